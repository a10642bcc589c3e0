"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class ErnVersion(StrEnum):
    V382 = "3.8.2"
    V42 = "4.2"
    V43 = "4.3"

    @classmethod
    def parse(cls, value: object) -> ErnVersion:
        """Return the matching version or raise ``ValueError`` naming the input."""

        if isinstance(value, ErnVersion):
            return value
        normalized = str(value).strip()
        for member in cls:
            if normalized in {member.value, member.value.replace(".", "")}:
                return member
        raise ValueError(f"Unsupported ERN version: {value}")


class MessageSubType(StrEnum):
    INITIAL = "Initial"
    UPDATE = "Update"
    TAKEDOWN = "Takedown"


class MessageControlType(StrEnum):
    LIVE = "LiveMessage"
    TEST = "TestMessage"
    UPDATE = "UpdateMessage"
    TAKEDOWN = "TakedownMessage"


class ReleaseType(StrEnum):
    ALBUM = "Album"
    SINGLE = "Single"
    USER_DEFINED = "UserDefined"


class CommercialType(StrEnum):
    ALBUM = "Album"
    EP = "EP"
    SINGLE = "Single"
    INVALID = "Invalid"


class ReleaseProfile(StrEnum):
    SIMPLE_AUDIO_SINGLE = "SimpleAudioSingle"
    SIMPLE_AUDIO_ALBUM = "SimpleAudioAlbum"
    CLASSICAL_AUDIO_ALBUM = "ClassicalAudioAlbum"
    INVALID = "Invalid"


class ContributorCategory(StrEnum):
    PERFORMER = "performer"
    PRODUCER_ENGINEER = "producer_engineer"
    COMPOSER_LYRICIST = "composer_lyricist"


class ContributorElementType(StrEnum):
    RESOURCE_CONTRIBUTOR = "ResourceContributor"
    INDIRECT_RESOURCE_CONTRIBUTOR = "IndirectResourceContributor"


class ReleaseResourceType(StrEnum):
    PRIMARY = "PrimaryResource"
    SECONDARY = "SecondaryResource"


class DeliveryStatus(StrEnum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
