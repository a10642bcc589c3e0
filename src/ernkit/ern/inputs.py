"""Builder inputs: the release-level product, its resources and message settings.

These structures live for one build call. They are assembled from a
``Release`` by :mod:`ernkit.ern.assembly` and consumed by ``ErnBuilder``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from ernkit.domain.model import (
    HASH_PENDING,
    WORLDWIDE,
    MessageControlType,
    MessageSubType,
    ReleaseProfile,
    ReleaseType,
)

if TYPE_CHECKING:
    from datetime import date

    from ernkit.domain.contributors import MappedContributor
    from ernkit.domain.model import (
        CommercialModel,
        Grid,
        Isrc,
        ReleaseReference,
        ResourceReference,
        TerritoryCode,
        Upc,
    )

# Fixed technical profile of delivered audio: 16 bit / 44.1 kHz stereo PCM.
AUDIO_CODEC = "PCM"
AUDIO_BIT_RATE = 1411
AUDIO_SAMPLING_RATE = 44100
AUDIO_BITS_PER_SAMPLE = 16
AUDIO_CHANNELS = 2


@dataclass(frozen=True, slots=True)
class ProductTrack:
    resource_reference: ResourceReference
    sequence_number: int
    disc_number: int
    isrc: Isrc | None
    title: str
    display_artist: str | None
    duration_seconds: float
    subtitle: str | None = None
    language: str | None = None
    genre: str | None = None
    contributors: tuple[MappedContributor, ...] = ()


@dataclass(frozen=True, slots=True)
class Product:
    """Release-level fields with resolved references."""

    release_reference: ReleaseReference
    upc: Upc | None
    title: str
    display_artist: str | None
    release_type: ReleaseType = ReleaseType.ALBUM
    secondary_types: tuple[str, ...] = ()
    profile: ReleaseProfile = ReleaseProfile.SIMPLE_AUDIO_ALBUM
    label: str | None = None
    subtitle: str | None = None
    grid: Grid | None = None
    catalog_number: str | None = None
    genre: str | None = None
    sub_genre: str | None = None
    parental_warning: str = "NotExplicit"
    copyright: str | None = None
    phonographic_copyright: str | None = None
    copyright_year: int | None = None
    release_date: date | None = None
    original_release_date: date | None = None
    language: str = "en"
    territories: tuple[TerritoryCode, ...] = (WORLDWIDE,)
    tracks: tuple[ProductTrack, ...] = ()

    def c_line(self, year: int) -> str:
        return self.copyright or f"{year} {self.label or self.display_artist or ''}".strip()

    def p_line(self, year: int) -> str:
        return (
            self.phonographic_copyright
            or f"{year} {self.label or self.display_artist or ''}".strip()
        )


@dataclass(frozen=True, slots=True)
class SoundRecordingResource:
    resource_reference: ResourceReference
    isrc: Isrc | None
    file_name: str
    url: str | None = None
    md5: str = HASH_PENDING
    preview_start: float | None = None
    preview_duration: float | None = None

    @property
    def has_preview(self) -> bool:
        return self.preview_start is not None and self.preview_duration is not None


@dataclass(frozen=True, slots=True)
class ImageResource:
    resource_reference: ResourceReference
    file_name: str
    url: str | None = None
    md5: str = HASH_PENDING
    width: int = 3000
    height: int = 3000
    resolution: int = 300
    codec: str = "JPEG"


@dataclass(frozen=True, slots=True)
class ResourceBundle:
    sound_recordings: tuple[SoundRecordingResource, ...]
    image: ImageResource

    def sound_recording(self, reference: ResourceReference) -> SoundRecordingResource | None:
        for recording in self.sound_recordings:
            if recording.resource_reference == reference:
                return recording
        return None

    @property
    def references(self) -> tuple[ResourceReference, ...]:
        return (
            *(recording.resource_reference for recording in self.sound_recordings),
            self.image.resource_reference,
        )


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class BuildConfig:
    """Message identity, routing and deal terms of a single build."""

    message_id: str
    sender_party_id: str
    sender_name: str
    recipient_name: str
    recipient_party_id: str | None = None
    message_sub_type: MessageSubType = MessageSubType.INITIAL
    test_mode: bool = False
    include_deals: bool = True
    territories: tuple[TerritoryCode, ...] = ()
    deal_start_date: date | None = None
    deal_end_date: date | None = None
    commercial_models: tuple[CommercialModel, ...] = ()
    exclusivity: str | None = None
    pre_order_date: date | None = None
    display_start_date: date | None = None
    profile: ReleaseProfile | None = None
    created_at: datetime = field(default_factory=_utcnow)

    @property
    def control_type(self) -> MessageControlType:
        if self.test_mode:
            return MessageControlType.TEST
        if self.message_sub_type is MessageSubType.UPDATE:
            return MessageControlType.UPDATE
        if self.message_sub_type is MessageSubType.TAKEDOWN:
            return MessageControlType.TAKEDOWN
        return MessageControlType.LIVE
