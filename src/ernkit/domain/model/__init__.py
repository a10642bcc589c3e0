"""Public domain model surface."""

from __future__ import annotations

from ernkit.domain.model.classification import Classification
from ernkit.domain.model.delivery import CommercialModel, DeliveryRecord, DeliveryTarget
from ernkit.domain.model.enums import (
    CommercialType,
    ContributorCategory,
    ContributorElementType,
    DeliveryStatus,
    ErnVersion,
    MessageControlType,
    MessageSubType,
    ReleaseProfile,
    ReleaseResourceType,
    ReleaseType,
)
from ernkit.domain.model.primitives import (
    HASH_FAILED,
    HASH_PENDING,
    WORLDWIDE,
    DurationSeconds,
    Grid,
    Isrc,
    PartyReference,
    ReleaseReference,
    ResourceReference,
    TerritoryCode,
    Upc,
)
from ernkit.domain.model.release import (
    AudioFile,
    Contributor,
    CoverImage,
    Preview,
    Release,
    Track,
)
from ernkit.domain.model.warnings import GenerationWarning, WarningKind

__all__ = [  # noqa: RUF022
    # release
    "Release",
    "Track",
    "Contributor",
    "AudioFile",
    "CoverImage",
    "Preview",
    # delivery
    "DeliveryTarget",
    "DeliveryRecord",
    "CommercialModel",
    # classification
    "Classification",
    # warnings
    "GenerationWarning",
    "WarningKind",
    # enums
    "CommercialType",
    "ContributorCategory",
    "ContributorElementType",
    "DeliveryStatus",
    "ErnVersion",
    "MessageControlType",
    "MessageSubType",
    "ReleaseProfile",
    "ReleaseResourceType",
    "ReleaseType",
    # primitives
    "DurationSeconds",
    "Grid",
    "Isrc",
    "PartyReference",
    "ReleaseReference",
    "ResourceReference",
    "TerritoryCode",
    "Upc",
    "HASH_FAILED",
    "HASH_PENDING",
    "WORLDWIDE",
]
