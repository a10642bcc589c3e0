"""Derived release classification."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import CommercialType, ReleaseProfile, ReleaseType


@dataclass(frozen=True, slots=True)
class Classification:
    """DDEX release type, commercial type and profile derived from a track list.

    Computed fresh for every generation; only ever stored next to a generated
    message for audit purposes.
    """

    release_type: ReleaseType
    commercial_type: CommercialType
    profile: ReleaseProfile
    track_count: int
    total_duration_seconds: float
    total_duration_formatted: str
    has_long_track: bool
    rationale: str
    secondary_types: tuple[str, ...] = ()
    requested_type: str | None = None
    override_applied: bool = False
    override_rejected: bool = False

    @property
    def is_valid(self) -> bool:
        return self.commercial_type is not CommercialType.INVALID

    def as_audit_record(self) -> dict[str, object]:
        """Flat representation stored alongside a generated message."""

        return {
            "releaseType": self.release_type.value,
            "commercialType": self.commercial_type.value,
            "profile": self.profile.value,
            "secondaryTypes": list(self.secondary_types),
            "trackCount": self.track_count,
            "duration": self.total_duration_formatted,
            "rationale": self.rationale,
            "overrideRejected": self.override_rejected,
        }
