"""Release classification into DDEX release type, commercial type and profile.

The classifier is pure: it never raises and never performs I/O. A release
without tracks yields an invalid classification that callers must check via
``Classification.is_valid`` before building a message.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from logging import getLogger
from typing import TYPE_CHECKING

from .identifiers import format_clock_duration
from .model import (
    Classification,
    CommercialModel,
    CommercialType,
    ReleaseProfile,
    ReleaseType,
)

if TYPE_CHECKING:
    from .model import Release

log = getLogger(__name__)

# Keywords in a free-text requested type that add a secondary release type to albums.
_SECONDARY_TYPE_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("live", "Live"),
    ("remix", "Remix"),
    ("soundtrack", "Soundtrack"),
    ("mixtape", "Mixtape"),
)


@dataclass(frozen=True, slots=True)
class ClassificationRules:
    """Thresholds of the classification decision table."""

    long_track_seconds: float = 600
    album_total_seconds: float = 1800
    single_max_tracks: int = 3
    ep_max_tracks: int = 6


@dataclass(frozen=True, slots=True)
class _Metrics:
    track_count: int
    total_seconds: float
    has_long_track: bool


class ReleaseClassifier:
    def __init__(self, rules: ClassificationRules | None = None) -> None:
        self.rules = rules or ClassificationRules()

    def classify(self, release: Release) -> Classification:
        metrics = self._measure(release)
        classification = self._classify_by_table(metrics, requested_type=release.requested_type)
        if not classification.is_valid:
            return classification
        classification = self._apply_override(classification, metrics)
        classification = self._apply_secondary_types(classification)
        return self._apply_genre_profile(classification, release.genre)

    def _measure(self, release: Release) -> _Metrics:
        durations = [track.duration_seconds for track in release.tracks]
        return _Metrics(
            track_count=len(durations),
            total_seconds=sum(durations),
            has_long_track=any(d > self.rules.long_track_seconds for d in durations),
        )

    def _classify_by_table(
        self, metrics: _Metrics, *, requested_type: str | None
    ) -> Classification:
        rules = self.rules
        count = metrics.track_count
        total = metrics.total_seconds
        minutes = int(total // 60)

        if count == 0:
            return self._result(
                metrics,
                ReleaseType.USER_DEFINED,
                CommercialType.INVALID,
                "Release has no tracks and cannot be delivered",
                requested_type=requested_type,
                profile=ReleaseProfile.INVALID,
            )

        if count == 1:
            if metrics.has_long_track:
                return self._result(
                    metrics,
                    ReleaseType.ALBUM,
                    CommercialType.EP,
                    f"1 track longer than {int(rules.long_track_seconds // 60)} minutes = EP",
                    requested_type=requested_type,
                )
            return self._result(
                metrics,
                ReleaseType.SINGLE,
                CommercialType.SINGLE,
                "1 track = Single",
                requested_type=requested_type,
            )

        if count <= rules.single_max_tracks:
            if total > rules.album_total_seconds:
                return self._result(
                    metrics,
                    ReleaseType.ALBUM,
                    CommercialType.ALBUM,
                    f"{count} tracks, {minutes} minutes = Album",
                    requested_type=requested_type,
                )
            if metrics.has_long_track:
                return self._result(
                    metrics,
                    ReleaseType.ALBUM,
                    CommercialType.EP,
                    f"{count} tracks including a long track = EP",
                    requested_type=requested_type,
                )
            return self._result(
                metrics,
                ReleaseType.SINGLE,
                CommercialType.SINGLE,
                f"{count} tracks under {int(rules.album_total_seconds // 60)} minutes = Single",
                requested_type=requested_type,
            )

        if count <= rules.ep_max_tracks:
            if total > rules.album_total_seconds:
                return self._result(
                    metrics,
                    ReleaseType.ALBUM,
                    CommercialType.ALBUM,
                    f"{count} tracks, {minutes} minutes = Album",
                    requested_type=requested_type,
                )
            return self._result(
                metrics,
                ReleaseType.ALBUM,
                CommercialType.EP,
                f"{count} tracks, {minutes} minutes = EP",
                requested_type=requested_type,
            )

        return self._result(
            metrics,
            ReleaseType.ALBUM,
            CommercialType.ALBUM,
            f"{count} tracks = Album",
            requested_type=requested_type,
        )

    def _result(
        self,
        metrics: _Metrics,
        release_type: ReleaseType,
        commercial_type: CommercialType,
        rationale: str,
        *,
        requested_type: str | None,
        profile: ReleaseProfile | None = None,
    ) -> Classification:
        if profile is None:
            profile = (
                ReleaseProfile.SIMPLE_AUDIO_SINGLE
                if release_type is ReleaseType.SINGLE
                else ReleaseProfile.SIMPLE_AUDIO_ALBUM
            )
        return Classification(
            release_type=release_type,
            commercial_type=commercial_type,
            profile=profile,
            track_count=metrics.track_count,
            total_duration_seconds=metrics.total_seconds,
            total_duration_formatted=format_clock_duration(metrics.total_seconds),
            has_long_track=metrics.has_long_track,
            rationale=rationale,
            requested_type=requested_type,
        )

    def _apply_override(self, classification: Classification, metrics: _Metrics) -> Classification:
        requested = (classification.requested_type or "").strip()
        key = requested.lower()
        rules = self.rules

        if key == "single":
            accepted = (
                metrics.track_count <= rules.single_max_tracks
                and metrics.total_seconds <= rules.album_total_seconds
                and not metrics.has_long_track
            )
            target = (ReleaseType.SINGLE, CommercialType.SINGLE, ReleaseProfile.SIMPLE_AUDIO_SINGLE)
        elif key == "ep":
            accepted = (
                metrics.track_count <= rules.ep_max_tracks
                and metrics.total_seconds <= rules.album_total_seconds
            )
            target = (ReleaseType.ALBUM, CommercialType.EP, ReleaseProfile.SIMPLE_AUDIO_ALBUM)
        elif key == "compilation":
            if classification.release_type is ReleaseType.ALBUM:
                return replace(
                    classification,
                    secondary_types=(*classification.secondary_types, "Compilation"),
                    override_applied=True,
                    rationale=f"{classification.rationale}; requested Compilation accepted",
                )
            return self._reject(classification, requested)
        else:
            return classification

        release_type, commercial_type, profile = target
        matches = (release_type, commercial_type) == (
            classification.release_type,
            classification.commercial_type,
        )
        if not (matches or accepted):
            return self._reject(classification, requested)
        if matches:
            return replace(
                classification,
                override_applied=True,
                rationale=f"{classification.rationale}; requested {requested} matches",
            )
        return replace(
            classification,
            release_type=release_type,
            commercial_type=commercial_type,
            profile=profile,
            override_applied=True,
            rationale=f"User specified: {requested} ({classification.rationale})",
        )

    def _reject(self, classification: Classification, requested: str) -> Classification:
        log.warning(
            "Requested release type %r rejected for %s classification",
            requested,
            classification.commercial_type.value,
        )
        return replace(
            classification,
            override_rejected=True,
            rationale=(
                f"{classification.rationale}; requested type {requested!r} rejected "
                "as structurally inconsistent"
            ),
        )

    def _apply_secondary_types(self, classification: Classification) -> Classification:
        if classification.release_type is not ReleaseType.ALBUM:
            return classification
        requested = (classification.requested_type or "").lower()
        extra = [
            label
            for keyword, label in _SECONDARY_TYPE_KEYWORDS
            if keyword in requested and label not in classification.secondary_types
        ]
        if not extra:
            return classification
        return replace(classification, secondary_types=(*classification.secondary_types, *extra))

    def _apply_genre_profile(
        self, classification: Classification, genre: str | None
    ) -> Classification:
        if classification.profile is not ReleaseProfile.SIMPLE_AUDIO_ALBUM:
            return classification
        if not genre or "classical" not in genre.lower():
            return classification
        return replace(
            classification,
            profile=ReleaseProfile.CLASSICAL_AUDIO_ALBUM,
            rationale=f"{classification.rationale} (Classical genre detected)",
        )


def classify_release(release: Release, rules: ClassificationRules | None = None) -> Classification:
    return ReleaseClassifier(rules).classify(release)


def recommended_commercial_models(classification: Classification) -> tuple[CommercialModel, ...]:
    """Default commercial models for a classification.

    Streaming subscription applies to everything; singles add ad-supported
    streaming and albums or EPs add permanent downloads.
    """

    models = [CommercialModel(type="SubscriptionModel", usage_types=("OnDemandStream",))]
    if classification.commercial_type is CommercialType.SINGLE:
        models.append(
            CommercialModel(type="AdvertisementSupportedModel", usage_types=("OnDemandStream",))
        )
    elif classification.commercial_type in {CommercialType.ALBUM, CommercialType.EP}:
        models.append(CommercialModel(type="PayAsYouGoModel", usage_types=("PermanentDownload",)))
    return tuple(models)
