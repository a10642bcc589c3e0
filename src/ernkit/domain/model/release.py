"""Release, track and contributor value objects consumed by ERN generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .primitives import WORLDWIDE

if TYPE_CHECKING:
    from datetime import date

    from .enums import ContributorCategory
    from .primitives import DurationSeconds, Grid, Isrc, TerritoryCode, Upc


@dataclass(frozen=True, slots=True)
class Contributor:
    name: str
    role: str
    category: ContributorCategory | None = None


@dataclass(frozen=True, slots=True)
class AudioFile:
    url: str | None = None
    format: str | None = None
    bitrate: int | None = None
    sample_rate: int | None = None
    bit_depth: int | None = None
    channels: int | None = None

    @property
    def extension(self) -> str:
        """File extension used for the DDEX file name (``wav`` by default)."""

        if self.format:
            return self.format.strip().lower().lstrip(".")
        return "wav"


@dataclass(frozen=True, slots=True)
class Preview:
    start_time: float = 0.0
    duration: float = 30.0


@dataclass(frozen=True, slots=True)
class CoverImage:
    url: str | None = None
    width: int = 3000
    height: int = 3000
    resolution: int = 300
    format: str = "JPEG"


@dataclass(frozen=True, slots=True)
class Track:
    """A track as stored on a release, before ERN resources are derived from it."""

    id: str
    sequence_number: int
    isrc: Isrc | None
    title: str
    display_artist: str | None = None
    duration: DurationSeconds | None = None
    audio: AudioFile | None = None
    contributors: tuple[Contributor, ...] = ()
    language: str | None = None
    genre: str | None = None
    disc_number: int = 1
    preview: Preview | None = None
    subtitle: str | None = None

    @property
    def duration_seconds(self) -> float:
        return float(self.duration or 0)


@dataclass(frozen=True, slots=True)
class Release:
    """A release as read from the catalog, the input of classification and generation."""

    id: str
    title: str
    display_artist: str | None
    label: str | None = None
    upc: Upc | None = None
    catalog_number: str | None = None
    release_date: date | None = None
    original_release_date: date | None = None
    requested_type: str | None = None
    subtitle: str | None = None
    grid: Grid | None = None
    genre: str | None = None
    sub_genre: str | None = None
    copyright: str | None = None
    phonographic_copyright: str | None = None
    copyright_year: int | None = None
    parental_warning: str = "NotExplicit"
    language: str = "en"
    tracks: tuple[Track, ...] = ()
    territories: tuple[TerritoryCode, ...] = field(default_factory=lambda: (WORLDWIDE,))
    cover_image: CoverImage | None = None

    @property
    def ordered_tracks(self) -> tuple[Track, ...]:
        return tuple(
            sorted(self.tracks, key=lambda track: (track.disc_number, track.sequence_number))
        )
