"""Pydantic schemas of stored catalog release documents."""

from __future__ import annotations

import logging
from datetime import date  # noqa: TC003
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

log = logging.getLogger(__name__)

type GenreField = list[str] | str | None


class CatalogBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    _logged_extra_keys: ClassVar[set[str]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.warning(
            "Catalog %s: unmodeled keys: %s",
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )


class CatalogContributor(CatalogBaseModel):
    name: str = ""
    role: str = ""
    category: str | None = None
    isni: str | None = None
    ipi: str | None = None


class CatalogTrackMetadata(CatalogBaseModel):
    title: str | None = None
    display_artist: str | None = Field(default=None, alias="displayArtist")
    subtitle: str | None = None
    duration: float | None = None
    contributors: list[CatalogContributor] = Field(default_factory=list)
    genre: GenreField = None
    language: str | None = None
    explicit: bool | None = None


class CatalogAudio(CatalogBaseModel):
    url: str | None = None
    format: str | None = None
    duration: float | None = None
    bitrate: int | None = None
    sample_rate: int | None = Field(default=None, alias="sampleRate")
    bit_depth: int | None = Field(default=None, alias="bitDepth")
    channels: int | None = None


class CatalogPreview(CatalogBaseModel):
    start_time: float = Field(default=0.0, alias="startTime")
    duration: float = 30.0


class CatalogTrack(CatalogBaseModel):
    id: str | None = None
    sequence_number: int | None = Field(default=None, alias="sequenceNumber")
    disc_number: int = Field(default=1, alias="discNumber")
    isrc: str | None = None
    # Older documents keep title and artist at the top level of the track.
    title: str | None = None
    artist: str | None = None
    duration: float | None = None
    metadata: CatalogTrackMetadata = Field(default_factory=CatalogTrackMetadata)
    audio: CatalogAudio | None = None
    preview: CatalogPreview | None = None


class CatalogBasic(CatalogBaseModel):
    title: str
    display_artist: str | None = Field(default=None, alias="displayArtist")
    artist: str | None = None
    label: str | None = None
    upc: str | None = None
    barcode: str | None = None
    ean: str | None = None
    catalog_number: str | None = Field(default=None, alias="catalogNumber")
    release_date: date | None = Field(default=None, alias="releaseDate")
    original_release_date: date | None = Field(default=None, alias="originalReleaseDate")
    release_type: str | None = Field(default=None, alias="releaseType")
    subtitle: str | None = None


class CatalogReleaseMetadata(CatalogBaseModel):
    genre: GenreField = None
    sub_genre: str | None = Field(default=None, alias="subGenre")
    language: str | None = None
    parental_warning: bool | str | None = Field(default=None, alias="parentalWarning")
    copyright_line: str | None = Field(default=None, alias="copyrightLine")
    copyright_cline: str | None = Field(default=None, alias="copyrightCline")
    production_year: int | None = Field(default=None, alias="productionYear")
    grid: str | None = None


class CatalogCoverImage(CatalogBaseModel):
    url: str | None = None
    width: int | None = None
    height: int | None = None
    resolution: int | None = None
    format: str | None = None


class CatalogAssets(CatalogBaseModel):
    cover_image: CatalogCoverImage | None = Field(default=None, alias="coverImage")


class CatalogTerritories(CatalogBaseModel):
    included: list[str] = Field(default_factory=list)
    worldwide: bool = False


class CatalogRelease(CatalogBaseModel):
    id: str
    basic: CatalogBasic
    metadata: CatalogReleaseMetadata = Field(default_factory=CatalogReleaseMetadata)
    tracks: list[CatalogTrack] = Field(default_factory=list)
    territories: CatalogTerritories | list[str] | None = None
    assets: CatalogAssets = Field(default_factory=CatalogAssets)
