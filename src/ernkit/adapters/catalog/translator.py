"""Translate catalog documents into domain releases."""

from __future__ import annotations

from dataclasses import replace
from logging import getLogger
from typing import TYPE_CHECKING

from ernkit.domain.model import (
    WORLDWIDE,
    AudioFile,
    Contributor,
    ContributorCategory,
    CoverImage,
    Preview,
    Release,
    Track,
)

if TYPE_CHECKING:
    from .schema import (
        CatalogAudio,
        CatalogContributor,
        CatalogCoverImage,
        CatalogRelease,
        CatalogTerritories,
        CatalogTrack,
        GenreField,
    )

log = getLogger(__name__)

_CATEGORY_MAP: dict[str, ContributorCategory] = {
    "performer": ContributorCategory.PERFORMER,
    "producer_engineer": ContributorCategory.PRODUCER_ENGINEER,
    "producer": ContributorCategory.PRODUCER_ENGINEER,
    "composer_lyricist": ContributorCategory.COMPOSER_LYRICIST,
    "composer": ContributorCategory.COMPOSER_LYRICIST,
}


def translate_release(document: CatalogRelease) -> Release:
    basic = document.basic
    metadata = document.metadata
    display_artist = basic.display_artist or basic.artist
    return Release(
        id=document.id,
        title=basic.title,
        display_artist=display_artist,
        label=basic.label,
        upc=_first_present(basic.upc, basic.barcode, basic.ean),
        catalog_number=basic.catalog_number,
        release_date=basic.release_date,
        original_release_date=basic.original_release_date,
        requested_type=basic.release_type,
        subtitle=basic.subtitle,
        grid=metadata.grid,
        genre=first_genre(metadata.genre),
        sub_genre=metadata.sub_genre,
        copyright=metadata.copyright_cline,
        phonographic_copyright=metadata.copyright_line,
        copyright_year=metadata.production_year,
        parental_warning=parental_warning(metadata.parental_warning),
        language=metadata.language or "en",
        tracks=_unique_positions(
            document.id,
            [
                _translate_track(track, position, release_artist=display_artist)
                for position, track in enumerate(document.tracks, start=1)
            ],
        ),
        territories=_territories(document.territories),
        cover_image=_cover_image(document.assets.cover_image),
    )


def _translate_track(track: CatalogTrack, position: int, *, release_artist: str | None) -> Track:
    metadata = track.metadata
    audio_duration = track.audio.duration if track.audio else None
    duration = metadata.duration or track.duration or audio_duration
    return Track(
        id=track.id or f"track-{position}",
        sequence_number=track.sequence_number or position,
        disc_number=track.disc_number,
        isrc=track.isrc.strip() if track.isrc else None,
        title=metadata.title or track.title or "Untitled",
        display_artist=metadata.display_artist or track.artist or release_artist,
        subtitle=metadata.subtitle,
        duration=duration,
        audio=_audio(track.audio),
        contributors=tuple(_contributor(contributor) for contributor in metadata.contributors),
        language=metadata.language,
        genre=first_genre(metadata.genre),
        preview=(
            Preview(start_time=track.preview.start_time, duration=track.preview.duration)
            if track.preview
            else None
        ),
    )


def _unique_positions(release_id: str, tracks: list[Track]) -> tuple[Track, ...]:
    """Renumber tracks by document order when two share a disc and sequence number.

    DDEX file names are derived from the disc and sequence number, so they must
    not collide.
    """

    positions = [(track.disc_number, track.sequence_number) for track in tracks]
    if len(set(positions)) == len(positions):
        return tuple(tracks)
    log.warning(
        "Release %s has duplicate track sequence numbers; renumbering by document order",
        release_id,
    )
    return tuple(
        replace(track, sequence_number=position)
        for position, track in enumerate(tracks, start=1)
    )


def _contributor(contributor: CatalogContributor) -> Contributor:
    category = (
        _CATEGORY_MAP.get(contributor.category.strip().lower()) if contributor.category else None
    )
    return Contributor(
        name=contributor.name.strip(),
        role=contributor.role.strip(),
        category=category,
    )


def _audio(audio: CatalogAudio | None) -> AudioFile | None:
    if audio is None:
        return None
    return AudioFile(
        url=audio.url,
        format=audio.format,
        bitrate=audio.bitrate,
        sample_rate=audio.sample_rate,
        bit_depth=audio.bit_depth,
        channels=audio.channels,
    )


def _cover_image(cover: CatalogCoverImage | None) -> CoverImage | None:
    if cover is None:
        return None
    defaults = CoverImage()
    return CoverImage(
        url=cover.url,
        width=cover.width or defaults.width,
        height=cover.height or defaults.height,
        resolution=cover.resolution or defaults.resolution,
        format=(cover.format or defaults.format).upper(),
    )


def _territories(territories: CatalogTerritories | list[str] | None) -> tuple[str, ...]:
    if territories is None:
        return (WORLDWIDE,)
    codes = territories if isinstance(territories, list) else territories.included
    if not isinstance(territories, list) and territories.worldwide:
        return (WORLDWIDE,)
    return tuple(_territory_code(code) for code in codes if code.strip()) or (WORLDWIDE,)


def _territory_code(code: str) -> str:
    normalized = code.strip()
    return WORLDWIDE if normalized.lower() == WORLDWIDE.lower() else normalized.upper()


def first_genre(genre: GenreField) -> str | None:
    """Catalog documents store genres as a list; DDEX carries a single genre."""

    if genre is None:
        return None
    if isinstance(genre, str):
        return genre.strip() or None
    return next((entry.strip() for entry in genre if entry.strip()), None)


def parental_warning(value: bool | str | None) -> str:
    if isinstance(value, bool):
        return "Explicit" if value else "NotExplicit"
    return value.strip() if value and value.strip() else "NotExplicit"


def _first_present(*values: str | None) -> str | None:
    for value in values:
        if value and value.strip():
            return value.strip()
    return None
