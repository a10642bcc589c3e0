"""Derive builder inputs (product and resources) from a catalog release."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ernkit.domain.identifiers import audio_file_name, cover_file_name, normalize_isrc
from ernkit.domain.model import HASH_PENDING, CoverImage

from .inputs import ImageResource, Product, ProductTrack, ResourceBundle, SoundRecordingResource

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ernkit.dictionaries.genres import GenreMapping
    from ernkit.domain.contributors import ContributorRoleMapper
    from ernkit.domain.model import Classification, GenerationWarning, Release, Track

    from .policy import ErnVersionPolicy


def build_product(
    release: Release,
    classification: Classification,
    policy: ErnVersionPolicy,
    *,
    mapper: ContributorRoleMapper,
    genre_mapping: GenreMapping | None = None,
    warnings: list[GenerationWarning] | None = None,
) -> Product:
    """Resolve references, contributor roles and genre codes for one target."""

    tracks = tuple(
        _product_track(
            track, index, policy, mapper=mapper, genre_mapping=genre_mapping, warnings=warnings
        )
        for index, track in enumerate(release.ordered_tracks, start=1)
    )
    return Product(
        release_reference=policy.release_reference(),
        upc=release.upc,
        title=release.title,
        display_artist=release.display_artist,
        release_type=classification.release_type,
        secondary_types=classification.secondary_types,
        profile=classification.profile,
        label=release.label,
        subtitle=release.subtitle,
        grid=release.grid,
        catalog_number=release.catalog_number,
        genre=_map_genre(release.genre, genre_mapping),
        sub_genre=release.sub_genre,
        parental_warning=release.parental_warning,
        copyright=release.copyright,
        phonographic_copyright=release.phonographic_copyright,
        copyright_year=release.copyright_year,
        release_date=release.release_date,
        original_release_date=release.original_release_date,
        language=release.language,
        territories=release.territories,
        tracks=tracks,
    )


def _product_track(
    track: Track,
    index: int,
    policy: ErnVersionPolicy,
    *,
    mapper: ContributorRoleMapper,
    genre_mapping: GenreMapping | None,
    warnings: list[GenerationWarning] | None,
) -> ProductTrack:
    contributors = tuple(
        mapper.map_to_ddex(contributor, sequence_number=position, warnings=warnings)
        for position, contributor in enumerate(track.contributors, start=1)
        if contributor.name and contributor.role
    )
    return ProductTrack(
        resource_reference=policy.resource_reference(index),
        sequence_number=track.sequence_number,
        disc_number=track.disc_number,
        isrc=normalize_isrc(track.isrc) if track.isrc else None,
        title=track.title,
        display_artist=track.display_artist,
        duration_seconds=track.duration_seconds,
        subtitle=track.subtitle,
        language=track.language,
        genre=_map_genre(track.genre, genre_mapping),
        contributors=contributors,
    )


def _map_genre(code: str | None, mapping: GenreMapping | None) -> str | None:
    if mapping is None:
        return code
    return mapping.map(code)


def build_resources(
    product: Product,
    release: Release,
    policy: ErnVersionPolicy,
    hashes: Mapping[str, str] | None = None,
) -> ResourceBundle:
    """One sound recording per product track plus the front cover image.

    ``hashes`` maps asset URLs to their MD5 digest (or a failure marker);
    assets without an entry keep the pending marker.
    """

    hashes = hashes or {}
    upc = product.upc or ""
    tracks_by_position = dict(enumerate(release.ordered_tracks, start=1))

    recordings: list[SoundRecordingResource] = []
    for index, product_track in enumerate(product.tracks, start=1):
        track = tracks_by_position[index]
        url = track.audio.url if track.audio else None
        extension = track.audio.extension if track.audio else "wav"
        preview = track.preview
        recordings.append(
            SoundRecordingResource(
                resource_reference=product_track.resource_reference,
                isrc=product_track.isrc,
                file_name=audio_file_name(
                    upc, product_track.disc_number, product_track.sequence_number, extension
                ),
                url=url,
                md5=hashes.get(url, HASH_PENDING) if url else HASH_PENDING,
                preview_start=preview.start_time if preview else None,
                preview_duration=preview.duration if preview else None,
            )
        )

    cover = release.cover_image or CoverImage()
    image = ImageResource(
        resource_reference=policy.resource_reference(len(product.tracks) + 1),
        file_name=cover_file_name(upc),
        url=cover.url,
        md5=hashes.get(cover.url, HASH_PENDING) if cover.url else HASH_PENDING,
        width=cover.width,
        height=cover.height,
        resolution=cover.resolution,
        codec=cover.format,
    )
    return ResourceBundle(sound_recordings=tuple(recordings), image=image)
