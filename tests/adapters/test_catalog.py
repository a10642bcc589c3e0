from __future__ import annotations

import logging
import shutil
from datetime import date
from typing import TYPE_CHECKING

import pytest

from ernkit.adapters.catalog import (
    CatalogRelease,
    JsonReleaseRepository,
    load_release_document,
    translate_release,
)
from ernkit.adapters.catalog.schema import CatalogTrackMetadata
from ernkit.adapters.catalog.translator import first_genre, parental_warning
from ernkit.domain.classification import classify_release
from ernkit.domain.model import ContributorCategory, Preview, ReleaseType

if TYPE_CHECKING:
    from pathlib import Path


def _document(**overrides: object) -> CatalogRelease:
    payload: dict[str, object] = {
        "id": "rel-200",
        "basic": {"title": "Quiet Rooms", "artist": "Mona Vale", "upc": "123456789012"},
        "tracks": [{"isrc": "USABC2500001", "audio": {"url": "https://x/1.wav", "duration": 181}}],
    }
    payload.update(overrides)
    return CatalogRelease.model_validate(payload)


def test_load_release_document(release_document_path: Path) -> None:
    release = load_release_document(release_document_path)

    assert release.id == "rel-100"
    assert release.title == "Northern Static"
    assert release.display_artist == "The Long Winters"
    assert release.upc == "0123456789012"
    assert release.catalog_number == "SD-100"
    assert release.release_date == date(2025, 5, 2)
    assert release.requested_type == "Album"
    assert release.genre == "Alternative"
    assert release.sub_genre == "Shoegaze"
    assert release.parental_warning == "Explicit"
    assert release.phonographic_copyright == "2025 Stardust Records"
    assert release.copyright is None
    assert release.copyright_year == 2025
    assert release.territories == ("GB", "US", "DE")
    assert release.cover_image is not None
    assert release.cover_image.url == "https://cdn.example.com/rel-100/cover.jpg"
    assert release.cover_image.format == "JPEG"
    assert release.cover_image.resolution == 300


def test_tracks_fall_back_to_top_level_fields(release_document_path: Path) -> None:
    first, second, third = load_release_document(release_document_path).tracks

    assert first.title == "Static Bloom"
    assert first.duration == 245
    assert first.audio is not None
    assert first.audio.extension == "flac"
    assert [(c.name, c.role) for c in first.contributors] == [
        ("Mara Quinn", "Producer"),
        ("Ivo Lent", "Lyricist"),
    ]
    assert second.title == "Low Light"
    assert second.duration == 312
    assert second.display_artist == "The Long Winters"
    assert second.preview == Preview(start_time=45, duration=30)
    assert third.title == "Glass Harbour"
    assert third.preview is None


def test_loaded_release_classifies_as_album(release_document_path: Path) -> None:
    classification = classify_release(load_release_document(release_document_path))

    assert classification.release_type is ReleaseType.ALBUM
    assert classification.total_duration_formatted == "30:47"


def test_minimal_document_gets_defaults() -> None:
    release = translate_release(_document())

    assert release.display_artist == "Mona Vale"
    assert release.parental_warning == "NotExplicit"
    assert release.language == "en"
    assert release.territories == ("Worldwide",)
    assert release.cover_image is None
    (track,) = release.tracks
    assert track.id == "track-1"
    assert track.sequence_number == 1
    assert track.title == "Untitled"
    assert track.display_artist == "Mona Vale"
    assert track.duration == 181


def test_colliding_sequence_numbers_are_renumbered(caplog: pytest.LogCaptureFixture) -> None:
    document = _document(
        tracks=[
            {"isrc": "USABC2500001", "sequenceNumber": 2},
            {"isrc": "USABC2500002"},
            {"isrc": "USABC2500003", "sequenceNumber": 3},
        ]
    )

    with caplog.at_level(logging.WARNING):
        release = translate_release(document)

    assert [track.sequence_number for track in release.tracks] == [1, 2, 3]
    assert [track.isrc for track in release.tracks] == [
        "USABC2500001",
        "USABC2500002",
        "USABC2500003",
    ]
    assert "duplicate track sequence numbers" in caplog.text


def test_distinct_sequence_numbers_are_kept() -> None:
    document = _document(
        tracks=[
            {"isrc": "USABC2500001", "sequenceNumber": 2},
            {"isrc": "USABC2500002", "sequenceNumber": 1},
            {"isrc": "USABC2500003", "sequenceNumber": 1, "discNumber": 2},
        ]
    )

    release = translate_release(document)

    assert [(t.disc_number, t.sequence_number) for t in release.tracks] == [(1, 2), (1, 1), (2, 1)]


def test_contributor_categories_are_translated() -> None:
    document = _document(
        tracks=[
            {
                "isrc": "USABC2500001",
                "metadata": {
                    "contributors": [
                        {"name": " Dee Lay ", "role": "Tape Echo", "category": "Producer"},
                        {"name": "Ona", "role": "Words", "category": "composer_lyricist"},
                        {"name": "Ray", "role": "Guitar", "category": "session"},
                    ]
                },
            }
        ]
    )

    contributors = translate_release(document).tracks[0].contributors

    assert [(c.name, c.category) for c in contributors] == [
        ("Dee Lay", ContributorCategory.PRODUCER_ENGINEER),
        ("Ona", ContributorCategory.COMPOSER_LYRICIST),
        ("Ray", None),
    ]


@pytest.mark.parametrize(
    ("territories", "expected"),
    [
        ({"worldwide": True, "included": ["gb"]}, ("Worldwide",)),
        ({"included": []}, ("Worldwide",)),
        (["worldwide"], ("Worldwide",)),
        (["fr", " be "], ("FR", "BE")),
    ],
)
def test_territories(territories: object, expected: tuple[str, ...]) -> None:
    assert translate_release(_document(territories=territories)).territories == expected


def test_blank_upc_falls_back_to_ean() -> None:
    document = _document(
        basic={"title": "T", "upc": " ", "barcode": None, "ean": "4006381333931"},
    )

    assert translate_release(document).upc == "4006381333931"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(True, "Explicit"), (False, "NotExplicit"), (None, "NotExplicit"), ("Edited", "Edited")],
)
def test_parental_warning(value: bool | str | None, expected: str) -> None:
    assert parental_warning(value) == expected


@pytest.mark.parametrize(
    ("genre", "expected"),
    [(["", " Jazz "], "Jazz"), ("Blues", "Blues"), ([], None), (None, None)],
)
def test_first_genre(genre: list[str] | str | None, expected: str | None) -> None:
    assert first_genre(genre) == expected


def test_unmodeled_keys_are_logged_once(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="ernkit.adapters.catalog.schema")

    CatalogTrackMetadata.model_validate({"title": "A", "moodBoardColour": "teal"})
    CatalogTrackMetadata.model_validate({"title": "B", "moodBoardColour": "amber"})

    messages = [r.getMessage() for r in caplog.records if "moodBoardColour" in r.getMessage()]
    assert messages == ["Catalog CatalogTrackMetadata: unmodeled keys: moodBoardColour"]


def test_json_repository_reads_documents(tmp_path: Path, release_document_path: Path) -> None:
    shutil.copy(release_document_path, tmp_path / "rel-100.json")
    repository = JsonReleaseRepository(tmp_path)

    release = repository.get("rel-100")

    assert release is not None
    assert release.title == "Northern Static"
    assert repository.get("rel-404") is None
