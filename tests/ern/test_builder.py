from __future__ import annotations

import pytest

from ernkit.domain.errors import ErnPreconditionError, UnsupportedErnVersionError
from ernkit.domain.model import ErnVersion, MessageSubType, Release, ReleaseProfile
from ernkit.ern import get_builder
from tests.helpers.releases import (
    build_message,
    make_release,
    make_track,
    parse_message,
    texts,
)

ALL_VERSIONS = pytest.mark.parametrize("version", list(ErnVersion))


@ALL_VERSIONS
def test_takedown_carries_no_deals(release: Release, version: ErnVersion) -> None:
    root = parse_message(
        build_message(
            release,
            version,
            message_sub_type=MessageSubType.TAKEDOWN,
            include_deals=False,
        )
    )

    assert root.find("DealList") is None
    assert root.findtext("MessageHeader/MessageControlType") == "TakedownMessage"
    assert root.find("ReleaseList/Release") is not None


@ALL_VERSIONS
def test_test_mode_overrides_control_type(release: Release, version: ErnVersion) -> None:
    root = parse_message(
        build_message(release, version, message_sub_type=MessageSubType.UPDATE, test_mode=True)
    )

    assert root.findtext("MessageHeader/MessageControlType") == "TestMessage"


@ALL_VERSIONS
def test_missing_upc_is_rejected(version: ErnVersion) -> None:
    release = make_release((make_track(1),), upc=None)

    with pytest.raises(ErnPreconditionError, match="UPC is missing"):
        build_message(release, version)


@ALL_VERSIONS
def test_every_identifier_problem_is_reported(version: ErnVersion) -> None:
    release = make_release(
        (
            make_track(1, isrc="", title="Blank"),
            make_track(2, isrc="NOT-AN-ISRC", title="Broken"),
        ),
        upc="12345",
    )

    with pytest.raises(ErnPreconditionError) as excinfo:
        build_message(release, version)

    message = str(excinfo.value)
    assert "UPC '12345' is not 12 to 14 digits" in message
    assert "Track 1 (Blank) has no ISRC" in message
    assert "Track 2 (Broken) has invalid ISRC 'NOTANISRC'" in message


def test_isrcs_are_normalized_before_writing() -> None:
    release = make_release((make_track(1, isrc="us-abc-25-00001"),))

    root = parse_message(build_message(release, ErnVersion.V43))

    assert root.findtext("ResourceList/SoundRecording/ResourceId/ISRC") == "USABC2500001"


def test_unknown_version_is_a_value_error() -> None:
    with pytest.raises(UnsupportedErnVersionError, match=r"5\.0"):
        get_builder("5.0")
    with pytest.raises(ValueError, match="Unsupported ERN version"):
        get_builder("ern/99")


@pytest.mark.parametrize(
    ("requested", "expected"),
    [("4.3", ErnVersion.V43), ("42", ErnVersion.V42), (" 3.8.2 ", ErnVersion.V382)],
)
def test_builders_resolve_version_spellings(requested: str, expected: ErnVersion) -> None:
    assert get_builder(requested).version is expected


def test_profile_can_be_forced_per_build(release: Release) -> None:
    root = parse_message(
        build_message(release, ErnVersion.V43, profile=ReleaseProfile.CLASSICAL_AUDIO_ALBUM)
    )

    assert root.get("ReleaseProfileVersionId") == "ClassicalAudioAlbum/23"


@ALL_VERSIONS
def test_notices_default_to_label_and_release_year(release: Release, version: ErnVersion) -> None:
    root = parse_message(build_message(release, version))

    assert root.findtext(".//Release/CLine/CLineText") == "2025 Stardust Records"
    assert root.findtext(".//Release/PLine/Year") == "2025"


@ALL_VERSIONS
def test_release_date_falls_back_to_creation_date(version: ErnVersion) -> None:
    root = parse_message(build_message(make_release((make_track(1),), release_date=None), version))

    assert root.findtext(".//ReleaseDate") == "2025-03-14"
    assert root.findtext(".//OriginalReleaseDate") == "2025-03-14"


@ALL_VERSIONS
def test_explicit_copyright_lines_are_kept(version: ErnVersion) -> None:
    release = make_release(
        (make_track(1),),
        copyright="(C) 2024 Nova Lights",
        phonographic_copyright="(P) 2024 Stardust Records",
        copyright_year=2024,
    )

    root = parse_message(build_message(release, version))

    assert root.findtext(".//Release/CLine/CLineText") == "(C) 2024 Nova Lights"
    assert root.findtext(".//Release/PLine/PLineText") == "(P) 2024 Stardust Records"
    assert root.findtext(".//Release/CLine/Year") == "2024"


@ALL_VERSIONS
def test_missing_hashes_stay_pending(release: Release, version: ErnVersion) -> None:
    root = parse_message(build_message(release, version))

    assert texts(root, ".//HashSum/HashSum") == ["PENDING", "PENDING", "PENDING"]
