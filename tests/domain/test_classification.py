from __future__ import annotations

import logging

import pytest

from ernkit.domain.classification import (
    ClassificationRules,
    ReleaseClassifier,
    classify_release,
    recommended_commercial_models,
)
from ernkit.domain.model import CommercialType, ReleaseProfile, ReleaseType
from tests.helpers.releases import make_release, make_track, make_tracks


def test_single_short_track_is_single() -> None:
    result = classify_release(make_release(make_tracks(1, duration=200)))

    assert result.release_type is ReleaseType.SINGLE
    assert result.commercial_type is CommercialType.SINGLE
    assert result.profile is ReleaseProfile.SIMPLE_AUDIO_SINGLE
    assert result.rationale == "1 track = Single"
    assert result.is_valid


def test_single_long_track_is_ep() -> None:
    result = classify_release(make_release(make_tracks(1, duration=700)))

    assert result.release_type is ReleaseType.ALBUM
    assert result.commercial_type is CommercialType.EP
    assert result.has_long_track


@pytest.mark.parametrize(
    ("durations", "release_type", "commercial_type"),
    [
        ((200, 200, 200), ReleaseType.SINGLE, CommercialType.SINGLE),
        ((700, 500, 800), ReleaseType.ALBUM, CommercialType.ALBUM),
        ((700, 200), ReleaseType.ALBUM, CommercialType.EP),
        ((300,) * 5, ReleaseType.ALBUM, CommercialType.EP),
        ((400,) * 5, ReleaseType.ALBUM, CommercialType.ALBUM),
        ((120,) * 7, ReleaseType.ALBUM, CommercialType.ALBUM),
    ],
)
def test_decision_table(
    durations: tuple[float, ...],
    release_type: ReleaseType,
    commercial_type: CommercialType,
) -> None:
    tracks = tuple(
        make_track(index, duration=duration) for index, duration in enumerate(durations, start=1)
    )

    result = classify_release(make_release(tracks))

    assert result.release_type is release_type
    assert result.commercial_type is commercial_type
    assert result.track_count == len(durations)
    assert result.total_duration_seconds == sum(durations)


def test_release_without_tracks_is_invalid() -> None:
    result = classify_release(make_release(()))

    assert not result.is_valid
    assert result.commercial_type is CommercialType.INVALID
    assert result.profile is ReleaseProfile.INVALID
    assert result.track_count == 0


def test_single_override_on_full_album_is_rejected(caplog: pytest.LogCaptureFixture) -> None:
    release = make_release(make_tracks(8, duration=300), requested_type="Single")

    with caplog.at_level(logging.WARNING):
        result = classify_release(release)

    assert result.release_type is ReleaseType.ALBUM
    assert result.commercial_type is CommercialType.ALBUM
    assert result.override_rejected
    assert not result.override_applied
    assert "rejected" in result.rationale
    assert result.total_duration_formatted == "40:00"
    assert "Single" in caplog.text


def test_ep_override_on_short_release_is_applied() -> None:
    release = make_release(make_tracks(3, duration=200), requested_type="EP")

    result = classify_release(release)

    assert result.release_type is ReleaseType.ALBUM
    assert result.commercial_type is CommercialType.EP
    assert result.profile is ReleaseProfile.SIMPLE_AUDIO_ALBUM
    assert result.override_applied
    assert result.rationale.startswith("User specified: EP")


def test_matching_override_keeps_classification() -> None:
    release = make_release(make_tracks(2, duration=200), requested_type="single")

    result = classify_release(release)

    assert result.release_type is ReleaseType.SINGLE
    assert result.override_applied
    assert not result.override_rejected


def test_single_override_at_album_length_boundary_is_accepted() -> None:
    release = make_release(make_tracks(3, duration=600), requested_type="Single")

    result = classify_release(release)

    assert result.release_type is ReleaseType.SINGLE
    assert result.commercial_type is CommercialType.SINGLE
    assert result.total_duration_seconds == 1800
    assert result.override_applied
    assert not result.override_rejected
    assert "rejected" not in result.rationale


def test_compilation_override_adds_secondary_type_to_albums() -> None:
    album = classify_release(make_release(make_tracks(8), requested_type="Compilation"))
    single = classify_release(make_release(make_tracks(1), requested_type="Compilation"))

    assert album.secondary_types == ("Compilation",)
    assert album.override_applied
    assert single.override_rejected
    assert single.secondary_types == ()


def test_keywords_in_requested_type_add_secondary_types() -> None:
    result = classify_release(make_release(make_tracks(8), requested_type="Live Remix Album"))

    assert result.secondary_types == ("Live", "Remix")
    assert result.release_type is ReleaseType.ALBUM


def test_classical_genre_switches_album_profile() -> None:
    album = classify_release(make_release(make_tracks(8), genre="Classical"))
    single = classify_release(make_release(make_tracks(1), genre="Classical"))

    assert album.profile is ReleaseProfile.CLASSICAL_AUDIO_ALBUM
    assert "Classical" in album.rationale
    assert single.profile is ReleaseProfile.SIMPLE_AUDIO_SINGLE


def test_rules_are_configurable() -> None:
    classifier = ReleaseClassifier(ClassificationRules(single_max_tracks=1, ep_max_tracks=2))

    result = classifier.classify(make_release(make_tracks(3)))

    assert result.commercial_type is CommercialType.ALBUM


def test_missing_durations_count_as_zero() -> None:
    tracks = (make_track(1, duration=0), make_track(2, duration=0))

    result = classify_release(make_release(tracks))

    assert result.commercial_type is CommercialType.SINGLE
    assert result.total_duration_formatted == "0:00"


def test_audit_record_is_flat() -> None:
    record = classify_release(make_release(make_tracks(8))).as_audit_record()

    assert record["releaseType"] == "Album"
    assert record["trackCount"] == 8
    assert record["overrideRejected"] is False


def test_recommended_commercial_models() -> None:
    single = classify_release(make_release(make_tracks(1)))
    album = classify_release(make_release(make_tracks(8)))

    assert [model.type for model in recommended_commercial_models(single)] == [
        "SubscriptionModel",
        "AdvertisementSupportedModel",
    ]
    assert [model.type for model in recommended_commercial_models(album)] == [
        "SubscriptionModel",
        "PayAsYouGoModel",
    ]
