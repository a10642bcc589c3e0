from __future__ import annotations

from pathlib import Path

import pytest

from ernkit.adapters.memory import InMemoryDeliveryHistory
from ernkit.config import ErnSettings
from ernkit.domain.model import Contributor, DeliveryTarget, ErnVersion, Release
from tests.helpers.releases import (
    SENDER_PARTY_ID,
    FakeChecksumService,
    make_release,
    make_track,
)

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture
def settings() -> ErnSettings:
    return ErnSettings(sender_party_id=SENDER_PARTY_ID, sender_name="Stardust Distribution")


@pytest.fixture
def release() -> Release:
    return make_release(
        (
            make_track(
                1,
                isrc="US1234567890",
                duration=200,
                title="Signal One",
                contributors=(
                    Contributor(name="Ada Mix", role="Mix Engineer"),
                    Contributor(name="Cole Writer", role="Composer"),
                ),
            ),
            make_track(
                2,
                isrc="US1234567891",
                duration=215,
                title="Signal Two",
                contributors=(Contributor(name="Vee Vibes", role="Vibes Curator"),),
            ),
        )
    )


@pytest.fixture
def target() -> DeliveryTarget:
    return DeliveryTarget(
        id="spotify",
        name="Spotify",
        party_id="PADPIDA2011072101T",
        ern_version=ErnVersion.V43,
    )


@pytest.fixture
def history() -> InMemoryDeliveryHistory:
    return InMemoryDeliveryHistory()


@pytest.fixture
def checksums() -> FakeChecksumService:
    return FakeChecksumService()


@pytest.fixture
def release_document_path() -> Path:
    return DATA_DIR / "release_document.json"
