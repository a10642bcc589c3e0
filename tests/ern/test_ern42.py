from __future__ import annotations

from datetime import date

from ernkit.domain.model import ErnVersion, Release
from tests.helpers.releases import build_message, parse_message, texts


def test_root_declares_ern_42(release: Release) -> None:
    root = parse_message(build_message(release, ErnVersion.V42))

    assert root.tag == "{http://ddex.net/xml/ern/42}NewReleaseMessage"
    assert root.get("MessageSchemaVersionId") == "ern/42"
    assert root.get("ReleaseProfileVersionId") == "SimpleAudioSingle/14"


def test_references_are_zero_padded(release: Release) -> None:
    root = parse_message(build_message(release, ErnVersion.V42))

    assert texts(root, "ResourceList/*/ResourceReference") == ["A001", "A002", "A003"]
    assert root.findtext("ReleaseList/Release/ReleaseReference") == "R001"
    assert root.findtext("DealList/ReleaseDeal/DealReleaseReference") == "R001"
    assert texts(
        root, "ReleaseList/Release/ReleaseResourceReferenceList/ReleaseResourceReference"
    ) == ["A001", "A002", "A003"]
    assert root.find("ReleaseList/Release/ResourceGroup") is None


def test_parties_are_written_inline(release: Release) -> None:
    root = parse_message(build_message(release, ErnVersion.V42))

    assert root.find("PartyList") is None
    assert root.find(".//ArtistPartyReference") is None
    recording = root.find("ResourceList/SoundRecording")
    assert recording is not None
    assert recording.findtext("DisplayArtist/PartyName/FullName") == "Nova Lights"
    assert recording.findtext("DisplayArtist/ArtistRole") == "MainArtist"
    assert recording.findtext("ResourceContributor/PartyName/FullName") == "Ada Mix"
    assert recording.findtext("ResourceContributor/ResourceContributorRole") == "Mixer"
    assert root.findtext("ReleaseList/Release/LabelName") == "Stardust Records"


def test_technical_details_mark_files_as_provided(release: Release) -> None:
    root = parse_message(build_message(release, ErnVersion.V42))

    assert texts(root, "ResourceList/SoundRecording/TechnicalDetails/IsProvidedInDelivery") == [
        "true",
        "true",
    ]
    assert root.findtext("ResourceList/Image/TechnicalDetails/IsProvidedInDelivery") == "true"
    image = root.find("ResourceList/Image/TechnicalDetails")
    assert image is not None
    assert image.findtext("TechnicalResourceDetailsReference") == "TA003"


def test_default_deal_sells_downloads_and_streams(release: Release) -> None:
    root = parse_message(build_message(release, ErnVersion.V42))

    terms = root.find("DealList/ReleaseDeal/Deal/DealTerms")
    assert terms is not None
    assert terms.findtext("CommercialModelType") == "PayAsYouGoModel"
    assert texts(terms, "Usage/UseType") == ["PermanentDownload", "OnDemandStream"]


def test_deal_extensions_are_not_written(release: Release) -> None:
    root = parse_message(
        build_message(
            release,
            ErnVersion.V42,
            exclusivity="Exclusive",
            pre_order_date=date(2025, 3, 20),
            display_start_date=date(2025, 3, 25),
        )
    )

    assert root.find(".//ExclusivityType") is None
    assert root.find(".//PreOrderReleaseDate") is None
    assert root.find(".//ReleaseDisplayStartDate") is None
