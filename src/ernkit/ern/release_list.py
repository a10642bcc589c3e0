"""ReleaseList section: the main release and its links to the resources."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ernkit.domain.identifiers import synthesize_grid
from ernkit.domain.model import WORLDWIDE, ReleaseResourceType

from .party_list import UNKNOWN_PARTY_NAME, append_display_artist
from .xml import sub, sub_if

if TYPE_CHECKING:
    from lxml import etree

    from .context import BuildContext


def build_release_list(root: etree._Element, context: BuildContext) -> etree._Element:
    release_list = sub(root, "ReleaseList")
    if context.policy.territorial_details:
        _build_legacy_release(release_list, context)
    else:
        _build_release(release_list, context)
    return release_list


def resource_links(context: BuildContext) -> list[tuple[str, ReleaseResourceType]]:
    """Resource references of the release, first track primary, the rest secondary."""

    links = [
        (
            track.resource_reference,
            ReleaseResourceType.PRIMARY if index == 0 else ReleaseResourceType.SECONDARY,
        )
        for index, track in enumerate(context.product.tracks)
    ]
    links.append((context.resources.image.resource_reference, ReleaseResourceType.SECONDARY))
    return links


def _build_release(parent: etree._Element, context: BuildContext) -> None:
    product = context.product
    release = sub(parent, "Release")
    sub(release, "ReleaseReference", product.release_reference)
    _release_types(release, context)
    _release_id(release, context)
    sub(release, "DisplayTitleText", product.title)
    title = sub(release, "DisplayTitle")
    sub(title, "TitleText", product.title)
    sub_if(title, "SubTitle", product.subtitle)
    sub(release, "DisplayArtistName", product.display_artist or UNKNOWN_PARTY_NAME)
    append_display_artist(release, context, product.display_artist)
    if product.label:
        if context.policy.party_list:
            sub(release, "ReleaseLabelReference", context.party(product.label))
        else:
            sub(release, "LabelName", product.label)
    _notices(release, context)
    _genre(release, context)
    sub(release, "ParentalWarningType", product.parental_warning)
    _dates(release, context)
    if context.policy.deal_extensions:
        sub_if(release, "ReleaseDisplayStartDate", context.config.display_start_date)
    if context.policy.resource_groups:
        _resource_group(release, context)
    else:
        _resource_reference_list(release, context)


def _build_legacy_release(parent: etree._Element, context: BuildContext) -> None:
    product = context.product
    release = sub(parent, "Release", IsMainRelease="true")
    _release_id(release, context)
    sub(release, "ReleaseReference", product.release_reference)
    title = sub(release, "ReferenceTitle")
    sub(title, "TitleText", product.title)
    sub_if(title, "SubTitle", product.subtitle)
    _resource_reference_list(release, context)
    _release_types(release, context)

    details = sub(release, "ReleaseDetailsByTerritory")
    for territory in product.territories or (WORLDWIDE,):
        sub(details, "TerritoryCode", territory)
    sub(details, "DisplayArtistName", product.display_artist or UNKNOWN_PARTY_NAME)
    sub_if(details, "LabelName", product.label)
    display_title = sub(details, "Title", TitleType="DisplayTitle")
    sub(display_title, "TitleText", product.title)
    sub_if(display_title, "SubTitle", product.subtitle)
    append_display_artist(details, context, product.display_artist)
    sub(details, "ParentalWarningType", product.parental_warning)
    _genre(details, context)
    _dates(details, context)
    _notices(release, context)


def _release_types(release: etree._Element, context: BuildContext) -> None:
    sub(release, "ReleaseType", context.product.release_type.value)
    for secondary in context.product.secondary_types:
        sub(release, "ReleaseType", "UserDefined", UserDefinedValue=secondary)


def _release_id(release: etree._Element, context: BuildContext) -> None:
    product = context.product
    release_id = sub(release, "ReleaseId")
    if context.policy.release_grid:
        grid = product.grid or synthesize_grid(context.config.sender_party_id, product.upc or "")
        sub(release_id, "GRid", grid)
    sub(release_id, "ICPN", product.upc)
    if product.catalog_number:
        sub(
            release_id,
            "CatalogNumber",
            product.catalog_number,
            Namespace=f"DPID:{context.config.sender_party_id}",
        )


def _notices(release: etree._Element, context: BuildContext) -> None:
    year = context.year
    p_line = sub(release, "PLine")
    sub(p_line, "Year", year)
    sub(p_line, "PLineText", context.product.p_line(year))
    c_line = sub(release, "CLine")
    sub(c_line, "Year", year)
    sub(c_line, "CLineText", context.product.c_line(year))


def _genre(parent: etree._Element, context: BuildContext) -> None:
    if not context.product.genre:
        return
    genre = sub(parent, "Genre")
    sub(genre, "GenreText", context.product.genre)
    sub_if(genre, "SubGenre", context.product.sub_genre)


def _dates(parent: etree._Element, context: BuildContext) -> None:
    product = context.product
    release_date = product.release_date or context.config.created_at.date()
    sub(parent, "ReleaseDate", release_date)
    sub(parent, "OriginalReleaseDate", product.original_release_date or release_date)


def _resource_reference_list(release: etree._Element, context: BuildContext) -> None:
    reference_list = sub(release, "ReleaseResourceReferenceList")
    for reference, resource_type in resource_links(context):
        sub(
            reference_list,
            "ReleaseResourceReference",
            reference,
            ReleaseResourceType=resource_type.value,
        )


def _resource_group(release: etree._Element, context: BuildContext) -> None:
    group = sub(release, "ResourceGroup")
    sub(group, "SequenceNumber", 1)
    for sequence, (reference, resource_type) in enumerate(resource_links(context), start=1):
        item = sub(group, "ResourceGroupContentItem")
        sub(item, "SequenceNumber", sequence)
        sub(
            item,
            "ReleaseResourceReference",
            reference,
            ReleaseResourceType=resource_type.value,
        )
