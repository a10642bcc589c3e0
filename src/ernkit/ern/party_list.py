"""PartyList section (ERN 4.3): every party named in the message, by reference."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .xml import sub

if TYPE_CHECKING:
    from lxml import etree

    from ernkit.domain.parties import PartyReferenceRegistry

    from .context import BuildContext
    from .inputs import Product

UNKNOWN_PARTY_NAME = "Unknown"


def collect_parties(product: Product, registry: PartyReferenceRegistry) -> None:
    """Allocate references in document order.

    Release artist first, then per track its artist followed by its
    contributors, then the label. Two builds of the same product therefore
    assign identical references.
    """

    registry.get_or_create_reference(product.display_artist)
    for track in product.tracks:
        registry.get_or_create_reference(track.display_artist or product.display_artist)
        registry.register_all(contributor.party_name for contributor in track.contributors)
    if product.label:
        registry.get_or_create_reference(product.label)


def build_party_list(root: etree._Element, registry: PartyReferenceRegistry) -> etree._Element:
    party_list = sub(root, "PartyList")
    for reference, name in registry.entries():
        party = sub(party_list, "Party")
        sub(party, "PartyReference", reference)
        sub(sub(party, "PartyName"), "FullName", name or UNKNOWN_PARTY_NAME)
    return party_list


def append_display_artist(
    parent: etree._Element, context: BuildContext, name: str | None
) -> etree._Element:
    """``DisplayArtist`` as a PartyList reference (4.3) or an inline party name."""

    artist = sub(parent, "DisplayArtist", SequenceNumber="1")
    if context.policy.party_list:
        sub(artist, "ArtistPartyReference", context.party(name))
        sub(artist, "DisplayArtistRole", "MainArtist")
    else:
        sub(sub(artist, "PartyName"), "FullName", name or UNKNOWN_PARTY_NAME)
        sub(artist, "ArtistRole", "MainArtist")
    return artist
