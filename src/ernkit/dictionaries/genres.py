"""Genre mappings from the catalog's genre codes to a DSP's genre codes."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

WILDCARD = "*"


@dataclass(frozen=True, slots=True)
class GenreMapping:
    """Maps source genre codes for one target.

    An identity mapping passes codes through unchanged. Otherwise codes are
    looked up in ``rules`` and fall back to the ``*`` rule; without one an
    unknown code maps to ``None``.
    """

    target: str
    rules: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    identity: bool = False
    version: str | None = None

    def map(self, code: str | None) -> str | None:
        if not code:
            return None
        if self.identity:
            return code
        return self.rules.get(code, self.rules.get(WILDCARD))


def identity_mapping(target: str, *, version: str | None = None) -> GenreMapping:
    return GenreMapping(target=target, identity=True, version=version)


APPLE_GENRE_MAPPING = identity_mapping("apple", version="5.3.9")

BEATPORT_GENRE_MAPPING = GenreMapping(
    target="beatport",
    version="2025-05",
    rules=MappingProxyType(
        {
            "HOUSE-00": "BP-HOUSE-00",
            "ACID": "BP-HOUSE-ACID",
            "DEEP-HOUSE-00": "BP-DEEP-HOUSE-00",
            "TECH-HOUSE-00": "BP-TECH-HOUSE-00",
            "BASS-HOUSE-00": "BP-BASS-HOUSE-00",
            "TECHNO-00": "BP-TECHNO-PEAK-00",
            "MINIMAL-00": "BP-MINIMAL-00",
            "HARD-TECHNO-00": "BP-HARD-TECHNO-00",
            "TRANCE-00": "BP-TRANCE-MAIN-00",
            "PSY-TRANCE-00": "BP-PSY-TRANCE-00",
            "DUBSTEP-00": "BP-DUBSTEP-00",
            "DRUM-BASS-00": "BP-DRUM-BASS-00",
            "BREAKBEAT-00": "BP-BREAKS-00",
            WILDCARD: "BP-ELECTRONICA-00",
        }
    ),
)

GENRE_MAPPINGS: Mapping[str, GenreMapping] = MappingProxyType(
    {mapping.target: mapping for mapping in (APPLE_GENRE_MAPPING, BEATPORT_GENRE_MAPPING)}
)
