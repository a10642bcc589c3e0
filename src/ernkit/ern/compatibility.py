"""Which ERN versions each DSP ingests."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from ernkit.domain.model import ErnVersion

if TYPE_CHECKING:
    from collections.abc import Mapping

DSP_COMPATIBILITY: Mapping[str, tuple[ErnVersion, ...]] = MappingProxyType(
    {
        "spotify": (ErnVersion.V43, ErnVersion.V42),
        "apple": (ErnVersion.V43,),
        "amazon": (ErnVersion.V43, ErnVersion.V42, ErnVersion.V382),
        "tidal": (ErnVersion.V43, ErnVersion.V42),
        "deezer": (ErnVersion.V42, ErnVersion.V382),
        "youtube": (ErnVersion.V43,),
    }
)

RECOMMENDED_VERSIONS: Mapping[str, ErnVersion] = MappingProxyType(
    {
        "spotify": ErnVersion.V43,
        "apple": ErnVersion.V43,
        "tidal": ErnVersion.V43,
        "youtube": ErnVersion.V43,
        "amazon": ErnVersion.V382,
        "deezer": ErnVersion.V382,
        "soundcloud": ErnVersion.V382,
    }
)

DEFAULT_RECOMMENDED_VERSION = ErnVersion.V43


def _dsp_key(dsp: str) -> str:
    return dsp.strip().lower()


def is_version_compatible(version: ErnVersion | str, dsp: str) -> bool:
    """Unknown DSPs accept every supported version; unknown versions are never compatible."""

    try:
        parsed = ErnVersion.parse(version)
    except ValueError:
        return False
    return parsed in DSP_COMPATIBILITY.get(_dsp_key(dsp), tuple(ErnVersion))


def recommended_version(dsp: str) -> ErnVersion:
    return RECOMMENDED_VERSIONS.get(_dsp_key(dsp), DEFAULT_RECOMMENDED_VERSION)
