"""Static lookup data injected into the mapper, classifier and generator."""

from __future__ import annotations

from .contributor_roles import (
    COMPOSER_LYRICIST_ROLES,
    DEFAULT_ROLE_CATALOG,
    PERFORMER_ROLES,
    PRODUCER_ENGINEER_ROLES,
    RoleCatalog,
    RoleDictionary,
)
from .genres import GENRE_MAPPINGS, GenreMapping, identity_mapping

__all__ = [
    "COMPOSER_LYRICIST_ROLES",
    "DEFAULT_ROLE_CATALOG",
    "GENRE_MAPPINGS",
    "PERFORMER_ROLES",
    "PRODUCER_ENGINEER_ROLES",
    "GenreMapping",
    "RoleCatalog",
    "RoleDictionary",
    "identity_mapping",
]
