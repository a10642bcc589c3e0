"""Catalog release documents stored as JSON."""

from __future__ import annotations

from .repository import JsonReleaseRepository, load_release_document
from .schema import CatalogRelease
from .translator import translate_release

__all__ = [
    "CatalogRelease",
    "JsonReleaseRepository",
    "load_release_document",
    "translate_release",
]
