"""DDEX ERN message builders for versions 3.8.2, 4.2 and 4.3."""

from __future__ import annotations

from .assembly import build_product, build_resources
from .builder import ErnBuilder, get_builder
from .compatibility import is_version_compatible, recommended_version
from .inputs import (
    BuildConfig,
    ImageResource,
    Product,
    ProductTrack,
    ResourceBundle,
    SoundRecordingResource,
)
from .inspection import detect_ern_version, extract_message_id
from .policy import ERN_42, ERN_43, ERN_382, POLICIES, ErnVersionPolicy, get_policy

__all__ = [
    "ERN_42",
    "ERN_43",
    "ERN_382",
    "POLICIES",
    "BuildConfig",
    "ErnBuilder",
    "ErnVersionPolicy",
    "ImageResource",
    "Product",
    "ProductTrack",
    "ResourceBundle",
    "SoundRecordingResource",
    "build_product",
    "build_resources",
    "detect_ern_version",
    "extract_message_id",
    "get_builder",
    "get_policy",
    "is_version_compatible",
    "recommended_version",
]
