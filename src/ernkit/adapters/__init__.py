"""Adapters implementing the domain ports."""

from __future__ import annotations

from .checksum import ChecksumError, HttpChecksumService
from .http_resilience import ResilientClient
from .memory import InMemoryDeliveryHistory, InMemoryReleaseRepository

__all__ = [
    "ChecksumError",
    "HttpChecksumService",
    "InMemoryDeliveryHistory",
    "InMemoryReleaseRepository",
    "ResilientClient",
]
