"""Domain port definitions for adapters."""

from __future__ import annotations

from .checksum import ChecksumService
from .clock import Clock, utcnow
from .persistence import DeliveryHistory, ReleaseRepository

__all__ = [
    "ChecksumService",
    "Clock",
    "DeliveryHistory",
    "ReleaseRepository",
    "utcnow",
]
