"""Ports for reading releases and delivery history."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ernkit.domain.model import DeliveryRecord, DeliveryStatus, Release


@runtime_checkable
class ReleaseRepository(Protocol):
    """Read access to release documents."""

    def get(self, release_id: str) -> Release | None: ...


@runtime_checkable
class DeliveryHistory(Protocol):
    """Past deliveries, filtered by release, target and optionally status."""

    def find(
        self,
        *,
        release_id: str,
        target_id: str,
        status: DeliveryStatus | None = None,
    ) -> Sequence[DeliveryRecord]: ...


__all__ = ["DeliveryHistory", "ReleaseRepository"]
