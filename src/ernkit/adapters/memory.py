"""In-memory release and delivery history stores."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from ernkit.domain.model import DeliveryRecord, DeliveryStatus, Release


class InMemoryReleaseRepository:
    def __init__(self, releases: Iterable[Release] = ()) -> None:
        self._releases = {release.id: release for release in releases}

    def add(self, release: Release) -> None:
        self._releases[release.id] = release

    def get(self, release_id: str) -> Release | None:
        return self._releases.get(release_id)


class InMemoryDeliveryHistory:
    """Delivery records kept in insertion order."""

    def __init__(self, records: Iterable[DeliveryRecord] = ()) -> None:
        self._records = list(records)

    def record(self, record: DeliveryRecord) -> None:
        self._records.append(record)

    def find(
        self,
        *,
        release_id: str,
        target_id: str,
        status: DeliveryStatus | None = None,
    ) -> Sequence[DeliveryRecord]:
        return [
            record
            for record in self._records
            if record.release_id == release_id
            and record.target_id == target_id
            and (status is None or record.status is status)
        ]
