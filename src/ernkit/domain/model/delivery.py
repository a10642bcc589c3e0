"""Delivery targets and delivery history records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .enums import DeliveryStatus, ErnVersion, MessageSubType

if TYPE_CHECKING:
    from datetime import date, datetime

    from ernkit.dictionaries.genres import GenreMapping

    from .primitives import TerritoryCode


@dataclass(frozen=True, slots=True)
class CommercialModel:
    type: str
    usage_types: tuple[str, ...]
    price: float | None = None
    currency: str = "USD"


@dataclass(frozen=True, slots=True)
class DeliveryTarget:
    """A DSP (or aggregator) a release is delivered to, with its deal terms."""

    id: str
    name: str
    party_id: str | None = None
    party_name: str | None = None
    ern_version: ErnVersion | None = None
    territories: tuple[TerritoryCode, ...] = ()
    deal_start_date: date | None = None
    deal_end_date: date | None = None
    commercial_models: tuple[CommercialModel, ...] = ()
    test_mode: bool = False
    genre_mapping: GenreMapping | None = None
    exclusivity: str | None = None
    pre_order_date: date | None = None
    display_start_date: date | None = None

    @property
    def recipient_name(self) -> str:
        return self.party_name or self.name


@dataclass(frozen=True, slots=True)
class DeliveryRecord:
    release_id: str
    target_id: str
    status: DeliveryStatus
    message_sub_type: MessageSubType
    ern_version: ErnVersion | None = None
    message_id: str | None = None
    delivered_at: datetime | None = None
