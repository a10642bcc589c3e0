"""Per-build state handed to every section builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ernkit.domain.model import PartyReference
    from ernkit.domain.parties import PartyReferenceRegistry

    from .inputs import BuildConfig, Product, ResourceBundle
    from .policy import ErnVersionPolicy


@dataclass(frozen=True, slots=True)
class BuildContext:
    policy: ErnVersionPolicy
    product: Product
    resources: ResourceBundle
    config: BuildConfig
    parties: PartyReferenceRegistry

    @property
    def year(self) -> int:
        """Year used in P-Line and C-Line notices."""

        if self.product.copyright_year:
            return self.product.copyright_year
        if self.product.release_date is not None:
            return self.product.release_date.year
        return self.config.created_at.year

    def party(self, name: str | None) -> PartyReference:
        return self.parties.get_or_create_reference(name)
