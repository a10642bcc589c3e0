"""DealList section: territories, validity period and commercial models."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ernkit.domain.model import WORLDWIDE

from .xml import sub, sub_if

if TYPE_CHECKING:
    from lxml import etree

    from ernkit.domain.model import CommercialModel

    from .context import BuildContext


def build_deal_list(root: etree._Element, context: BuildContext) -> etree._Element | None:
    """Append the DealList unless the message carries no deals (takedowns)."""

    config = context.config
    if not config.include_deals:
        return None

    deal_list = sub(root, "DealList")
    release_deal = sub(deal_list, "ReleaseDeal")
    sub(release_deal, "DealReleaseReference", context.product.release_reference)
    terms = sub(sub(release_deal, "Deal"), "DealTerms")

    territories = config.territories or context.product.territories or (WORLDWIDE,)
    for territory in territories:
        sub(terms, "TerritoryCode", territory)

    validity = sub(terms, "ValidityPeriod")
    sub(validity, "StartDate", config.deal_start_date or config.created_at.date())
    sub_if(validity, "EndDate", config.deal_end_date)

    models = config.commercial_models or context.policy.default_commercial_models
    for model in models:
        _commercial_model(terms, model)

    if context.policy.deal_extensions:
        sub_if(terms, "ExclusivityType", config.exclusivity)
        sub_if(terms, "PreOrderReleaseDate", config.pre_order_date)
    return deal_list


def _commercial_model(terms: etree._Element, model: CommercialModel) -> None:
    sub(terms, "CommercialModelType", model.type)
    for use_type in model.usage_types:
        sub(sub(terms, "Usage"), "UseType", use_type)
    if model.price is not None:
        price_information = sub(terms, "PriceInformation")
        sub(price_information, "PriceType", "WholePrice")
        sub(
            sub(price_information, "Price"),
            "Amount",
            f"{model.price:.2f}",
            CurrencyCode=model.currency,
        )
