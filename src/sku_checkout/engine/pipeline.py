from __future__ import annotations

from typing import Iterable, List

from sku_checkout.app.models.config import CheckoutConfig, IndividualPromotionConfig
from sku_checkout.engine.canonical.models import Receipt
from sku_checkout.engine.checkout import check_promotions, checkout_receipt
from sku_checkout.engine.pricing.pricing import PricingTable
from sku_checkout.engine.promotions.promotions import Combined, Individual, Promotion


def build_pricing_table(config: CheckoutConfig) -> PricingTable:
    return PricingTable(config.catalog.unit_prices)


def build_promotions(config: CheckoutConfig, table: PricingTable) -> List[Promotion]:
    promotions: List[Promotion] = []
    for entry in config.promotions:
        promotion: Promotion
        if isinstance(entry, IndividualPromotionConfig):
            promotion = Individual(entry.count, entry.sku, entry.price)
        else:
            promotion = Combined(entry.skus[0], entry.skus[1], entry.price)
        promotions.append(promotion)
    check_promotions(promotions, table)
    return promotions


def price_cart(cart: Iterable[str], config: CheckoutConfig) -> Receipt:
    table = build_pricing_table(config)
    return checkout_receipt(cart, build_promotions(config, table), table=table)
