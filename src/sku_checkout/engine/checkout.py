from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple, Union

from sku_checkout.engine.canonical.models import PromotionLine, Receipt
from sku_checkout.engine.pricing.pricing import DEFAULT_PRICING_TABLE, PricingTable, base_price
from sku_checkout.engine.promotions.promotions import Promotion
from sku_checkout.util.errors import InvalidPromotionError
from sku_checkout.util.logging import get_logger, log_event

PromotionsArg = Union[None, Promotion, Sequence[Promotion]]

logger = get_logger(__name__)


def _as_sequence(promotions: PromotionsArg) -> Tuple[Promotion, ...]:
    if promotions is None:
        return ()
    if hasattr(promotions, "apply"):
        return (promotions,)  # type: ignore[return-value]
    return tuple(promotions)  # type: ignore[arg-type]


def check_promotions(promotions: Iterable[Promotion], table: PricingTable) -> None:
    for promotion in promotions:
        for sku in promotion.skus:
            if sku not in table:
                raise InvalidPromotionError(
                    f"promotion {promotion.describe()!r} references unknown sku {sku!r}"
                )


def checkout_receipt(
    cart: Iterable[str],
    promotions: PromotionsArg = None,
    *,
    table: PricingTable = DEFAULT_PRICING_TABLE,
) -> Receipt:
    ordered = _as_sequence(promotions)
    items: List[str] = list(cart)
    table.validate(items)
    check_promotions(ordered, table)

    working = list(items)
    lines: List[PromotionLine] = []
    for promotion in ordered:
        applications = promotion.applications(working)
        revenue = promotion.apply(working)
        lines.append(
            PromotionLine(
                description=promotion.describe(),
                applications=applications,
                revenue=revenue,
            )
        )

    remainder = base_price(working, table)
    total = sum(line.revenue for line in lines) + remainder
    log_event(
        logger,
        "checkout_priced",
        items=len(items),
        promotions=len(ordered),
        total=total,
    )
    return Receipt(
        items=items,
        promotions=lines,
        remaining=working,
        base_total=remainder,
        total=total,
    )


def checkout(
    cart: Iterable[str],
    promotions: PromotionsArg = None,
    *,
    table: PricingTable = DEFAULT_PRICING_TABLE,
) -> int:
    """Price `cart` after applying `promotions` in order.

    `promotions` may be omitted, a single promotion, or an ordered sequence.
    The caller's cart is copied and never mutated.
    """
    return checkout_receipt(cart, promotions, table=table).total
