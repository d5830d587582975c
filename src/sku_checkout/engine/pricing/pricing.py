from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from sku_checkout.util.errors import InvalidPricingError, UnknownSkuError


@dataclass(frozen=True)
class PricingTable:
    """Unit price per SKU for whatever no promotion has consumed."""

    unit_prices: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        prices = dict(self.unit_prices)
        for sku, price in prices.items():
            if not isinstance(sku, str) or len(sku) != 1:
                raise InvalidPricingError(f"sku must be a single character: {sku!r}")
            if price < 0:
                raise InvalidPricingError(f"unit price for {sku!r} must be >= 0")
        object.__setattr__(self, "unit_prices", MappingProxyType(prices))

    def __contains__(self, sku: object) -> bool:
        return sku in self.unit_prices

    def unit_price(self, sku: str) -> int:
        try:
            return self.unit_prices[sku]
        except KeyError:
            raise UnknownSkuError(sku) from None

    def validate(self, cart: Iterable[str]) -> None:
        for sku in cart:
            if sku not in self.unit_prices:
                raise UnknownSkuError(sku)


DEFAULT_PRICING_TABLE = PricingTable({"a": 50, "b": 30, "c": 20, "d": 15})


def base_price(cart: Iterable[str], table: PricingTable = DEFAULT_PRICING_TABLE) -> int:
    return sum(table.unit_price(sku) for sku in cart)
