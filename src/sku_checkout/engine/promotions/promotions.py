"""
Promotion rules applied to a cart before base pricing.

Each promotion consumes the units it discounts from a working cart (a plain
list of SKUs) and returns the revenue charged for them. Promotions run in the
caller's order, so a unit taken by one promotion is no longer available to the
next.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol, Sequence, Tuple

from sku_checkout.util.errors import InvalidPromotionError


class Promotion(Protocol):
    """Interface shared by every promotion variant."""

    @property
    def skus(self) -> Tuple[str, ...]: ...

    def applications(self, cart: Sequence[str]) -> int: ...

    def apply(self, cart: List[str]) -> int: ...

    def describe(self) -> str: ...


def _check_sku(sku: object) -> None:
    if not isinstance(sku, str) or len(sku) != 1:
        raise InvalidPromotionError(f"sku must be a single character: {sku!r}")


def _check_price(price: int) -> None:
    if price < 0:
        raise InvalidPromotionError("price must be >= 0")


def _remove(cart: List[str], sku: str, quantity: int) -> None:
    # Left-to-right; units of one SKU are interchangeable.
    if quantity <= 0:
        return
    kept: List[str] = []
    for item in cart:
        if item == sku and quantity > 0:
            quantity -= 1
            continue
        kept.append(item)
    cart[:] = kept


@dataclass(frozen=True)
class Individual:
    """`count` units of `sku` for a flat `price`."""

    count: int
    sku: str
    price: int

    def __post_init__(self) -> None:
        if self.count <= 0:
            raise InvalidPromotionError("count must be >= 1")
        _check_sku(self.sku)
        _check_price(self.price)

    @property
    def skus(self) -> Tuple[str, ...]:
        return (self.sku,)

    def applications(self, cart: Sequence[str]) -> int:
        return list(cart).count(self.sku) // self.count

    def apply(self, cart: List[str]) -> int:
        applications = self.applications(cart)
        _remove(cart, self.sku, applications * self.count)
        return applications * self.price

    def describe(self) -> str:
        return f"{self.count} x {self.sku} for {self.price}"


@dataclass(frozen=True)
class Combined:
    """One `sku_a` plus one `sku_b` for a flat `price`."""

    sku_a: str
    sku_b: str
    price: int

    def __post_init__(self) -> None:
        _check_sku(self.sku_a)
        _check_sku(self.sku_b)
        if self.sku_a == self.sku_b:
            raise InvalidPromotionError("combined promotion needs two distinct skus")
        _check_price(self.price)

    @property
    def skus(self) -> Tuple[str, ...]:
        return (self.sku_a, self.sku_b)

    def applications(self, cart: Sequence[str]) -> int:
        items = list(cart)
        return min(items.count(self.sku_a), items.count(self.sku_b))

    def apply(self, cart: List[str]) -> int:
        applications = self.applications(cart)
        _remove(cart, self.sku_a, applications)
        _remove(cart, self.sku_b, applications)
        return applications * self.price

    def describe(self) -> str:
        return f"{self.sku_a} + {self.sku_b} for {self.price}"
