from __future__ import annotations


class CheckoutError(Exception):
    """Base class for failures raised while pricing a cart."""


class UnknownSkuError(CheckoutError, KeyError):
    """A SKU outside the pricing table was found."""

    def __init__(self, sku: str) -> None:
        super().__init__(sku)
        self.sku = sku

    def __str__(self) -> str:
        return f"unknown sku: {self.sku!r}"


class InvalidPromotionError(CheckoutError, ValueError):
    """A promotion was built with parameters it cannot apply."""


class InvalidPricingError(CheckoutError, ValueError):
    """A pricing table was built from a malformed mapping."""
