from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator


class PromotionLine(BaseModel):
    description: str
    applications: int = Field(..., ge=0)
    revenue: int = Field(..., ge=0)


class Receipt(BaseModel):
    items: List[str]
    promotions: List[PromotionLine] = Field(default_factory=list)
    remaining: List[str] = Field(default_factory=list)
    base_total: int = Field(..., ge=0)
    total: int = Field(..., ge=0)

    @field_validator("items", "remaining")
    @classmethod
    def single_character_skus(cls, value: List[str]) -> List[str]:
        for sku in value:
            if len(sku) != 1:
                raise ValueError(f"sku must be a single character: {sku!r}")
        return value

    @property
    def discount_revenue(self) -> int:
        return sum(line.revenue for line in self.promotions)


def parse_cart(text: str) -> List[str]:
    """Turn `"aab c"` into `["a", "a", "b", "c"]`, ignoring whitespace."""
    return [char for char in text if not char.isspace()]
