from __future__ import annotations

from typing import Annotated, Dict, List, Literal, Tuple, Union

from pydantic import BaseModel, Field, field_validator


def _single_character(value: str) -> str:
    if len(value) != 1:
        raise ValueError(f"sku must be a single character: {value!r}")
    return value


class CatalogConfig(BaseModel):
    unit_prices: Dict[str, int]

    @field_validator("unit_prices")
    @classmethod
    def valid_prices(cls, value: Dict[str, int]) -> Dict[str, int]:
        for sku, price in value.items():
            _single_character(sku)
            if price < 0:
                raise ValueError(f"unit price for {sku!r} must be >= 0")
        return value


class IndividualPromotionConfig(BaseModel):
    type: Literal["individual"] = "individual"
    count: int = Field(..., ge=1)
    sku: str
    price: int = Field(..., ge=0)

    @field_validator("sku")
    @classmethod
    def single_sku(cls, value: str) -> str:
        return _single_character(value)


class CombinedPromotionConfig(BaseModel):
    type: Literal["combined"] = "combined"
    skus: Tuple[str, str]
    price: int = Field(..., ge=0)

    @field_validator("skus")
    @classmethod
    def distinct_skus(cls, value: Tuple[str, str]) -> Tuple[str, str]:
        for sku in value:
            _single_character(sku)
        if value[0] == value[1]:
            raise ValueError("combined promotion needs two distinct skus")
        return value


PromotionConfig = Annotated[
    Union[IndividualPromotionConfig, CombinedPromotionConfig],
    Field(discriminator="type"),
]


class CheckoutConfig(BaseModel):
    schema_version: int = 1
    catalog: CatalogConfig
    promotions: List[PromotionConfig] = Field(default_factory=list)


DEFAULT_CHECKOUT_CONFIG = CheckoutConfig(
    catalog=CatalogConfig(unit_prices={"a": 50, "b": 30, "c": 20, "d": 15}),
    promotions=[
        IndividualPromotionConfig(count=3, sku="a", price=130),
        IndividualPromotionConfig(count=2, sku="b", price=45),
        CombinedPromotionConfig(skus=("c", "d"), price=30),
    ],
)
