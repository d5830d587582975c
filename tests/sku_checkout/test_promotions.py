import pytest

from sku_checkout.engine.promotions.promotions import Combined, Individual
from sku_checkout.util.errors import InvalidPromotionError


def test_individual_not_enough_units() -> None:
    cart = list("aa")
    assert Individual(3, "a", 130).apply(cart) == 0
    assert cart == ["a", "a"]


def test_individual_exactly_one_group() -> None:
    cart = list("aaa")
    assert Individual(3, "a", 130).apply(cart) == 130
    assert cart == []


def test_individual_two_groups() -> None:
    cart = list("aaaaaa")
    assert Individual(3, "a", 130).apply(cart) == 260
    assert cart == []


def test_individual_leaves_remainder_and_other_skus() -> None:
    cart = list("abacaada")
    promotion = Individual(3, "a", 130)
    assert promotion.applications(cart) == 1
    assert promotion.apply(cart) == 130
    assert sorted(cart) == ["a", "a", "b", "c", "d"]


def test_individual_is_idempotent() -> None:
    cart = list("aaaa")
    promotion = Individual(3, "a", 130)
    assert promotion.apply(cart) == 130
    assert promotion.apply(cart) == 0
    assert cart == ["a"]


def test_individual_count_one_discounts_every_unit() -> None:
    cart = list("bbb")
    assert Individual(1, "b", 25).apply(cart) == 75
    assert cart == []


@pytest.mark.parametrize("count", [0, -1])
def test_individual_rejects_non_positive_count(count: int) -> None:
    with pytest.raises(InvalidPromotionError, match="count"):
        Individual(count, "a", 130)


def test_promotions_reject_negative_price() -> None:
    with pytest.raises(InvalidPromotionError, match="price"):
        Individual(3, "a", -1)
    with pytest.raises(InvalidPromotionError, match="price"):
        Combined("c", "d", -1)


def test_promotions_reject_multi_character_sku() -> None:
    with pytest.raises(InvalidPromotionError, match="single character"):
        Individual(2, "ab", 10)
    with pytest.raises(InvalidPromotionError, match="single character"):
        Combined("c", "dd", 10)


@pytest.mark.parametrize(
    ("cart", "expected_revenue", "expected_left"),
    [
        ("cd", 30, []),
        ("ccdd", 60, []),
        ("bc", 0, ["b", "c"]),
        ("c", 0, ["c"]),
        ("cccd", 30, ["c", "c"]),
    ],
)
def test_combined_pairs(cart: str, expected_revenue: int, expected_left: list) -> None:
    working = list(cart)
    assert Combined("c", "d", 30).apply(working) == expected_revenue
    assert working == expected_left


def test_combined_is_symmetric() -> None:
    for cart in ("cd", "dc", "dccdd"):
        left, right = list(cart), list(cart)
        assert Combined("c", "d", 30).apply(left) == Combined("d", "c", 30).apply(right)
        assert sorted(left) == sorted(right)


def test_combined_is_idempotent() -> None:
    cart = list("cdc")
    promotion = Combined("c", "d", 30)
    assert promotion.apply(cart) == 30
    assert promotion.apply(cart) == 0
    assert cart == ["c"]


def test_combined_rejects_identical_skus() -> None:
    with pytest.raises(InvalidPromotionError, match="distinct"):
        Combined("c", "c", 30)


def test_describe() -> None:
    assert Individual(3, "a", 130).describe() == "3 x a for 130"
    assert Combined("c", "d", 30).describe() == "c + d for 30"
