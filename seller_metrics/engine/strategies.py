"""
Seller Metrics — Revenue & Bonus Strategies

The pipeline never hardcodes how revenue or bonus is computed. Callers
inject two strategies:

    calculate_revenue(item, product) -> number
    calculate_bonus(index, total, seller) -> number

The built-ins below are the standard policy and must be passed explicitly.

Default revenue:
    R_item = sale_price × quantity × (1 − discount / 100), rounded to 2dp

Default bonus tiers (index is 0-based rank by profit descending):
    index 0          → 15%
    index 1..2       → 10%
    index < total−1  → 5%
    last             → 0%
Rank checks run before the last-place check, so with three or fewer
sellers the last one still earns the runner-up rate.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Protocol, Union

from seller_metrics.config import settings
from seller_metrics.models.records import LineItem, Product
from seller_metrics.utils.money import quantize_money

if TYPE_CHECKING:
    from seller_metrics.engine.indexer import SellerAccumulator

Number = Union[Decimal, int, float]

_HUNDRED = Decimal("100")
_ONE = Decimal("1")


class RevenueStrategy(Protocol):
    """Revenue for one matched line item."""

    def __call__(self, item: LineItem, product: Product) -> Number:
        ...


class BonusStrategy(Protocol):
    """Bonus rate (or amount) for the seller at rank `index` of `total`."""

    def __call__(self, index: int, total: int, seller: SellerAccumulator) -> Number:
        ...


def calculate_simple_revenue(item: LineItem, product: Product) -> Decimal:
    """
    Discounted line revenue, rounded half away from zero to 2dp.

    Examples:
        sale_price=100, quantity=2, discount=10 → Decimal('180.00')
    """
    gross = item.sale_price * item.quantity
    return quantize_money(gross * (_ONE - item.discount / _HUNDRED))


def bonus_rate_for_rank(index: int, total: int) -> Decimal:
    """
    Tiered bonus rate for a 0-based rank.

    Raises:
        ValueError: If index is outside [0, total).
    """
    if total < 1 or not 0 <= index < total:
        raise ValueError(f"rank {index} is outside 0..{total - 1}")

    if index == 0:
        return settings.BONUS_RATE_FIRST
    if index <= settings.BONUS_RUNNER_UP_MAX_RANK:
        return settings.BONUS_RATE_RUNNER_UP
    if index < total - 1:
        return settings.BONUS_RATE_STANDARD
    return settings.BONUS_RATE_LAST


def calculate_bonus_by_profit(
    index: int,
    total: int,
    seller: SellerAccumulator,
) -> Decimal:
    """Bonus as a rate of profit. Pair with bonus_returns_amount=False."""
    return bonus_rate_for_rank(index, total)


def calculate_bonus_amount_by_profit(
    index: int,
    total: int,
    seller: SellerAccumulator,
) -> Decimal:
    """Bonus as a currency amount. Pair with bonus_returns_amount=True."""
    rate = bonus_rate_for_rank(index, total)
    return quantize_money(quantize_money(seller.profit) * rate)
