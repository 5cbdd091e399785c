"""
Seller Metrics — Ranking & Reports

Sort sellers by profit descending, assign tiered bonuses through the
injected bonus strategy and shape the final reports.

Bonus calling conventions:
- rate   (bonus_returns_amount=False): bonus = round(profit × result)
- amount (bonus_returns_amount=True):  bonus = round(result)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from decimal import Decimal

import structlog

from seller_metrics.config import settings
from seller_metrics.engine.indexer import SellerAccumulator
from seller_metrics.engine.strategies import BonusStrategy
from seller_metrics.errors import StrategyResultError
from seller_metrics.models.report import SellerReport, TopProduct
from seller_metrics.utils.money import quantize_money, to_decimal

logger = structlog.get_logger(__name__)


def rank_sellers(accumulators: Iterable[SellerAccumulator]) -> list[SellerAccumulator]:
    """Profit descending. sorted() is stable, so ties keep input order."""
    ranked = sorted(accumulators, key=lambda seller: seller.profit, reverse=True)
    logger.debug("sellers_ranked", total=len(ranked))
    return ranked


def select_top_products(
    products_sold: Mapping[str, int],
    limit: int | None = None,
) -> list[TopProduct]:
    """Best sellers by quantity; ties keep first-sale order."""
    if limit is None:
        limit = settings.TOP_PRODUCTS_LIMIT
    ordered = sorted(products_sold.items(), key=lambda pair: pair[1], reverse=True)
    return [TopProduct(sku=sku, quantity=quantity) for sku, quantity in ordered[:limit]]


def compute_bonus(
    index: int,
    total: int,
    seller: SellerAccumulator,
    calculate_bonus: BonusStrategy,
    returns_amount: bool = False,
) -> Decimal:
    """
    Bonus for the seller at `index` of `total`, rounded to 2dp.

    Raises:
        StrategyResultError: If the bonus strategy returns a non-number.
    """
    result = calculate_bonus(index, total, seller)
    try:
        value = to_decimal(result, field="bonus strategy result")
    except TypeError as exc:
        raise StrategyResultError(str(exc)) from exc

    if returns_amount:
        return quantize_money(value)
    return quantize_money(quantize_money(seller.profit) * value)


def build_reports(
    accumulators: Iterable[SellerAccumulator],
    calculate_bonus: BonusStrategy,
    returns_amount: bool = False,
) -> list[SellerReport]:
    """
    Rank sellers and emit one report each, in ranked order.

    Ranking uses the accumulated profit as is; money fields are quantized
    to 2dp on the way out, which is a no-op for incrementally rounded totals.
    """
    ranked = rank_sellers(accumulators)
    total = len(ranked)

    reports: list[SellerReport] = []
    for index, seller in enumerate(ranked):
        reports.append(
            SellerReport(
                seller_id=seller.id,
                name=seller.name,
                revenue=quantize_money(seller.revenue),
                profit=quantize_money(seller.profit),
                sales_count=seller.sales_count,
                top_products=select_top_products(seller.products_sold),
                bonus=compute_bonus(index, total, seller, calculate_bonus, returns_amount),
            )
        )
    return reports
