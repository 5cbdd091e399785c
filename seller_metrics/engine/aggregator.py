"""
Seller Metrics — Purchase Aggregation

Fold purchase records into per-seller accumulators:

    R_item  = calculate_revenue(item, product)
    Cost    = purchase_price × quantity
    P_item  = R_item − Cost

Lenient join: an unknown seller skips the whole record; an unknown SKU
skips only that item (the record still counts as a sale).

Under RoundingPolicy.INCREMENTAL the running revenue and profit are
re-quantized to 2dp after every addition, which keeps results identical to
historical reports. ON_COMPLETION leaves them unrounded until reporting.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from decimal import Decimal

import structlog

from seller_metrics.config import RoundingPolicy, settings
from seller_metrics.engine.indexer import SellerAccumulator
from seller_metrics.engine.strategies import RevenueStrategy
from seller_metrics.errors import StrategyResultError
from seller_metrics.models.records import LineItem, Product, PurchaseRecord
from seller_metrics.utils.money import quantize_money, to_decimal

logger = structlog.get_logger(__name__)


def _item_revenue(
    calculate_revenue: RevenueStrategy,
    item: LineItem,
    product: Product,
) -> Decimal:
    result = calculate_revenue(item, product)
    try:
        return to_decimal(result, field="revenue strategy result")
    except TypeError as exc:
        raise StrategyResultError(str(exc)) from exc


def apply_line_item(
    seller: SellerAccumulator,
    item: LineItem,
    product: Product,
    calculate_revenue: RevenueStrategy,
    rounding: RoundingPolicy = RoundingPolicy.INCREMENTAL,
) -> None:
    """Add one matched item's revenue, profit and quantity to the seller."""
    revenue = _item_revenue(calculate_revenue, item, product)
    cost = product.purchase_price * item.quantity
    profit = revenue - cost

    seller.revenue += revenue
    seller.profit += profit
    if rounding == RoundingPolicy.INCREMENTAL:
        seller.revenue = quantize_money(seller.revenue)
        seller.profit = quantize_money(seller.profit)

    seller.products_sold[item.sku] = seller.products_sold.get(item.sku, 0) + item.quantity


def aggregate_purchases(
    records: Iterable[PurchaseRecord],
    seller_index: Mapping[str, SellerAccumulator],
    product_index: Mapping[str, Product],
    calculate_revenue: RevenueStrategy,
    rounding: RoundingPolicy | None = None,
) -> None:
    """
    Accumulate every purchase record into its seller's running totals.

    Args:
        records: Parsed purchase records, in input order.
        seller_index: Seller id → accumulator (mutated in place).
        product_index: SKU → product.
        calculate_revenue: Revenue strategy for matched items.
        rounding: Rounding policy. Defaults to settings.ROUNDING_POLICY.

    Raises:
        StrategyResultError: If the revenue strategy returns a non-number.
    """
    if rounding is None:
        rounding = settings.ROUNDING_POLICY

    matched_records = 0
    skipped_records = 0
    skipped_items = 0

    for record in records:
        seller = seller_index.get(record.seller_id)
        if seller is None:
            skipped_records += 1
            logger.debug("purchase_record_skipped", seller_id=record.seller_id)
            continue

        matched_records += 1
        seller.sales_count += 1

        for item in record.items:
            product = product_index.get(item.sku)
            if product is None:
                skipped_items += 1
                logger.debug("line_item_skipped", seller_id=seller.id, sku=item.sku)
                continue
            apply_line_item(seller, item, product, calculate_revenue, rounding)

    logger.info(
        "purchases_aggregated",
        matched_records=matched_records,
        skipped_records=skipped_records,
        skipped_items=skipped_items,
        rounding=rounding.value,
    )
