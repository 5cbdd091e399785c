"""
Seller Metrics — Sales Analysis Entry Point

validate → index → aggregate → rank/report, in a single synchronous pass.
Nothing is cached between calls; the same inputs and strategies always
produce the same reports.
"""

from __future__ import annotations

from typing import Any

import structlog

from seller_metrics.config import RoundingPolicy
from seller_metrics.engine.aggregator import aggregate_purchases
from seller_metrics.engine.indexer import build_product_index, build_seller_index
from seller_metrics.engine.ranker import build_reports
from seller_metrics.engine.validator import validate_options, validate_sales_data
from seller_metrics.models.report import SellerReport

logger = structlog.get_logger(__name__)


def analyze_sales_data(
    data: Any,
    options: Any,
    rounding: RoundingPolicy | None = None,
) -> list[SellerReport]:
    """
    Compute per-seller revenue, profit, bonus and top products.

    Args:
        data: Mapping (or SalesData) with sellers, products and
            purchase_records.
        options: AnalysisOptions, mapping or object exposing
            calculate_revenue and calculate_bonus (both mandatory), and
            optionally bonus_returns_amount.
        rounding: Accumulation rounding policy. Defaults to
            settings.ROUNDING_POLICY.

    Returns:
        One SellerReport per seller, ranked by profit descending.

    Raises:
        InvalidInputError: Malformed data bundle.
        EmptyCollectionError: A required collection is empty.
        MissingStrategyError: A strategy is missing or not callable.
        StrategyResultError: A strategy returned a non-number.
    """
    sales = validate_sales_data(data)
    resolved = validate_options(options)

    seller_index = build_seller_index(sales.sellers)
    product_index = build_product_index(sales.products)

    aggregate_purchases(
        sales.purchase_records,
        seller_index,
        product_index,
        resolved.calculate_revenue,
        rounding,
    )

    reports = build_reports(
        seller_index.values(),
        resolved.calculate_bonus,
        returns_amount=bool(resolved.bonus_returns_amount),
    )

    logger.info(
        "sales_analysis_completed",
        sellers=len(reports),
        products=len(product_index),
        purchase_records=len(sales.purchase_records),
        bonus_returns_amount=resolved.bonus_returns_amount,
    )
    return reports
