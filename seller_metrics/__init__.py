"""Seller Metrics — per-seller revenue, profit, bonus and top products."""

from seller_metrics.engine import (
    AnalysisOptions,
    analyze_sales_data,
    calculate_bonus_amount_by_profit,
    calculate_bonus_by_profit,
    calculate_simple_revenue,
)
from seller_metrics.errors import (
    EmptyCollectionError,
    InvalidInputError,
    MissingStrategyError,
    SalesAnalysisError,
    StrategyResultError,
)
from seller_metrics.models import SellerReport, TopProduct
from seller_metrics.utils import configure_logging

__all__ = [
    "AnalysisOptions",
    "EmptyCollectionError",
    "InvalidInputError",
    "MissingStrategyError",
    "SalesAnalysisError",
    "SellerReport",
    "StrategyResultError",
    "TopProduct",
    "analyze_sales_data",
    "calculate_bonus_amount_by_profit",
    "calculate_bonus_by_profit",
    "calculate_simple_revenue",
    "configure_logging",
]
