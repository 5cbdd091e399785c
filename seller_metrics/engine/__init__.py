from seller_metrics.engine.aggregator import aggregate_purchases, apply_line_item
from seller_metrics.engine.analyzer import analyze_sales_data
from seller_metrics.engine.indexer import (
    SellerAccumulator,
    build_product_index,
    build_seller_index,
)
from seller_metrics.engine.ranker import (
    build_reports,
    compute_bonus,
    rank_sellers,
    select_top_products,
)
from seller_metrics.engine.strategies import (
    BonusStrategy,
    RevenueStrategy,
    bonus_rate_for_rank,
    calculate_bonus_amount_by_profit,
    calculate_bonus_by_profit,
    calculate_simple_revenue,
)
from seller_metrics.engine.validator import (
    AnalysisOptions,
    validate_options,
    validate_sales_data,
)

__all__ = [
    "AnalysisOptions",
    "BonusStrategy",
    "RevenueStrategy",
    "SellerAccumulator",
    "aggregate_purchases",
    "analyze_sales_data",
    "apply_line_item",
    "bonus_rate_for_rank",
    "build_product_index",
    "build_reports",
    "build_seller_index",
    "calculate_bonus_amount_by_profit",
    "calculate_bonus_by_profit",
    "calculate_simple_revenue",
    "compute_bonus",
    "rank_sellers",
    "select_top_products",
    "validate_options",
    "validate_sales_data",
]
