"""
Seller Metrics — Configuration & Constants

Bonus tiers, report limits and rounding policy live here. No hardcoded
values in business logic.

Usage:
    from seller_metrics.config import settings
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum

from pydantic_settings import BaseSettings


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class RoundingPolicy(str, Enum):
    """When running revenue/profit totals are quantized to 2dp."""
    INCREMENTAL = "incremental"        # after every addition
    ON_COMPLETION = "on_completion"    # once, when the report is built


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """
    Central configuration for seller metrics.

    Loads from environment variables with fallback defaults.
    """

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # -----------------------------------------------------------------------
    # Report shaping
    # -----------------------------------------------------------------------
    TOP_PRODUCTS_LIMIT: int = 10

    # -----------------------------------------------------------------------
    # Bonus tiers (rank is 0-based after sorting by profit descending)
    # rank 0 → 15%, ranks 1..2 → 10%, others → 5%, last → 0%
    # -----------------------------------------------------------------------
    BONUS_RATE_FIRST: Decimal = Decimal("0.15")
    BONUS_RATE_RUNNER_UP: Decimal = Decimal("0.10")
    BONUS_RUNNER_UP_MAX_RANK: int = 2
    BONUS_RATE_STANDARD: Decimal = Decimal("0.05")
    BONUS_RATE_LAST: Decimal = Decimal("0")

    # Bonus strategy returns a ready currency amount instead of a rate
    BONUS_RETURNS_AMOUNT: bool = False

    # -----------------------------------------------------------------------
    # Accumulation
    # -----------------------------------------------------------------------
    ROUNDING_POLICY: RoundingPolicy = RoundingPolicy.INCREMENTAL
    REQUIRE_NON_EMPTY_COLLECTIONS: bool = True

    # Input bounds; keep line totals well inside Decimal context precision
    MAX_UNIT_PRICE: Decimal = Decimal("1000000000")
    MAX_LINE_QUANTITY: int = 1_000_000

    # -----------------------------------------------------------------------
    # Logging
    # -----------------------------------------------------------------------
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True


settings = Settings()
