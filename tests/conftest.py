"""
Seller Metrics — Shared pytest Fixtures

Provides a small sales bundle and the default strategy options used across
test modules.
"""

from __future__ import annotations

from typing import Any

import pytest

from seller_metrics.config import settings
from seller_metrics.engine.strategies import (
    calculate_bonus_by_profit,
    calculate_simple_revenue,
)
from seller_metrics.engine.validator import AnalysisOptions


# ---------------------------------------------------------------------------
# Data Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sales_data() -> dict[str, Any]:
    """
    Three sellers, three products, four receipts.

    seller_3 has no receipts; one receipt references an unknown seller and
    one line item references an unknown SKU.
    """
    return {
        "sellers": [
            {"id": "seller_1", "first_name": "Alexey", "last_name": "Petrov", "position": "Senior"},
            {"id": "seller_2", "first_name": "Maria", "last_name": "Ivanova"},
            {"id": "seller_3", "first_name": "Oleg", "last_name": "Smirnov"},
        ],
        "products": [
            {"sku": "SKU_001", "name": "Kettle", "purchase_price": 50, "sale_price": 100},
            {"sku": "SKU_002", "name": "Toaster", "purchase_price": 20.5},
            {"sku": "SKU_003", "name": "Blender", "purchase_price": "10.00"},
        ],
        "purchase_records": [
            {
                "receipt_id": "R1",
                "seller_id": "seller_1",
                "total_amount": 180,
                "items": [{"sku": "SKU_001", "quantity": 2, "sale_price": 100, "discount": 10}],
            },
            {
                "receipt_id": "R2",
                "seller_id": "seller_2",
                "total_amount": 90,
                "items": [
                    {"sku": "SKU_002", "quantity": 3, "sale_price": 30, "discount": 0},
                    {"sku": "SKU_404", "quantity": 7, "sale_price": 999, "discount": 0},
                ],
            },
            {
                "receipt_id": "R3",
                "seller_id": "ghost",
                "total_amount": 1000,
                "items": [{"sku": "SKU_001", "quantity": 10, "sale_price": 100, "discount": 0}],
            },
            {
                "receipt_id": "R4",
                "seller_id": "seller_1",
                "total_amount": 30,
                "items": [{"sku": "SKU_003", "quantity": 1, "sale_price": 30, "discount": 0}],
            },
        ],
    }


@pytest.fixture
def default_options() -> AnalysisOptions:
    """The built-in strategies, passed explicitly."""
    return AnalysisOptions(
        calculate_revenue=calculate_simple_revenue,
        calculate_bonus=calculate_bonus_by_profit,
    )


# ---------------------------------------------------------------------------
# Settings Overrides
# ---------------------------------------------------------------------------


@pytest.fixture
def override_settings(monkeypatch: pytest.MonkeyPatch):
    """Patch attributes on the shared settings object for one test."""

    def _override(**values: Any) -> None:
        for name, value in values.items():
            monkeypatch.setattr(settings, name, value)

    return _override
