"""Tests for purchase aggregation into seller accumulators."""

from __future__ import annotations

from decimal import Decimal

import pytest
from structlog.testing import capture_logs

from seller_metrics.config import RoundingPolicy
from seller_metrics.engine.aggregator import aggregate_purchases, apply_line_item
from seller_metrics.engine.indexer import SellerAccumulator, build_product_index, build_seller_index
from seller_metrics.engine.strategies import calculate_simple_revenue
from seller_metrics.errors import StrategyResultError
from seller_metrics.models import LineItem, Product, PurchaseRecord, Seller


@pytest.fixture
def seller_index() -> dict[str, SellerAccumulator]:
    return build_seller_index(
        [
            Seller(id="s1", first_name="A", last_name="One"),
            Seller(id="s2", first_name="B", last_name="Two"),
        ]
    )


@pytest.fixture
def product_index() -> dict[str, Product]:
    return build_product_index(
        [Product(sku="A", purchase_price=50), Product(sku="B", purchase_price=Decimal("0.10"))]
    )


def _record(seller_id: str, *items: dict) -> PurchaseRecord:
    return PurchaseRecord.model_validate({"seller_id": seller_id, "items": list(items)})


class TestAggregation:

    def test_example_revenue_and_profit(self, seller_index, product_index) -> None:
        """2 × 100 with 10% off, cost 50 each → revenue 180.00, profit 80.00."""
        records = [_record("s1", {"sku": "A", "quantity": 2, "sale_price": 100, "discount": 10})]
        aggregate_purchases(records, seller_index, product_index, calculate_simple_revenue)

        acc = seller_index["s1"]
        assert acc.revenue == Decimal("180.00")
        assert acc.profit == Decimal("80.00")
        assert acc.sales_count == 1
        assert acc.products_sold == {"A": 2}

    def test_unknown_seller_has_no_effect(self, seller_index, product_index) -> None:
        records = [_record("ghost", {"sku": "A", "quantity": 5, "sale_price": 100})]
        aggregate_purchases(records, seller_index, product_index, calculate_simple_revenue)

        for acc in seller_index.values():
            assert acc.sales_count == 0
            assert acc.revenue == Decimal("0")
            assert acc.products_sold == {}

    def test_unknown_sku_skips_item_but_counts_sale(self, seller_index, product_index) -> None:
        records = [
            _record(
                "s2",
                {"sku": "NOPE", "quantity": 9, "sale_price": 10},
                {"sku": "B", "quantity": 4, "sale_price": 1},
            )
        ]
        aggregate_purchases(records, seller_index, product_index, calculate_simple_revenue)

        acc = seller_index["s2"]
        assert acc.sales_count == 1
        assert acc.revenue == Decimal("4.00")
        assert acc.profit == Decimal("3.60")
        assert acc.products_sold == {"B": 4}

    def test_record_without_items_still_counts(self, seller_index, product_index) -> None:
        aggregate_purchases([_record("s1")], seller_index, product_index, calculate_simple_revenue)
        assert seller_index["s1"].sales_count == 1
        assert seller_index["s1"].revenue == Decimal("0")

    def test_quantities_accumulate_per_sku_in_first_sale_order(self, seller_index, product_index) -> None:
        records = [
            _record("s1", {"sku": "B", "quantity": 1, "sale_price": 1}),
            _record("s1", {"sku": "A", "quantity": 2, "sale_price": 60}),
            _record("s1", {"sku": "B", "quantity": 3, "sale_price": 1}),
        ]
        aggregate_purchases(records, seller_index, product_index, calculate_simple_revenue)
        assert list(seller_index["s1"].products_sold.items()) == [("B", 4), ("A", 2)]
        assert seller_index["s1"].sales_count == 3

    def test_loss_making_items_reduce_profit(self, seller_index, product_index) -> None:
        records = [_record("s1", {"sku": "A", "quantity": 1, "sale_price": 40})]
        aggregate_purchases(records, seller_index, product_index, calculate_simple_revenue)
        assert seller_index["s1"].profit == Decimal("-10.00")

    def test_logs_skips_and_summary(self, seller_index, product_index) -> None:
        records = [
            _record("ghost"),
            _record("s1", {"sku": "NOPE", "quantity": 1, "sale_price": 1}),
        ]
        with capture_logs() as logs:
            aggregate_purchases(records, seller_index, product_index, calculate_simple_revenue)

        events = [entry["event"] for entry in logs]
        assert "purchase_record_skipped" in events
        assert "line_item_skipped" in events
        summary = next(entry for entry in logs if entry["event"] == "purchases_aggregated")
        assert summary["matched_records"] == 1
        assert summary["skipped_records"] == 1
        assert summary["skipped_items"] == 1


class TestCustomRevenueStrategy:

    def test_float_results_are_converted_exactly(self, seller_index, product_index) -> None:
        def flat_revenue(item: LineItem, product: Product) -> float:
            return 0.1

        records = [_record("s2", {"sku": "B", "quantity": 1, "sale_price": 5})] * 3
        aggregate_purchases(records, seller_index, product_index, flat_revenue)
        assert seller_index["s2"].revenue == Decimal("0.30")
        assert seller_index["s2"].profit == Decimal("0.00")

    def test_non_numeric_result_raises(self, seller_index, product_index) -> None:
        records = [_record("s1", {"sku": "A", "quantity": 1, "sale_price": 5})]
        with pytest.raises(StrategyResultError):
            aggregate_purchases(records, seller_index, product_index, lambda item, product: "5.00")

    def test_bool_result_raises(self, seller_index, product_index) -> None:
        records = [_record("s1", {"sku": "A", "quantity": 1, "sale_price": 5})]
        with pytest.raises(StrategyResultError):
            aggregate_purchases(records, seller_index, product_index, lambda item, product: True)


class TestRoundingPolicy:

    @staticmethod
    def _third(item: LineItem, product: Product) -> Decimal:
        return Decimal("0.004")

    def test_incremental_rounds_after_every_addition(self) -> None:
        acc = SellerAccumulator(id="s", name="S")
        item = LineItem(sku="Z", quantity=0, sale_price=0)
        product = Product(sku="Z", purchase_price=0)
        for _ in range(3):
            apply_line_item(acc, item, product, self._third, RoundingPolicy.INCREMENTAL)
        assert acc.revenue == Decimal("0.00")

    def test_on_completion_keeps_full_precision(self) -> None:
        acc = SellerAccumulator(id="s", name="S")
        item = LineItem(sku="Z", quantity=0, sale_price=0)
        product = Product(sku="Z", purchase_price=0)
        for _ in range(3):
            apply_line_item(acc, item, product, self._third, RoundingPolicy.ON_COMPLETION)
        assert acc.revenue == Decimal("0.012")

    def test_default_policy_comes_from_settings(self, seller_index, product_index, override_settings) -> None:
        override_settings(ROUNDING_POLICY=RoundingPolicy.ON_COMPLETION)
        records = [_record("s1", {"sku": "A", "quantity": 1, "sale_price": 5})] * 2
        aggregate_purchases(records, seller_index, product_index, lambda item, product: Decimal("0.005"))
        assert seller_index["s1"].revenue == Decimal("0.010")


class TestNonFiniteRevenue:

    @pytest.mark.parametrize("result", [float("nan"), float("inf"), float("-inf"), Decimal("NaN")])
    def test_non_finite_result_raises(self, seller_index, product_index, result) -> None:
        records = [_record("s1", {"sku": "A", "quantity": 1, "sale_price": 5})]
        with pytest.raises(StrategyResultError, match="finite"):
            aggregate_purchases(records, seller_index, product_index, lambda item, product: result)
