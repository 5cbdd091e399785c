"""
Seller Metrics — Seller & Product Indexes

Seller id → fresh accumulator, SKU → product. Both are plain dicts, so
lookups during the fold are O(1) on average. Duplicate ids are
last-write-wins: the later entry replaces the earlier one in place.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

import structlog
from pydantic import BaseModel, Field

from seller_metrics.models.records import Product, Seller

logger = structlog.get_logger(__name__)


class SellerAccumulator(BaseModel):
    """
    Running totals for one seller during aggregation.

    Mutated only by the aggregator; read-only once reports are built.
    products_sold keeps first-sale insertion order, which is the tie-break
    for top products.
    """
    id: str
    name: str
    revenue: Decimal = Decimal("0")
    profit: Decimal = Decimal("0")
    sales_count: int = 0
    products_sold: dict[str, int] = Field(default_factory=dict)


def build_seller_index(sellers: Iterable[Seller]) -> dict[str, SellerAccumulator]:
    """Map each seller id to a zeroed accumulator."""
    index: dict[str, SellerAccumulator] = {}
    duplicates = 0
    for seller in sellers:
        if seller.id in index:
            duplicates += 1
        index[seller.id] = SellerAccumulator(id=seller.id, name=seller.full_name)

    if duplicates:
        logger.debug("seller_index_duplicates", duplicates=duplicates)
    return index


def build_product_index(products: Iterable[Product]) -> dict[str, Product]:
    """Map each SKU to its catalog entry."""
    return {product.sku: product for product in products}
