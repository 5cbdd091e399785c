"""
Seller Metrics — Output Records

One SellerReport per seller, ranked by profit descending.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict


class TopProduct(BaseModel):
    """SKU with its cumulative sold quantity."""
    model_config = ConfigDict(frozen=True)

    sku: str
    quantity: int


class SellerReport(BaseModel):
    """Final per-seller metrics. Money fields are 2dp."""
    model_config = ConfigDict(frozen=True)

    seller_id: str
    name: str
    revenue: Decimal
    profit: Decimal
    sales_count: int
    top_products: tuple[TopProduct, ...] = ()
    bonus: Decimal

    def to_dict(self) -> dict[str, Any]:
        """Plain dict in the shape downstream reports consume."""
        return {
            "seller_id": self.seller_id,
            "name": self.name,
            "revenue": self.revenue,
            "profit": self.profit,
            "sales_count": self.sales_count,
            "top_products": [
                {"sku": product.sku, "quantity": product.quantity}
                for product in self.top_products
            ],
            "bonus": self.bonus,
        }
