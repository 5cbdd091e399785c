"""
Models package — export all record types.
"""

from seller_metrics.models.records import (
    LineItem,
    Product,
    PurchaseRecord,
    SalesData,
    Seller,
)
from seller_metrics.models.report import SellerReport, TopProduct

__all__ = [
    "LineItem",
    "Product",
    "PurchaseRecord",
    "SalesData",
    "Seller",
    "SellerReport",
    "TopProduct",
]
