"""
Seller Metrics — Input Records

Typed shapes for the raw sales bundle: seller and product catalogs plus
purchase records with their line items. Catalog exports carry more keys
than the pipeline needs (bank details, vendor, receipt ids); extra keys are
ignored, missing required keys fail at construction time.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from seller_metrics.config import settings
from seller_metrics.utils.money import to_decimal

_RECORD_CONFIG = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


def _money_before(value: Any) -> Any:
    # Route floats through str() so 0.1 does not pick up binary noise
    if isinstance(value, float):
        try:
            return to_decimal(value)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc
    return value


class Seller(BaseModel):
    """Seller catalog entry."""
    model_config = _RECORD_CONFIG

    id: str = Field(..., description="Seller identifier (e.g., 'seller_1')")
    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Product(BaseModel):
    """Product catalog entry. Only the cost side matters for profit."""
    model_config = _RECORD_CONFIG

    sku: str = Field(..., description="Stock-keeping unit")
    purchase_price: Decimal = Field(
        ..., ge=0, le=settings.MAX_UNIT_PRICE, description="Unit cost price"
    )

    @field_validator("purchase_price", mode="before")
    @classmethod
    def coerce_price(cls, v: Any) -> Any:
        return _money_before(v)


class LineItem(BaseModel):
    """One product line inside a purchase record."""
    model_config = _RECORD_CONFIG

    sku: str
    quantity: int = Field(..., ge=0, le=settings.MAX_LINE_QUANTITY)
    sale_price: Decimal = Field(
        ..., ge=0, le=settings.MAX_UNIT_PRICE, description="Unit sale price before discount"
    )
    discount: Decimal = Field(
        default=Decimal("0"), ge=0, le=100, description="Discount percent, 0-100"
    )

    @field_validator("sale_price", "discount", mode="before")
    @classmethod
    def coerce_money(cls, v: Any) -> Any:
        return _money_before(v)


class PurchaseRecord(BaseModel):
    """
    A receipt: one seller, one or more line items.

    total_amount is carried for completeness; revenue is always rebuilt from
    the items through the revenue strategy.
    """
    model_config = _RECORD_CONFIG

    seller_id: str
    total_amount: Decimal = Decimal("0")
    items: list[LineItem] = Field(default_factory=list)

    @field_validator("total_amount", mode="before")
    @classmethod
    def coerce_total(cls, v: Any) -> Any:
        return _money_before(v)


class SalesData(BaseModel):
    """Parsed input bundle."""
    sellers: list[Seller]
    products: list[Product]
    purchase_records: list[PurchaseRecord]
