"""Pydantic schemas for placing orders."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class OrderItemCreate(BaseModel):
    """One requested product line."""

    product_id: int
    quantity: int = Field(..., gt=0, le=32767, description="Units ordered")
    discount: Decimal = Field(
        Decimal("0"),
        ge=0,
        lt=1,
        max_digits=5,
        decimal_places=4,
        description="Discount as a fraction, e.g. 0.1 for 10%",
    )


class ShippingOverrides(BaseModel):
    """Shipping fields that replace the customer's address on this order."""

    name: str | None = Field(None, max_length=40)
    address: str | None = Field(None, max_length=60)
    city: str | None = Field(None, max_length=15)
    region: str | None = Field(None, max_length=15)
    postal_code: str | None = Field(None, max_length=10)
    country: str | None = Field(None, max_length=15)


class PlaceOrderRequest(BaseModel):
    """Schema for placing a new order with one or more items."""

    customer_id: str = Field(..., min_length=1, max_length=5)
    employee_id: int | None = None
    shipper_id: int | None = None
    required_date: datetime | None = None
    freight: Decimal | None = Field(None, ge=0)
    ship_overrides: ShippingOverrides | None = None
    items: list[OrderItemCreate] = Field(..., min_length=1)

    @property
    def product_ids(self) -> list[int]:
        """Distinct product ids in first-seen order."""
        return list(dict.fromkeys(item.product_id for item in self.items))
