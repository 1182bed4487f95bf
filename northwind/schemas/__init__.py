"""Pydantic schemas."""

from northwind.schemas.order import OrderItemCreate, PlaceOrderRequest, ShippingOverrides

__all__ = ["OrderItemCreate", "PlaceOrderRequest", "ShippingOverrides"]
