"""SQLAlchemy ORM models."""

from northwind.models.category import Category
from northwind.models.customer import Customer
from northwind.models.employee import Employee
from northwind.models.order import Order, OrderLine
from northwind.models.product import Product
from northwind.models.shipper import Shipper
from northwind.models.supplier import Supplier

__all__ = [
    "Category",
    "Customer",
    "Employee",
    "Order",
    "OrderLine",
    "Product",
    "Shipper",
    "Supplier",
]
