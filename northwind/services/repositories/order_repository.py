"""Order data access layer.

Orders are written as one aggregate: lines appended to ``Order.lines`` are
inserted together with the header through the relationship cascade.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session, joinedload, selectinload

from northwind.constants import EntityKind
from northwind.models import Order, OrderLine
from northwind.services.repositories.exceptions import NotFoundError

if TYPE_CHECKING:
    from collections.abc import Sequence


class OrderRepository:
    """Centralized order data access.

    Naming conventions:
    - find_* : Query that may return None or empty list
    - get_* : Query that raises NotFoundError if missing
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, order_id: int) -> Order | None:
        """Find order header by primary key."""
        return self._db.get(Order, order_id)

    def get_by_id(self, order_id: int) -> Order:
        """Get order header by primary key or raise NotFoundError."""
        order = self.find_by_id(order_id)
        if order is None:
            raise NotFoundError(EntityKind.ORDER, order_id)
        return order

    def find_all(self, *, limit: int | None = None, offset: int = 0) -> "Sequence[Order]":
        """Find orders, newest first."""
        query = (
            self._db.query(Order)
            .order_by(Order.order_date.desc(), Order.order_id.desc())
            .offset(offset)
        )
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def find_with_details(self, order_id: int) -> Order | None:
        """Find order with customer, employee, shipper and lines (with products) loaded."""
        return (
            self._db.query(Order)
            .options(
                joinedload(Order.customer),
                joinedload(Order.employee),
                joinedload(Order.shipper),
                selectinload(Order.lines).joinedload(OrderLine.product),
            )
            .filter(Order.order_id == order_id)
            .first()
        )

    def find_by_customer(self, customer_id: str) -> "Sequence[Order]":
        """Find all orders of a customer with their lines."""
        return (
            self._db.query(Order)
            .options(selectinload(Order.lines))
            .filter(Order.customer_id == customer_id)
            .order_by(Order.order_id)
            .all()
        )

    def find_by_date_range(self, from_date: datetime, to_date: datetime) -> "Sequence[Order]":
        """Find orders placed between two dates (inclusive)."""
        return (
            self._db.query(Order)
            .filter(Order.order_date >= from_date, Order.order_date <= to_date)
            .order_by(Order.order_date)
            .all()
        )

    def count_lines(self, order_id: int) -> int:
        """Count the lines stored for an order."""
        return self._db.query(OrderLine).filter(OrderLine.order_id == order_id).count()

    def add(self, order: Order) -> Order:
        """Stage a new order; its id is assigned on the next flush."""
        self._db.add(order)
        return order

    def update(self, order: Order) -> Order:
        self._db.add(order)
        return order

    def delete(self, order: Order) -> None:
        """Delete an order; its lines go with it."""
        self._db.delete(order)

    def exists(self, order_id: int) -> bool:
        return (
            self._db.query(Order.order_id).filter(Order.order_id == order_id).first() is not None
        )
