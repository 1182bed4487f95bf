"""Customer data access layer."""

from typing import TYPE_CHECKING

from sqlalchemy.orm import Session, selectinload

from northwind.constants import EntityKind
from northwind.models import Customer
from northwind.services.repositories.exceptions import NotFoundError

if TYPE_CHECKING:
    from collections.abc import Sequence


class CustomerRepository:
    """Centralized customer data access.

    Naming conventions:
    - find_* : Query that may return None or empty list
    - get_* : Query that raises exception if missing
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, customer_id: str) -> Customer | None:
        """Find customer by its short code."""
        return self._db.get(Customer, customer_id)

    def get_by_id(self, customer_id: str) -> Customer:
        """Get customer by its short code or raise NotFoundError."""
        customer = self.find_by_id(customer_id)
        if customer is None:
            raise NotFoundError(EntityKind.CUSTOMER, customer_id)
        return customer

    def find_all(self, *, limit: int | None = None, offset: int = 0) -> "Sequence[Customer]":
        """Find customers ordered by company name."""
        query = self._db.query(Customer).order_by(Customer.company_name).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def find_by_country(self, country: str) -> "Sequence[Customer]":
        """Find all customers located in a country."""
        return (
            self._db.query(Customer)
            .filter(Customer.country == country)
            .order_by(Customer.company_name)
            .all()
        )

    def find_with_orders(self, customer_id: str) -> Customer | None:
        """Find customer with its orders eagerly loaded."""
        return (
            self._db.query(Customer)
            .options(selectinload(Customer.orders))
            .filter(Customer.customer_id == customer_id)
            .first()
        )

    def add(self, customer: Customer) -> Customer:
        self._db.add(customer)
        return customer

    def update(self, customer: Customer) -> Customer:
        self._db.add(customer)
        return customer

    def delete(self, customer: Customer) -> None:
        self._db.delete(customer)

    def exists(self, customer_id: str) -> bool:
        return (
            self._db.query(Customer.customer_id)
            .filter(Customer.customer_id == customer_id)
            .first()
            is not None
        )
