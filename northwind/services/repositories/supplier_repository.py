"""Supplier data access layer."""

from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from northwind.models import Supplier
from northwind.services.repositories.exceptions import NotFoundError

if TYPE_CHECKING:
    from collections.abc import Sequence


class SupplierRepository:
    """Centralized supplier data access."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, supplier_id: int) -> Supplier | None:
        return self._db.get(Supplier, supplier_id)

    def get_by_id(self, supplier_id: int) -> Supplier:
        supplier = self.find_by_id(supplier_id)
        if supplier is None:
            raise NotFoundError("Supplier", supplier_id)
        return supplier

    def find_all(self, *, limit: int | None = None, offset: int = 0) -> "Sequence[Supplier]":
        query = self._db.query(Supplier).order_by(Supplier.company_name).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def find_by_country(self, country: str) -> "Sequence[Supplier]":
        """Find all suppliers located in a country."""
        return self._db.query(Supplier).filter(Supplier.country == country).all()

    def add(self, supplier: Supplier) -> Supplier:
        self._db.add(supplier)
        return supplier

    def update(self, supplier: Supplier) -> Supplier:
        self._db.add(supplier)
        return supplier

    def delete(self, supplier: Supplier) -> None:
        self._db.delete(supplier)

    def exists(self, supplier_id: int) -> bool:
        return self.find_by_id(supplier_id) is not None
