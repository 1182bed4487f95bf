"""Shipper data access layer."""

from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from northwind.models import Shipper
from northwind.services.repositories.exceptions import NotFoundError

if TYPE_CHECKING:
    from collections.abc import Sequence


class ShipperRepository:
    """Centralized shipper data access."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, shipper_id: int) -> Shipper | None:
        return self._db.get(Shipper, shipper_id)

    def get_by_id(self, shipper_id: int) -> Shipper:
        shipper = self.find_by_id(shipper_id)
        if shipper is None:
            raise NotFoundError("Shipper", shipper_id)
        return shipper

    def find_all(self, *, limit: int | None = None, offset: int = 0) -> "Sequence[Shipper]":
        query = self._db.query(Shipper).order_by(Shipper.shipper_id).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def add(self, shipper: Shipper) -> Shipper:
        self._db.add(shipper)
        return shipper

    def update(self, shipper: Shipper) -> Shipper:
        self._db.add(shipper)
        return shipper

    def delete(self, shipper: Shipper) -> None:
        self._db.delete(shipper)

    def exists(self, shipper_id: int) -> bool:
        return self.find_by_id(shipper_id) is not None
