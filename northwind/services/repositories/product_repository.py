"""Product data access layer.

Product stock is the only shared mutable state order placement touches, so
this repository also offers a locking read for re-checking stock inside an
open transaction.
"""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session, joinedload

from northwind.constants import EntityKind
from northwind.models import Product
from northwind.services.repositories.exceptions import NotFoundError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


class ProductRepository:
    """Centralized product data access.

    Naming conventions:
    - find_* : Query that may return None or empty list
    - get_* : Query that raises NotFoundError if missing
    - update : Stage changes to an already loaded product
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, product_id: int) -> Product | None:
        """Find product by primary key."""
        return self._db.get(Product, product_id)

    def get_by_id(self, product_id: int) -> Product:
        """Get product by primary key or raise NotFoundError."""
        product = self.find_by_id(product_id)
        if product is None:
            raise NotFoundError(EntityKind.PRODUCT, product_id)
        return product

    def find_by_ids(self, product_ids: list[int]) -> "Sequence[Product]":
        """Find multiple products by IDs."""
        return self._db.query(Product).filter(Product.product_id.in_(product_ids)).all()

    def find_for_update(self, product_id: int) -> Product | None:
        """Reload a product from the database, locking its row.

        The identity-map copy is overwritten with the current row so a stock
        value read before the transaction started is not reused. SQLite ignores
        the lock.
        """
        return self._db.get(Product, product_id, with_for_update=True, populate_existing=True)

    def find_all(self, *, limit: int | None = None, offset: int = 0) -> "Sequence[Product]":
        """Find products ordered by name."""
        query = self._db.query(Product).order_by(Product.product_name).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def find_by_category(self, category_id: int) -> "Sequence[Product]":
        """Find all products in a category."""
        return self._db.query(Product).filter(Product.category_id == category_id).all()

    def find_by_supplier(self, supplier_id: int) -> "Sequence[Product]":
        """Find all products from a supplier."""
        return self._db.query(Product).filter(Product.supplier_id == supplier_id).all()

    def find_discontinued(self) -> "Sequence[Product]":
        """Find products that can no longer be ordered."""
        return self._db.query(Product).filter(Product.discontinued.is_(True)).all()

    def find_with_details(self, product_id: int) -> Product | None:
        """Find product with category and supplier eagerly loaded."""
        return (
            self._db.query(Product)
            .options(joinedload(Product.category), joinedload(Product.supplier))
            .filter(Product.product_id == product_id)
            .first()
        )

    def add(self, product: Product) -> Product:
        self._db.add(product)
        return product

    def update(self, product: Product) -> Product:
        """Stage a modified product; written on the next flush or commit."""
        self._db.add(product)
        logger.debug(
            "Staged product %s update (units_in_stock=%s)",
            product.product_id,
            product.units_in_stock,
        )
        return product

    def delete(self, product: Product) -> None:
        self._db.delete(product)

    def exists(self, product_id: int) -> bool:
        return (
            self._db.query(Product.product_id).filter(Product.product_id == product_id).first()
            is not None
        )
