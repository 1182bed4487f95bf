"""Category data access layer."""

from typing import TYPE_CHECKING

from sqlalchemy.orm import Session, selectinload

from northwind.models import Category
from northwind.services.repositories.exceptions import NotFoundError

if TYPE_CHECKING:
    from collections.abc import Sequence


class CategoryRepository:
    """Centralized category data access."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, category_id: int) -> Category | None:
        return self._db.get(Category, category_id)

    def get_by_id(self, category_id: int) -> Category:
        category = self.find_by_id(category_id)
        if category is None:
            raise NotFoundError("Category", category_id)
        return category

    def find_all(self, *, limit: int | None = None, offset: int = 0) -> "Sequence[Category]":
        query = self._db.query(Category).order_by(Category.category_name).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def find_with_products(self, category_id: int) -> Category | None:
        """Find category with its products eagerly loaded."""
        return (
            self._db.query(Category)
            .options(selectinload(Category.products))
            .filter(Category.category_id == category_id)
            .first()
        )

    def add(self, category: Category) -> Category:
        self._db.add(category)
        return category

    def update(self, category: Category) -> Category:
        self._db.add(category)
        return category

    def delete(self, category: Category) -> None:
        self._db.delete(category)

    def exists(self, category_id: int) -> bool:
        return self.find_by_id(category_id) is not None
