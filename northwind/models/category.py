"""Category model - product groupings."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from northwind.database import Base


class Category(Base):
    """Category model grouping products (Beverages, Condiments, ...)."""

    __tablename__ = "categories"

    category_id: Mapped[int] = mapped_column(primary_key=True, index=True)
    category_name: Mapped[str] = mapped_column(String(15), index=True)
    description: Mapped[str | None] = mapped_column(Text)

    # Relationships
    products: Mapped[list["Product"]] = relationship(back_populates="category")

    def __repr__(self) -> str:
        return f"<Category(category_id={self.category_id}, category_name='{self.category_name}')>"
