"""Product model - sellable items with stock on hand."""

from decimal import Decimal

from sqlalchemy import Boolean, ForeignKey, Index, Numeric, SmallInteger, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from northwind.database import Base


class Product(Base):
    """Product model.

    ``unit_price`` and ``units_in_stock`` are nullable; order placement reads a
    missing value as zero. Stock is signed and only ever decremented by orders.
    """

    __tablename__ = "products"
    __table_args__ = (
        Index("idx_products_category", "category_id"),
        Index("idx_products_supplier", "supplier_id"),
        Index("idx_products_discontinued", "discontinued"),
    )

    product_id: Mapped[int] = mapped_column(primary_key=True, index=True)
    product_name: Mapped[str] = mapped_column(String(40))
    supplier_id: Mapped[int | None] = mapped_column(ForeignKey("suppliers.supplier_id"))
    category_id: Mapped[int | None] = mapped_column(ForeignKey("categories.category_id"))
    quantity_per_unit: Mapped[str | None] = mapped_column(String(20))
    unit_price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    units_in_stock: Mapped[int | None] = mapped_column(SmallInteger)
    units_on_order: Mapped[int | None] = mapped_column(SmallInteger, default=0)
    reorder_level: Mapped[int | None] = mapped_column(SmallInteger, default=0)
    discontinued: Mapped[bool] = mapped_column(Boolean, default=False)

    # Relationships
    category: Mapped["Category"] = relationship(back_populates="products")
    supplier: Mapped["Supplier"] = relationship(back_populates="products")

    @property
    def price(self) -> Decimal:
        """Unit price with a missing value read as zero."""
        return self.unit_price if self.unit_price is not None else Decimal("0")

    @property
    def stock_on_hand(self) -> int:
        """Units in stock with a missing value read as zero."""
        return self.units_in_stock if self.units_in_stock is not None else 0

    def __repr__(self) -> str:
        return (
            f"<Product(product_id={self.product_id}, product_name='{self.product_name}', "
            f"units_in_stock={self.units_in_stock})>"
        )
