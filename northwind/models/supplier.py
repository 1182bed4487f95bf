"""Supplier model - product vendors."""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from northwind.database import Base


class Supplier(Base):
    """Supplier model representing a product vendor."""

    __tablename__ = "suppliers"
    __table_args__ = (Index("idx_suppliers_country", "country"),)

    supplier_id: Mapped[int] = mapped_column(primary_key=True, index=True)
    company_name: Mapped[str] = mapped_column(String(40))
    contact_name: Mapped[str | None] = mapped_column(String(30))
    city: Mapped[str | None] = mapped_column(String(15))
    country: Mapped[str | None] = mapped_column(String(15))
    phone: Mapped[str | None] = mapped_column(String(24))

    # Relationships
    products: Mapped[list["Product"]] = relationship(back_populates="supplier")

    def __repr__(self) -> str:
        return f"<Supplier(supplier_id={self.supplier_id}, company_name='{self.company_name}')>"
