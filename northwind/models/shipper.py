"""Shipper model - carriers orders ship via."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from northwind.database import Base


class Shipper(Base):
    """Shipper model."""

    __tablename__ = "shippers"

    shipper_id: Mapped[int] = mapped_column(primary_key=True, index=True)
    company_name: Mapped[str] = mapped_column(String(40))
    phone: Mapped[str | None] = mapped_column(String(24))

    # Relationships
    orders: Mapped[list["Order"]] = relationship(back_populates="shipper")

    def __repr__(self) -> str:
        return f"<Shipper(shipper_id={self.shipper_id}, company_name='{self.company_name}')>"
