"""Customer model - companies placing orders."""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from northwind.database import Base


class Customer(Base):
    """Customer model.

    The key is an opaque short code (e.g. ``ALFKI``) rather than a generated id.
    Address fields double as the default shipping profile for new orders.
    """

    __tablename__ = "customers"
    __table_args__ = (
        Index("idx_customers_company_name", "company_name"),
        Index("idx_customers_country", "country"),
    )

    customer_id: Mapped[str] = mapped_column(String(5), primary_key=True)
    company_name: Mapped[str] = mapped_column(String(40))
    contact_name: Mapped[str | None] = mapped_column(String(30))
    contact_title: Mapped[str | None] = mapped_column(String(30))
    address: Mapped[str | None] = mapped_column(String(60))
    city: Mapped[str | None] = mapped_column(String(15))
    region: Mapped[str | None] = mapped_column(String(15))
    postal_code: Mapped[str | None] = mapped_column(String(10))
    country: Mapped[str | None] = mapped_column(String(15))
    phone: Mapped[str | None] = mapped_column(String(24))
    fax: Mapped[str | None] = mapped_column(String(24))

    # Relationships
    orders: Mapped[list["Order"]] = relationship(back_populates="customer")

    def __repr__(self) -> str:
        return f"<Customer(customer_id='{self.customer_id}', company_name='{self.company_name}')>"
