"""Order aggregate - order header and the lines it owns."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import ForeignKey, Index, Numeric, SmallInteger, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from northwind.database import Base


class Order(Base):
    """Order header.

    ``order_id`` is generated by the database and only known after a flush.
    Shipping fields are a snapshot taken when the order is placed.
    """

    __tablename__ = "orders"
    __table_args__ = (
        Index("idx_orders_customer", "customer_id"),
        Index("idx_orders_employee", "employee_id"),
        Index("idx_orders_order_date", "order_date"),
    )

    order_id: Mapped[int] = mapped_column(primary_key=True, index=True)
    customer_id: Mapped[str | None] = mapped_column(ForeignKey("customers.customer_id"))
    employee_id: Mapped[int | None] = mapped_column(ForeignKey("employees.employee_id"))
    order_date: Mapped[datetime | None]
    required_date: Mapped[datetime | None]
    shipped_date: Mapped[datetime | None]
    ship_via: Mapped[int | None] = mapped_column(ForeignKey("shippers.shipper_id"))
    freight: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), default=Decimal("0"))
    ship_name: Mapped[str | None] = mapped_column(String(40))
    ship_address: Mapped[str | None] = mapped_column(String(60))
    ship_city: Mapped[str | None] = mapped_column(String(15))
    ship_region: Mapped[str | None] = mapped_column(String(15))
    ship_postal_code: Mapped[str | None] = mapped_column(String(10))
    ship_country: Mapped[str | None] = mapped_column(String(15))

    # Relationships
    customer: Mapped["Customer"] = relationship(back_populates="orders")
    employee: Mapped["Employee"] = relationship(back_populates="orders")
    shipper: Mapped["Shipper"] = relationship(back_populates="orders")
    lines: Mapped[list["OrderLine"]] = relationship(
        back_populates="order", cascade="all, delete-orphan", order_by="OrderLine.id"
    )

    @property
    def total_amount(self) -> Decimal:
        """Sum of the lines' extended prices."""
        return sum((line.extended_price for line in self.lines), Decimal("0"))

    def __repr__(self) -> str:
        return f"<Order(order_id={self.order_id}, customer_id='{self.customer_id}')>"


class OrderLine(Base):
    """A single product line on an order.

    ``unit_price`` is copied from the product when the order is placed and is
    never refreshed from the catalog afterwards.
    """

    __tablename__ = "order_details"
    __table_args__ = (
        Index("idx_order_details_order", "order_id"),
        Index("idx_order_details_product", "product_id"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    order_id: Mapped[int] = mapped_column(ForeignKey("orders.order_id", ondelete="CASCADE"))
    product_id: Mapped[int] = mapped_column(ForeignKey("products.product_id"))
    unit_price: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    quantity: Mapped[int] = mapped_column(SmallInteger)
    discount: Mapped[Decimal] = mapped_column(Numeric(5, 4), default=Decimal("0"))

    # Relationships
    order: Mapped["Order"] = relationship(back_populates="lines")
    product: Mapped["Product"] = relationship()

    @property
    def extended_price(self) -> Decimal:
        """Line total after discount, unrounded."""
        discount = self.discount if self.discount is not None else Decimal("0")
        return self.unit_price * self.quantity * (1 - discount)

    def __repr__(self) -> str:
        return (
            f"<OrderLine(order_id={self.order_id}, product_id={self.product_id}, "
            f"quantity={self.quantity})>"
        )
