"""Employee model - staff who take orders."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from northwind.database import Base


class Employee(Base):
    """Employee model."""

    __tablename__ = "employees"

    employee_id: Mapped[int] = mapped_column(primary_key=True, index=True)
    last_name: Mapped[str] = mapped_column(String(20))
    first_name: Mapped[str] = mapped_column(String(10))
    title: Mapped[str | None] = mapped_column(String(30))

    # Relationships
    orders: Mapped[list["Order"]] = relationship(back_populates="employee")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return f"<Employee(employee_id={self.employee_id}, name='{self.full_name}')>"
