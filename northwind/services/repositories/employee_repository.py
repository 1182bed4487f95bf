"""Employee data access layer."""

from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from northwind.models import Employee
from northwind.services.repositories.exceptions import NotFoundError

if TYPE_CHECKING:
    from collections.abc import Sequence


class EmployeeRepository:
    """Centralized employee data access."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, employee_id: int) -> Employee | None:
        return self._db.get(Employee, employee_id)

    def get_by_id(self, employee_id: int) -> Employee:
        employee = self.find_by_id(employee_id)
        if employee is None:
            raise NotFoundError("Employee", employee_id)
        return employee

    def find_all(self, *, limit: int | None = None, offset: int = 0) -> "Sequence[Employee]":
        query = (
            self._db.query(Employee)
            .order_by(Employee.last_name, Employee.first_name)
            .offset(offset)
        )
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def add(self, employee: Employee) -> Employee:
        self._db.add(employee)
        return employee

    def update(self, employee: Employee) -> Employee:
        self._db.add(employee)
        return employee

    def delete(self, employee: Employee) -> None:
        self._db.delete(employee)

    def exists(self, employee_id: int) -> bool:
        return self.find_by_id(employee_id) is not None
