"""Repository layer - data access abstraction.

Repositories handle all database queries, providing a clean interface
for services. Every repository implements the same capability set
(see ``base.Repository``) against its own model; the unit of work hands
them out bound to one shared session.

Dependency direction: Services -> UnitOfWork -> Repositories -> Models
"""

from .base import Repository
from .category_repository import CategoryRepository
from .customer_repository import CustomerRepository
from .employee_repository import EmployeeRepository
from .exceptions import (
    AlreadyInTransactionError,
    NoActiveTransactionError,
    NotFoundError,
    PendingChangesError,
    RepositoryError,
    TransactionError,
    UnitOfWorkError,
)
from .order_repository import OrderRepository
from .product_repository import ProductRepository
from .shipper_repository import ShipperRepository
from .supplier_repository import SupplierRepository

__all__ = [
    "AlreadyInTransactionError",
    "CategoryRepository",
    "CustomerRepository",
    "EmployeeRepository",
    "NoActiveTransactionError",
    "NotFoundError",
    "OrderRepository",
    "PendingChangesError",
    "ProductRepository",
    "Repository",
    "RepositoryError",
    "ShipperRepository",
    "SupplierRepository",
    "TransactionError",
    "UnitOfWorkError",
]
