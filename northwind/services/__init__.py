"""Services layer - business logic over the data access layer.

- repositories/: Data access layer, one repository per aggregate
- unit_of_work: Session-scoped repositories and transaction control
- order_placement_service: Transactional order placement

Common imports for convenience:
    from northwind.services import UnitOfWork, OrderPlacementService
"""

# Re-export commonly used components for convenience
from northwind.services.order_placement_service import OrderPlacementService
from northwind.services.order_placement_types import (
    Discontinued,
    InsufficientStock,
    NotFound,
    OrderPlacementCancelledError,
    OrderReceipt,
    OrderValidationFailure,
    PlaceOrderResult,
)
from northwind.services.repositories import NotFoundError, RepositoryError
from northwind.services.unit_of_work import TransactionManager, UnitOfWork, get_unit_of_work

__all__ = [
    # Order placement
    "Discontinued",
    "InsufficientStock",
    "NotFound",
    "OrderPlacementCancelledError",
    "OrderPlacementService",
    "OrderReceipt",
    "OrderValidationFailure",
    "PlaceOrderResult",
    # Repositories
    "NotFoundError",
    "RepositoryError",
    # Unit of work
    "TransactionManager",
    "UnitOfWork",
    "get_unit_of_work",
]
