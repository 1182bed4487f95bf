"""Value objects returned by order placement.

Validation failures are returned as values, not raised: they describe a
problem with the caller's request and leave no trace in the database.
Infrastructure failures are raised as the original exception.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from northwind.constants import CURRENCY_QUANTUM


@dataclass(frozen=True)
class OrderReceipt:
    """Outcome of a successfully placed order. Not persisted."""

    order_id: int
    total_amount: Decimal
    item_count: int
    message: str

    @property
    def display_total(self) -> Decimal:
        """Total rounded to cents."""
        return self.total_amount.quantize(CURRENCY_QUANTUM, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class OrderValidationFailure:
    """Base class for request problems detected before any write."""

    @property
    def message(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class NotFound(OrderValidationFailure):
    """A referenced customer or product does not exist."""

    entity_kind: str
    entity_id: str | int

    @property
    def message(self) -> str:
        return f"{self.entity_kind} with ID '{self.entity_id}' not found"


@dataclass(frozen=True)
class Discontinued(OrderValidationFailure):
    """The product is no longer sold."""

    product_id: int
    product_name: str

    @property
    def message(self) -> str:
        return f"Product '{self.product_name}' is discontinued"


@dataclass(frozen=True)
class InsufficientStock(OrderValidationFailure):
    """More units were requested than the product has in stock."""

    product_id: int
    product_name: str
    available: int
    requested: int

    @property
    def message(self) -> str:
        return (
            f"Insufficient stock for '{self.product_name}'. "
            f"Available: {self.available}, Requested: {self.requested}"
        )


PlaceOrderResult = OrderReceipt | OrderValidationFailure


class OrderPlacementCancelledError(Exception):
    """Order placement was cancelled by the caller.

    ``transaction_opened`` tells whether a transaction had been started (and
    was therefore rolled back) when the cancellation was noticed.
    """

    def __init__(self, stage: str, transaction_opened: bool = False):
        self.stage = stage
        self.transaction_opened = transaction_opened
        super().__init__(f"Order placement cancelled during {stage}")
