"""Order placement - the one multi-aggregate write in the system.

Placing an order validates the customer and every requested product against
current inventory, then writes the order header, its lines and the stock
decrements in a single transaction. Either all of it is committed or none of it.

Validation reads happen before the transaction opens. Two concurrent orders
for the same low-stock product can therefore both pass validation and both
decrement stock (oversell) unless the database isolation level prevents it.

Repeated lines for one product are checked against its stock together, so
``InsufficientStock.requested`` reports the total quantity asked for that
product across the request, not the quantity of a single line.

Setting ``order_stock_recheck`` re-reads each product with a row lock inside
the transaction and rejects the order if stock ran out in the meantime.
"""

import logging
import threading
from datetime import UTC, datetime
from decimal import Decimal

from northwind.config import settings
from northwind.constants import EntityKind
from northwind.models import Customer, Order, OrderLine, Product
from northwind.schemas.order import PlaceOrderRequest, ShippingOverrides
from northwind.services.order_placement_types import (
    Discontinued,
    InsufficientStock,
    NotFound,
    OrderPlacementCancelledError,
    OrderReceipt,
    OrderValidationFailure,
    PlaceOrderResult,
)
from northwind.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class _StockRecheckFailed(Exception):
    """Aborts the transaction when the in-transaction stock check fails."""

    def __init__(self, failure: InsufficientStock):
        self.failure = failure
        super().__init__(failure.message)


class OrderPlacementService:
    """Validates and persists new orders through a unit of work."""

    def __init__(self, uow: UnitOfWork, *, recheck_stock: bool | None = None) -> None:
        """Initialize with an active unit of work.

        Args:
            uow: Unit of work already entered by the caller
            recheck_stock: Re-validate stock inside the transaction. Defaults to
                ``settings.order_stock_recheck``.
        """
        self._uow = uow
        self._recheck_stock = (
            settings.order_stock_recheck if recheck_stock is None else recheck_stock
        )

    def place_order(
        self,
        request: PlaceOrderRequest,
        cancel_event: threading.Event | None = None,
    ) -> PlaceOrderResult:
        """Place an order.

        Args:
            request: Validated order request
            cancel_event: Set by the caller to abandon the operation

        Returns:
            OrderReceipt on success, or an OrderValidationFailure (NotFound,
            Discontinued, InsufficientStock) when the request cannot be
            fulfilled. Nothing is written in the failure case.

        Raises:
            OrderPlacementCancelledError: cancel_event was set; any open
                transaction has been rolled back
            SQLAlchemyError: storage failure while writing; the transaction has
                been rolled back and the error is re-raised unchanged
        """
        validated = self._validate(request, cancel_event)
        if isinstance(validated, OrderValidationFailure):
            logger.warning(
                "Order for customer %s rejected: %s", request.customer_id, validated.message
            )
            return validated

        customer, products = validated
        self._check_cancelled(cancel_event, "validation")

        try:
            order, total_amount = self._persist(request, customer, products, cancel_event)
        except _StockRecheckFailed as e:
            logger.warning(
                "Order for customer %s rolled back: %s", request.customer_id, e.failure.message
            )
            return e.failure
        except OrderPlacementCancelledError:
            logger.info("Order for customer %s cancelled and rolled back", request.customer_id)
            raise
        except Exception:
            logger.exception("Failed to place order for customer %s", request.customer_id)
            raise

        item_count = len(request.items)
        receipt = OrderReceipt(
            order_id=order.order_id,
            total_amount=total_amount,
            item_count=item_count,
            message=f"Order #{order.order_id} created successfully with {item_count} items",
        )
        logger.info(
            "Placed order %s for customer %s: %d items, total %s",
            receipt.order_id,
            request.customer_id,
            item_count,
            receipt.display_total,
        )
        return receipt

    def _validate(
        self,
        request: PlaceOrderRequest,
        cancel_event: threading.Event | None,
    ) -> tuple[Customer, dict[int, Product]] | OrderValidationFailure:
        """Read-only checks run before any transaction is opened."""
        self._check_cancelled(cancel_event, "validation")
        customer = self._uow.customers.find_by_id(request.customer_id)
        if customer is None:
            return NotFound(EntityKind.CUSTOMER, request.customer_id)

        products: dict[int, Product] = {}
        for product_id in request.product_ids:
            self._check_cancelled(cancel_event, "validation")
            product = self._uow.products.find_by_id(product_id)
            if product is None:
                return NotFound(EntityKind.PRODUCT, product_id)
            products[product_id] = product

        # Repeated lines for one product draw on the same stock
        requested: dict[int, int] = {}
        for item in request.items:
            product = products[item.product_id]
            if product.discontinued:
                return Discontinued(product.product_id, product.product_name)

            requested[item.product_id] = requested.get(item.product_id, 0) + item.quantity
            if requested[item.product_id] > product.stock_on_hand:
                return InsufficientStock(
                    product_id=product.product_id,
                    product_name=product.product_name,
                    available=product.stock_on_hand,
                    requested=requested[item.product_id],
                )

        return customer, products

    def _persist(
        self,
        request: PlaceOrderRequest,
        customer: Customer,
        products: dict[int, Product],
        cancel_event: threading.Event | None,
    ) -> tuple[Order, Decimal]:
        """Write order, lines and stock decrements in one transaction."""
        with self._uow.transaction():
            order = self._build_order(request, customer)
            self._uow.orders.add(order)
            self._uow.flush()
            self._check_cancelled(cancel_event, "order write", transaction_opened=True)

            total_amount = Decimal("0")
            for item in request.items:
                self._check_cancelled(cancel_event, "order write", transaction_opened=True)
                product = products[item.product_id]
                if self._recheck_stock:
                    product = self._lock_and_recheck(product, item.quantity)

                line = OrderLine(
                    product_id=product.product_id,
                    unit_price=product.price,
                    quantity=item.quantity,
                    discount=item.discount,
                )
                order.lines.append(line)
                total_amount += line.unit_price * item.quantity * (1 - item.discount)

                product.units_in_stock = product.stock_on_hand - item.quantity
                self._uow.products.update(product)

            self._check_cancelled(cancel_event, "commit", transaction_opened=True)

        return order, total_amount

    def _lock_and_recheck(self, product: Product, quantity: int) -> Product:
        """Reload the product row under lock and make sure stock still covers quantity."""
        # Pending decrements from earlier lines must reach the row before it is reloaded
        self._uow.flush()
        current = self._uow.products.find_for_update(product.product_id)
        if current is None or current.stock_on_hand < quantity:
            available = current.stock_on_hand if current is not None else 0
            raise _StockRecheckFailed(
                InsufficientStock(
                    product_id=product.product_id,
                    product_name=product.product_name,
                    available=available,
                    requested=quantity,
                )
            )
        return current

    @staticmethod
    def _build_order(request: PlaceOrderRequest, customer: Customer) -> Order:
        """Order header with shipping defaulted from the customer's address."""
        overrides = request.ship_overrides
        return Order(
            customer_id=customer.customer_id,
            employee_id=request.employee_id,
            order_date=datetime.now(UTC),
            required_date=request.required_date,
            ship_via=request.shipper_id,
            freight=request.freight if request.freight is not None else Decimal("0"),
            ship_name=_override(overrides, "name", customer.company_name),
            ship_address=_override(overrides, "address", customer.address),
            ship_city=_override(overrides, "city", customer.city),
            ship_region=_override(overrides, "region", customer.region),
            ship_postal_code=_override(overrides, "postal_code", customer.postal_code),
            ship_country=_override(overrides, "country", customer.country),
        )

    @staticmethod
    def _check_cancelled(
        cancel_event: threading.Event | None, stage: str, transaction_opened: bool = False
    ) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise OrderPlacementCancelledError(stage, transaction_opened)


def _override(
    overrides: ShippingOverrides | None, field: str, default: str | None
) -> str | None:
    value = getattr(overrides, field) if overrides is not None else None
    return value if value is not None else default
