"""Application constants to avoid magic strings."""

from decimal import Decimal


class EntityKind:
    """Entity names used in lookup failures and log messages."""

    CUSTOMER = "Customer"
    PRODUCT = "Product"
    ORDER = "Order"


# Amounts are kept exact while an order is totalled and only rounded for display
CURRENCY_QUANTUM = Decimal("0.01")
