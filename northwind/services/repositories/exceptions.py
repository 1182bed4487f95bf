"""Repository-specific exceptions.

These exceptions provide semantic meaning for data access errors,
separating them from general database errors.
"""


class RepositoryError(Exception):
    """Base exception for repository operations."""


class NotFoundError(RepositoryError):
    """Entity not found in database."""

    def __init__(self, entity_type: str, identifier: str | int):
        self.entity_type = entity_type
        self.identifier = identifier
        super().__init__(f"{entity_type} not found: {identifier}")


class TransactionError(RepositoryError):
    """Transaction used out of sequence."""


class AlreadyInTransactionError(TransactionError):
    """begin() called while a transaction is already open."""

    def __init__(self) -> None:
        super().__init__("A transaction is already open on this unit of work")


class NoActiveTransactionError(TransactionError):
    """flush() or commit() called without an open transaction."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot {operation}: no transaction is open")


class UnitOfWorkError(RepositoryError):
    """Unit of work used outside its context."""


class PendingChangesError(TransactionError):
    """begin() called while the session holds writes staged outside a transaction."""

    def __init__(self) -> None:
        super().__init__("Cannot begin: the session has changes staged outside a transaction")
