"""Unit of Work and transaction management over a SQLAlchemy session.

A ``UnitOfWork`` owns one session for one logical operation. Every repository
it hands out is bound to that session, and its ``TransactionManager`` controls
the single write transaction running on it:

    with UnitOfWork() as uow:
        customer = uow.customers.get_by_id("ALFKI")
        with uow.transaction():
            uow.orders.add(order)
            uow.flush()  # order.order_id is now set
            ...
        # committed here, or rolled back if the block raised
"""

import logging
from collections.abc import Callable, Generator, Iterator
from contextlib import contextmanager
from typing import TypeVar

from sqlalchemy.orm import Session, SessionTransaction

from northwind.services.repositories import (
    CategoryRepository,
    CustomerRepository,
    EmployeeRepository,
    OrderRepository,
    ProductRepository,
    Repository,
    ShipperRepository,
    SupplierRepository,
)
from northwind.services.repositories.exceptions import (
    AlreadyInTransactionError,
    NoActiveTransactionError,
    PendingChangesError,
    UnitOfWorkError,
)

logger = logging.getLogger(__name__)

RepoT = TypeVar("RepoT")


class TransactionManager:
    """Explicit begin/flush/commit/rollback over one session.

    Only one transaction may be open per instance. ``rollback`` is idempotent
    and ``commit`` never leaves a half-applied transaction behind: if applying
    the writes fails it rolls back before re-raising.
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._transaction: SessionTransaction | None = None

    @property
    def in_transaction(self) -> bool:
        return self._transaction is not None

    def begin(self) -> None:
        """Open a new transaction.

        Raises:
            AlreadyInTransactionError: A transaction is already open here
            PendingChangesError: Objects were added, modified or deleted on the
                session before begin()
        """
        if self._transaction is not None:
            raise AlreadyInTransactionError()
        if self._session.new or self._session.dirty or self._session.deleted:
            raise PendingChangesError()

        # Reads made before begin() autobegin a transaction on the session.
        # No changes are staged in it; commit closes it while keeping the
        # loaded objects (expire_on_commit=False).
        if self._session.in_transaction():
            self._session.commit()

        self._transaction = self._session.begin()
        logger.debug("Transaction started")

    def flush(self) -> None:
        """Write pending changes without ending the transaction.

        Generated identifiers (e.g. ``Order.order_id``) are populated after this.
        """
        if self._transaction is None:
            raise NoActiveTransactionError("flush")
        self._session.flush()

    def commit(self) -> None:
        """Apply all pending writes and end the transaction.

        On failure the transaction is rolled back and the original error re-raised.
        """
        transaction = self._transaction
        if transaction is None:
            raise NoActiveTransactionError("commit")

        try:
            self._session.flush()
            transaction.commit()
        except BaseException:
            self._rollback_after_failure()
            raise
        self._transaction = None
        logger.debug("Transaction committed")

    def rollback(self) -> None:
        """Discard all writes since begin(). No-op when no transaction is open."""
        if self._transaction is None:
            return
        try:
            self._session.rollback()
        finally:
            self._transaction = None
        logger.debug("Transaction rolled back")

    @contextmanager
    def scope(self) -> Iterator["TransactionManager"]:
        """Run a block inside a transaction.

        Commits when the block finishes, rolls back when it raises (including
        cancellation and KeyboardInterrupt).
        """
        self.begin()
        try:
            yield self
        except BaseException:
            self._rollback_after_failure()
            raise
        self.commit()

    def close(self) -> None:
        """Roll back anything still open and release the session."""
        try:
            if self._transaction is not None:
                logger.warning("Closing with an open transaction, rolling back")
                self._rollback_after_failure()
        finally:
            self._session.close()

    def _rollback_after_failure(self) -> None:
        """Roll back while another error is propagating.

        A rollback failure is logged and dropped so the error that caused the
        rollback is the one the caller sees.
        """
        try:
            self.rollback()
        except Exception:
            logger.exception("Rollback failed; the original error is re-raised")


class UnitOfWork:
    """One session, one transaction manager, and lazily built repositories.

    Create one per logical operation and use it as a context manager; the
    session is closed on exit and any open transaction rolled back.
    """

    def __init__(self, session_factory: Callable[[], Session] | None = None) -> None:
        if session_factory is None:
            from northwind.database import SessionLocal

            session_factory = SessionLocal
        self._session_factory = session_factory
        self._session: Session | None = None
        self._transaction_manager: TransactionManager | None = None
        self._repositories: dict[type, Repository] = {}

    def __enter__(self) -> "UnitOfWork":
        if self._session is not None:
            raise UnitOfWorkError("Unit of work is already active")
        self._session = self._session_factory()
        self._transaction_manager = TransactionManager(self._session)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        try:
            if self._transaction_manager is not None:
                self._transaction_manager.close()
        finally:
            self._session = None
            self._transaction_manager = None
            self._repositories.clear()

    @property
    def session(self) -> Session:
        if self._session is None:
            raise UnitOfWorkError("Unit of work is not active. Use 'with UnitOfWork() as uow:'")
        return self._session

    @property
    def transaction_manager(self) -> TransactionManager:
        if self._transaction_manager is None:
            raise UnitOfWorkError("Unit of work is not active. Use 'with UnitOfWork() as uow:'")
        return self._transaction_manager

    def _repository(self, repository_cls: Callable[[Session], RepoT]) -> RepoT:
        """Build a repository on first access and reuse it afterwards."""
        repository = self._repositories.get(repository_cls)
        if repository is None:
            repository = repository_cls(self.session)
            self._repositories[repository_cls] = repository
        return repository

    # Repositories

    @property
    def customers(self) -> CustomerRepository:
        return self._repository(CustomerRepository)

    @property
    def products(self) -> ProductRepository:
        return self._repository(ProductRepository)

    @property
    def categories(self) -> CategoryRepository:
        return self._repository(CategoryRepository)

    @property
    def suppliers(self) -> SupplierRepository:
        return self._repository(SupplierRepository)

    @property
    def employees(self) -> EmployeeRepository:
        return self._repository(EmployeeRepository)

    @property
    def shippers(self) -> ShipperRepository:
        return self._repository(ShipperRepository)

    @property
    def orders(self) -> OrderRepository:
        return self._repository(OrderRepository)

    # Transaction control

    def begin(self) -> None:
        self.transaction_manager.begin()

    def flush(self) -> None:
        self.transaction_manager.flush()

    def commit(self) -> None:
        self.transaction_manager.commit()

    def rollback(self) -> None:
        self.transaction_manager.rollback()

    def transaction(self):
        """Context manager committing on success and rolling back on error."""
        return self.transaction_manager.scope()


def get_unit_of_work() -> Generator[UnitOfWork, None, None]:
    """
    Unit of work dependency, one per request.

    Example:
        for uow in get_unit_of_work():
            OrderPlacementService(uow).place_order(request)
    """
    with UnitOfWork() as uow:
        yield uow
