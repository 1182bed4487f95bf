"""Shared fixtures: in-memory SQLite database seeded with a small Northwind slice."""

import os

# Keep the module-level application engine off PostgreSQL while testing
os.environ.setdefault("DATABASE_URL", "sqlite://")

from decimal import Decimal  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import create_engine, event  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from northwind.database import Base  # noqa: E402
from northwind.models import (  # noqa: E402
    Category,
    Customer,
    Employee,
    Order,
    OrderLine,
    Product,
    Shipper,
    Supplier,
)
from northwind.services.unit_of_work import UnitOfWork  # noqa: E402


@pytest.fixture
def engine():
    """Create in-memory SQLite engine for testing.

    StaticPool keeps every session on the same connection so the in-memory
    database survives between them.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        # Enable foreign keys
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    """Session factory configured like the application's SessionLocal."""
    return sessionmaker(autoflush=False, expire_on_commit=False, bind=engine)


@pytest.fixture
def db(session_factory):
    """Create database session for test setup."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def northwind_data(db):
    """Seed one customer, one employee, one shipper and a handful of products.

    Products:
        1 Chai           18.00, stock 10
        2 Chang          19.00, stock 2
        3 Aniseed Syrup  10.00, stock 13
        4 Gumbo Mix      21.35, stock 20, discontinued
        5 Mystery Tea    no price, no stock
        6 Sample Packet  no price, stock 5
    """
    db.add(Category(category_id=1, category_name="Beverages", description="Drinks"))
    db.add(Category(category_id=2, category_name="Condiments", description="Sauces"))
    db.add(Supplier(supplier_id=1, company_name="Exotic Liquids", country="UK"))
    db.add(Supplier(supplier_id=2, company_name="New Orleans Cajun Delights", country="USA"))
    db.add(Employee(employee_id=1, last_name="Davolio", first_name="Nancy"))
    db.add(Shipper(shipper_id=1, company_name="Speedy Express"))
    db.add(
        Customer(
            customer_id="ALFKI",
            company_name="Alfreds Futterkiste",
            address="Obere Str. 57",
            city="Berlin",
            region=None,
            postal_code="12209",
            country="Germany",
        )
    )
    db.add(
        Customer(
            customer_id="BONAP",
            company_name="Bon app'",
            address="12, rue des Bouchers",
            city="Marseille",
            postal_code="13008",
            country="France",
        )
    )
    db.flush()

    db.add_all(
        [
            Product(
                product_id=1,
                product_name="Chai",
                supplier_id=1,
                category_id=1,
                unit_price=Decimal("18.00"),
                units_in_stock=10,
            ),
            Product(
                product_id=2,
                product_name="Chang",
                supplier_id=1,
                category_id=1,
                unit_price=Decimal("19.00"),
                units_in_stock=2,
            ),
            Product(
                product_id=3,
                product_name="Aniseed Syrup",
                supplier_id=1,
                category_id=2,
                unit_price=Decimal("10.00"),
                units_in_stock=13,
            ),
            Product(
                product_id=4,
                product_name="Chef Anton's Gumbo Mix",
                supplier_id=2,
                category_id=2,
                unit_price=Decimal("21.35"),
                units_in_stock=20,
                discontinued=True,
            ),
            Product(
                product_id=5,
                product_name="Mystery Tea",
                category_id=1,
                unit_price=None,
                units_in_stock=None,
            ),
            Product(
                product_id=6,
                product_name="Sample Packet",
                category_id=1,
                unit_price=None,
                units_in_stock=5,
            ),
        ]
    )
    db.commit()
    return db


@pytest.fixture
def uow(session_factory, northwind_data):
    """Active unit of work over the seeded database."""
    with UnitOfWork(session_factory) as unit_of_work:
        yield unit_of_work


@pytest.fixture
def read_stock(session_factory):
    """Read current stock levels from the database through a fresh session."""

    def _read_stock() -> dict[int, int | None]:
        session = session_factory()
        try:
            return {
                product.product_id: product.units_in_stock
                for product in session.query(Product).all()
            }
        finally:
            session.close()

    return _read_stock


@pytest.fixture
def count_orders(session_factory):
    """Count persisted orders and order lines through a fresh session."""

    def _count_orders() -> tuple[int, int]:
        session = session_factory()
        try:
            return session.query(Order).count(), session.query(OrderLine).count()
        finally:
            session.close()

    return _count_orders
