"""Tests for database seeding."""

from decimal import Decimal

from northwind import init_db as init_db_module
from northwind.models import Category, Customer, Product, Shipper, Supplier
from northwind.schemas import OrderItemCreate, PlaceOrderRequest
from northwind.services import OrderPlacementService, OrderReceipt, UnitOfWork


def test_seed_data_populates_catalog(db):
    init_db_module.seed_data(db)

    assert db.query(Category).count() == 3
    assert db.query(Supplier).count() == 3
    assert db.query(Shipper).count() == 3
    assert db.query(Customer).count() == 3
    assert db.query(Product).count() == 7
    assert db.query(Product).filter(Product.discontinued.is_(True)).count() == 1


def test_seeded_database_accepts_orders(db, session_factory, read_stock):
    init_db_module.seed_data(db)

    with UnitOfWork(session_factory) as uow:
        result = OrderPlacementService(uow).place_order(
            PlaceOrderRequest(
                customer_id="ALFKI",
                employee_id=1,
                shipper_id=2,
                items=[OrderItemCreate(product_id=1, quantity=3)],
            )
        )

    assert isinstance(result, OrderReceipt)
    assert result.total_amount == Decimal("54.00")
    assert read_stock()[1] == 36


def test_init_db_skips_seeding_when_customers_exist(engine, session_factory, monkeypatch):
    monkeypatch.setattr(init_db_module, "engine", engine)
    monkeypatch.setattr(init_db_module, "SessionLocal", session_factory)

    init_db_module.init_db()
    init_db_module.init_db()

    session = session_factory()
    try:
        assert session.query(Customer).count() == 3
    finally:
        session.close()
