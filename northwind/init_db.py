"""Database initialization script with seed data."""

import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from northwind.config import settings
from northwind.database import Base, SessionLocal, engine
from northwind.models import Category, Customer, Employee, Product, Shipper, Supplier

logger = logging.getLogger(__name__)


def create_tables() -> None:
    """Create all database tables."""
    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Tables created successfully")


def seed_data(db: Session) -> None:
    """Seed the database with a small slice of the Northwind catalog."""
    logger.info("Seeding database with sample data...")

    categories = [
        Category(
            category_id=1,
            category_name="Beverages",
            description="Soft drinks, coffees, teas, beers, and ales",
        ),
        Category(
            category_id=2,
            category_name="Condiments",
            description="Sweet and savory sauces, relishes, spreads, and seasonings",
        ),
        Category(
            category_id=3,
            category_name="Confections",
            description="Desserts, candies, and sweet breads",
        ),
    ]
    db.add_all(categories)

    suppliers = [
        Supplier(supplier_id=1, company_name="Exotic Liquids", city="London", country="UK"),
        Supplier(
            supplier_id=2,
            company_name="New Orleans Cajun Delights",
            city="New Orleans",
            country="USA",
        ),
        Supplier(
            supplier_id=3,
            company_name="Grandma Kelly's Homestead",
            city="Ann Arbor",
            country="USA",
        ),
    ]
    db.add_all(suppliers)

    db.add_all(
        [
            Employee(
                employee_id=1,
                last_name="Davolio",
                first_name="Nancy",
                title="Sales Representative",
            ),
            Employee(
                employee_id=2,
                last_name="Fuller",
                first_name="Andrew",
                title="Vice President, Sales",
            ),
        ]
    )
    db.add_all(
        [
            Shipper(shipper_id=1, company_name="Speedy Express", phone="(503) 555-9831"),
            Shipper(shipper_id=2, company_name="United Package", phone="(503) 555-3199"),
            Shipper(shipper_id=3, company_name="Federal Shipping", phone="(503) 555-9931"),
        ]
    )
    db.add_all(
        [
            Customer(
                customer_id="ALFKI",
                company_name="Alfreds Futterkiste",
                contact_name="Maria Anders",
                contact_title="Sales Representative",
                address="Obere Str. 57",
                city="Berlin",
                postal_code="12209",
                country="Germany",
                phone="030-0074321",
            ),
            Customer(
                customer_id="ANATR",
                company_name="Ana Trujillo Emparedados y helados",
                contact_name="Ana Trujillo",
                contact_title="Owner",
                address="Avda. de la Constitución 2222",
                city="México D.F.",
                postal_code="05021",
                country="Mexico",
                phone="(5) 555-4729",
            ),
            Customer(
                customer_id="BONAP",
                company_name="Bon app'",
                contact_name="Laurence Lebihan",
                contact_title="Owner",
                address="12, rue des Bouchers",
                city="Marseille",
                postal_code="13008",
                country="France",
                phone="91.24.45.40",
            ),
        ]
    )

    products_data = [
        # name, supplier, category, quantity_per_unit, unit_price, units_in_stock, discontinued
        ("Chai", 1, 1, "10 boxes x 20 bags", Decimal("18.00"), 39, False),
        ("Chang", 1, 1, "24 - 12 oz bottles", Decimal("19.00"), 17, False),
        ("Aniseed Syrup", 1, 2, "12 - 550 ml bottles", Decimal("10.00"), 13, False),
        ("Chef Anton's Cajun Seasoning", 2, 2, "48 - 6 oz jars", Decimal("22.00"), 53, False),
        ("Chef Anton's Gumbo Mix", 2, 2, "36 boxes", Decimal("21.35"), 0, True),
        ("Grandma's Boysenberry Spread", 3, 2, "12 - 8 oz jars", Decimal("25.00"), 120, False),
        ("Teatime Chocolate Biscuits", 3, 3, "10 boxes x 12 pieces", Decimal("9.20"), 25, False),
    ]
    db.add_all(
        [
            Product(
                product_id=index,
                product_name=name,
                supplier_id=supplier_id,
                category_id=category_id,
                quantity_per_unit=quantity_per_unit,
                unit_price=unit_price,
                units_in_stock=units_in_stock,
                units_on_order=0,
                reorder_level=10,
                discontinued=discontinued,
            )
            for index, (
                name,
                supplier_id,
                category_id,
                quantity_per_unit,
                unit_price,
                units_in_stock,
                discontinued,
            ) in enumerate(products_data, start=1)
        ]
    )

    db.commit()
    logger.info(
        "Seed data created: %d categories, %d suppliers, %d products",
        len(categories),
        len(suppliers),
        len(products_data),
    )


def init_db() -> None:
    """Initialize database with tables and seed data."""
    logger.info("Initializing database...")

    create_tables()

    db = SessionLocal()
    try:
        # Check if data already exists
        existing_customers = db.query(Customer).count()
        if existing_customers > 0:
            logger.info(
                "Database already has %d customers. Skipping seed data.", existing_customers
            )
            return

        seed_data(db)
        logger.info("Database initialization complete")

    except Exception:
        logger.exception("Error during database initialization")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    init_db()
