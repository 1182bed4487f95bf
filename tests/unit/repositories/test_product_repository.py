"""Tests for ProductRepository."""

import pytest
from sqlalchemy import update

from northwind.models import Product
from northwind.services.repositories.exceptions import NotFoundError


class TestProductRepository:
    """Tests for ProductRepository."""

    def test_find_by_id_returns_product(self, db, northwind_data):
        """Test finding product by ID returns the correct product."""
        from northwind.services.repositories.product_repository import ProductRepository

        repo = ProductRepository(db)
        product = repo.find_by_id(1)

        assert product is not None
        assert product.product_name == "Chai"
        assert product.units_in_stock == 10

    def test_find_by_id_returns_none_for_nonexistent(self, db, northwind_data):
        """Test finding nonexistent product returns None."""
        from northwind.services.repositories.product_repository import ProductRepository

        repo = ProductRepository(db)

        assert repo.find_by_id(99999) is None

    def test_get_by_id_raises_not_found(self, db, northwind_data):
        """Test get_by_id raises NotFoundError for a missing product."""
        from northwind.services.repositories.product_repository import ProductRepository

        repo = ProductRepository(db)

        with pytest.raises(NotFoundError) as exc_info:
            repo.get_by_id(99999)

        assert exc_info.value.entity_type == "Product"
        assert exc_info.value.identifier == 99999

    def test_find_by_ids_returns_products(self, db, northwind_data):
        """Test finding multiple products by IDs."""
        from northwind.services.repositories.product_repository import ProductRepository

        repo = ProductRepository(db)
        products = repo.find_by_ids([1, 3, 99999])

        assert sorted(p.product_id for p in products) == [1, 3]

    def test_find_all_orders_by_name_and_paginates(self, db, northwind_data):
        """Test find_all sorts by name and honors limit/offset."""
        from northwind.services.repositories.product_repository import ProductRepository

        repo = ProductRepository(db)

        assert len(repo.find_all()) == 6
        page = repo.find_all(limit=2, offset=1)
        assert [p.product_name for p in page] == ["Chai", "Chang"]

    def test_find_by_category(self, db, northwind_data):
        """Test filtering products by category."""
        from northwind.services.repositories.product_repository import ProductRepository

        repo = ProductRepository(db)
        products = repo.find_by_category(1)

        assert sorted(p.product_id for p in products) == [1, 2, 5, 6]

    def test_find_by_supplier(self, db, northwind_data):
        """Test filtering products by supplier."""
        from northwind.services.repositories.product_repository import ProductRepository

        repo = ProductRepository(db)
        products = repo.find_by_supplier(2)

        assert [p.product_id for p in products] == [4]

    def test_find_discontinued(self, db, northwind_data):
        """Test only discontinued products are returned."""
        from northwind.services.repositories.product_repository import ProductRepository

        repo = ProductRepository(db)
        products = repo.find_discontinued()

        assert [p.product_name for p in products] == ["Chef Anton's Gumbo Mix"]

    def test_find_with_details_loads_category_and_supplier(self, db, northwind_data):
        """Test eager loading of category and supplier."""
        from northwind.services.repositories.product_repository import ProductRepository

        repo = ProductRepository(db)
        product = repo.find_with_details(4)

        assert product.category.category_name == "Condiments"
        assert product.supplier.company_name == "New Orleans Cajun Delights"

    def test_find_for_update_reloads_current_row(self, db, session_factory, northwind_data):
        """Test find_for_update replaces a stale identity-map copy."""
        from northwind.services.repositories.product_repository import ProductRepository

        repo = ProductRepository(db)
        stale = repo.find_by_id(1)
        assert stale.units_in_stock == 10

        other = session_factory()
        other.execute(update(Product).where(Product.product_id == 1).values(units_in_stock=4))
        other.commit()
        other.close()

        current = repo.find_for_update(1)

        assert current is stale
        assert current.units_in_stock == 4

    def test_missing_price_and_stock_read_as_zero(self, db, northwind_data):
        """Test nullable price and stock fall back to zero."""
        from northwind.services.repositories.product_repository import ProductRepository

        product = ProductRepository(db).get_by_id(5)

        assert product.unit_price is None
        assert product.units_in_stock is None
        assert product.price == 0
        assert product.stock_on_hand == 0

    def test_update_stages_change(self, db, session_factory, northwind_data):
        """Test update writes the change on commit."""
        from northwind.services.repositories.product_repository import ProductRepository

        repo = ProductRepository(db)
        product = repo.get_by_id(3)
        product.units_in_stock = 7
        repo.update(product)
        db.commit()

        check = session_factory()
        assert check.get(Product, 3).units_in_stock == 7
        check.close()

    def test_exists_and_delete(self, db, northwind_data):
        """Test exists reflects a deleted product."""
        from northwind.services.repositories.product_repository import ProductRepository

        repo = ProductRepository(db)
        assert repo.exists(6)

        repo.delete(repo.get_by_id(6))
        db.flush()

        assert not repo.exists(6)
