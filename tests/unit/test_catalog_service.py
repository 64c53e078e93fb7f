"""
Unit tests for supplier and product catalog operations.
"""

import pytest
from decimal import Decimal
from inventory.models import Supplier, Product, StockTransaction
from inventory.exceptions import (
    BusinessLogicError, NotFoundError, SupplierInUseError, NegativeStockRejectedError
)
from inventory.services import catalog_service


class TestSuppliers:
    """Tests for supplier operations."""

    def test_create_supplier(self, session):
        supplier = catalog_service.create_supplier(
            {'supplier_name': '  Acme Traders ', 'phone': '', 'city': 'Pune'}, session
        )

        assert supplier.supplier_id is not None
        assert supplier.supplier_name == 'Acme Traders'
        assert supplier.phone is None
        assert supplier.city == 'Pune'

    def test_create_supplier_requires_name(self, session):
        with pytest.raises(BusinessLogicError):
            catalog_service.create_supplier({'supplier_name': '   '}, session)

        assert session.query(Supplier).count() == 0

    def test_supplier_ids_are_monotonic(self, session):
        first = catalog_service.create_supplier({'supplier_name': 'A'}, session)
        second = catalog_service.create_supplier({'supplier_name': 'B'}, session)

        assert second.supplier_id > first.supplier_id

    def test_list_suppliers_by_name(self, session, other_supplier, supplier):
        names = [s.supplier_name for s in catalog_service.list_suppliers(session)]
        assert names == ['Global Electronics', 'Tech Suppliers Pvt Ltd']

    def test_get_unknown_supplier(self, session):
        with pytest.raises(NotFoundError):
            catalog_service.get_supplier(42, session)

    def test_delete_unreferenced_supplier(self, session, other_supplier):
        catalog_service.delete_supplier(other_supplier.supplier_id, session)

        assert session.query(Supplier).count() == 0

    def test_delete_referenced_supplier_refused(self, session, supplier, laptop, printer):
        with pytest.raises(SupplierInUseError) as exc_info:
            catalog_service.delete_supplier(supplier.supplier_id, session)

        assert exc_info.value.product_count == 2
        assert exc_info.value.status_code == 409
        assert session.query(Supplier).count() == 1


class TestProducts:
    """Tests for product operations."""

    def test_create_product(self, session, supplier):
        product = catalog_service.create_product({
            'product_name': 'Mouse',
            'supplier_id': supplier.supplier_id,
            'price': '499.5',
            'stock_qty': 7,
        }, session)

        assert product.product_id is not None
        assert product.price == Decimal('499.50')
        assert product.stock_qty == 7
        assert product.reorder_level == 10

    def test_opening_stock_writes_no_transaction(self, session):
        catalog_service.create_product({'product_name': 'Mouse', 'price': 10, 'stock_qty': 7}, session)

        assert session.query(StockTransaction).count() == 0

    def test_supplier_is_optional(self, session):
        product = catalog_service.create_product({'product_name': 'Loose item', 'price': 1}, session)

        assert product.supplier_id is None
        assert product.stock_qty == 0

    @pytest.mark.parametrize('price', [0, -10, 'abc', None, 'NaN'])
    def test_invalid_price(self, session, price):
        with pytest.raises(BusinessLogicError):
            catalog_service.create_product({'product_name': 'Bad', 'price': price}, session)

        assert session.query(Product).count() == 0

    def test_requires_name(self, session):
        with pytest.raises(BusinessLogicError):
            catalog_service.create_product({'price': 5}, session)

    def test_unknown_supplier(self, session):
        with pytest.raises(NotFoundError):
            catalog_service.create_product({'product_name': 'X', 'price': 5, 'supplier_id': 77}, session)

    def test_negative_opening_stock_hits_guard(self, session):
        with pytest.raises(NegativeStockRejectedError):
            catalog_service.create_product({'product_name': 'X', 'price': 5, 'stock_qty': -2}, session)

        assert session.query(Product).count() == 0

    def test_negative_reorder_level(self, session):
        with pytest.raises(BusinessLogicError):
            catalog_service.create_product({'product_name': 'X', 'price': 5, 'reorder_level': -1}, session)

    @pytest.mark.parametrize('field, value', [
        ('stock_qty', 2.9),
        ('stock_qty', '2.9'),
        ('stock_qty', Decimal('3.5')),
        ('reorder_level', 4.7),
        ('supplier_id', 1.9),
        ('stock_qty', float('inf')),
    ])
    def test_non_integral_numbers_rejected(self, session, supplier, field, value):
        payload = {'product_name': 'X', 'price': 1, field: value}

        with pytest.raises(BusinessLogicError) as exc_info:
            catalog_service.create_product(payload, session)

        assert exc_info.value.message == f'Invalid {field}'
        assert session.query(Product).count() == 0

    def test_whole_float_accepted(self, session):
        product = catalog_service.create_product(
            {'product_name': 'X', 'price': 1, 'stock_qty': 4.0, 'reorder_level': '6'}, session
        )

        assert product.stock_qty == 4
        assert product.reorder_level == 6

    def test_get_and_list(self, session, laptop, printer):
        assert catalog_service.get_product(1002, session).product_name == 'HP Printer'
        assert [p.product_id for p in catalog_service.list_products(session)] == [1001, 1002]

        with pytest.raises(NotFoundError):
            catalog_service.get_product(1, session)
