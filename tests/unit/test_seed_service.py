"""
Unit tests for demo data loading.
"""

from inventory.models import Supplier, Product
from inventory.services.seed_service import seed_demo
from inventory.services.stock_service import get_stock


def test_seed_demo_loads_catalog(session):
    assert seed_demo(session) is True

    assert session.query(Supplier).count() == 2
    products = session.query(Product).order_by(Product.product_id).all()
    assert [(p.product_name, p.stock_qty, p.reorder_level) for p in products] == [
        ('Dell Laptop XPS', 15, 5),
        ('HP Printer', 8, 10),
        ('Samsung LED TV', 3, 5),
    ]
    assert products[2].supplier.supplier_name == 'Global Electronics'


def test_seed_demo_is_idempotent(session, laptop):
    assert seed_demo(session) is False
    assert session.query(Product).count() == 1
    assert get_stock(1001, session) == 15
