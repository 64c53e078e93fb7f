import pytest
from decimal import Decimal

from inventory import create_app
from inventory import database
from inventory.database import get_session
from inventory.models import Supplier, Product


@pytest.fixture(scope='session')
def app():
    """Create application instance for testing."""
    app = create_app('config.TestConfig')
    return app


@pytest.fixture(autouse=True)
def schema(app):
    """Fresh tables for every test."""
    database.drop_all()
    database.create_all()
    yield
    database.get_session().remove()


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def runner(app):
    """Create CLI runner."""
    return app.test_cli_runner()


@pytest.fixture(scope='function')
def session():
    """Create database session for testing."""
    session = get_session()
    yield session
    session.rollback()
    session.close()


@pytest.fixture(scope='function')
def supplier(session):
    """Create test supplier."""
    supplier = Supplier(
        supplier_name='Tech Suppliers Pvt Ltd',
        phone='9876543210',
        city='Mumbai'
    )
    session.add(supplier)
    session.commit()
    session.refresh(supplier)
    return supplier


@pytest.fixture(scope='function')
def other_supplier(session):
    """Create second test supplier."""
    supplier = Supplier(
        supplier_name='Global Electronics',
        phone='9123456789',
        city='Delhi'
    )
    session.add(supplier)
    session.commit()
    session.refresh(supplier)
    return supplier


@pytest.fixture(scope='function')
def laptop(session, supplier):
    """Product 1001: stock 15, reorder level 5."""
    product = Product(
        product_id=1001,
        product_name='Dell Laptop XPS',
        supplier_id=supplier.supplier_id,
        price=Decimal('85000.00'),
        stock_qty=15,
        reorder_level=5
    )
    session.add(product)
    session.commit()
    session.refresh(product)
    return product


@pytest.fixture(scope='function')
def printer(session, supplier):
    """Product 1002: stock 8, reorder level 10."""
    product = Product(
        product_id=1002,
        product_name='HP Printer',
        supplier_id=supplier.supplier_id,
        price=Decimal('12000.00'),
        stock_qty=8,
        reorder_level=10
    )
    session.add(product)
    session.commit()
    session.refresh(product)
    return product


@pytest.fixture(scope='function')
def tv(session, other_supplier):
    """Product 1003: stock 3, reorder level 5."""
    product = Product(
        product_id=1003,
        product_name='Samsung LED TV',
        supplier_id=other_supplier.supplier_id,
        price=Decimal('45000.00'),
        stock_qty=3,
        reorder_level=5
    )
    session.add(product)
    session.commit()
    session.refresh(product)
    return product
