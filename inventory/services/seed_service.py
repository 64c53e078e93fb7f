"""Demo data loader."""
import logging
from decimal import Decimal
from sqlalchemy.orm import Session
from inventory.models import Supplier, Product

logger = logging.getLogger(__name__)

DEMO_SUPPLIERS = [
    {'supplier_name': 'Tech Suppliers Pvt Ltd', 'phone': '9876543210', 'city': 'Mumbai'},
    {'supplier_name': 'Global Electronics', 'phone': '9123456789', 'city': 'Delhi'},
]

# supplier index into DEMO_SUPPLIERS, name, price, stock, reorder level
DEMO_PRODUCTS = [
    (0, 'Dell Laptop XPS', Decimal('85000'), 15, 5),
    (0, 'HP Printer', Decimal('12000'), 8, 10),
    (1, 'Samsung LED TV', Decimal('45000'), 3, 5),
]


def seed_demo(session: Session) -> bool:
    """
    Load demo suppliers and products into an empty catalog.

    Returns:
        True when data was inserted, False when products already exist.
    """
    if session.query(Product).count() > 0:
        logger.info("Catalog not empty, skipping demo data")
        return False

    try:
        suppliers = [Supplier(**data) for data in DEMO_SUPPLIERS]
        session.add_all(suppliers)
        session.flush()

        for supplier_index, name, price, stock_qty, reorder_level in DEMO_PRODUCTS:
            session.add(Product(
                product_name=name,
                supplier_id=suppliers[supplier_index].supplier_id,
                price=price,
                stock_qty=stock_qty,
                reorder_level=reorder_level
            ))

        session.commit()
    except Exception:
        session.rollback()
        raise

    logger.info(f"Demo data loaded: {len(DEMO_SUPPLIERS)} suppliers, {len(DEMO_PRODUCTS)} products")
    return True
