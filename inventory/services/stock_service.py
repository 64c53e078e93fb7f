"""
Stock service with transactional logic.
Handles stock queries and the two stock movements (IN / OUT).

Each movement is one unit of work on the given session:
lock product row -> validate -> guarded write -> ledger append -> commit.
Any failure rolls the session back, so stock_qty and the ledger never diverge.
"""
import logging
from sqlalchemy.orm import Session
from inventory.models import Product, StockTransaction, TxnType
from inventory.exceptions import (
    InventoryError, NotFoundError, InvalidQuantityError, InsufficientStockError
)

logger = logging.getLogger(__name__)


def get_stock(product_id: int, session: Session) -> int:
    """Return the current stock quantity of a product."""
    stock_qty = session.query(Product.stock_qty).filter(
        Product.product_id == product_id
    ).scalar()

    if stock_qty is None:
        raise NotFoundError('Product ID not found!', payload={'product_id': product_id})

    return stock_qty


def receive_stock(product_id: int, quantity: int, session: Session) -> int:
    """
    Stock IN (purchase / add stock).

    Args:
        product_id: Product receiving the units
        quantity: Units received, must be > 0
        session: SQLAlchemy session

    Returns:
        New stock level

    Raises:
        InvalidQuantityError: quantity <= 0 or not an integer
        NotFoundError: unknown product
    """
    _validate_quantity(quantity)

    try:
        product = _lock_product(session, product_id)
        product.stock_qty = product.stock_qty + quantity
        _append_transaction(session, product, TxnType.IN, quantity)
        session.commit()

    except InventoryError:
        session.rollback()
        raise
    except Exception:
        session.rollback()
        logger.exception(f"Stock IN failed for product {product_id}")
        raise

    new_stock = product.stock_qty
    logger.info(f"Stock IN successful! Added {quantity} units. New stock: {new_stock} (product {product_id})")
    return new_stock


def issue_stock(product_id: int, quantity: int, session: Session) -> int:
    """
    Stock OUT (sale / remove stock).

    The availability check runs against the locked row; when it fails
    nothing is written.

    Raises:
        InvalidQuantityError: quantity <= 0 or not an integer
        NotFoundError: unknown product
        InsufficientStockError: quantity exceeds current stock
    """
    _validate_quantity(quantity)

    try:
        product = _lock_product(session, product_id)

        current_stock = product.stock_qty
        if current_stock < quantity:
            raise InsufficientStockError(product_id, quantity, current_stock)

        product.stock_qty = current_stock - quantity
        _append_transaction(session, product, TxnType.OUT, quantity)
        session.commit()

    except InventoryError:
        session.rollback()
        raise
    except Exception:
        session.rollback()
        logger.exception(f"Stock OUT failed for product {product_id}")
        raise

    remaining = product.stock_qty
    logger.info(f"Stock OUT successful! Removed {quantity} units. Remaining stock: {remaining} (product {product_id})")
    return remaining


# =====================================================
# PRIVATE HELPERS
# =====================================================

def _validate_quantity(quantity):
    """Movement quantities are strictly positive integers; direction lives in txn_type."""
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise InvalidQuantityError(quantity)


def _lock_product(session: Session, product_id: int) -> Product:
    """Fetch the product row FOR UPDATE (no-op lock on SQLite)."""
    product = session.query(Product).filter(
        Product.product_id == product_id
    ).with_for_update().first()

    if not product:
        raise NotFoundError('Product ID not found!', payload={'product_id': product_id})

    return product


def _append_transaction(session: Session, product: Product, txn_type: TxnType, quantity: int):
    """Append one ledger entry for a stock movement; txn_date comes from the store clock."""
    session.add(StockTransaction(
        product_id=product.product_id,
        txn_type=txn_type,
        quantity=quantity
    ))
