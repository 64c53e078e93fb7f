"""Catalog service: suppliers and products."""
import decimal
import logging
from decimal import Decimal
from typing import List
from sqlalchemy.orm import Session
from inventory.models import Supplier, Product, DEFAULT_REORDER_LEVEL
from inventory.exceptions import (
    BusinessLogicError, NotFoundError, SupplierInUseError
)

logger = logging.getLogger(__name__)


def _clean(value):
    """Strip strings; blank becomes None."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


# =====================================================
# SUPPLIERS
# =====================================================

def create_supplier(payload: dict, session: Session) -> Supplier:
    """
    Create a supplier.

    Args:
        payload: Dictionary with:
            - supplier_name: str (required)
            - phone: str | None
            - city: str | None
        session: SQLAlchemy session
    """
    name = _clean(payload.get('supplier_name'))
    if not name:
        raise BusinessLogicError('Supplier name is required')

    supplier = Supplier(
        supplier_name=name,
        phone=_clean(payload.get('phone')),
        city=_clean(payload.get('city'))
    )

    try:
        session.add(supplier)
        session.commit()
    except Exception:
        session.rollback()
        raise

    logger.info(f"Supplier created: {supplier.supplier_id} ({supplier.supplier_name})")
    return supplier


def get_supplier(supplier_id: int, session: Session) -> Supplier:
    supplier = session.query(Supplier).filter(Supplier.supplier_id == supplier_id).first()
    if not supplier:
        raise NotFoundError('Supplier ID not found!', payload={'supplier_id': supplier_id})
    return supplier


def list_suppliers(session: Session) -> List[Supplier]:
    return session.query(Supplier).order_by(Supplier.supplier_name).all()


def delete_supplier(supplier_id: int, session: Session) -> None:
    """
    Delete a supplier that no product references.

    Referenced suppliers are kept; products are never detached or cascaded.
    """
    supplier = get_supplier(supplier_id, session)

    product_count = session.query(Product).filter(
        Product.supplier_id == supplier_id
    ).count()
    if product_count:
        raise SupplierInUseError(supplier.supplier_name, product_count)

    try:
        session.delete(supplier)
        session.commit()
    except Exception:
        session.rollback()
        raise

    logger.info(f"Supplier deleted: {supplier_id}")


# =====================================================
# PRODUCTS
# =====================================================

def create_product(payload: dict, session: Session) -> Product:
    """
    Create a product.

    Opening stock is recorded as-is (no ledger entry); it still goes
    through the stock guard.

    Args:
        payload: Dictionary with:
            - product_name: str (required)
            - price: number > 0 (required)
            - supplier_id: int | None
            - stock_qty: int >= 0 (default 0)
            - reorder_level: int >= 0 (default 10)
        session: SQLAlchemy session
    """
    name = _clean(payload.get('product_name'))
    if not name:
        raise BusinessLogicError('Product name is required')

    try:
        price = Decimal(str(payload.get('price')))
    except (TypeError, ValueError, decimal.InvalidOperation):
        raise BusinessLogicError('Invalid price')
    if not price.is_finite() or price <= 0:
        raise BusinessLogicError('Price must be greater than zero')
    price = price.quantize(Decimal('0.01'))

    stock_qty = _as_int(payload.get('stock_qty'), 0, 'stock_qty')
    reorder_level = _as_int(payload.get('reorder_level'), DEFAULT_REORDER_LEVEL, 'reorder_level')
    if reorder_level < 0:
        raise BusinessLogicError('Reorder level cannot be negative')

    supplier_id = payload.get('supplier_id')
    if supplier_id is not None:
        supplier_id = get_supplier(_as_int(supplier_id, None, 'supplier_id'), session).supplier_id

    try:
        product = Product(
            product_name=name,
            supplier_id=supplier_id,
            price=price,
            stock_qty=stock_qty,
            reorder_level=reorder_level
        )
        session.add(product)
        session.commit()
    except Exception:
        session.rollback()
        raise

    logger.info(f"Product created: {product.product_id} ({product.product_name}), opening stock {product.stock_qty}")
    return product


def get_product(product_id: int, session: Session) -> Product:
    product = session.query(Product).filter(Product.product_id == product_id).first()
    if not product:
        raise NotFoundError('Product ID not found!', payload={'product_id': product_id})
    return product


def list_products(session: Session) -> List[Product]:
    return session.query(Product).order_by(Product.product_id).all()


def _as_int(value, default, field):
    if value is None or value == '':
        return default
    if isinstance(value, bool):
        raise BusinessLogicError(f'Invalid {field}')
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        raise BusinessLogicError(f'Invalid {field}')
    # int() truncates 2.9 to 2; only whole numbers are accepted
    if isinstance(value, (float, Decimal)) and number != value:
        raise BusinessLogicError(f'Invalid {field}')
    return number
