"""
Report service - read-only projections over products, suppliers and
stock transactions.
"""
from typing import List, Dict, Any, Optional
from sqlalchemy.orm import Session
from inventory.models import Product, Supplier, StockTransaction
from inventory.exceptions import BusinessLogicError


def get_low_stock(session: Session) -> List[Dict[str, Any]]:
    """
    Products at or below their reorder level, lowest stock first.

    Inner join on supplier: products without a supplier are not listed.
    """
    rows = (session.query(
                Product.product_id,
                Product.product_name,
                Product.stock_qty,
                Product.reorder_level,
                Supplier.supplier_name
            )
            .join(Supplier, Product.supplier_id == Supplier.supplier_id)
            .filter(Product.stock_qty <= Product.reorder_level)
            .order_by(Product.stock_qty.asc(), Product.product_id.asc())
            .all())

    return [
        {
            'product_id': row.product_id,
            'product_name': row.product_name,
            'stock_qty': row.stock_qty,
            'reorder_level': row.reorder_level,
            'supplier_name': row.supplier_name,
        }
        for row in rows
    ]


def get_supplier_stock(session: Session) -> List[Dict[str, Any]]:
    """Stock per supplier: supplier name ascending, then stock descending."""
    rows = (session.query(
                Supplier.supplier_name,
                Product.product_id,
                Product.product_name,
                Product.price,
                Product.stock_qty
            )
            .join(Product, Supplier.supplier_id == Product.supplier_id)
            .order_by(Supplier.supplier_name.asc(), Product.stock_qty.desc())
            .all())

    return [
        {
            'supplier_name': row.supplier_name,
            'product_id': row.product_id,
            'product_name': row.product_name,
            'price': row.price,
            'stock_qty': row.stock_qty,
        }
        for row in rows
    ]


def get_transaction_history(session: Session, limit: Optional[int] = None) -> List[Dict[str, Any]]:
    """
    Full transaction history, newest first.

    ``limit`` of None or 0 returns every row; a negative limit is rejected.
    """
    if limit is not None and limit < 0:
        raise BusinessLogicError('Limit cannot be negative', payload={'limit': limit})

    query = (session.query(
                StockTransaction.txn_id,
                Product.product_name,
                StockTransaction.txn_type,
                StockTransaction.quantity,
                StockTransaction.txn_date
            )
            .join(Product, StockTransaction.product_id == Product.product_id)
            .order_by(StockTransaction.txn_date.desc(), StockTransaction.txn_id.desc()))

    if limit:
        query = query.limit(limit)

    return [
        {
            'txn_id': row.txn_id,
            'product_name': row.product_name,
            'txn_type': row.txn_type.value,
            'quantity': row.quantity,
            'txn_date': row.txn_date,
        }
        for row in query.all()
    ]
