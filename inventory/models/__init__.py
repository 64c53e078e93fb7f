"""Models package - exports all SQLAlchemy models."""
from inventory.models.supplier import Supplier
from inventory.models.product import Product, DEFAULT_REORDER_LEVEL
from inventory.models.stock_transaction import StockTransaction, TxnType

__all__ = [
    'Supplier', 'Product', 'DEFAULT_REORDER_LEVEL',
    'StockTransaction', 'TxnType',
]
