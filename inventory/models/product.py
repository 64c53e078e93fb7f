"""Product model."""
from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, Sequence, CheckConstraint
from sqlalchemy.orm import relationship, validates
from sqlalchemy.sql.expression import ClauseElement
from inventory.database import Base, STOCK_QTY_CHECK
from inventory.exceptions import NegativeStockRejectedError

DEFAULT_REORDER_LEVEL = 10


class Product(Base):
    """
    Product with its cached on-hand quantity.

    ``stock_qty`` is maintained incrementally by the stock service; the
    ``stock_transactions`` ledger is the audit trail behind it.

    Every ORM write of ``stock_qty`` passes through ``_guard_stock_qty``,
    constructor included. Writes that skip the ORM hit the table CHECK.
    """

    __tablename__ = 'products'

    product_id = Column(Integer, Sequence('seq_product', start=1001), primary_key=True)
    product_name = Column(String(100), nullable=False)
    supplier_id = Column(Integer, ForeignKey('suppliers.supplier_id'), nullable=True)
    price = Column(Numeric(12, 2), nullable=False)
    stock_qty = Column(Integer, nullable=False, default=0, server_default='0')
    reorder_level = Column(Integer, nullable=False, default=DEFAULT_REORDER_LEVEL,
                           server_default=str(DEFAULT_REORDER_LEVEL))

    # Relationships
    supplier = relationship('Supplier', back_populates='products')
    transactions = relationship('StockTransaction', back_populates='product',
                                order_by='StockTransaction.txn_id')

    __table_args__ = (
        CheckConstraint('price > 0', name='products_price_check'),
        CheckConstraint('stock_qty >= 0', name=STOCK_QTY_CHECK),
    )

    def __init__(self, **kwargs):
        kwargs.setdefault('stock_qty', 0)
        kwargs.setdefault('reorder_level', DEFAULT_REORDER_LEVEL)
        super().__init__(**kwargs)

    def __repr__(self):
        return f"<Product(product_id={self.product_id}, product_name='{self.product_name}', stock_qty={self.stock_qty})>"

    @validates('stock_qty')
    def _guard_stock_qty(self, key, value):
        if isinstance(value, ClauseElement):
            # SQL expression (e.g. stock_qty - 5): evaluated at flush, checked by the CHECK
            return value
        if value is not None and value < 0:
            raise NegativeStockRejectedError(value)
        return value

    @property
    def is_low_stock(self):
        """True when on-hand quantity is at or below the reorder level."""
        return self.stock_qty <= self.reorder_level

    def to_dict(self):
        return {
            'product_id': self.product_id,
            'product_name': self.product_name,
            'supplier_id': self.supplier_id,
            'price': str(self.price) if self.price is not None else None,
            'stock_qty': self.stock_qty,
            'reorder_level': self.reorder_level,
            'low_stock': self.is_low_stock,
        }
