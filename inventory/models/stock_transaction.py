"""Stock Transaction model."""
from sqlalchemy import Column, Integer, DateTime, Enum, ForeignKey, Sequence, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from inventory.database import Base
import enum


class TxnType(enum.Enum):
    """Stock transaction direction."""
    IN = "IN"
    OUT = "OUT"


class StockTransaction(Base):
    """Stock Transaction (append-only ledger entry)."""

    __tablename__ = 'stock_transactions'

    txn_id = Column(Integer, Sequence('seq_txn', start=1), primary_key=True)
    product_id = Column(Integer, ForeignKey('products.product_id'), nullable=False)
    txn_type = Column(Enum(TxnType, name='txn_type'), nullable=False)
    quantity = Column(Integer, nullable=False)
    txn_date = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    product = relationship('Product', back_populates='transactions')

    __table_args__ = (
        CheckConstraint("txn_type IN ('IN', 'OUT')", name='stock_transactions_type_check'),
        CheckConstraint('quantity > 0', name='stock_transactions_quantity_check'),
    )

    def __repr__(self):
        return f"<StockTransaction(txn_id={self.txn_id}, type={self.txn_type.value}, quantity={self.quantity})>"

    @property
    def signed_quantity(self):
        """Quantity with the direction applied (OUT is negative)."""
        return self.quantity if self.txn_type == TxnType.IN else -self.quantity

    def to_dict(self):
        return {
            'txn_id': self.txn_id,
            'product_id': self.product_id,
            'txn_type': self.txn_type.value,
            'quantity': self.quantity,
            'txn_date': self.txn_date.isoformat() if self.txn_date else None,
        }
