"""Supplier model."""
from sqlalchemy import Column, Integer, String, Sequence
from sqlalchemy.orm import relationship
from inventory.database import Base


class Supplier(Base):
    """Supplier. Immutable once created."""

    __tablename__ = 'suppliers'

    supplier_id = Column(Integer, Sequence('seq_supplier', start=1), primary_key=True)
    supplier_name = Column(String(100), nullable=False)
    phone = Column(String(15), nullable=True)
    city = Column(String(50), nullable=True)

    # Relationships
    products = relationship('Product', back_populates='supplier')

    def __repr__(self):
        return f"<Supplier(supplier_id={self.supplier_id}, supplier_name='{self.supplier_name}')>"

    def to_dict(self):
        return {
            'supplier_id': self.supplier_id,
            'supplier_name': self.supplier_name,
            'phone': self.phone,
            'city': self.city,
        }
