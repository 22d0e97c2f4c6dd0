from sqlalchemy import Column, Integer, String, Text, Numeric, DateTime
from sqlalchemy.sql import func

from inventory_app.database import Base


class Product(Base):
    """
    Product model representing an inventory item.

    Attributes:
        id: Unique identifier, assigned by the database
        name: Product name
        description: Free-text description
        price: Unit price
        stock: Quantity on hand (not enforced to be non-negative)
        category: Category label
        created_at: Timestamp when the product was inserted
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), index=True)
    description = Column(Text)
    price = Column(Numeric(10, 2, asdecimal=False))
    stock = Column(Integer)
    category = Column(String(255))
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', stock={self.stock})>"
