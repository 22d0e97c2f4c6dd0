from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional


class ProductBase(BaseModel):
    """
    Base schema for Product with the writable attributes.

    No field is validated beyond its type; constraints, if any, are left to
    the database schema.
    """
    name: Optional[str] = Field(None, description="Product name")
    description: Optional[str] = Field(None, description="Product description")
    price: Optional[float] = Field(None, description="Unit price")
    stock: Optional[int] = Field(None, description="Quantity on hand")
    category: Optional[str] = Field(None, description="Product category")


class ProductCreate(ProductBase):
    """Schema for creating a new product."""
    pass


class ProductUpdate(ProductBase):
    """Schema for replacing a product. Omitted fields are stored as null."""
    pass


class ProductResponse(ProductBase):
    """Schema for product response including server-assigned fields."""
    id: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ProductStats(BaseModel):
    """Aggregate inventory figures. Both are null when there are no products."""
    total_inventory_value: Optional[float] = None
    total_stock: Optional[int] = None
