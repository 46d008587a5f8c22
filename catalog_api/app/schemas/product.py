"""
Pydantic models for catalogue products.
"""

from typing import ClassVar, Optional

from pydantic import BaseModel, Field

from .base import Entity


class Product(Entity):
    entity_name: ClassVar[str] = "Product"

    name: str = Field(..., examples=["Mechanical keyboard"])
    description: Optional[str] = Field(None, examples=["Tenkeyless, brown switches"])
    price: float = Field(..., examples=[89.9])
    category: str = Field(..., examples=["Peripherals"])

    def ensure_valid(self) -> None:
        self._require_text("name")
        self._require_text("category")
        if self.price is None or self.price <= 0:
            raise self._invalid("Price must be positive")


class ProductCreate(BaseModel):
    """Schema for creating a product."""

    name: str
    description: Optional[str] = None
    price: float
    category: str


class ProductUpdate(BaseModel):
    """Schema for updating a product.  Only provided fields are changed."""

    name: str | None = None
    description: str | None = None
    price: float | None = None
    category: str | None = None
