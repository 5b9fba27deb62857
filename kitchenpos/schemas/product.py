"""
Product Pydantic schemas for API request/response models.
"""
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ProductCreate(BaseModel):
    """Request model for registering a product."""
    name: str
    # Validated by the service so a missing price answers 400, not 422
    price: Optional[Decimal] = None


class ProductResponse(BaseModel):
    """Response model for a single product."""
    id: int
    name: str
    price: Decimal

    model_config = ConfigDict(from_attributes=True)
