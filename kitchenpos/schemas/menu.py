"""
Menu and menu group Pydantic schemas for API request/response models.
"""
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from kitchenpos.core.limits import BIGINT_MAX


class MenuGroupCreate(BaseModel):
    """Request model for creating a menu group."""
    name: str


class MenuGroupResponse(BaseModel):
    """Response model for a single menu group."""
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class MenuProductRequest(BaseModel):
    """A product and its quantity inside a menu create request."""
    product_id: int
    quantity: int = Field(le=BIGINT_MAX)


class MenuProductResponse(BaseModel):
    seq: int
    menu_id: int
    product_id: int
    quantity: int

    model_config = ConfigDict(from_attributes=True)


class MenuCreate(BaseModel):
    """Request model for creating a menu."""
    name: str
    price: Optional[Decimal] = None
    menu_group_id: int
    menu_products: List[MenuProductRequest] = []


class MenuResponse(BaseModel):
    """Response model for a menu with its products."""
    id: int
    name: str
    price: Decimal
    menu_group_id: int
    menu_products: List[MenuProductResponse]

    model_config = ConfigDict(from_attributes=True)
