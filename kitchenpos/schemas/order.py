"""
Order Pydantic schemas for API request/response models.
"""
from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from kitchenpos.core.limits import BIGINT_MAX
from kitchenpos.models.order import OrderStatus


class OrderLineItemRequest(BaseModel):
    menu_id: int
    # Negative quantities are rejected by the service with 400
    quantity: int = Field(le=BIGINT_MAX)


class OrderLineItemResponse(BaseModel):
    seq: int
    order_id: int
    menu_id: int
    quantity: int

    model_config = ConfigDict(from_attributes=True)


class OrderCreate(BaseModel):
    """Request model for placing an order."""
    order_table_id: int
    order_line_items: List[OrderLineItemRequest] = []


class OrderStatusUpdate(BaseModel):
    """Request model for PUT /orders/{id}/order-status."""
    order_status: OrderStatus


class OrderResponse(BaseModel):
    """Response model for an order with its line items."""
    id: int
    order_table_id: int
    order_status: OrderStatus
    ordered_time: datetime
    order_line_items: List[OrderLineItemResponse]

    model_config = ConfigDict(from_attributes=True)
