"""
Orders router.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from kitchenpos.db.session import get_db
from kitchenpos.schemas.order import OrderCreate, OrderResponse, OrderStatusUpdate
from kitchenpos.services.order import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
def create_order(
    request: OrderCreate,
    response: Response,
    db: Session = Depends(get_db),
):
    """
    Place an order from a seated table.

    400 without line items or against an empty table, 404 when a menu or the
    table does not exist.
    """
    order = OrderService(db).create(request.order_table_id, request.order_line_items)
    response.headers["Location"] = f"/api/orders/{order.id}"
    return OrderResponse.model_validate(order)


@router.get("", response_model=List[OrderResponse])
def list_orders(db: Session = Depends(get_db)):
    orders = OrderService(db).list()
    return [OrderResponse.model_validate(o) for o in orders]


@router.put("/{order_id}/order-status", response_model=OrderResponse)
def change_order_status(
    order_id: int,
    request: OrderStatusUpdate,
    db: Session = Depends(get_db),
):
    """
    Change an order's status.

    404 for an unknown order, 409 once the order is COMPLETION.
    """
    order = OrderService(db).change_status(order_id, request.order_status)
    return OrderResponse.model_validate(order)
