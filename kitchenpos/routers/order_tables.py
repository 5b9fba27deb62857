"""
Order tables router.

Provides endpoints for:
- Registering and listing tables
- Seating/clearing a table (empty flag)
- Updating the guest count of a seated table
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from kitchenpos.db.session import get_db
from kitchenpos.schemas.table import (
    OrderTableCreate,
    OrderTableEmptyUpdate,
    OrderTableGuestsUpdate,
    OrderTableResponse,
)
from kitchenpos.services.table import OrderTableService

router = APIRouter(prefix="/order-tables", tags=["order-tables"])


@router.post("", response_model=OrderTableResponse, status_code=status.HTTP_201_CREATED)
def create_order_table(
    request: OrderTableCreate,
    response: Response,
    db: Session = Depends(get_db),
):
    order_table = OrderTableService(db).create(request.number_of_guests, request.empty)
    response.headers["Location"] = f"/api/order-tables/{order_table.id}"
    return OrderTableResponse.model_validate(order_table)


@router.get("", response_model=List[OrderTableResponse])
def list_order_tables(db: Session = Depends(get_db)):
    order_tables = OrderTableService(db).list()
    return [OrderTableResponse.model_validate(t) for t in order_tables]


@router.put("/{order_table_id}/empty", response_model=OrderTableResponse)
def change_empty(
    order_table_id: int,
    request: OrderTableEmptyUpdate,
    db: Session = Depends(get_db),
):
    """
    Seat or clear a table.

    404 if the table does not exist, 409 if it is grouped or has an order
    still cooking or being eaten.
    """
    order_table = OrderTableService(db).change_empty(order_table_id, request.empty)
    return OrderTableResponse.model_validate(order_table)


@router.put("/{order_table_id}/number-of-guests", response_model=OrderTableResponse)
def change_number_of_guests(
    order_table_id: int,
    request: OrderTableGuestsUpdate,
    db: Session = Depends(get_db),
):
    """
    Update the guest count.

    400 for a negative count, 404 if the table does not exist, 409 if the
    table is empty.
    """
    order_table = OrderTableService(db).change_number_of_guests(
        order_table_id, request.number_of_guests
    )
    return OrderTableResponse.model_validate(order_table)
