"""
Order manager.

Orders start COOKING and may be moved between COOKING and MEAL in either
direction; COMPLETION is terminal. Other services ask this one whether a
table is busy through ``has_active_order``.
"""
import logging
from datetime import datetime
from typing import Iterable, List, Sequence

from sqlalchemy.orm import Session

from kitchenpos.core.exceptions import (
    CompletedOrderError,
    InvalidOrderError,
    MenuNotFoundError,
    OrderNotFoundError,
    OrderTableNotFoundError,
)
from kitchenpos.models.order import Order, OrderLineItem, OrderStatus
from kitchenpos.repositories.catalog import MenuRepository
from kitchenpos.repositories.orders import OrderRepository
from kitchenpos.repositories.tables import OrderTableRepository
from kitchenpos.schemas.order import OrderLineItemRequest

logger = logging.getLogger(__name__)


class OrderService:
    """Places orders and moves them through their status lifecycle."""

    def __init__(self, db: Session):
        self.db = db
        self.orders = OrderRepository(db)
        self.menus = MenuRepository(db)
        self.tables = OrderTableRepository(db)

    def create(self, order_table_id: int, order_line_items: Sequence[OrderLineItemRequest]) -> Order:
        """
        Place an order from a table.

        Fails if there are no line items, a quantity is negative, a menu does
        not exist, or the table is missing or empty. The new order is COOKING,
        stamped with now.
        """
        if not order_line_items:
            raise InvalidOrderError("At least one line item required")

        negative = sorted(item.menu_id for item in order_line_items if item.quantity < 0)
        if negative:
            raise InvalidOrderError(f"Quantity cannot be negative for menus {negative}")

        menu_ids = {item.menu_id for item in order_line_items}
        found_ids = {menu.id for menu in self.menus.find_all_by_ids(menu_ids)}
        missing = sorted(menu_ids - found_ids)
        if missing:
            raise MenuNotFoundError(message=f"Referenced menu not found: {missing}")

        order_table = self.tables.find_by_id(order_table_id)
        if order_table is None:
            raise OrderTableNotFoundError(order_table_id)
        if order_table.empty:
            raise InvalidOrderError("Cannot order against an empty table")

        order = Order(
            order_table_id=order_table.id,
            order_status=OrderStatus.COOKING.value,
            ordered_time=datetime.now(),
            order_line_items=[
                OrderLineItem(menu_id=item.menu_id, quantity=item.quantity)
                for item in order_line_items
            ],
        )
        self.orders.save(order)
        self.db.commit()
        self.db.refresh(order)

        logger.info(f"Created order {order.id} for table {order.order_table_id}")
        return order

    def list(self) -> List[Order]:
        return self.orders.find_all()

    def change_status(self, order_id: int, order_status: OrderStatus) -> Order:
        """
        Overwrite an order's status.

        Only COMPLETION is guarded; any other move, backwards included, is
        accepted as requested.
        """
        order = self.orders.find_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)

        if order.order_status == OrderStatus.COMPLETION.value:
            raise CompletedOrderError()

        previous = order.order_status
        order.order_status = OrderStatus(order_status).value
        self.orders.save(order)
        self.db.commit()
        self.db.refresh(order)

        logger.info(f"Order {order.id} status {previous} -> {order.order_status}")
        return order

    def has_active_order(self, order_table_id: int) -> bool:
        """True if the table has an order that is COOKING or MEAL."""
        return self.has_active_orders([order_table_id])

    def has_active_orders(self, order_table_ids: Iterable[int]) -> bool:
        """True if any of the tables has an order that is COOKING or MEAL."""
        return self.orders.exists_by_order_table_ids_and_status_in(
            order_table_ids, OrderStatus.active()
        )
