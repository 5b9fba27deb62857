"""
Repository for orders and their line items.
"""
from typing import Iterable

from sqlalchemy import select, exists
from sqlalchemy.orm import selectinload

from kitchenpos.models.order import Order, OrderStatus
from kitchenpos.repositories.base import SqlAlchemyRepository


class OrderRepository(SqlAlchemyRepository[Order]):
    model = Order
    eager_options = (selectinload(Order.order_line_items),)

    def exists_by_order_table_ids_and_status_in(
        self,
        order_table_ids: Iterable[int],
        statuses: Iterable[OrderStatus],
    ) -> bool:
        """True if any order on the given tables is in one of ``statuses``."""
        order_table_ids = list(order_table_ids)
        if not order_table_ids:
            return False
        stmt = select(
            exists().where(
                Order.order_table_id.in_(order_table_ids),
                Order.order_status.in_([status.value for status in statuses]),
            )
        )
        return bool(self.db.execute(stmt).scalar())
