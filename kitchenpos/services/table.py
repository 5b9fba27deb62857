"""
Order table registry and table grouping.

Both services need to know whether a table is busy; they take any object
with ``has_active_order`` / ``has_active_orders`` and default to the
OrderService on the same session.
"""
import logging
from datetime import datetime
from typing import Iterable, List, Optional, Protocol, Sequence

from sqlalchemy.orm import Session

from kitchenpos.core.exceptions import (
    EmptyTableError,
    InvalidNumberOfGuestsError,
    InvalidTableGroupError,
    OrderTableNotFoundError,
    TableGroupedError,
    TableGroupInUseError,
    TableGroupNotFoundError,
    TableInUseError,
    TableNotGroupableError,
)
from kitchenpos.models.table import OrderTable, TableGroup
from kitchenpos.repositories.tables import OrderTableRepository, TableGroupRepository
from kitchenpos.services.order import OrderService

logger = logging.getLogger(__name__)

MIN_GROUP_SIZE = 2


class ActiveOrderChecker(Protocol):
    def has_active_order(self, order_table_id: int) -> bool: ...

    def has_active_orders(self, order_table_ids: Iterable[int]) -> bool: ...


class OrderTableService:
    """Registers tables and updates their empty flag and guest count."""

    def __init__(self, db: Session, active_orders: Optional[ActiveOrderChecker] = None):
        self.db = db
        self.tables = OrderTableRepository(db)
        self.active_orders = active_orders or OrderService(db)

    def create(self, number_of_guests: int, empty: bool) -> OrderTable:
        order_table = self.tables.save(
            OrderTable(number_of_guests=number_of_guests, empty=empty, table_group_id=None)
        )
        self.db.commit()
        self.db.refresh(order_table)

        logger.info(f"Created table {order_table.id} (guests={order_table.number_of_guests}, empty={order_table.empty})")
        return order_table

    def list(self) -> List[OrderTable]:
        return self.tables.find_all()

    def change_empty(self, order_table_id: int, empty: bool) -> OrderTable:
        """
        Seat or clear a table.

        Grouped tables and tables with a COOKING or MEAL order are locked.
        """
        order_table = self._get(order_table_id)

        if order_table.table_group_id is not None:
            raise TableGroupedError()

        if self.active_orders.has_active_order(order_table.id):
            raise TableInUseError()

        order_table.empty = empty
        self.tables.save(order_table)
        self.db.commit()
        self.db.refresh(order_table)

        logger.info(f"Table {order_table.id} empty={order_table.empty}")
        return order_table

    def change_number_of_guests(self, order_table_id: int, number_of_guests: int) -> OrderTable:
        if number_of_guests < 0:
            raise InvalidNumberOfGuestsError("Number of guests cannot be negative")

        order_table = self._get(order_table_id)

        if order_table.empty:
            raise EmptyTableError()

        order_table.number_of_guests = number_of_guests
        self.tables.save(order_table)
        self.db.commit()
        self.db.refresh(order_table)

        logger.info(f"Table {order_table.id} now seats {order_table.number_of_guests} guests")
        return order_table

    def _get(self, order_table_id: int) -> OrderTable:
        order_table = self.tables.find_by_id(order_table_id)
        if order_table is None:
            raise OrderTableNotFoundError(order_table_id)
        return order_table


class TableGroupService:
    """
    Seats several tables as one party.

    All checks run before any table is touched, so a rejected request leaves
    every table as it was.
    """

    def __init__(self, db: Session, active_orders: Optional[ActiveOrderChecker] = None):
        self.db = db
        self.tables = OrderTableRepository(db)
        self.table_groups = TableGroupRepository(db)
        self.active_orders = active_orders or OrderService(db)

    def create(self, order_table_ids: Sequence[int]) -> TableGroup:
        """
        Group tables.

        Args:
            order_table_ids: Two or more distinct ids of existing tables that
                are empty and not grouped yet

        Returns:
            The new group; every member is tagged with it and no longer empty
        """
        order_table_ids = list(order_table_ids or [])
        if len(order_table_ids) < MIN_GROUP_SIZE:
            raise InvalidTableGroupError(f"At least {MIN_GROUP_SIZE} tables required")
        if len(set(order_table_ids)) != len(order_table_ids):
            raise InvalidTableGroupError("Each table may appear only once in a group")

        order_tables = self.tables.find_all_by_ids(order_table_ids)
        missing = sorted(set(order_table_ids) - {table.id for table in order_tables})
        if missing:
            raise OrderTableNotFoundError(message=f"Table not found: {missing}")

        for order_table in order_tables:
            if not order_table.empty or order_table.table_group_id is not None:
                raise TableNotGroupableError(
                    f"Cannot group non-empty or already-grouped tables (table {order_table.id})"
                )

        table_group = TableGroup(created_date=datetime.now())
        for order_table in order_tables:
            order_table.table_group = table_group
            order_table.empty = False

        self.table_groups.save(table_group)
        self.db.commit()
        self.db.refresh(table_group)

        logger.info(f"Grouped tables {[table.id for table in order_tables]} as group {table_group.id}")
        return table_group

    def get(self, table_group_id: int) -> TableGroup:
        table_group = self.table_groups.find_by_id(table_group_id)
        if table_group is None:
            raise TableGroupNotFoundError(table_group_id)
        return table_group

    def ungroup(self, table_group_id: int) -> None:
        """
        Release the tables of a group.

        Refused while any member has a COOKING or MEAL order. Members keep
        their empty flag and guest count.
        """
        self.get(table_group_id)
        order_tables = self.tables.find_all_by_table_group_id(table_group_id)

        if self.active_orders.has_active_orders([table.id for table in order_tables]):
            raise TableGroupInUseError()

        for order_table in order_tables:
            order_table.table_group = None
        self.db.commit()

        logger.info(f"Ungrouped table group {table_group_id}")
