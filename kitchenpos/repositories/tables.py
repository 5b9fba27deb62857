"""
Repositories for order tables and table groups.
"""
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from kitchenpos.models.table import OrderTable, TableGroup
from kitchenpos.repositories.base import SqlAlchemyRepository


class OrderTableRepository(SqlAlchemyRepository[OrderTable]):
    model = OrderTable

    def find_all_by_table_group_id(self, table_group_id: int) -> List[OrderTable]:
        stmt = (
            select(OrderTable)
            .where(OrderTable.table_group_id == table_group_id)
            .order_by(OrderTable.id)
        )
        return list(self.db.execute(stmt).scalars().all())


class TableGroupRepository(SqlAlchemyRepository[TableGroup]):
    model = TableGroup
    eager_options = (selectinload(TableGroup.order_tables),)
