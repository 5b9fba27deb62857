"""
Per-entity persistence over a SQLAlchemy session.
"""
from kitchenpos.repositories.catalog import MenuGroupRepository, MenuRepository, ProductRepository
from kitchenpos.repositories.orders import OrderRepository
from kitchenpos.repositories.tables import OrderTableRepository, TableGroupRepository

__all__ = [
    "ProductRepository",
    "MenuGroupRepository",
    "MenuRepository",
    "OrderTableRepository",
    "TableGroupRepository",
    "OrderRepository",
]
