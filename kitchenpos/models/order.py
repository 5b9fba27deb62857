"""
Orders and their line items.
"""
import enum

from sqlalchemy import Column, Integer, String, BigInteger, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship

from kitchenpos.db.base import Base


class OrderStatus(str, enum.Enum):
    """Lifecycle of an order. COMPLETION is terminal."""
    COOKING = "COOKING"
    MEAL = "MEAL"
    COMPLETION = "COMPLETION"

    @classmethod
    def active(cls) -> list["OrderStatus"]:
        """Statuses that keep a table busy."""
        return [cls.COOKING, cls.MEAL]


class Order(Base):
    """An order placed from an occupied table."""
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_table_id = Column(Integer, ForeignKey("order_tables.id"), nullable=False)
    order_status = Column(String(255), nullable=False)
    ordered_time = Column(DateTime, nullable=False)

    order_line_items = relationship(
        "OrderLineItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderLineItem.seq",
    )

    __table_args__ = (
        # Active-order lookups filter on table and status
        Index("idx_orders_table_status", "order_table_id", "order_status"),
    )


class OrderLineItem(Base):
    """A menu and quantity requested in an order."""
    __tablename__ = "order_line_items"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    menu_id = Column(Integer, ForeignKey("menus.id"), nullable=False)
    quantity = Column(BigInteger, nullable=False)

    order = relationship("Order", back_populates="order_line_items")
