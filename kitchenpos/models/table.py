"""
Order tables and table groups.

OrderTable: a physical table with a guest count and an empty flag
TableGroup: two or more tables seated together as one party
"""
from sqlalchemy import Column, Integer, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from kitchenpos.db.base import Base


class TableGroup(Base):
    """
    Grouping of order tables.

    The group only tags its members; ungrouping clears the tag and the tables
    live on with their own state.
    """
    __tablename__ = "table_groups"

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_date = Column(DateTime, nullable=False)

    order_tables = relationship("OrderTable", back_populates="table_group", order_by="OrderTable.id")


class OrderTable(Base):
    """A physical table in the restaurant."""
    __tablename__ = "order_tables"

    id = Column(Integer, primary_key=True, autoincrement=True)
    table_group_id = Column(Integer, ForeignKey("table_groups.id"), nullable=True)
    number_of_guests = Column(Integer, nullable=False, default=0)
    empty = Column(Boolean, nullable=False, default=True)

    table_group = relationship("TableGroup", back_populates="order_tables")
