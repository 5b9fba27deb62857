"""
SQLAlchemy models for kitchenpos.
"""
# Catalog
from kitchenpos.models.product import Product
from kitchenpos.models.menu import MenuGroup, Menu, MenuProduct

# Tables
from kitchenpos.models.table import OrderTable, TableGroup

# Orders
from kitchenpos.models.order import Order, OrderLineItem, OrderStatus


__all__ = [
    # Catalog
    "Product",
    "MenuGroup",
    "Menu",
    "MenuProduct",
    # Tables
    "OrderTable",
    "TableGroup",
    # Orders
    "Order",
    "OrderLineItem",
    "OrderStatus",
]
