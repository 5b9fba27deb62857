"""
Menu-related models: menu groups, menus, and the products each menu bundles.
"""
from sqlalchemy import Column, Integer, String, Numeric, BigInteger, ForeignKey
from sqlalchemy.orm import relationship

from kitchenpos.core.limits import PRICE_PRECISION, PRICE_SCALE
from kitchenpos.db.base import Base


class MenuGroup(Base):
    """Named grouping of menus (e.g. "Two chickens", "Set meals")."""
    __tablename__ = "menu_groups"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)

    menus = relationship("Menu", back_populates="menu_group")


class Menu(Base):
    """
    A priced bundle of products sold as one item.

    The price may undercut but never exceed the summed price of its products.
    """
    __tablename__ = "menus"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(PRICE_PRECISION, PRICE_SCALE), nullable=False)
    menu_group_id = Column(Integer, ForeignKey("menu_groups.id"), nullable=False)

    menu_group = relationship("MenuGroup", back_populates="menus")
    menu_products = relationship(
        "MenuProduct",
        back_populates="menu",
        cascade="all, delete-orphan",
        order_by="MenuProduct.seq",
    )


class MenuProduct(Base):
    """Line item of a menu: a product and how many of it the menu contains."""
    __tablename__ = "menu_products"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    menu_id = Column(Integer, ForeignKey("menus.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    quantity = Column(BigInteger, nullable=False)

    menu = relationship("Menu", back_populates="menu_products")
    product = relationship("Product")
