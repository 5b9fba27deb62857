"""
Repositories for products, menu groups and menus.
"""
from sqlalchemy.orm import selectinload

from kitchenpos.models.menu import Menu, MenuGroup
from kitchenpos.models.product import Product
from kitchenpos.repositories.base import SqlAlchemyRepository


class ProductRepository(SqlAlchemyRepository[Product]):
    model = Product


class MenuGroupRepository(SqlAlchemyRepository[MenuGroup]):
    model = MenuGroup


class MenuRepository(SqlAlchemyRepository[Menu]):
    model = Menu
    eager_options = (selectinload(Menu.menu_products),)
