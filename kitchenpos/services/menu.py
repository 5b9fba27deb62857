"""
Menu catalog: menu groups and menus.

A menu bundles existing products and may be priced at or below what its
products would cost separately, never above.
"""
import logging
from decimal import Decimal
from typing import List, Optional, Sequence

from sqlalchemy.orm import Session

from kitchenpos.core.exceptions import InvalidMenuError, InvalidMenuGroupError
from kitchenpos.core.limits import fits_price_column
from kitchenpos.models.menu import Menu, MenuGroup, MenuProduct
from kitchenpos.repositories.catalog import MenuGroupRepository, MenuRepository, ProductRepository
from kitchenpos.schemas.menu import MenuProductRequest

logger = logging.getLogger(__name__)


class MenuGroupService:
    """Creates and lists menu groups."""

    def __init__(self, db: Session):
        self.db = db
        self.menu_groups = MenuGroupRepository(db)

    def create(self, name: str) -> MenuGroup:
        if not name or not name.strip():
            raise InvalidMenuGroupError("Menu group name is required")

        menu_group = self.menu_groups.save(MenuGroup(name=name))
        self.db.commit()
        self.db.refresh(menu_group)

        logger.info(f"Created menu group {menu_group.id} ({menu_group.name})")
        return menu_group

    def list(self) -> List[MenuGroup]:
        return self.menu_groups.find_all()


class MenuService:
    """
    Service for registering menus against the product catalog.

    Validation order: price, name, menu group, line items, products, price sum.
    Every failure is an InvalidMenuError so the API answers 400.
    """

    def __init__(self, db: Session):
        self.db = db
        self.menus = MenuRepository(db)
        self.menu_groups = MenuGroupRepository(db)
        self.products = ProductRepository(db)

    def create(
        self,
        name: str,
        price: Optional[Decimal],
        menu_group_id: int,
        menu_products: Sequence[MenuProductRequest],
    ) -> Menu:
        """
        Register a menu.

        Args:
            name: Display name, not blank
            price: Selling price, must be >= 0
            menu_group_id: Existing menu group
            menu_products: Product ids and quantities, at least one

        Returns:
            The persisted menu with its menu products tagged with its id
        """
        if price is None or price < 0:
            raise InvalidMenuError("Menu price must be zero or greater")
        if not fits_price_column(price):
            raise InvalidMenuError("Menu price must have at most 2 decimal places and 17 integer digits")

        if not name or not name.strip():
            raise InvalidMenuError("Menu name is required")

        if not self.menu_groups.exists_by_id(menu_group_id):
            raise InvalidMenuError(f"Menu group {menu_group_id} not found")

        if not menu_products:
            raise InvalidMenuError("A menu needs at least one product")

        products_total = self._sum_product_prices(menu_products)
        if price > products_total:
            raise InvalidMenuError(
                f"Menu price {price} exceeds the sum of its products ({products_total})"
            )

        menu = Menu(
            name=name,
            price=price,
            menu_group_id=menu_group_id,
            menu_products=[
                MenuProduct(product_id=item.product_id, quantity=item.quantity)
                for item in menu_products
            ],
        )
        self.menus.save(menu)
        self.db.commit()
        self.db.refresh(menu)

        logger.info(f"Created menu {menu.id} ({menu.name}) with {len(menu.menu_products)} products")
        return menu

    def list(self) -> List[Menu]:
        return self.menus.find_all()

    def _sum_product_prices(self, menu_products: Sequence[MenuProductRequest]) -> Decimal:
        """Sum of price x quantity over the line items; unknown products are rejected."""
        product_ids = {item.product_id for item in menu_products}
        prices = {product.id: product.price for product in self.products.find_all_by_ids(product_ids)}

        total = Decimal(0)
        for item in menu_products:
            if item.product_id not in prices:
                raise InvalidMenuError(f"Product {item.product_id} not found")
            if item.quantity < 0:
                raise InvalidMenuError(f"Quantity of product {item.product_id} cannot be negative")
            total += prices[item.product_id] * item.quantity
        return total
