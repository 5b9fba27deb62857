"""
Seed the demo catalog: chicken products, menu groups, one menu per product
and eight empty tables.

Run with ``python -m kitchenpos.scripts.seed_demo``. Does nothing if products
already exist.
"""
from decimal import Decimal

from sqlalchemy.orm import Session

from kitchenpos.db.session import session_scope
from kitchenpos.repositories.catalog import ProductRepository
from kitchenpos.schemas.menu import MenuProductRequest
from kitchenpos.services.menu import MenuGroupService, MenuService
from kitchenpos.services.product import ProductService
from kitchenpos.services.table import OrderTableService

PRODUCTS = [
    ("Fried Chicken", Decimal("16000")),
    ("Seasoned Chicken", Decimal("16000")),
    ("Half and Half Chicken", Decimal("16000")),
    ("Roast Chicken", Decimal("16000")),
    ("Soy Sauce Chicken", Decimal("17000")),
    ("Boneless Chicken", Decimal("17000")),
]

MENU_GROUPS = ["Two Chickens", "One Chicken", "Two Boneless", "New"]

TABLE_COUNT = 8


def seed(db: Session) -> bool:
    """Insert the demo data. Returns False if the catalog was not empty."""
    if ProductRepository(db).find_all():
        print("Products already present, skipping seed.")
        return False

    product_service = ProductService(db)
    products = [product_service.create(name, price) for name, price in PRODUCTS]

    menu_group_service = MenuGroupService(db)
    menu_groups = {name: menu_group_service.create(name) for name in MENU_GROUPS}

    menu_service = MenuService(db)
    for product in products:
        menu_service.create(
            name=product.name,
            price=product.price,
            menu_group_id=menu_groups["One Chicken"].id,
            menu_products=[MenuProductRequest(product_id=product.id, quantity=1)],
        )

    table_service = OrderTableService(db)
    for _ in range(TABLE_COUNT):
        table_service.create(number_of_guests=0, empty=True)

    print(f"Seeded {len(products)} products, {len(menu_groups)} menu groups, {TABLE_COUNT} tables.")
    return True


def main():
    with session_scope() as db:
        seed(db)


if __name__ == "__main__":
    main()
