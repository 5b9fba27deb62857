"""
Menus router.

Any validation failure (price, menu group, products, price sum) answers 400.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from kitchenpos.db.session import get_db
from kitchenpos.schemas.menu import MenuCreate, MenuResponse
from kitchenpos.services.menu import MenuService

router = APIRouter(prefix="/menus", tags=["menus"])


@router.post("", response_model=MenuResponse, status_code=status.HTTP_201_CREATED)
def create_menu(
    request: MenuCreate,
    response: Response,
    db: Session = Depends(get_db),
):
    """
    Register a menu made of existing products.

    The menu price may not exceed the summed price x quantity of its products.
    """
    menu = MenuService(db).create(
        name=request.name,
        price=request.price,
        menu_group_id=request.menu_group_id,
        menu_products=request.menu_products,
    )
    response.headers["Location"] = f"/api/menus/{menu.id}"
    return MenuResponse.model_validate(menu)


@router.get("", response_model=List[MenuResponse])
def list_menus(db: Session = Depends(get_db)):
    """List all menus with their products."""
    menus = MenuService(db).list()
    return [MenuResponse.model_validate(m) for m in menus]
