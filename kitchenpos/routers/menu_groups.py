"""
Menu groups router.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from kitchenpos.db.session import get_db
from kitchenpos.schemas.menu import MenuGroupCreate, MenuGroupResponse
from kitchenpos.services.menu import MenuGroupService

router = APIRouter(prefix="/menu-groups", tags=["menu-groups"])


@router.post("", response_model=MenuGroupResponse, status_code=status.HTTP_201_CREATED)
def create_menu_group(
    request: MenuGroupCreate,
    response: Response,
    db: Session = Depends(get_db),
):
    menu_group = MenuGroupService(db).create(request.name)
    response.headers["Location"] = f"/api/menu-groups/{menu_group.id}"
    return MenuGroupResponse.model_validate(menu_group)


@router.get("", response_model=List[MenuGroupResponse])
def list_menu_groups(db: Session = Depends(get_db)):
    menu_groups = MenuGroupService(db).list()
    return [MenuGroupResponse.model_validate(g) for g in menu_groups]
