"""
Table groups router.
"""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from kitchenpos.db.session import get_db
from kitchenpos.schemas.table import TableGroupCreate, TableGroupResponse
from kitchenpos.services.table import TableGroupService

router = APIRouter(prefix="/table-groups", tags=["table-groups"])


@router.post("", response_model=TableGroupResponse, status_code=status.HTTP_201_CREATED)
def create_table_group(
    request: TableGroupCreate,
    response: Response,
    db: Session = Depends(get_db),
):
    """
    Group two or more empty, ungrouped tables.

    400 for fewer than two tables, 404 for an unknown table, 409 if a table
    is occupied or already grouped.
    """
    table_group = TableGroupService(db).create(request.order_table_ids)
    response.headers["Location"] = f"/api/table-groups/{table_group.id}"
    return TableGroupResponse.model_validate(table_group)


@router.get("/{table_group_id}", response_model=TableGroupResponse)
def get_table_group(table_group_id: int, db: Session = Depends(get_db)):
    table_group = TableGroupService(db).get(table_group_id)
    return TableGroupResponse.model_validate(table_group)


@router.delete("/{table_group_id}", status_code=status.HTTP_204_NO_CONTENT)
def ungroup(table_group_id: int, db: Session = Depends(get_db)):
    """
    Release the tables of a group.

    400 while any member table has an order cooking or being eaten, 404 if
    the group does not exist.
    """
    TableGroupService(db).ungroup(table_group_id)
