"""
Order table and table group Pydantic schemas.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from kitchenpos.core.limits import INTEGER_MAX, INTEGER_MIN


class OrderTableCreate(BaseModel):
    """Request model for registering a table."""
    number_of_guests: int = Field(default=0, ge=INTEGER_MIN, le=INTEGER_MAX)
    empty: bool = True


class OrderTableEmptyUpdate(BaseModel):
    """Request model for PUT /order-tables/{id}/empty."""
    empty: bool


class OrderTableGuestsUpdate(BaseModel):
    """Request model for PUT /order-tables/{id}/number-of-guests."""
    number_of_guests: int = Field(le=INTEGER_MAX)


class OrderTableResponse(BaseModel):
    id: int
    table_group_id: Optional[int] = None
    number_of_guests: int
    empty: bool

    model_config = ConfigDict(from_attributes=True)


class TableGroupCreate(BaseModel):
    """Request model for grouping tables."""
    order_table_ids: List[int] = []


class TableGroupResponse(BaseModel):
    """Response model for a table group and its current members."""
    id: int
    created_date: datetime
    order_tables: List[OrderTableResponse]

    model_config = ConfigDict(from_attributes=True)
