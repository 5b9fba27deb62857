"""
Generic SQLAlchemy repository.

Repositories flush but never commit; the calling service owns the
transaction.
"""
from typing import Generic, Iterable, List, Optional, Type, TypeVar

from sqlalchemy import select, exists
from sqlalchemy.orm import Session

ModelT = TypeVar("ModelT")


class SqlAlchemyRepository(Generic[ModelT]):
    """find/save/exists operations over one mapped entity with an ``id`` key."""

    model: Type[ModelT]
    # Loader options applied to find_all / find_all_by_ids
    eager_options: tuple = ()

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        return self.db.get(self.model, entity_id)

    def find_all(self) -> List[ModelT]:
        stmt = select(self.model).options(*self.eager_options).order_by(self.model.id)
        return list(self.db.execute(stmt).scalars().all())

    def find_all_by_ids(self, ids: Iterable[int]) -> List[ModelT]:
        ids = list(ids)
        if not ids:
            return []
        stmt = (
            select(self.model)
            .options(*self.eager_options)
            .where(self.model.id.in_(ids))
            .order_by(self.model.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    def exists_by_id(self, entity_id: int) -> bool:
        return bool(self.db.execute(select(exists().where(self.model.id == entity_id))).scalar())

    def save(self, entity: ModelT) -> ModelT:
        self.db.add(entity)
        self.db.flush()
        return entity
