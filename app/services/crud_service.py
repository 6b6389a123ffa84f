"""
Generic table access used by every public page and admin manager.

A ResourceSpec describes one table (model, label, orderings, parent joins and
the admin form schemas); CrudService runs list/get/create/update/delete/count
against it. Failures are logged and surfaced as a generic HTTP error that does
not distinguish network, constraint or permission problems.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Type
import asyncio
import logging

from fastapi import HTTPException
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

logger = logging.getLogger(__name__)


@dataclass
class ResourceSpec:
    model: Type[Any]
    label: str
    path: str
    public_order: Sequence[Any] = ()
    admin_order: Sequence[Any] = ()
    joins: Sequence[Any] = ()
    create_schema: Optional[Type[BaseModel]] = None
    update_schema: Optional[Type[BaseModel]] = None
    response_schema: Optional[Type[BaseModel]] = None
    plural: str = field(default="")

    def __post_init__(self):
        if not self.plural:
            self.plural = self.path.replace("-", " ")


class CrudService:
    def __init__(self, db: Session, resource: ResourceSpec):
        self.db = db
        self.resource = resource
        self.model = resource.model

    def _query(self):
        query = self.db.query(self.model)
        for relation in self.resource.joins:
            query = query.options(joinedload(relation))
        return query

    def _fail(self, verb: str, noun: str, exc: Exception):
        logger.error(f"Error trying to {verb} {noun}: {type(exc).__name__}: {exc}")
        raise HTTPException(status_code=500, detail=f"Could not {verb} {noun}")

    def list(
        self,
        *criteria,
        order_by: Optional[Sequence[Any]] = None,
        limit: Optional[int] = None,
    ) -> List[Any]:
        ordering = self.resource.public_order if order_by is None else order_by
        try:
            query = self._query()
            if criteria:
                query = query.filter(*criteria)
            if ordering:
                query = query.order_by(*ordering)
            if limit is not None:
                query = query.limit(limit)
            return query.all()
        except SQLAlchemyError as e:
            self._fail("fetch", self.resource.plural, e)

    def get(self, item_id: str, *criteria) -> Optional[Any]:
        try:
            return self._query().filter(self.model.id == item_id, *criteria).first()
        except SQLAlchemyError as e:
            self._fail("fetch", self.resource.label.lower(), e)

    def get_or_404(self, item_id: str, *criteria) -> Any:
        item = self.get(item_id, *criteria)
        if not item:
            raise HTTPException(status_code=404, detail=f"{self.resource.label} not found")
        return item

    def count(self) -> int:
        try:
            return self.db.query(self.model).count()
        except SQLAlchemyError as e:
            self._fail("count", self.resource.plural, e)

    def create(self, data: Dict[str, Any]) -> Any:
        item = self.model(**data)
        try:
            self.db.add(item)
            self.db.commit()
            self.db.refresh(item)
        except SQLAlchemyError as e:
            self.db.rollback()
            self._fail("save", self.resource.label.lower(), e)
        logger.info(f"Created {self.resource.label.lower()} {item.id}")
        return item

    def update(self, item_id: str, data: Dict[str, Any]) -> Any:
        item = self.get_or_404(item_id)
        for key, value in data.items():
            setattr(item, key, value)
        try:
            self.db.commit()
            self.db.refresh(item)
        except SQLAlchemyError as e:
            self.db.rollback()
            self._fail("save", self.resource.label.lower(), e)
        return item

    def delete(self, item_id: str) -> None:
        """Delete one row by id. Rows referencing it are left untouched."""
        item = self.get_or_404(item_id)
        try:
            self.db.delete(item)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            self._fail("delete", self.resource.label.lower(), e)
        logger.info(f"Deleted {self.resource.label.lower()} {item_id}")


async def gather_queries(bind, *queries: Callable[[Session], Any]) -> List[Any]:
    """
    Run independent read queries concurrently, each on its own session bound
    to `bind`, and wait for all of them.
    """
    def run(query):
        with Session(bind=bind) as session:
            return query(session)

    return list(await asyncio.gather(*(run_in_threadpool(run, query) for query in queries)))
