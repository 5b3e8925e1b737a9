"""Collection provider backed by a SQLAlchemy select statement."""

from __future__ import annotations

import logging
from typing import Any, Callable

from sqlalchemy import Select, asc, desc, func, select
from sqlalchemy.inspection import inspect
from sqlalchemy.orm import Session

from fastapi_collections.data.base import UNSET, BaseCollectionProvider

logger = logging.getLogger(__name__)


class SQLAlchemyCollectionProvider(BaseCollectionProvider):
    """Run ``statement`` on ``session`` to fetch one page of ORM models.

    Ordering comes from the sort definition (column names resolved on the
    statement's first entity), paging from ``offset`` and ``limit``. Keys
    default to the mapped primary key; ``key`` overrides them with an
    attribute name or a callable.
    """

    def __init__(
        self,
        session: Session,
        statement: Select,
        *,
        offset: int = 0,
        limit: int | None = None,
        key: str | Callable[[Any], Any] | None = None,
        id: str | None = None,
        sort: Any = UNSET,
    ) -> None:
        super().__init__(id=id, sort=sort)
        self.session = session
        self.statement = statement
        self.offset = offset
        self.limit = limit
        self.key = key

    def _entity(self) -> Any:
        descriptions = self.statement.column_descriptions
        if not descriptions:
            return None
        return descriptions[0].get("entity")

    def apply_sorting(self, statement: Select) -> Select:
        """Append ORDER BY clauses for the requested sort orders."""
        sort = self.get_sort()
        if sort is False:
            return statement
        entity = self._entity()
        info = inspect(entity, raiseerr=False) if entity is not None else None
        mapper = getattr(info, "mapper", None)
        for name, direction in sort.get_attribute_orders().items():
            # only mapped columns, never relationships or other class attributes
            if mapper is None or name not in mapper.column_attrs:
                logger.debug("Skipping unknown sort column %r", name)
                continue
            column = getattr(entity, name)
            statement = statement.order_by(desc(column) if direction == "desc" else asc(column))
        return statement

    def prepare_models(self) -> list[Any]:
        statement = self.apply_sorting(self.statement)
        if self.offset:
            statement = statement.offset(self.offset)
        if self.limit is not None:
            statement = statement.limit(self.limit)
        return list(self.session.execute(statement).scalars().all())

    def prepare_keys(self, models: list[Any]) -> list[Any]:
        if callable(self.key):
            return [self.key(model) for model in models]
        if isinstance(self.key, str):
            return [getattr(model, self.key) for model in models]
        keys = []
        for model in models:
            identity = inspect(model).identity
            if identity is None:
                keys.append(None)
            elif len(identity) == 1:
                keys.append(identity[0])
            else:
                keys.append(identity)
        return keys

    def prepare_total_count(self) -> int:
        count_statement = select(func.count()).select_from(
            self.statement.order_by(None).subquery()
        )
        return int(self.session.execute(count_statement).scalar_one())
