# 📄 File: app/shared/infrastructure/database/repository.py
#
# 🧭 Purpose (Layman Explanation):
# The common toolbox every "storage clerk" (repository) uses: find one thing by number,
# list a page of things, save, change and remove them, and report database trouble clearly.
#
# 🧪 Purpose (Technical Summary):
# Generic async SQLAlchemy repository base mapping ORM rows to pydantic domain models
# (from_attributes), with paging/sorting and uniform IntegrityError/SQLAlchemyError translation.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession), FastAPI Depends
# - app/shared/infrastructure/database/session.py (get_db_session)
# - app/shared/utils/pagination.py (PageParams, apply_page)
#
# 🔄 Connected Modules / Calls From:
# - Every module's infrastructure/database/*_repository_impl.py

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Generic, List, Optional, Sequence, Tuple, Type, TypeVar

from fastapi import Depends
from pydantic import BaseModel
from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.core.exceptions import DuplicateResourceError, RepositoryError
from app.shared.infrastructure.database.session import get_db_session
from app.shared.utils.pagination import PageParams, apply_page

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")
DomainT = TypeVar("DomainT", bound=BaseModel)


class SQLAlchemyRepository(Generic[ModelT, DomainT]):
    """
    Base class for repository implementations.

    Subclasses set ``model`` (ORM class), ``domain`` (pydantic class) and
    ``entity_name`` and inherit the common CRUD operations.
    """

    model: Type[ModelT]
    domain: Type[DomainT]
    entity_name: str = "entity"

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        """
        Args:
            session: SQLAlchemy async session for database operations
        """
        self._session = session

    # =========================================================================
    # MAPPING & ERROR TRANSLATION
    # =========================================================================

    def _to_domain(self, row: ModelT) -> DomainT:
        return self.domain.model_validate(row)

    def _apply(self, row: ModelT, entity: DomainT, exclude: Sequence[str] = ("id",)) -> None:
        for key, value in entity.model_dump(exclude=set(exclude)).items():
            if hasattr(row, key):
                setattr(row, key, value)

    @asynccontextmanager
    async def _guard(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except IntegrityError as e:
            logger.warning(f"{self.entity_name} {operation} violated a constraint: {e.orig}")
            raise DuplicateResourceError(
                f"{self.entity_name.capitalize()} conflicts with an existing record",
                resource_type=self.entity_name,
            ) from e
        except SQLAlchemyError as e:
            logger.error(f"Database error during {self.entity_name} {operation}: {e}")
            raise RepositoryError(f"Failed to {operation} {self.entity_name}", entity=self.entity_name) from e

    # =========================================================================
    # QUERIES
    # =========================================================================

    async def _get_row(self, entity_id: int) -> Optional[ModelT]:
        stmt = select(self.model).where(self.model.id == entity_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _fetch_all(self, stmt: Select) -> List[DomainT]:
        async with self._guard("list"):
            result = await self._session.execute(stmt)
            return [self._to_domain(row) for row in result.scalars().all()]

    async def _fetch_one(self, stmt: Select) -> Optional[DomainT]:
        async with self._guard("read"):
            result = await self._session.execute(stmt)
            row = result.scalars().first()
            return self._to_domain(row) if row is not None else None

    async def get_by_id(self, entity_id: int) -> Optional[DomainT]:
        async with self._guard("read"):
            row = await self._get_row(entity_id)
            if row is None:
                logger.debug(f"{self.entity_name} not found: {entity_id}")
                return None
            return self._to_domain(row)

    async def exists(self, entity_id: int) -> bool:
        return await self.count(self.model.id == entity_id) > 0

    async def count(self, *criteria: Any) -> int:
        async with self._guard("count"):
            stmt = select(func.count()).select_from(self.model)
            if criteria:
                stmt = stmt.where(*criteria)
            stmt = stmt.where(*self._type_criteria())
            result = await self._session.execute(stmt)
            return int(result.scalar_one())

    def _type_criteria(self) -> Tuple[Any, ...]:
        """Extra WHERE clauses for count queries (discriminators of single-table subclasses)."""
        return ()

    async def list_all(self) -> List[DomainT]:
        return await self._fetch_all(select(self.model).order_by(self.model.id))

    async def list_page(self, params: PageParams, *criteria: Any) -> Tuple[List[DomainT], int]:
        """Return one sorted page and the total number of matching rows."""
        stmt = select(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        items = await self._fetch_all(apply_page(stmt, self.model, params))
        total = await self.count(*criteria)
        return items, total

    # =========================================================================
    # COMMANDS
    # =========================================================================

    async def add(self, entity: DomainT) -> DomainT:
        async with self._guard("create"):
            row = self.model(**entity.model_dump(exclude={"id"}, exclude_none=True))
            self._session.add(row)
            await self._session.flush()
            await self._session.refresh(row)
            logger.info(f"Created {self.entity_name} with ID: {row.id}")
            return self._to_domain(row)

    async def update(self, entity: DomainT) -> Optional[DomainT]:
        async with self._guard("update"):
            row = await self._get_row(entity.id)
            if row is None:
                return None
            self._apply(row, entity)
            await self._session.flush()
            await self._session.refresh(row)
            logger.info(f"Updated {self.entity_name}: {row.id}")
            return self._to_domain(row)

    async def delete(self, entity_id: int) -> bool:
        async with self._guard("delete"):
            row = await self._get_row(entity_id)
            if row is None:
                return False
            await self._session.delete(row)
            await self._session.flush()
            logger.info(f"Deleted {self.entity_name}: {entity_id}")
            return True
