"""Base repository with common CRUD operations."""

from typing import Any, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from collab.db.base import Base

T = TypeVar("T", bound=Base)


class BaseRepository:
    """Generic async repository for SQLAlchemy models."""

    def __init__(self, session: AsyncSession, model_class: type[T]):
        self.session = session
        self.model_class = model_class

    async def get_by_field(self, field: str, value: Any) -> T | None:
        """Get a single record by a unique column."""
        stmt = select(self.model_class).where(
            getattr(self.model_class, field) == value
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, **kwargs: Any) -> T:
        """Create and persist a new record."""
        row = self.model_class(**kwargs)
        self.session.add(row)
        await self.session.flush()
        return row

    async def list_by_field(self, field: str, value: Any) -> list[T]:
        """List records matching a field value, ordered by id."""
        stmt = (
            select(self.model_class)
            .where(getattr(self.model_class, field) == value)
            .order_by(self.model_class.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
