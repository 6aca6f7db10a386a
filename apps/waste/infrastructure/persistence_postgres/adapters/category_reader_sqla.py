"""Category Reader SQLAlchemy Adapter.

CategoryReaderPort의 PostgreSQL 구현체.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import func, select

from waste.application.category.ports import CategoryReaderPort
from waste.domain.entities import WasteCategory
from waste.infrastructure.persistence_postgres.mappings import categories_table

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


class CategoryReaderSQLA(CategoryReaderPort):
    """Category Reader SQLAlchemy 구현체."""

    def __init__(self, session: "AsyncSession") -> None:
        self._session = session

    async def list_all(self) -> list[WasteCategory]:
        """전체 카테고리 (이름 오름차순)."""
        stmt = select(WasteCategory).order_by(categories_table.c.name.asc())
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def find_by_name(self, name: str) -> WasteCategory | None:
        """LOWER(name) = LOWER(:name) 조회."""
        stmt = (
            select(WasteCategory)
            .where(func.lower(categories_table.c.name) == name.strip().lower())
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalars().first()
