"""Classification History Repository SQLAlchemy Adapter.

HistoryRepositoryPort의 PostgreSQL 구현체.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import func, select

from waste.application.history.dto import HistoryEntry
from waste.application.history.ports import HistoryRepositoryPort
from waste.domain.entities import ClassificationRecord
from waste.infrastructure.persistence_postgres.mappings import (
    categories_table,
    history_table,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

# 이력 + 카테고리 LEFT JOIN 조회 컬럼
_ENTRY_COLUMNS = (
    history_table.c.id,
    history_table.c.waste_category_id,
    history_table.c.image_url,
    history_table.c.detected_items,
    history_table.c.confidence_score,
    history_table.c.is_correct,
    history_table.c.user_feedback,
    history_table.c.created_at,
    history_table.c.updated_at,
    categories_table.c.name.label("category_name"),
    categories_table.c.color_code,
    categories_table.c.description,
    categories_table.c.disposal_instructions,
    categories_table.c.environmental_impact,
)


class HistoryRepositorySQLA(HistoryRepositoryPort):
    """Classification History Repository SQLAlchemy 구현체."""

    def __init__(self, session: "AsyncSession") -> None:
        """초기화.

        Args:
            session: SQLAlchemy AsyncSession
        """
        self._session = session

    # ─────────────────────────────────────────────────────────────
    # Command 측
    # ─────────────────────────────────────────────────────────────

    async def create(self, record: ClassificationRecord) -> ClassificationRecord:
        """새 이력 생성 (flush로 id 할당)."""
        self._session.add(record)
        await self._session.flush()
        await self._session.refresh(record)
        return record

    async def get_record(self, history_id: int) -> ClassificationRecord | None:
        """이력 엔티티 조회."""
        return await self._session.get(ClassificationRecord, history_id)

    async def save(self, record: ClassificationRecord) -> ClassificationRecord:
        """변경 사항 flush."""
        await self._session.flush()
        await self._session.refresh(record)
        return record

    # ─────────────────────────────────────────────────────────────
    # Query 측 (카테고리 조인)
    # ─────────────────────────────────────────────────────────────

    def _entry_select(self):
        return select(*_ENTRY_COLUMNS).select_from(
            history_table.outerjoin(
                categories_table,
                history_table.c.waste_category_id == categories_table.c.id,
            )
        )

    async def get_entry(self, history_id: int) -> HistoryEntry | None:
        """이력 단건 조회."""
        stmt = self._entry_select().where(history_table.c.id == history_id)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return self._to_entry(row) if row else None

    async def list_entries(self, limit: int = 20, offset: int = 0) -> list[HistoryEntry]:
        """이력 목록 (created_at 내림차순, 동률은 id 내림차순)."""
        stmt = (
            self._entry_select()
            .order_by(history_table.c.created_at.desc(), history_table.c.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self._session.execute(stmt)
        return [self._to_entry(row) for row in result.mappings().all()]

    async def count(self) -> int:
        """전체 이력 수."""
        stmt = select(func.count()).select_from(history_table)
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

    @staticmethod
    def _to_entry(row: Any) -> HistoryEntry:
        return HistoryEntry(
            id=row["id"],
            waste_category_id=row["waste_category_id"],
            image_url=row["image_url"],
            detected_items=list(row["detected_items"] or []),
            confidence_score=float(row["confidence_score"]),
            is_correct=row["is_correct"],
            user_feedback=row["user_feedback"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
            category_name=row["category_name"],
            color_code=row["color_code"],
            description=row["description"],
            disposal_instructions=row["disposal_instructions"],
            environmental_impact=row["environmental_impact"],
        )
