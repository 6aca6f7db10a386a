"""List History Query (CQRS - Query).

읽기 전용 - 상태를 변경하지 않음.
"""

from __future__ import annotations

from waste.application.history.dto import HistoryPage
from waste.application.history.ports import HistoryRepositoryPort

DEFAULT_LIMIT = 20


class ListHistoryQuery:
    """분류 이력 목록 조회 (최신순)."""

    def __init__(self, history_repository: HistoryRepositoryPort):
        self._history = history_repository

    async def execute(self, limit: int = DEFAULT_LIMIT, offset: int = 0) -> HistoryPage:
        items = await self._history.list_entries(limit=limit, offset=offset)
        total = await self._history.count()
        return HistoryPage(items=items, total=total, limit=limit, offset=offset)
