"""Get History Entry Query - 분류 이력 단건 조회."""

from __future__ import annotations

from waste.application.history.dto import HistoryEntry
from waste.application.history.ports import HistoryRepositoryPort
from waste.domain.exceptions import ClassificationNotFoundError


class GetHistoryEntryQuery:
    """카테고리가 조인된 이력 단건 조회."""

    def __init__(self, history_repository: HistoryRepositoryPort):
        self._history = history_repository

    async def execute(self, history_id: int) -> HistoryEntry:
        """이력 단건 조회.

        Raises:
            ClassificationNotFoundError: 이력 없음
        """
        entry = await self._history.get_entry(history_id)
        if entry is None:
            raise ClassificationNotFoundError(history_id)
        return entry
