"""List Categories Query - 카테고리 목록 조회."""

from __future__ import annotations

from waste.application.category.ports import CategoryReaderPort
from waste.domain.entities import WasteCategory


class ListCategoriesQuery:
    """카테고리 목록 조회 Query (이름 오름차순)."""

    def __init__(self, category_reader: CategoryReaderPort):
        self._categories = category_reader

    async def execute(self) -> list[WasteCategory]:
        return await self._categories.list_all()
