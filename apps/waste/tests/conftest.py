"""Pytest configuration for waste tests."""

from __future__ import annotations

import os

# 앱 import 전에 트레이싱/로깅 환경 고정
os.environ.setdefault("OTEL_ENABLED", "false")
os.environ.setdefault("WASTE_LOG_FORMAT", "text")

from datetime import datetime, timedelta, timezone  # noqa: E402

import pytest  # noqa: E402

from waste.application.category.ports import CategoryReaderPort  # noqa: E402
from waste.application.history.dto import HistoryEntry  # noqa: E402
from waste.application.history.ports import HistoryRepositoryPort  # noqa: E402
from waste.domain.entities import ClassificationRecord, WasteCategory  # noqa: E402
from waste.domain.enums import WasteCategoryName  # noqa: E402

BASE_TIME = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)


class InMemoryCategoryReader(CategoryReaderPort):
    """메모리 기반 CategoryReader."""

    def __init__(self, categories: list[WasteCategory]):
        self.categories = categories

    async def list_all(self) -> list[WasteCategory]:
        return sorted(self.categories, key=lambda c: c.name)

    async def find_by_name(self, name: str) -> WasteCategory | None:
        for category in self.categories:
            if category.matches(name):
                return category
        return None


class InMemoryHistoryRepository(HistoryRepositoryPort):
    """메모리 기반 HistoryRepository (카테고리 조인 포함)."""

    def __init__(self, categories: list[WasteCategory] | None = None):
        self.records: dict[int, ClassificationRecord] = {}
        self.save_calls = 0
        self._categories = {c.id: c for c in categories or []}
        self._next_id = 1

    async def create(self, record: ClassificationRecord) -> ClassificationRecord:
        record.id = self._next_id
        self._next_id += 1
        self.records[record.id] = record
        return record

    async def get_record(self, history_id: int) -> ClassificationRecord | None:
        return self.records.get(history_id)

    async def save(self, record: ClassificationRecord) -> ClassificationRecord:
        self.save_calls += 1
        self.records[record.id] = record
        return record

    async def get_entry(self, history_id: int) -> HistoryEntry | None:
        record = self.records.get(history_id)
        return self._to_entry(record) if record else None

    async def list_entries(self, limit: int = 20, offset: int = 0) -> list[HistoryEntry]:
        ordered = sorted(
            self.records.values(),
            key=lambda r: (r.created_at, r.id),
            reverse=True,
        )
        return [self._to_entry(r) for r in ordered[offset : offset + limit]]

    async def count(self) -> int:
        return len(self.records)

    def _to_entry(self, record: ClassificationRecord) -> HistoryEntry:
        category = self._categories.get(record.waste_category_id)
        return HistoryEntry(
            id=record.id,
            waste_category_id=record.waste_category_id,
            image_url=record.image_url,
            detected_items=list(record.detected_items),
            confidence_score=record.confidence_score,
            is_correct=record.is_correct,
            user_feedback=record.user_feedback,
            created_at=record.created_at,
            updated_at=record.updated_at,
            category_name=category.name if category else None,
            color_code=category.color_code if category else None,
            description=category.description if category else None,
            disposal_instructions=category.disposal_instructions if category else None,
            environmental_impact=category.environmental_impact if category else None,
        )


@pytest.fixture
def anyio_backend():
    """Use asyncio backend for anyio."""
    return "asyncio"


@pytest.fixture
def categories() -> list[WasteCategory]:
    """시드와 같은 이름의 8개 카테고리."""
    return [
        WasteCategory(
            id=index,
            name=name,
            color_code=f"#00000{index}",
            description=f"{name} description",
            disposal_instructions=f"{name} disposal",
            environmental_impact=f"{name} impact",
        )
        for index, name in enumerate(WasteCategoryName.values(), start=1)
    ]


@pytest.fixture
def category_reader(categories: list[WasteCategory]) -> InMemoryCategoryReader:
    return InMemoryCategoryReader(categories)


@pytest.fixture
def history_repository(categories: list[WasteCategory]) -> InMemoryHistoryRepository:
    return InMemoryHistoryRepository(categories)


@pytest.fixture
def make_record():
    """created_at을 분 단위로 지정하는 레코드 팩토리."""

    def _make(minutes: int = 0, **kwargs) -> ClassificationRecord:
        created_at = BASE_TIME + timedelta(minutes=minutes)
        kwargs.setdefault("waste_category_id", 1)
        kwargs.setdefault("image_url", "https://example.com/bottle.jpg")
        kwargs.setdefault("detected_items", ["plastic bottle"])
        kwargs.setdefault("confidence_score", 0.9)
        return ClassificationRecord(created_at=created_at, updated_at=created_at, **kwargs)

    return _make
