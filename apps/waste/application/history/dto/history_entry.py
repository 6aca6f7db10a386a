"""History DTOs - 카테고리 조인 이력 읽기 모델."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class HistoryEntry:
    """카테고리 정보가 조인된 분류 이력.

    카테고리 컬럼은 LEFT JOIN이므로 None일 수 있습니다.
    """

    id: int
    waste_category_id: int
    image_url: str
    detected_items: list[str]
    confidence_score: float
    is_correct: bool | None
    user_feedback: str | None
    created_at: datetime
    updated_at: datetime | None = None
    category_name: str | None = None
    color_code: str | None = None
    description: str | None = None
    disposal_instructions: str | None = None
    environmental_impact: str | None = None


@dataclass(frozen=True)
class HistoryPage:
    """페이지네이션된 이력 목록."""

    items: list[HistoryEntry]
    total: int
    limit: int
    offset: int
