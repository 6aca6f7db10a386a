"""WasteCategory Entity - 폐기물 카테고리 도메인 엔티티.

마이그레이션으로 시드되며 분류 파이프라인에서는 읽기 전용입니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class WasteCategory:
    """폐기물 카테고리 엔티티.

    Attributes:
        name: 카테고리명 (대소문자 무시 조회 키)
        color_code: 표시 색상 (예: "#2196F3")
        description: 카테고리 설명
        disposal_instructions: 배출 방법 안내
        environmental_impact: 환경 영향 설명
        id: 카테고리 ID (DB 할당)
        created_at: 생성 시간
    """

    name: str
    color_code: str | None = None
    description: str | None = None
    disposal_instructions: str | None = None
    environmental_impact: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def matches(self, name: str) -> bool:
        """카테고리명이 대소문자 무시 완전 일치하는지 확인."""
        return self.name.lower() == name.strip().lower()
