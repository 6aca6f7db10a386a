"""Classification Value Objects.

Vision 모델 응답 파싱 결과를 태그드 유니온으로 표현합니다.
- ParsedClassification: 응답에서 JSON을 추출/검증한 경우
- FallbackClassification: 추출/파싱 실패 (기본 분류로 대체)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from waste.domain.enums import WasteCategoryName

FALLBACK_DETECTED_ITEMS: tuple[str, ...] = ("Unknown item",)
FALLBACK_CONFIDENCE = 0.5


@dataclass(frozen=True, slots=True)
class ClassificationPayload:
    """구조화된 분류 결과 Value Object.

    Attributes:
        category: 모델이 반환한 카테고리명 (DB 조회 전 원문)
        detected_items: 감지된 항목 목록
        confidence: 신뢰도 (0.0 ~ 1.0)
        reasoning: 분류 근거
    """

    category: str
    detected_items: tuple[str, ...] = ()
    confidence: float = FALLBACK_CONFIDENCE
    reasoning: str = ""

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence out of range: {self.confidence}")

    @property
    def confidence_percent(self) -> int:
        """정수 백분율 신뢰도 (0 ~ 100, 0.5는 올림)."""
        return math.floor(self.confidence * 100 + 0.5)


@dataclass(frozen=True, slots=True)
class ParsedClassification:
    """모델 응답에서 파싱에 성공한 결과."""

    payload: ClassificationPayload

    @property
    def is_fallback(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class FallbackClassification:
    """파싱 실패 시 기본 분류.

    raw_text는 reasoning으로 그대로 전달됩니다.
    """

    raw_text: str

    @property
    def is_fallback(self) -> bool:
        return True

    @property
    def payload(self) -> ClassificationPayload:
        return ClassificationPayload(
            category=WasteCategoryName.GENERAL.value,
            detected_items=FALLBACK_DETECTED_ITEMS,
            confidence=FALLBACK_CONFIDENCE,
            reasoning=self.raw_text,
        )


ClassificationOutcome = Union[ParsedClassification, FallbackClassification]
