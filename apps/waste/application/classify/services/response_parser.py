"""Vision Response Parser - 모델 원문 → 구조화 분류 결과.

파싱 정책:
1. 첫 '{'부터 마지막 '}'까지 탐욕적으로 추출
2. JSON 파싱 후 스키마 검증
3. 어느 단계든 실패하면 FallbackClassification (예외 없음)
"""

from __future__ import annotations

import json
import logging
import math
import re
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from waste.domain.value_objects import (
    ClassificationOutcome,
    ClassificationPayload,
    FallbackClassification,
    ParsedClassification,
)
from waste.domain.value_objects.classification import FALLBACK_CONFIDENCE

logger = logging.getLogger(__name__)

_JSON_OBJECT_PATTERN = re.compile(r"\{.*\}", re.DOTALL)


class VisionResponse(BaseModel):
    """모델 응답 JSON 스키마."""

    category: str = Field(min_length=1)
    detected_items: list[str] = Field(default_factory=list)
    confidence: float = FALLBACK_CONFIDENCE
    reasoning: str = ""

    @field_validator("category")
    @classmethod
    def _strip_category(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("category is blank")
        return value

    @field_validator("detected_items", mode="before")
    @classmethod
    def _coerce_items(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, list):
            return [str(item) for item in value if item is not None]
        return value

    @field_validator("confidence")
    @classmethod
    def _clamp_confidence(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("confidence is not finite")
        return min(max(value, 0.0), 1.0)

    @field_validator("reasoning", mode="before")
    @classmethod
    def _coerce_reasoning(cls, value: Any) -> Any:
        return "" if value is None else value


class VisionResponseParser:
    """Vision 모델 응답 파서 (순수 로직)."""

    def parse(self, raw_text: str | None) -> ClassificationOutcome:
        """모델 원문을 분류 결과로 변환.

        Args:
            raw_text: 모델 응답 원문

        Returns:
            ParsedClassification 또는 FallbackClassification
        """
        text = raw_text or ""

        match = _JSON_OBJECT_PATTERN.search(text)
        if match is None:
            return self._fallback(text, "no_json_object")

        try:
            data = json.loads(match.group(0))
        except (ValueError, RecursionError) as e:
            return self._fallback(text, f"invalid_json: {e}")

        if not isinstance(data, dict):
            return self._fallback(text, "json_not_object")

        try:
            parsed = VisionResponse.model_validate(data)
        except ValidationError as e:
            return self._fallback(text, f"schema_mismatch: {e.error_count()} errors")

        return ParsedClassification(
            payload=ClassificationPayload(
                category=parsed.category,
                detected_items=tuple(parsed.detected_items),
                confidence=parsed.confidence,
                reasoning=parsed.reasoning,
            )
        )

    def _fallback(self, text: str, reason: str) -> FallbackClassification:
        logger.warning(
            "vision_response_parse_degraded",
            extra={"reason": reason, "response_length": len(text)},
        )
        return FallbackClassification(raw_text=text)
