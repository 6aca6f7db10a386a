"""ClassificationRecord Entity - 분류 이력 도메인 엔티티.

분류 요청 1건당 정확히 1개 생성되며,
이후 사용자 피드백(is_correct, user_feedback)으로만 변경됩니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

# 인라인 이미지만 전달된 경우 image_url 대신 저장되는 값
INLINE_IMAGE_PLACEHOLDER = "base64_image"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ClassificationRecord:
    """분류 이력 엔티티.

    Attributes:
        waste_category_id: 카테고리 ID (FK)
        image_url: 이미지 URL 또는 INLINE_IMAGE_PLACEHOLDER
        detected_items: 감지된 항목 목록
        confidence_score: 신뢰도 [0, 1]
        is_correct: 사용자 정답 여부 (피드백 전 None)
        user_feedback: 사용자 피드백 텍스트
        id: 이력 ID (DB 할당)
        created_at: 생성 시간
        updated_at: 수정 시간
    """

    waste_category_id: int
    image_url: str
    detected_items: list[str] = field(default_factory=list)
    confidence_score: float = 0.0
    is_correct: bool | None = None
    user_feedback: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence_score <= 1.0:
            raise ValueError(f"confidence_score out of range: {self.confidence_score}")

    def apply_feedback(
        self,
        is_correct: bool | None = None,
        user_feedback: str | None = None,
    ) -> None:
        """전달된 필드만 갱신하고 updated_at을 갱신합니다."""
        if is_correct is not None:
            self.is_correct = is_correct
        if user_feedback is not None:
            self.user_feedback = user_feedback
        self.updated_at = _utcnow()
