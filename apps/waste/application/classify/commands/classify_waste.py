"""Classify Waste Command - 폐기물 분류 오케스트레이션.

흐름:
1. 이미지 입력 검증 (InvalidInputError)
2. Vision 분류 (UpstreamUnavailableError)
3. 카테고리 대소문자 무시 조회 (CategoryNotFoundError)
4. 분류 이력 1건 생성
5. 응답 DTO 반환

4단계 이전에 실패하면 이력은 생성되지 않습니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from waste.application.category.ports import CategoryReaderPort
from waste.application.classify.dto import ImageSource
from waste.application.classify.services import VisionClassifier
from waste.application.history.ports import HistoryRepositoryPort
from waste.domain.entities import INLINE_IMAGE_PLACEHOLDER, ClassificationRecord
from waste.domain.exceptions import CategoryNotFoundError

logger = logging.getLogger(__name__)


@dataclass
class ClassifyWasteRequest:
    """분류 요청 DTO."""

    model: str
    image_base64: str | None = None
    image_url: str | None = None


@dataclass
class ClassificationView:
    """분류 결과 DTO (카테고리 안내 포함)."""

    id: int
    category: str
    color_code: str | None
    description: str | None
    disposal_instructions: str | None
    environmental_impact: str | None
    detected_items: list[str]
    confidence: int
    reasoning: str


@dataclass
class ClassifyWasteResponse:
    """분류 응답 DTO."""

    classification: ClassificationView
    history_id: int


class ClassifyWasteCommand:
    """폐기물 분류 Command.

    요청당 ClassificationRecord를 정확히 1건 생성합니다.
    """

    def __init__(
        self,
        vision_classifier: VisionClassifier,
        category_reader: CategoryReaderPort,
        history_repository: HistoryRepositoryPort,
    ):
        """초기화.

        Args:
            vision_classifier: Vision 분류 서비스
            category_reader: 카테고리 조회 Port
            history_repository: 분류 이력 저장소 Port
        """
        self._classifier = vision_classifier
        self._categories = category_reader
        self._history = history_repository

    async def execute(self, request: ClassifyWasteRequest) -> ClassifyWasteResponse:
        """분류 실행.

        Raises:
            InvalidInputError: 이미지 입력 없음
            UpstreamUnavailableError: Vision 모델 호출 실패
            CategoryNotFoundError: 카테고리 매칭 실패
        """
        # 1. 입력 검증
        image = ImageSource.of(request.image_base64, request.image_url)

        # 2. Vision 분류 (파싱 실패는 fallback으로 흡수됨)
        outcome = await self._classifier.classify(image, model=request.model)
        payload = outcome.payload

        # 3. 카테고리 조회 (퍼지 매칭/자동 생성 없음)
        category = await self._categories.find_by_name(payload.category)
        if category is None or category.id is None:
            raise CategoryNotFoundError(payload.category)

        # 4. 이력 생성 (인라인 이미지 바이트는 저장하지 않음)
        record = await self._history.create(
            ClassificationRecord(
                waste_category_id=category.id,
                image_url=image.url or INLINE_IMAGE_PLACEHOLDER,
                detected_items=list(payload.detected_items),
                confidence_score=payload.confidence,
            )
        )
        if record.id is None:
            raise RuntimeError("history record was not assigned an id")

        logger.info(
            "waste_classified",
            extra={
                "history_id": record.id,
                "category": category.name,
                "confidence": payload.confidence,
                "fallback": outcome.is_fallback,
                "model": request.model,
            },
        )

        return ClassifyWasteResponse(
            classification=ClassificationView(
                id=record.id,
                category=category.name,
                color_code=category.color_code,
                description=category.description,
                disposal_instructions=category.disposal_instructions,
                environmental_impact=category.environmental_impact,
                detected_items=list(payload.detected_items),
                confidence=payload.confidence_percent,
                reasoning=payload.reasoning,
            ),
            history_id=record.id,
        )
