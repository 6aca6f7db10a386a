"""Waste Classify Controller.

- POST /waste/classify: 이미지 분류 + 이력 저장 (동기)
"""

from __future__ import annotations

import logging

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from waste.application.classify.commands import (
    ClassificationView,
    ClassifyWasteRequest,
)
from waste.application.common.exceptions import UnsupportedModelError
from waste.setup.config import get_settings
from waste.setup.dependencies import ClassifyCommandDep

router = APIRouter(prefix="/waste", tags=["classify"])
logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Schemas (camelCase)
# ─────────────────────────────────────────────────────────────────────────────


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ClassifyRequestBody(CamelModel):
    """분류 요청 스키마."""

    image_base64: str | None = Field(
        default=None,
        description="base64 인코딩 이미지 (data URL 허용)",
    )
    image_url: str | None = Field(
        default=None,
        description="분석할 이미지 URL",
    )
    model: str | None = Field(
        default=None,
        description="Vision 모델명 (미지정 시 기본 모델)",
        examples=["gpt-5.2", "gpt-4o", "gemini-2.5-flash"],
    )


class ClassificationBody(CamelModel):
    """분류 결과 스키마."""

    id: int
    category: str
    color_code: str | None = None
    description: str | None = None
    disposal_instructions: str | None = None
    environmental_impact: str | None = None
    detected_items: list[str]
    confidence: int = Field(ge=0, le=100, description="신뢰도 (%)")
    reasoning: str

    @classmethod
    def from_view(cls, view: ClassificationView) -> "ClassificationBody":
        return cls(
            id=view.id,
            category=view.category,
            color_code=view.color_code,
            description=view.description,
            disposal_instructions=view.disposal_instructions,
            environmental_impact=view.environmental_impact,
            detected_items=view.detected_items,
            confidence=view.confidence,
            reasoning=view.reasoning,
        )


class ClassifyResponseBody(CamelModel):
    """분류 응답 스키마."""

    classification: ClassificationBody
    history_id: int


# ─────────────────────────────────────────────────────────────────────────────
# Endpoints
# ─────────────────────────────────────────────────────────────────────────────


@router.post(
    "/classify",
    response_model=ClassifyResponseBody,
    response_model_by_alias=True,
    summary="Classify a waste photo",
)
async def classify_waste(
    payload: ClassifyRequestBody,
    command: ClassifyCommandDep,
) -> ClassifyResponseBody:
    """폐기물 사진을 분류하고 분류 이력을 1건 저장합니다."""
    # 모델 검증
    settings = get_settings()
    model = payload.model or settings.llm_default_model
    if not settings.validate_model(model):
        raise UnsupportedModelError(model, settings.get_all_supported_models())

    response = await command.execute(
        ClassifyWasteRequest(
            model=model,
            image_base64=payload.image_base64,
            image_url=payload.image_url,
        )
    )

    return ClassifyResponseBody(
        classification=ClassificationBody.from_view(response.classification),
        history_id=response.history_id,
    )
