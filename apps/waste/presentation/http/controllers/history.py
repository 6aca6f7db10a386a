"""Classification History Controller.

RESTful 엔드포인트:
- GET   /waste/history        이력 목록 (최신순, limit/offset)
- GET   /waste/history/{id}   이력 단건
- PATCH /waste/history/{id}   사용자 피드백
"""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from waste.application.history.commands import SubmitFeedbackRequest
from waste.application.history.dto import HistoryEntry
from waste.application.history.queries import DEFAULT_LIMIT
from waste.domain.entities import ClassificationRecord
from waste.setup.dependencies import (
    GetHistoryEntryQueryDep,
    ListHistoryQueryDep,
    SubmitFeedbackCommandDep,
)

router = APIRouter(prefix="/waste/history", tags=["history"])

MAX_LIMIT = 100


# ─────────────────────────────────────────────────────────────────────────────
# Schemas
# ─────────────────────────────────────────────────────────────────────────────


class HistoryEntryResponse(BaseModel):
    """이력 항목 (카테고리 조인)."""

    id: int
    waste_category_id: int
    image_url: str
    detected_items: list[str]
    confidence_score: float
    is_correct: bool | None = None
    user_feedback: str | None = None
    created_at: datetime
    updated_at: datetime | None = None
    category_name: str | None = None
    color_code: str | None = None
    description: str | None = None
    disposal_instructions: str | None = None
    environmental_impact: str | None = None

    @classmethod
    def from_entry(cls, entry: HistoryEntry) -> "HistoryEntryResponse":
        return cls(
            id=entry.id,
            waste_category_id=entry.waste_category_id,
            image_url=entry.image_url,
            detected_items=list(entry.detected_items),
            confidence_score=entry.confidence_score,
            is_correct=entry.is_correct,
            user_feedback=entry.user_feedback,
            created_at=entry.created_at,
            updated_at=entry.updated_at,
            category_name=entry.category_name,
            color_code=entry.color_code,
            description=entry.description,
            disposal_instructions=entry.disposal_instructions,
            environmental_impact=entry.environmental_impact,
        )


class HistoryListResponse(BaseModel):
    """이력 목록 응답."""

    data: list[HistoryEntryResponse]
    total: int = Field(description="전체 이력 수 (페이지네이션 무관)")
    limit: int
    offset: int


class HistoryEntryEnvelope(BaseModel):
    data: HistoryEntryResponse


class ClassificationRecordResponse(BaseModel):
    """피드백 반영 후 이력 레코드."""

    id: int
    waste_category_id: int
    image_url: str
    detected_items: list[str]
    confidence_score: float
    is_correct: bool | None = None
    user_feedback: str | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, record: ClassificationRecord) -> "ClassificationRecordResponse":
        return cls(
            id=record.id,
            waste_category_id=record.waste_category_id,
            image_url=record.image_url,
            detected_items=list(record.detected_items),
            confidence_score=record.confidence_score,
            is_correct=record.is_correct,
            user_feedback=record.user_feedback,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )


class ClassificationRecordEnvelope(BaseModel):
    data: ClassificationRecordResponse


class FeedbackRequest(BaseModel):
    """피드백 요청. null 또는 누락 필드는 변경하지 않습니다."""

    is_correct: bool | None = Field(default=None, description="분류 정확 여부")
    user_feedback: str | None = Field(default=None, description="사용자 코멘트")


# ─────────────────────────────────────────────────────────────────────────────
# Endpoints
# ─────────────────────────────────────────────────────────────────────────────


@router.get(
    "",
    response_model=HistoryListResponse,
    summary="List classification history",
)
async def list_history(
    query: ListHistoryQueryDep,
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT, description="페이지 크기"),
    offset: int = Query(0, ge=0, description="시작 위치"),
) -> HistoryListResponse:
    """분류 이력을 최신순으로 반환합니다."""
    page = await query.execute(limit=limit, offset=offset)
    return HistoryListResponse(
        data=[HistoryEntryResponse.from_entry(e) for e in page.items],
        total=page.total,
        limit=page.limit,
        offset=page.offset,
    )


@router.get(
    "/{history_id}",
    response_model=HistoryEntryEnvelope,
    summary="Get one classification history entry",
)
async def get_history_entry(
    history_id: int,
    query: GetHistoryEntryQueryDep,
) -> HistoryEntryEnvelope:
    entry = await query.execute(history_id)
    return HistoryEntryEnvelope(data=HistoryEntryResponse.from_entry(entry))


@router.patch(
    "/{history_id}",
    response_model=ClassificationRecordEnvelope,
    summary="Submit feedback on a classification",
)
async def submit_feedback(
    history_id: int,
    payload: FeedbackRequest,
    command: SubmitFeedbackCommandDep,
) -> ClassificationRecordEnvelope:
    """분류 결과에 대한 사용자 피드백을 반영합니다."""
    record = await command.execute(
        SubmitFeedbackRequest(
            history_id=history_id,
            is_correct=payload.is_correct,
            user_feedback=payload.user_feedback,
        )
    )
    return ClassificationRecordEnvelope(data=ClassificationRecordResponse.from_entity(record))
