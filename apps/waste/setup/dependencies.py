"""Waste API Dependencies - DI 팩토리.

Port/Adapter 패턴 기반 DI Factory.
- 싱글톤: 프롬프트 리포지토리, 모델별 Vision 어댑터
- 요청별: DB 세션, Repository, Command/Query
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from waste.application.category.ports import CategoryReaderPort
from waste.application.category.queries import ListCategoriesQuery
from waste.application.classify.commands import ClassifyWasteCommand
from waste.application.classify.ports import PromptRepositoryPort, VisionModelPort
from waste.application.classify.services import VisionClassifier
from waste.application.common.exceptions import UnsupportedModelError
from waste.application.history.commands import SubmitFeedbackCommand
from waste.application.history.ports import HistoryRepositoryPort
from waste.application.history.queries import GetHistoryEntryQuery, ListHistoryQuery
from waste.infrastructure.asset_loader import FilePromptRepository
from waste.infrastructure.llm import GeminiVisionAdapter, GPTVisionAdapter
from waste.infrastructure.persistence_postgres.adapters import (
    CategoryReaderSQLA,
    HistoryRepositorySQLA,
)
from waste.infrastructure.persistence_postgres.session import async_session_factory
from waste.setup.config import get_settings

logger = logging.getLogger(__name__)


# ============================================================
# Singleton Port Instances
# ============================================================


@lru_cache
def get_prompt_repository() -> PromptRepositoryPort:
    """PromptRepository 싱글톤."""
    settings = get_settings()
    return FilePromptRepository(assets_path=settings.assets_path)


# 모델명 → Vision 어댑터 (프로세스 수명, 종료 시 close_vision_models)
_vision_models: dict[str, VisionModelPort] = {}


def get_vision_model(model: str) -> VisionModelPort:
    """모델별 VisionModel 싱글톤.

    Raises:
        UnsupportedModelError: 지원하지 않는 모델인 경우
    """
    cached = _vision_models.get(model)
    if cached is not None:
        return cached

    settings = get_settings()

    # 가드레일: 지원 모델 검증
    if not settings.validate_model(model):
        raise UnsupportedModelError(model, settings.get_all_supported_models())

    provider = settings.resolve_provider(model)
    api_key = settings.get_api_key(provider)

    adapter: VisionModelPort
    if provider == "gemini":
        adapter = GeminiVisionAdapter(model=model, api_key=api_key)
    else:
        # 기본: GPT
        adapter = GPTVisionAdapter(model=model, api_key=api_key)

    _vision_models[model] = adapter
    return adapter


async def close_vision_models() -> None:
    """캐시된 Vision 어댑터의 HTTP 클라이언트 종료."""
    adapters = list(_vision_models.values())
    _vision_models.clear()
    for adapter in adapters:
        await adapter.close()
    if adapters:
        logger.info("Vision model clients closed", extra={"count": len(adapters)})


@lru_cache
def get_vision_classifier() -> VisionClassifier:
    """VisionClassifier 싱글톤."""
    return VisionClassifier(
        vision_models=get_vision_model,
        prompt_repository=get_prompt_repository(),
    )


# ============================================================
# Database Session & Repository
# ============================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """DB 세션 팩토리 (요청별 세션)."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_category_reader(
    session: AsyncSession = Depends(get_db_session),
) -> CategoryReaderPort:
    """CategoryReader 팩토리."""
    return CategoryReaderSQLA(session)


async def get_history_repository(
    session: AsyncSession = Depends(get_db_session),
) -> HistoryRepositoryPort:
    """HistoryRepository 팩토리."""
    return HistoryRepositorySQLA(session)


# Type aliases
DbSessionDep = Annotated[AsyncSession, Depends(get_db_session)]
CategoryReaderDep = Annotated[CategoryReaderPort, Depends(get_category_reader)]
HistoryRepositoryDep = Annotated[HistoryRepositoryPort, Depends(get_history_repository)]


# ============================================================
# Command / Query Factories (per-request)
# ============================================================


async def get_classify_command(
    category_reader: CategoryReaderDep,
    history_repository: HistoryRepositoryDep,
) -> ClassifyWasteCommand:
    """ClassifyWasteCommand 팩토리."""
    return ClassifyWasteCommand(
        vision_classifier=get_vision_classifier(),
        category_reader=category_reader,
        history_repository=history_repository,
    )


async def get_submit_feedback_command(
    history_repository: HistoryRepositoryDep,
) -> SubmitFeedbackCommand:
    """SubmitFeedbackCommand 팩토리."""
    return SubmitFeedbackCommand(history_repository=history_repository)


async def get_list_history_query(
    history_repository: HistoryRepositoryDep,
) -> ListHistoryQuery:
    """ListHistoryQuery 팩토리."""
    return ListHistoryQuery(history_repository=history_repository)


async def get_history_entry_query(
    history_repository: HistoryRepositoryDep,
) -> GetHistoryEntryQuery:
    """GetHistoryEntryQuery 팩토리."""
    return GetHistoryEntryQuery(history_repository=history_repository)


async def get_list_categories_query(
    category_reader: CategoryReaderDep,
) -> ListCategoriesQuery:
    """ListCategoriesQuery 팩토리."""
    return ListCategoriesQuery(category_reader=category_reader)


ClassifyCommandDep = Annotated[ClassifyWasteCommand, Depends(get_classify_command)]
SubmitFeedbackCommandDep = Annotated[
    SubmitFeedbackCommand, Depends(get_submit_feedback_command)
]
ListHistoryQueryDep = Annotated[ListHistoryQuery, Depends(get_list_history_query)]
GetHistoryEntryQueryDep = Annotated[GetHistoryEntryQuery, Depends(get_history_entry_query)]
ListCategoriesQueryDep = Annotated[ListCategoriesQuery, Depends(get_list_categories_query)]
