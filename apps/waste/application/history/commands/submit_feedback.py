"""Submit Feedback Command - 분류 결과 사용자 피드백."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from waste.application.history.ports import HistoryRepositoryPort
from waste.domain.entities import ClassificationRecord
from waste.domain.exceptions import ClassificationNotFoundError

logger = logging.getLogger(__name__)


@dataclass
class SubmitFeedbackRequest:
    """피드백 요청 DTO. None 필드는 변경하지 않습니다."""

    history_id: int
    is_correct: bool | None = None
    user_feedback: str | None = None


class SubmitFeedbackCommand:
    """피드백 Command.

    전달된 필드만 갱신하고 updated_at은 항상 갱신합니다.
    """

    def __init__(self, history_repository: HistoryRepositoryPort):
        self._history = history_repository

    async def execute(self, request: SubmitFeedbackRequest) -> ClassificationRecord:
        """피드백 반영.

        Raises:
            ClassificationNotFoundError: 이력 없음
        """
        record = await self._history.get_record(request.history_id)
        if record is None:
            raise ClassificationNotFoundError(request.history_id)

        record.apply_feedback(
            is_correct=request.is_correct,
            user_feedback=request.user_feedback,
        )
        saved = await self._history.save(record)

        logger.info(
            "classification_feedback_saved",
            extra={
                "history_id": request.history_id,
                "is_correct": saved.is_correct,
                "has_feedback_text": saved.user_feedback is not None,
            },
        )
        return saved
