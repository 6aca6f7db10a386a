"""Classification History Repository Port - 분류 이력 저장소 추상화.

Clean Architecture의 Port로서 Application Layer에서 정의.
Infrastructure Layer에서 구현.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from waste.application.history.dto import HistoryEntry
    from waste.domain.entities import ClassificationRecord


class HistoryRepositoryPort(ABC):
    """분류 이력 저장소 Port.

    이력은 생성/피드백 갱신만 허용되며 삭제하지 않습니다.
    """

    @abstractmethod
    async def create(self, record: "ClassificationRecord") -> "ClassificationRecord":
        """새 이력 생성.

        Args:
            record: ClassificationRecord 엔티티 (id 미할당)

        Returns:
            id가 할당된 ClassificationRecord
        """
        ...

    @abstractmethod
    async def get_record(self, history_id: int) -> "ClassificationRecord | None":
        """이력 엔티티 조회 (갱신용).

        Args:
            history_id: 이력 ID

        Returns:
            ClassificationRecord 또는 None
        """
        ...

    @abstractmethod
    async def save(self, record: "ClassificationRecord") -> "ClassificationRecord":
        """변경된 이력 저장.

        Args:
            record: get_record로 조회한 엔티티

        Returns:
            저장된 ClassificationRecord
        """
        ...

    @abstractmethod
    async def get_entry(self, history_id: int) -> "HistoryEntry | None":
        """카테고리가 조인된 이력 단건 조회.

        Args:
            history_id: 이력 ID

        Returns:
            HistoryEntry 또는 None
        """
        ...

    @abstractmethod
    async def list_entries(self, limit: int = 20, offset: int = 0) -> list["HistoryEntry"]:
        """카테고리가 조인된 이력 목록 (created_at 내림차순).

        Args:
            limit: 조회 개수
            offset: 건너뛸 개수

        Returns:
            HistoryEntry 목록
        """
        ...

    @abstractmethod
    async def count(self) -> int:
        """전체 이력 수 (페이지네이션 무관)."""
        ...


__all__ = ["HistoryRepositoryPort"]
