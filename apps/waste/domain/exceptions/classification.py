"""Waste 도메인 예외."""

from waste.domain.exceptions.base import DomainError


class CategoryNotFoundError(DomainError):
    """모델이 반환한 카테고리가 저장소에 없음."""

    def __init__(self, category: str) -> None:
        self.category = category
        super().__init__(f"Could not find waste category: '{category}'")


class ClassificationNotFoundError(DomainError):
    """분류 이력을 찾을 수 없음."""

    def __init__(self, history_id: int | None = None) -> None:
        self.history_id = history_id
        super().__init__("Classification not found")
