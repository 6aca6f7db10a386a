"""Category Reader Port - 카테고리 조회 추상화."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from waste.domain.entities import WasteCategory


class CategoryReaderPort(ABC):
    """카테고리 읽기 전용 Port."""

    @abstractmethod
    async def list_all(self) -> list["WasteCategory"]:
        """전체 카테고리를 이름 오름차순으로 조회."""
        ...

    @abstractmethod
    async def find_by_name(self, name: str) -> "WasteCategory | None":
        """카테고리명 대소문자 무시 완전 일치 조회.

        Args:
            name: 카테고리명

        Returns:
            WasteCategory 또는 None
        """
        ...


__all__ = ["CategoryReaderPort"]
