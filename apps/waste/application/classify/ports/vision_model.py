"""Vision Model Port - 이미지 분석 추상화."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from waste.application.classify.dto import ImageSource


class VisionModelPort(ABC):
    """Vision 모델 포트 - 이미지 + 프롬프트 → 원문 텍스트.

    OpenAI, Gemini 등 구현체를 모델명 기준으로 주입합니다.
    응답 파싱은 애플리케이션 레이어의 책임입니다.
    """

    @property
    @abstractmethod
    def provider(self) -> str:
        """provider 이름 (gpt, gemini)."""
        ...

    @abstractmethod
    async def analyze_image(
        self,
        system_prompt: str,
        user_prompt: str,
        image: "ImageSource",
    ) -> str:
        """이미지 분석 후 첫 번째 응답 메시지 원문 반환.

        Args:
            system_prompt: 분류 지시 시스템 프롬프트
            user_prompt: 사용자 프롬프트
            image: 분석할 이미지

        Returns:
            모델 응답 텍스트 (JSON 포함 기대, 보장 없음)

        Raises:
            UpstreamUnavailableError: 모델 호출 실패
        """
        ...

    async def close(self) -> None:
        """클라이언트 리소스 정리."""
        return None


# 모델명 → VisionModelPort
VisionModelResolver = Callable[[str], VisionModelPort]
