"""Prompt Repository Port - 프롬프트 로딩 추상화."""

from abc import ABC, abstractmethod


class PromptRepositoryPort(ABC):
    """프롬프트 리포지토리 포트.

    파일 시스템, ConfigMap 등 구현체를 DI로 주입.
    """

    @abstractmethod
    def get_prompt(self, name: str) -> str:
        """프롬프트 템플릿 로딩.

        Args:
            name: 프롬프트 이름 (확장자 제외)
                - "vision_classification_prompt"
                - "vision_user_prompt"

        Returns:
            프롬프트 템플릿 문자열
        """
        pass
