"""Vision Classifier - 폐기물 이미지 분류 서비스.

프롬프트 렌더링 → Vision 모델 호출 → 응답 파싱.
VisionModelResolver와 PromptRepositoryPort만 의존.
"""

from __future__ import annotations

import logging
import time

from waste.application.classify.dto import ImageSource
from waste.application.classify.ports import PromptRepositoryPort, VisionModelResolver
from waste.application.classify.services.response_parser import VisionResponseParser
from waste.domain.enums import WasteCategoryName
from waste.domain.value_objects import ClassificationOutcome

logger = logging.getLogger(__name__)

SYSTEM_PROMPT_NAME = "vision_classification_prompt"
USER_PROMPT_NAME = "vision_user_prompt"


class VisionClassifier:
    """Vision 분류 서비스.

    모델 호출 실패(UpstreamUnavailableError)는 그대로 전파하고,
    응답 파싱 실패는 FallbackClassification으로 흡수합니다.
    """

    def __init__(
        self,
        vision_models: VisionModelResolver,
        prompt_repository: PromptRepositoryPort,
        parser: VisionResponseParser | None = None,
    ):
        """초기화.

        Args:
            vision_models: 모델명 → VisionModelPort 리졸버
            prompt_repository: 프롬프트 리포지토리 Port
            parser: 응답 파서 (기본: VisionResponseParser)
        """
        self._vision_models = vision_models
        self._prompts = prompt_repository
        self._parser = parser or VisionResponseParser()

    async def classify(self, image: ImageSource, model: str) -> ClassificationOutcome:
        """이미지 분류.

        Args:
            image: 분류 대상 이미지
            model: Vision 모델명

        Returns:
            ParsedClassification 또는 FallbackClassification

        Raises:
            UpstreamUnavailableError: 모델 호출 실패
        """
        start = time.perf_counter()

        system_prompt = self.render_system_prompt()
        user_prompt = self._prompts.get_prompt(USER_PROMPT_NAME).strip()

        vision = self._vision_models(model)
        raw_text = await vision.analyze_image(
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            image=image,
        )

        outcome = self._parser.parse(raw_text)
        elapsed = (time.perf_counter() - start) * 1000

        logger.info(
            "vision_classification_completed",
            extra={
                "model": model,
                "provider": vision.provider,
                "inline_image": image.is_inline,
                "fallback": outcome.is_fallback,
                "category": outcome.payload.category,
                "elapsed_ms": elapsed,
            },
        )
        return outcome

    def render_system_prompt(self) -> str:
        """허용 카테고리 목록을 채운 시스템 프롬프트."""
        template = self._prompts.get_prompt(SYSTEM_PROMPT_NAME)
        names = WasteCategoryName.values()
        category_list = ", ".join(names[:-1]) + f", or {names[-1]}"
        return template.replace("{{CATEGORY_LIST}}", category_list).strip()
