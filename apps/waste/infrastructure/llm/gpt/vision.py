"""GPT Vision Adapter - VisionModelPort 구현체.

OpenAI chat.completions API 사용 (비동기).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx
import openai
from openai import AsyncOpenAI

from waste.application.classify.ports import VisionModelPort
from waste.application.common.exceptions import UpstreamUnavailableError
from waste.infrastructure.llm.gpt.config import (
    MAX_RETRIES,
    OPENAI_LIMITS,
    OPENAI_TIMEOUT,
)

if TYPE_CHECKING:
    from waste.application.classify.dto import ImageSource

logger = logging.getLogger(__name__)


class GPTVisionAdapter(VisionModelPort):
    """GPT Vision API 구현체.

    system 메시지 + (텍스트, 이미지) user 메시지로 호출하고
    첫 번째 choice의 content 원문을 반환합니다.
    """

    def __init__(
        self,
        model: str = "gpt-5.2",
        api_key: str | None = None,
        client: AsyncOpenAI | None = None,
    ):
        """초기화.

        Args:
            model: GPT 모델명 (기본: gpt-5.2)
            api_key: OpenAI API 키 (None이면 환경변수 사용)
            client: 주입할 AsyncOpenAI 클라이언트 (테스트용)
        """
        if client is None:
            http_client = httpx.AsyncClient(
                timeout=OPENAI_TIMEOUT,
                limits=OPENAI_LIMITS,
            )
            client = AsyncOpenAI(
                api_key=api_key,
                http_client=http_client,
                max_retries=MAX_RETRIES,
            )
        self._client = client
        self._model = model
        logger.info(
            "GPTVisionAdapter initialized (model=%s)",
            model,
        )

    @property
    def provider(self) -> str:
        return "gpt"

    async def analyze_image(
        self,
        system_prompt: str,
        user_prompt: str,
        image: "ImageSource",
    ) -> str:
        """이미지 분석 후 응답 원문 반환.

        Raises:
            UpstreamUnavailableError: OpenAI 호출 실패
        """
        content_items = [
            {"type": "text", "text": user_prompt},
            {"type": "image_url", "image_url": {"url": image.model_url}},
        ]

        logger.debug(
            "Vision API call starting (model=%s, inline=%s)",
            self._model,
            image.is_inline,
        )

        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": content_items},
                ],
            )
        except (openai.OpenAIError, httpx.HTTPError) as e:
            logger.error(
                "Vision API call failed (model=%s): %s",
                self._model,
                e,
            )
            raise UpstreamUnavailableError(self.provider, str(e)) from e

        if not response.choices:
            return ""
        text = response.choices[0].message.content or ""

        logger.debug(
            "Vision API call completed (model=%s, len=%d)",
            self._model,
            len(text),
        )
        return text

    async def close(self) -> None:
        """리소스 정리 (AsyncOpenAI 내부 httpx 클라이언트 종료)."""
        await self._client.close()
        logger.debug("GPTVisionAdapter client closed (model=%s)", self._model)
