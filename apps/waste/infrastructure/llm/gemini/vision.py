"""Google Gemini Vision Adapter - VisionModelPort 구현체.

Gemini API generate_content 사용 (비동기 aio 클라이언트).
"""

from __future__ import annotations

import base64
import binascii
import logging
from typing import TYPE_CHECKING

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from waste.application.classify.ports import VisionModelPort
from waste.application.common.exceptions import UpstreamUnavailableError
from waste.infrastructure.llm.gemini.config import (
    GEMINI_CONNECT_TIMEOUT,
    GEMINI_READ_TIMEOUT,
    IMAGE_FETCH_TIMEOUT,
)

if TYPE_CHECKING:
    from waste.application.classify.dto import ImageSource

logger = logging.getLogger(__name__)


class GeminiVisionAdapter(VisionModelPort):
    """Google Gemini Vision API 구현체.

    URL 입력은 httpx로 내려받아 바이트로 전달합니다.
    """

    def __init__(
        self,
        model: str = "gemini-2.5-flash",
        api_key: str | None = None,
        client: genai.Client | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """초기화.

        Args:
            model: Gemini 모델명
            api_key: Google API 키 (None이면 GOOGLE_API_KEY 환경변수 사용)
            client: 주입할 genai 클라이언트 (테스트용)
            http_client: 이미지 다운로드용 httpx 클라이언트 (테스트용)
        """
        if client is None:
            client = genai.Client(api_key=api_key) if api_key else genai.Client()
        self._client = client
        self._model = model
        self._http_client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(
                IMAGE_FETCH_TIMEOUT,
                connect=GEMINI_CONNECT_TIMEOUT,
            )
        )
        logger.info(
            "GeminiVisionAdapter initialized (model=%s)",
            model,
        )

    @property
    def provider(self) -> str:
        return "gemini"

    async def _fetch_image_bytes(self, image_url: str) -> tuple[bytes, str]:
        """URL에서 이미지 바이트 다운로드.

        Returns:
            (이미지 바이트, MIME 타입) 튜플
        """
        response = await self._http_client.get(image_url)
        response.raise_for_status()

        # "image/jpeg; charset=utf-8" → "image/jpeg"
        content_type = response.headers.get("content-type", "image/jpeg")
        mime_type = content_type.split(";")[0].strip()

        return response.content, mime_type

    async def _image_part(self, image: "ImageSource") -> types.Part:
        if image.is_inline:
            mime_type, data = image.inline_payload
            image_bytes = base64.b64decode(data, validate=True)
        else:
            image_bytes, mime_type = await self._fetch_image_bytes(image.model_url)
        return types.Part.from_bytes(data=image_bytes, mime_type=mime_type)

    async def analyze_image(
        self,
        system_prompt: str,
        user_prompt: str,
        image: "ImageSource",
    ) -> str:
        """이미지 분석 후 응답 원문 반환.

        Raises:
            UpstreamUnavailableError: 이미지 준비 또는 Gemini 호출 실패
        """
        logger.debug(
            "Vision API call starting (model=%s, inline=%s)",
            self._model,
            image.is_inline,
        )

        try:
            image_part = await self._image_part(image)
            response = await self._client.aio.models.generate_content(
                model=self._model,
                contents=[image_part, user_prompt],
                config=types.GenerateContentConfig(
                    system_instruction=system_prompt,
                    http_options=types.HttpOptions(
                        timeout=int(GEMINI_READ_TIMEOUT * 1000),
                    ),
                ),
            )
        except (genai_errors.APIError, httpx.HTTPError, binascii.Error, ValueError) as e:
            logger.error(
                "Vision API call failed (model=%s): %s",
                self._model,
                e,
            )
            raise UpstreamUnavailableError(self.provider, str(e)) from e

        text = response.text or ""

        logger.debug(
            "Vision API call completed (model=%s, len=%d)",
            self._model,
            len(text),
        )
        return text

    async def close(self) -> None:
        """리소스 정리 (이미지 다운로드용 HTTP 클라이언트 종료)."""
        await self._http_client.aclose()
        logger.debug("GeminiVisionAdapter http client closed (model=%s)", self._model)
