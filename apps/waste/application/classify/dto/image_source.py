"""Image Source DTO - 분류 대상 이미지 입력."""

from __future__ import annotations

from dataclasses import dataclass

from waste.application.common.exceptions import InvalidInputError

DATA_URL_PREFIX = "data:"
DEFAULT_INLINE_MIME_TYPE = "image/jpeg"


@dataclass(frozen=True, slots=True)
class ImageSource:
    """인라인 base64 이미지 또는 원격 이미지 URL.

    둘 다 주어지면 인라인 이미지를 모델에 전달하고 URL은 이력에 저장합니다.
    """

    inline_base64: str | None = None
    url: str | None = None

    @classmethod
    def of(cls, image_base64: str | None, image_url: str | None) -> "ImageSource":
        """요청 값으로 ImageSource 생성.

        Raises:
            InvalidInputError: 두 입력 모두 비어 있는 경우
        """
        inline = (image_base64 or "").strip() or None
        url = (image_url or "").strip() or None
        if inline is None and url is None:
            raise InvalidInputError()
        return cls(inline_base64=inline, url=url)

    @property
    def is_inline(self) -> bool:
        return self.inline_base64 is not None

    @property
    def model_url(self) -> str:
        """Vision 모델에 전달할 이미지 URL (인라인은 data URL)."""
        if self.inline_base64 is None:
            return self.url or ""
        if self.inline_base64.startswith(DATA_URL_PREFIX):
            return self.inline_base64
        return f"data:{DEFAULT_INLINE_MIME_TYPE};base64,{self.inline_base64}"

    @property
    def inline_payload(self) -> tuple[str, str]:
        """(MIME 타입, base64 본문) 반환. data URL 헤더는 분리합니다."""
        if self.inline_base64 is None:
            raise ValueError("ImageSource has no inline payload")
        if not self.inline_base64.startswith(DATA_URL_PREFIX):
            return DEFAULT_INLINE_MIME_TYPE, self.inline_base64
        header, _, data = self.inline_base64.partition(",")
        mime_type = header[len(DATA_URL_PREFIX) :].split(";")[0] or DEFAULT_INLINE_MIME_TYPE
        return mime_type, data
