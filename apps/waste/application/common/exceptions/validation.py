"""검증 관련 애플리케이션 예외."""

from waste.application.common.exceptions.base import ApplicationError


class InvalidInputError(ApplicationError):
    """이미지 입력 누락 (imageBase64, imageUrl 둘 다 없음)."""

    def __init__(self, message: str = "Either imageBase64 or imageUrl is required") -> None:
        super().__init__(message)


class UnsupportedModelError(ApplicationError):
    """지원하지 않는 Vision 모델."""

    def __init__(self, model: str, supported_models: list[str]) -> None:
        self.model = model
        self.supported_models = supported_models
        super().__init__(f"Unsupported model: '{model}'")
