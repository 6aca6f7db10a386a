"""외부 서비스 관련 애플리케이션 예외."""

from waste.application.common.exceptions.base import ApplicationError


class UpstreamUnavailableError(ApplicationError):
    """Vision 모델 호출 실패.

    재시도하지 않고 호출자에게 즉시 전달됩니다.
    """

    def __init__(self, provider: str, reason: str | None = None) -> None:
        self.provider = provider
        self.reason = reason
        super().__init__("Failed to classify image")
