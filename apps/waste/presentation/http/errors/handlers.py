"""Exception Handlers.

도메인/애플리케이션 예외와 요청 검증 오류, 예상하지 못한 예외를
`{"error", "code"}` 응답으로 변환합니다.
4xx는 WARNING, 5xx는 ERROR로 기록합니다.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from waste.application.common.exceptions import (
    ApplicationError,
    InvalidInputError,
    UnsupportedModelError,
    UpstreamUnavailableError,
)
from waste.domain.exceptions import (
    CategoryNotFoundError,
    ClassificationNotFoundError,
    DomainError,
)

logger = logging.getLogger(__name__)


def _error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    **extra: Any,
) -> JSONResponse:
    level = logging.ERROR if status_code >= 500 else logging.WARNING
    logger.log(
        level,
        "request_failed",
        extra={
            "code": code,
            "status_code": status_code,
            "path": request.url.path,
            "error_message": message,
        },
    )
    return JSONResponse(
        status_code=status_code,
        content={"error": message, "code": code, **extra},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError):
        return _error_response(request, 400, "INVALID_INPUT", exc.message)

    @app.exception_handler(UnsupportedModelError)
    async def unsupported_model_handler(request: Request, exc: UnsupportedModelError):
        return _error_response(
            request,
            400,
            "UNSUPPORTED_MODEL",
            exc.message,
            supported_models=exc.supported_models,
        )

    @app.exception_handler(UpstreamUnavailableError)
    async def upstream_unavailable_handler(request: Request, exc: UpstreamUnavailableError):
        return _error_response(request, 500, "UPSTREAM_UNAVAILABLE", exc.message)

    @app.exception_handler(CategoryNotFoundError)
    async def category_not_found_handler(request: Request, exc: CategoryNotFoundError):
        return _error_response(request, 500, "CATEGORY_NOT_FOUND", exc.message)

    @app.exception_handler(ClassificationNotFoundError)
    async def classification_not_found_handler(
        request: Request, exc: ClassificationNotFoundError
    ):
        return _error_response(request, 404, "NOT_FOUND", exc.message)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return _error_response(request, 400, "DOMAIN_ERROR", exc.message)

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return _error_response(request, 400, "APPLICATION_ERROR", exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # 쿼리/경로 파라미터 오류는 FastAPI 기본 422 유지
        if not any(tuple(error.get("loc", ()))[:1] == ("body",) for error in exc.errors()):
            return await request_validation_exception_handler(request, exc)
        return _error_response(request, 400, "INVALID_INPUT", "Invalid request body")

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        return _error_response(request, 500, "INTERNAL_ERROR", "Internal server error")
