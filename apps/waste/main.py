"""Waste API - FastAPI application entry point.

분산 트레이싱 통합:
- FastAPI 자동 계측 (HTTP 요청/응답)
- HTTPX 자동 계측 (Vision API 호출)
- SQLAlchemy 자동 계측 (분류 이력 쿼리)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from waste.infrastructure.persistence_postgres.mappings import start_mappers
from waste.infrastructure.persistence_postgres.session import engine
from waste.presentation.http.controllers import (
    categories_router,
    classify_router,
    health_router,
    history_router,
)
from waste.presentation.http.errors.handlers import register_exception_handlers
from waste.setup.config import get_settings
from waste.setup.dependencies import close_vision_models
from waste.setup.logging import setup_logging
from waste.setup.tracing import (
    configure_tracing,
    instrument_fastapi,
    instrument_httpx,
    instrument_sqlalchemy,
    shutdown_tracing,
)

logger = logging.getLogger(__name__)
settings = get_settings()

# OpenTelemetry 분산 트레이싱 설정
configure_tracing()
instrument_httpx()
instrument_sqlalchemy(engine)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 수명주기 관리."""
    # Startup
    setup_logging()
    logger.info(f"Starting {settings.service_name} ({settings.environment})")

    # ORM 매핑 시작
    start_mappers()
    logger.info("ORM mappings initialized")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.service_name}")
    await close_vision_models()
    await engine.dispose()
    shutdown_tracing()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 생성."""
    app = FastAPI(
        title="Waste API",
        description="Waste photo classification and disposal guidance",
        version=settings.service_version,
        docs_url="/api/v1/waste/docs" if settings.debug else None,
        redoc_url="/api/v1/waste/redoc" if settings.debug else None,
        openapi_url="/api/v1/waste/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # OpenTelemetry FastAPI instrumentation
    instrument_fastapi(app)

    # Exception handlers
    register_exception_handlers(app)

    # Routers
    app.include_router(health_router)
    app.include_router(categories_router, prefix="/api/v1")
    app.include_router(classify_router, prefix="/api/v1")
    app.include_router(history_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
