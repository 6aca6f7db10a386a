"""HTTP Controllers."""

from waste.presentation.http.controllers.categories import router as categories_router
from waste.presentation.http.controllers.classify import router as classify_router
from waste.presentation.http.controllers.health import router as health_router
from waste.presentation.http.controllers.history import router as history_router

__all__ = [
    "categories_router",
    "classify_router",
    "health_router",
    "history_router",
]
