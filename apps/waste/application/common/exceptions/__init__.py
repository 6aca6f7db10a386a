"""Waste 애플리케이션 예외."""

from waste.application.common.exceptions.base import ApplicationError
from waste.application.common.exceptions.upstream import UpstreamUnavailableError
from waste.application.common.exceptions.validation import (
    InvalidInputError,
    UnsupportedModelError,
)

__all__ = [
    "ApplicationError",
    "InvalidInputError",
    "UnsupportedModelError",
    "UpstreamUnavailableError",
]
