"""Waste 도메인 예외."""

from waste.domain.exceptions.base import DomainError
from waste.domain.exceptions.classification import (
    CategoryNotFoundError,
    ClassificationNotFoundError,
)

__all__ = [
    "DomainError",
    "CategoryNotFoundError",
    "ClassificationNotFoundError",
]
