"""Waste Domain Value Objects."""

from waste.domain.value_objects.classification import (
    ClassificationOutcome,
    ClassificationPayload,
    FallbackClassification,
    ParsedClassification,
)

__all__ = [
    "ClassificationOutcome",
    "ClassificationPayload",
    "FallbackClassification",
    "ParsedClassification",
]
