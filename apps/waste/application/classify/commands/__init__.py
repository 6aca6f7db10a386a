"""Classify Commands."""

from waste.application.classify.commands.classify_waste import (
    ClassificationView,
    ClassifyWasteCommand,
    ClassifyWasteRequest,
    ClassifyWasteResponse,
)

__all__ = [
    "ClassificationView",
    "ClassifyWasteCommand",
    "ClassifyWasteRequest",
    "ClassifyWasteResponse",
]
