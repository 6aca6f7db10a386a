"""Waste Domain Entities."""

from waste.domain.entities.classification_record import (
    INLINE_IMAGE_PLACEHOLDER,
    ClassificationRecord,
)
from waste.domain.entities.waste_category import WasteCategory

__all__ = [
    "ClassificationRecord",
    "INLINE_IMAGE_PLACEHOLDER",
    "WasteCategory",
]
