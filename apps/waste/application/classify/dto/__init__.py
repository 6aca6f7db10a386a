"""Classify DTOs."""

from waste.application.classify.dto.image_source import ImageSource

__all__ = ["ImageSource"]
