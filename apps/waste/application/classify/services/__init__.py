"""Classify Services."""

from waste.application.classify.services.response_parser import (
    VisionResponse,
    VisionResponseParser,
)
from waste.application.classify.services.vision_classifier import VisionClassifier

__all__ = ["VisionClassifier", "VisionResponse", "VisionResponseParser"]
