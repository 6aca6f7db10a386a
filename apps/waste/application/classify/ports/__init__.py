"""Classify Ports."""

from waste.application.classify.ports.prompt_repository import PromptRepositoryPort
from waste.application.classify.ports.vision_model import (
    VisionModelPort,
    VisionModelResolver,
)

__all__ = ["PromptRepositoryPort", "VisionModelPort", "VisionModelResolver"]
