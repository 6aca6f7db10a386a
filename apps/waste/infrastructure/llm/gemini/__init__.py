"""Google Gemini Vision Adapter."""

from waste.infrastructure.llm.gemini.vision import GeminiVisionAdapter

__all__ = ["GeminiVisionAdapter"]
