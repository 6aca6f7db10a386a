"""GPT Vision Adapter."""

from waste.infrastructure.llm.gpt.vision import GPTVisionAdapter

__all__ = ["GPTVisionAdapter"]
