"""LLM Infrastructure Adapters.

모델 패밀리별 Vision 구현체:
- gpt/: GPT 모델 (gpt-4o, gpt-5.x)
- gemini/: Gemini 모델 (gemini-2.5, gemini-3)
"""

from waste.infrastructure.llm.gemini import GeminiVisionAdapter
from waste.infrastructure.llm.gpt import GPTVisionAdapter

__all__ = [
    "GPTVisionAdapter",
    "GeminiVisionAdapter",
]
