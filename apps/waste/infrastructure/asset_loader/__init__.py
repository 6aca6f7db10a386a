"""Asset Loader Infrastructure - Prompt/YAML Loading."""

from waste.infrastructure.asset_loader.prompt_repository_impl import (
    FilePromptRepository,
    load_category_seed,
)

__all__ = ["FilePromptRepository", "load_category_seed"]
