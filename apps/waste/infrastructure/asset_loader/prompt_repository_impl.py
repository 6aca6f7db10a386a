"""File Prompt Repository - PromptRepositoryPort 구현체.

파일 시스템 기반 프롬프트/YAML 로딩.
"""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import Any

import yaml

from waste.application.classify.ports import PromptRepositoryPort

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY_SEED_PATH = (
    Path(__file__).resolve().parent.parent / "assets" / "data" / "waste_categories.yaml"
)


class FilePromptRepository(PromptRepositoryPort):
    """파일 시스템 기반 프롬프트 리포지토리.

    프롬프트 템플릿 로딩 (이름별 캐시).
    """

    def __init__(self, assets_path: str | Path):
        """초기화.

        Args:
            assets_path: 정적 에셋 경로 (prompts/, data/ 포함)
        """
        self._assets_path = Path(assets_path)
        self._prompts_dir = self._assets_path / "prompts"
        self._cache: dict[str, Any] = {}
        logger.info(
            "FilePromptRepository initialized (path=%s)",
            self._assets_path,
        )

    def get_prompt(self, name: str) -> str:
        """프롬프트 템플릿 로딩.

        Args:
            name: 프롬프트 이름 (확장자 제외)

        Returns:
            프롬프트 템플릿 문자열
        """
        cache_key = f"prompt:{name}"
        if cache_key in self._cache:
            return self._cache[cache_key]

        filepath = self._prompts_dir / f"{name}.txt"
        if not filepath.exists():
            raise FileNotFoundError(f"Prompt not found: {filepath}")

        with filepath.open("r", encoding="utf-8") as f:
            content = f.read().strip()

        # SHA1 해시로 로딩 검증
        digest = hashlib.sha1(content.encode("utf-8")).hexdigest()
        logger.info(
            "Prompt loaded (path=%s, len=%d, sha1=%s)",
            filepath,
            len(content),
            digest,
        )

        self._cache[cache_key] = content
        return content


def load_category_seed(
    filepath: str | Path = DEFAULT_CATEGORY_SEED_PATH,
) -> list[dict[str, Any]]:
    """카테고리 시드 파일 로딩 (마이그레이션에서도 사용)."""
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Category seed not found: {filepath}")

    with filepath.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    categories = data.get("categories", [])
    logger.info("Category seed loaded (path=%s, count=%d)", filepath, len(categories))
    return categories
