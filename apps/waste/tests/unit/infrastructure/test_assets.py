"""FilePromptRepository 및 패키지 에셋 테스트."""

from pathlib import Path

import pytest

from waste.domain.enums import WasteCategoryName
from waste.infrastructure.asset_loader import FilePromptRepository, load_category_seed
from waste.setup.config import get_settings


@pytest.fixture
def repository() -> FilePromptRepository:
    return FilePromptRepository(assets_path=get_settings().assets_path)


class TestFilePromptRepository:
    """프롬프트 로딩 테스트."""

    def test_system_prompt_has_placeholder(self, repository: FilePromptRepository) -> None:
        prompt = repository.get_prompt("vision_classification_prompt")

        assert "{{CATEGORY_LIST}}" in prompt
        assert "detected_items" in prompt

    def test_user_prompt(self, repository: FilePromptRepository) -> None:
        assert (
            repository.get_prompt("vision_user_prompt")
            == "Classify this waste item and provide disposal recommendations."
        )

    def test_prompt_is_cached(self, tmp_path: Path) -> None:
        prompts = tmp_path / "prompts"
        prompts.mkdir()
        (prompts / "greeting.txt").write_text("hello\n", encoding="utf-8")
        repository = FilePromptRepository(assets_path=tmp_path)

        assert repository.get_prompt("greeting") == "hello"
        (prompts / "greeting.txt").write_text("changed", encoding="utf-8")
        assert repository.get_prompt("greeting") == "hello"

    def test_missing_prompt_raises(self, repository: FilePromptRepository) -> None:
        with pytest.raises(FileNotFoundError):
            repository.get_prompt("does_not_exist")


class TestCategorySeed:
    """카테고리 시드 테스트."""

    def test_seed_names_match_prompt_categories(self) -> None:
        names = [category["name"] for category in load_category_seed()]

        assert sorted(names) == sorted(WasteCategoryName.values())

    def test_seed_has_guidance(self) -> None:
        for category in load_category_seed():
            assert category["color_code"].startswith("#")
            assert category["description"]
            assert category["disposal_instructions"]
            assert category["environmental_impact"]

    def test_missing_seed_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_category_seed(tmp_path / "missing.yaml")
