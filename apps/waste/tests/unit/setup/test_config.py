"""Config / DI 테스트 - 모델 설정."""

import pytest

from waste.setup.config import Settings, get_settings


@pytest.fixture
def llm_env(monkeypatch):
    """API 키 환경변수 고정 (캐시 초기화 포함)."""
    from waste.setup.dependencies import _vision_models

    monkeypatch.setenv("OPENAI_API_KEY", "test-openai-key")
    monkeypatch.setenv("GEMINI_API_KEY", "test-gemini-key")
    get_settings.cache_clear()
    _vision_models.clear()
    yield
    get_settings.cache_clear()
    _vision_models.clear()


class TestSettingsResolveProvider:
    """Settings.resolve_provider() 테스트."""

    def test_resolve_provider_gpt(self):
        settings = Settings()
        assert settings.resolve_provider("gpt-5.2") == "gpt"
        assert settings.resolve_provider("gpt-4o") == "gpt"

    def test_resolve_provider_gemini(self):
        settings = Settings()
        assert settings.resolve_provider("gemini-2.5-flash") == "gemini"

    def test_resolve_provider_unknown_raises(self):
        with pytest.raises(KeyError):
            Settings().resolve_provider("unknown-model")


class TestSettings:
    """기타 설정 테스트."""

    def test_validate_model(self):
        settings = Settings()
        assert settings.validate_model("gpt-5.2") is True
        assert settings.validate_model("claude-3") is False

    def test_default_model_is_supported(self):
        settings = Settings()
        assert settings.llm_default_model in settings.get_all_supported_models()

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("WASTE_LLM_DEFAULT_MODEL", "gemini-2.5-flash")
        monkeypatch.setenv("WASTE_CORS_ORIGINS_STR", "http://a.test, http://b.test")

        settings = Settings()

        assert settings.llm_default_model == "gemini-2.5-flash"
        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_api_key_masked(self, llm_env):
        settings = get_settings()

        assert "test-openai-key" not in repr(settings)
        assert settings.get_api_key("gpt") == "test-openai-key"
        assert settings.get_api_key("gemini") == "test-gemini-key"


class TestGetVisionModel:
    """모델명 → Vision 어댑터 선택 테스트."""

    def test_gpt_model(self, llm_env):
        from waste.infrastructure.llm import GPTVisionAdapter
        from waste.setup.dependencies import get_vision_model

        adapter = get_vision_model("gpt-4o")

        assert isinstance(adapter, GPTVisionAdapter)
        assert get_vision_model("gpt-4o") is adapter

    def test_gemini_model(self, llm_env):
        from waste.infrastructure.llm import GeminiVisionAdapter
        from waste.setup.dependencies import get_vision_model

        assert isinstance(get_vision_model("gemini-2.5-flash"), GeminiVisionAdapter)

    def test_unsupported_model_raises(self, llm_env):
        from waste.application.common.exceptions import UnsupportedModelError
        from waste.setup.dependencies import get_vision_model

        with pytest.raises(UnsupportedModelError) as exc_info:
            get_vision_model("unknown-model")

        assert "gpt-5.2" in exc_info.value.supported_models

    @pytest.mark.asyncio
    async def test_close_vision_models_closes_and_evicts(self, llm_env):
        from unittest.mock import AsyncMock

        from waste.setup.dependencies import close_vision_models, get_vision_model

        adapter = get_vision_model("gpt-4o")
        adapter.close = AsyncMock()

        await close_vision_models()

        adapter.close.assert_awaited_once()
        assert get_vision_model("gpt-4o") is not adapter
