"""Tests for environment-driven settings."""

from mixologist.config import DEFAULT_COCKTAILDB_URL, Settings


class TestSettings:
    """Tests for Settings.from_env()."""

    def test_defaults(self, monkeypatch) -> None:
        for name in (
            "AI_PROVIDER",
            "AI_MODEL",
            "ANTHROPIC_API_KEY",
            "OPENAI_API_KEY",
            "IMAGE_GENERATION",
            "COCKTAILDB_BASE_URL",
            "REQUEST_TIMEOUT",
            "AI_TIMEOUT",
            "DETAIL_FETCH_LIMIT",
            "FAVORITES_BACKEND",
            "FAVORITES_RETRY_DELAY",
            "LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = Settings.from_env()

        assert settings.ai_provider == "anthropic"
        assert settings.ai_model is None
        assert settings.cocktaildb_base_url == DEFAULT_COCKTAILDB_URL
        assert settings.request_timeout == 10.0
        assert settings.ai_timeout == 60.0
        assert settings.detail_fetch_limit == 8
        assert settings.favorites_backend == "auto"
        assert settings.favorites_retry_delay == 0.5
        assert settings.log_level == "INFO"
        assert settings.ai_api_key is None
        assert settings.image_api_key is None

    def test_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("AI_PROVIDER", "OpenAI")
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        monkeypatch.setenv("COCKTAILDB_BASE_URL", "http://localhost:9000/api/")
        monkeypatch.setenv("DETAIL_FETCH_LIMIT", "4")
        monkeypatch.setenv("FAVORITES_BACKEND", "MEMORY")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings.from_env()

        assert settings.ai_provider == "openai"
        assert settings.ai_api_key == "sk-test"
        assert settings.image_api_key == "sk-test"
        assert settings.cocktaildb_base_url == "http://localhost:9000/api"
        assert settings.detail_fetch_limit == 4
        assert settings.favorites_backend == "memory"
        assert settings.log_level == "DEBUG"

    def test_image_generation_disabled(self) -> None:
        settings = Settings(openai_api_key="sk-test", image_generation=False)
        assert settings.image_api_key is None

    def test_anthropic_key_does_not_enable_images(self) -> None:
        settings = Settings(anthropic_api_key="sk-ant-test")
        assert settings.ai_api_key == "sk-ant-test"
        assert settings.image_api_key is None

    def test_placeholder_keys_unset(self) -> None:
        settings = Settings(
            anthropic_api_key="your-anthropic-api-key-here",
            openai_api_key="your-openai-api-key-here",
        )
        assert settings.ai_api_key is None
        assert settings.image_api_key is None
