"""Tests for configuration loading."""

import json

import pytest

from seokar.core.config import AppConfig, ProviderConfig


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every SEOKAR_* variable from the environment."""
    import os

    for name in list(os.environ):
        if name.startswith("SEOKAR_"):
            monkeypatch.delenv(name)
    return monkeypatch


class TestAppConfig:
    """Tests for AppConfig."""

    def test_defaults(self, clean_env):
        config = AppConfig.from_env()

        assert config.request_timeout == 30
        assert config.sslverify is True
        assert config.site_language == "en-US"
        assert config.openai_model == "gpt-3.5-turbo"
        assert config.google_model == "gemini-1.5-flash"
        assert config.max_tokens == 200
        assert config.api_token is None

    def test_reads_environment(self, clean_env):
        clean_env.setenv("SEOKAR_REQUEST_TIMEOUT", "45")
        clean_env.setenv("SEOKAR_SSLVERIFY", "false")
        clean_env.setenv("SEOKAR_SITE_LANGUAGE", "fa-IR")
        clean_env.setenv("SEOKAR_OPENAI_MODEL", "gpt-4o")
        clean_env.setenv("SEOKAR_API_TOKEN", "tok")
        config = AppConfig.from_env()

        assert config.request_timeout == 45
        assert config.sslverify is False
        assert config.ui_language == "fa"
        assert config.openai_model == "gpt-4o"
        assert config.api_token == "tok"

    def test_invalid_timeout(self, clean_env):
        clean_env.setenv("SEOKAR_REQUEST_TIMEOUT", "soon")

        with pytest.raises(ValueError, match="SEOKAR_REQUEST_TIMEOUT must be an integer"):
            AppConfig.from_env()

    def test_timeout_out_of_range(self, clean_env):
        clean_env.setenv("SEOKAR_REQUEST_TIMEOUT", "0")

        with pytest.raises(ValueError, match="between 1 and 600"):
            AppConfig.from_env()

    def test_config_is_frozen(self):
        config = AppConfig()

        with pytest.raises(Exception):
            config.request_timeout = 5

    @pytest.mark.parametrize(
        "language,expected",
        [("en-US", "en"), ("fa_IR", "fa"), ("FA", "fa"), ("", "en")],
    )
    def test_ui_language(self, language, expected):
        assert AppConfig(site_language=language).ui_language == expected


class TestProviderConfig:
    """Tests for ProviderConfig."""

    def test_blank_keys_are_missing(self):
        config = ProviderConfig(openai_api_key="  ", google_api_key=" g ")

        assert config.openai_api_key is None
        assert config.google_api_key == "g"

    def test_from_options_ignores_unknown_keys(self):
        config = ProviderConfig.from_options({"openai_api_key": "sk", "theme": "dark"})

        assert config.credential_for("openai_api_key") == "sk"
        assert config.credential_for("huggingface_api_key") is None

    def test_from_options_none(self):
        assert ProviderConfig.from_options(None) == ProviderConfig()

    def test_from_env(self, clean_env):
        clean_env.setenv("SEOKAR_GOOGLE_API_KEY", "g-key")
        config = ProviderConfig.from_env()

        assert config.google_api_key == "g-key"
        assert config.openai_api_key is None

    def test_from_file(self, tmp_path):
        path = tmp_path / "options.json"
        path.write_text(json.dumps({"huggingface_api_key": "hf"}), encoding="utf-8")

        assert ProviderConfig.from_file(path).huggingface_api_key == "hf"

    def test_from_file_rejects_non_object(self, tmp_path):
        path = tmp_path / "options.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ValueError, match="JSON object"):
            ProviderConfig.from_file(path)
