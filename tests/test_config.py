"""Tests for settings loading and startup validation."""

import pytest

from app.config import Settings, require_settings
from app.errors import ConfigurationError


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("OPENAI_MODEL", "OPENAI_MAX_TOKENS", "OPENAI_BASE_URL", "PORT"):
            monkeypatch.delenv(name, raising=False)
        config = Settings(_env_file=None)
        assert config.openai_model == "gpt-3.5-turbo"
        assert config.openai_max_tokens == 100
        assert config.openai_base_url == "https://api.openai.com/v1"
        assert config.port == 3000

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-env")
        monkeypatch.setenv("OPENAI_MAX_TOKENS", "256")
        config = Settings(_env_file=None)
        assert config.slack_bot_token == "xoxb-env"
        assert config.openai_max_tokens == 256

    def test_reads_env_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("OPENAI_API_KEY=sk-from-file\n", encoding="utf-8")
        config = Settings(_env_file=env_file)
        assert config.openai_api_key == "sk-from-file"


class TestRequireSettings:
    def test_passes_when_complete(self, config):
        assert require_settings(config) is config

    def test_names_every_missing_variable(self):
        config = Settings(_env_file=None, slack_bot_token="", openai_api_key="  ")
        with pytest.raises(ConfigurationError) as exc_info:
            require_settings(config)
        assert "SLACK_BOT_TOKEN" in str(exc_info.value)
        assert "OPENAI_API_KEY" in str(exc_info.value)

    def test_names_only_missing_variable(self):
        config = Settings(_env_file=None, slack_bot_token="xoxb", openai_api_key="")
        with pytest.raises(ConfigurationError) as exc_info:
            require_settings(config)
        assert "OPENAI_API_KEY" in str(exc_info.value)
        assert "SLACK_BOT_TOKEN" not in str(exc_info.value)
