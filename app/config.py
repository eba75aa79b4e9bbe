from pydantic_settings import BaseSettings, SettingsConfigDict

from app.errors import ConfigurationError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    slack_bot_token: str = ""

    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-3.5-turbo"
    openai_max_tokens: int = 100
    openai_timeout: float = 30.0
    fallback_reply: str = "すみません、現在お手伝いできません。"

    port: int = 3000
    log_level: str = "INFO"


REQUIRED_SETTINGS = {
    "slack_bot_token": "SLACK_BOT_TOKEN",
    "openai_api_key": "OPENAI_API_KEY",
}


def require_settings(config: Settings) -> Settings:
    missing = [env for field, env in REQUIRED_SETTINGS.items() if not getattr(config, field).strip()]
    if missing:
        raise ConfigurationError(
            f"Missing required configuration: {', '.join(missing)}. "
            "Set them in the environment or in a .env file."
        )
    return config


settings = Settings()
