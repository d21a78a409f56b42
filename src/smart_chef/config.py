"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from smart_chef import messages
from smart_chef.domain.errors import ConfigurationError

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

PLACEHOLDER_API_KEY = "PLACEHOLDER_API_KEY"
GEMINI_API_KEY_ENV = "GEMINI_API_KEY"
OPENAI_API_KEY_ENV = "OPENAI_API_KEY"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    ai_provider: str = "gemini"
    gemini_api_key: str = ""
    gemini_text_model: str = "gemini-2.5-flash"
    gemini_image_model: str = "gemini-2.5-flash-image"
    openai_api_key: str = ""
    openai_model: str = "gpt-5.2"
    openai_image_model: str = "gpt-image-1"
    openai_reasoning_effort: str | None = None
    openai_store: bool = False
    profile_path: str = ".smart_chef/profile.json"
    placeholder_image_base_url: str = "https://loremflickr.com"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def active_api_key(self) -> str:
        """Return the credential of the configured provider."""
        if self.ai_provider == "openai":
            return self.openai_api_key
        return self.gemini_api_key

    def active_api_key_env(self) -> str:
        """Return the environment variable holding the active credential."""
        if self.ai_provider == "openai":
            return OPENAI_API_KEY_ENV
        return GEMINI_API_KEY_ENV


def require_api_key(api_key: str | None, env_var: str = GEMINI_API_KEY_ENV) -> str:
    """Return a usable API key or raise a configuration error."""
    cleaned = (api_key or "").strip()
    if not cleaned or cleaned == PLACEHOLDER_API_KEY:
        raise ConfigurationError(messages.missing_api_key(env_var))
    return cleaned
