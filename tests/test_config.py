"""Tests for settings and credential checks."""

import pytest

from smart_chef import messages
from smart_chef.config import PLACEHOLDER_API_KEY, Settings, require_api_key
from smart_chef.domain.errors import ConfigurationError


@pytest.mark.parametrize("api_key", [None, "", "   ", PLACEHOLDER_API_KEY])
def test_require_api_key_rejects_unusable_keys(api_key: str | None) -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        require_api_key(api_key)

    assert exc_info.value.user_message == messages.missing_api_key("GEMINI_API_KEY")


def test_require_api_key_strips_whitespace() -> None:
    assert require_api_key("  key-123 ") == "key-123"


def test_active_api_key_follows_provider() -> None:
    settings = Settings(gemini_api_key="g", openai_api_key="o")

    assert settings.active_api_key() == "g"
    assert settings.model_copy(update={"ai_provider": "openai"}).active_api_key() == "o"


def test_missing_key_message_names_active_provider() -> None:
    settings = Settings(ai_provider="openai")

    with pytest.raises(ConfigurationError) as exc_info:
        require_api_key(settings.active_api_key(), settings.active_api_key_env())

    assert "OPENAI_API_KEY" in exc_info.value.user_message
    assert Settings().active_api_key_env() == "GEMINI_API_KEY"
