"""Unit tests for application settings configuration."""

from pathlib import Path

import pytest

from laura.config import DEFAULT_SYSTEM_PROMPT, Settings

_ENV_VARS = (
    "MISTRAL_API_KEY",
    "VITE_MISTRAL_API_KEY",
    "MISTRAL_MODEL",
    "VITE_MISTRAL_MODEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_defaults(clean_env):
    settings = Settings(_env_file=None)

    assert settings.mistral_api_key == ""
    assert settings.mistral_model == "mistral-small"
    assert settings.mistral_embedding_model == "mistral-embed"
    assert settings.chunk_size == 800
    assert settings.chunk_overlap == 100
    assert settings.retrieval_top_k == 3
    assert settings.retrieval_threshold == 0.2
    assert settings.chat_temperature == 0.4
    assert settings.system_prompt == DEFAULT_SYSTEM_PROMPT
    assert settings.max_upload_size_bytes == 2 * 1024 * 1024


def test_api_key_read_from_environment(clean_env):
    clean_env.setenv("MISTRAL_API_KEY", "  secret  ")

    assert Settings(_env_file=None).mistral_api_key == "secret"


def test_vite_prefixed_variables_are_accepted(clean_env):
    clean_env.setenv("VITE_MISTRAL_API_KEY", "vite-secret")
    clean_env.setenv("VITE_MISTRAL_MODEL", "mistral-large")

    settings = Settings(_env_file=None)

    assert settings.mistral_api_key == "vite-secret"
    assert settings.mistral_model == "mistral-large"


def test_unprefixed_variable_wins_over_vite_prefix(clean_env):
    clean_env.setenv("MISTRAL_API_KEY", "primary")
    clean_env.setenv("VITE_MISTRAL_API_KEY", "fallback")

    assert Settings(_env_file=None).mistral_api_key == "primary"


@pytest.mark.parametrize("model", ["mistral-small", "mistral-medium", "mistral-large"])
def test_supported_models_are_kept(clean_env, model):
    clean_env.setenv("MISTRAL_MODEL", model)

    assert Settings(_env_file=None).mistral_model == model


@pytest.mark.parametrize("model", ["gpt-4o", "", "   "])
def test_unknown_model_falls_back_to_default(clean_env, model):
    clean_env.setenv("MISTRAL_MODEL", model)

    assert Settings(_env_file=None).mistral_model == "mistral-small"
