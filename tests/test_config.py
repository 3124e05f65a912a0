"""Tests for configuration management."""

import asyncio
import os
from unittest.mock import Mock, patch

import pytest

from finnhub_client import FinnhubClient
from finnhub_client.config import (
    Config,
    FinnhubConfig,
    get_config,
    load_config,
    reset_config,
    set_config,
)


@pytest.fixture(autouse=True)
def clean_global_config():
    reset_config()
    yield
    reset_config()


def test_defaults():
    """Test that an empty config falls back to Finnhub defaults."""
    config = Config()
    assert config.finnhub.api_key_env == "FINNHUB_API_KEY"
    assert config.finnhub.base_url == "https://finnhub.io/api/v1"
    assert config.finnhub.timeout_seconds == 5.0
    assert config.logging.level == "INFO"


def test_load_config_from_yaml(tmp_path):
    """Test that YAML values and .env.local tokens are picked up."""
    config_file = tmp_path / "finnhub_client.yaml"
    config_file.write_text(
        "finnhub:\n"
        "  api_key_env: FINNHUB_TEST_TOKEN\n"
        "  base_url: https://example.test/api/v1\n"
        "  timeout_seconds: 2.5\n"
        "logging:\n"
        "  level: DEBUG\n"
    )
    env_file = tmp_path / ".env.local"
    env_file.write_text("FINNHUB_TEST_TOKEN=from-dotenv\n")

    with patch.dict(os.environ, {}):
        os.environ.pop("FINNHUB_TEST_TOKEN", None)
        config = load_config(config_path=str(config_file), env_file=str(env_file))

        assert config.finnhub.base_url == "https://example.test/api/v1"
        assert config.finnhub.timeout_seconds == 2.5
        assert config.logging.level == "DEBUG"
        assert config.finnhub.api_key_env == "FINNHUB_TEST_TOKEN"
        assert config.finnhub_token == "from-dotenv"


def test_empty_yaml_uses_defaults(tmp_path):
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("")
    config = load_config(config_path=str(config_file), env_file=str(tmp_path / "missing.env"))
    assert config == Config()


def test_config_path_from_environment(tmp_path):
    """Test that FINNHUB_CLIENT_CONFIG_PATH is honoured when no path is given."""
    config_file = tmp_path / "custom.yaml"
    config_file.write_text("finnhub:\n  timeout_seconds: 9\n")

    with patch.dict(os.environ, {"FINNHUB_CLIENT_CONFIG_PATH": str(config_file)}):
        config = load_config(env_file=str(tmp_path / "missing.env"))

    assert config.finnhub.timeout_seconds == 9


def test_packaged_config_loads():
    with patch.dict(os.environ, {}):
        os.environ.pop("FINNHUB_CLIENT_CONFIG_PATH", None)
        config = get_config(env_file=os.devnull)
    assert config.finnhub.base_url == "https://finnhub.io/api/v1"


def test_missing_token_raises():
    config = Config(finnhub=FinnhubConfig(api_key_env="FINNHUB_UNSET_TOKEN"))
    with patch.dict(os.environ, {}):
        os.environ.pop("FINNHUB_UNSET_TOKEN", None)
        with pytest.raises(ValueError, match="FINNHUB_UNSET_TOKEN"):
            config.finnhub_token


def test_set_and_get_config():
    config = Config(finnhub=FinnhubConfig(timeout_seconds=1))
    set_config(config)
    assert get_config() is config


def test_client_from_config():
    """Test that the client takes token, timeout and base URL from config."""
    config = Config(
        finnhub=FinnhubConfig(
            api_key_env="FINNHUB_TEST_TOKEN",
            base_url="https://example.test/api/v1/",
            timeout_seconds=2,
        )
    )
    session = Mock()
    session.get.return_value = Mock(status_code=200, text='{"c": 1.0}')

    with patch.dict(os.environ, {"FINNHUB_TEST_TOKEN": "env-token"}):
        client = FinnhubClient.from_config(config, session=session)

    assert client.base_url == "https://example.test/api/v1"
    assert client.timeout == 2

    asyncio.run(client.get_quote("AAPL"))
    args, kwargs = session.get.call_args
    assert args[0] == "https://example.test/api/v1/quote?token=env-token&symbol=AAPL"
    assert kwargs["timeout"] == 2
