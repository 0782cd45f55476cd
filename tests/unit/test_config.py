"""
Unit Tests for configuration lookup
"""

from unittest.mock import patch

import pytest

from daraja.config import get_config, Config, SandboxConfig, ProductionConfig, TestingConfig


@pytest.fixture(autouse=True)
def no_dotenv():
    with patch("daraja.config.load_dotenv") as mock_load:
        yield mock_load


@pytest.mark.parametrize("name, expected", [
    ("sandbox", SandboxConfig),
    ("PRODUCTION", ProductionConfig),
    ("testing", TestingConfig),
])
def test_get_config(name, expected, no_dotenv):
    assert get_config(name) is expected
    no_dotenv.assert_not_called()


def test_get_config_from_env(monkeypatch, no_dotenv):
    monkeypatch.setenv("MPESA_ENV", "production")
    assert get_config() is ProductionConfig
    no_dotenv.assert_called_once()


def test_get_config_defaults_to_sandbox(monkeypatch):
    monkeypatch.delenv("MPESA_ENV", raising=False)
    assert get_config() is SandboxConfig


def test_get_config_unknown():
    with pytest.raises(ValueError, match="Unknown Daraja environment"):
        get_config("staging")


def test_base_urls():
    assert Config.BASE_URL == SandboxConfig.BASE_URL == "https://sandbox.safaricom.co.ke"
    assert ProductionConfig.BASE_URL == "https://api.safaricom.co.ke"


def test_endpoint_paths():
    assert SandboxConfig.AUTH_PATH == "/oauth/v1/generate"
    assert SandboxConfig.STK_PUSH_PATH == "/mpesa/stkpush/v1/processrequest"
    assert SandboxConfig.TIMESTAMP_UTC_OFFSET_HOURS == 3
