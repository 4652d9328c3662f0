"""
Where: lattice_events/tests/test_config.py
What: Unit tests for settings loading.
Why: Keep defaults and environment overrides stable for deployed functions.
"""

import os

from lattice_events.core.config import DEFAULT_LOG_CONFIG_PATH, LatticeConfig


def test_config_defaults(monkeypatch):
    for name in ("LOG_LEVEL", "LOG_CONFIG_PATH", "SERVICE_NAME", "BAD_REQUEST_ON_DECODE_ERROR"):
        monkeypatch.delenv(name, raising=False)

    config = LatticeConfig(_env_file=None)

    assert config.LOG_LEVEL == "INFO"
    assert config.LOG_CONFIG_PATH == DEFAULT_LOG_CONFIG_PATH
    assert config.SERVICE_NAME == "vpc-lattice-function"
    assert config.BAD_REQUEST_ON_DECODE_ERROR is False


def test_default_log_config_is_packaged():
    assert os.path.basename(DEFAULT_LOG_CONFIG_PATH) == "logging.yml"
    assert os.path.exists(DEFAULT_LOG_CONFIG_PATH)


def test_config_reads_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("SERVICE_NAME", "orders-api")
    monkeypatch.setenv("BAD_REQUEST_ON_DECODE_ERROR", "true")

    config = LatticeConfig(_env_file=None)

    assert config.LOG_LEVEL == "DEBUG"
    assert config.SERVICE_NAME == "orders-api"
    assert config.BAD_REQUEST_ON_DECODE_ERROR is True


def test_config_env_names_are_case_sensitive(monkeypatch):
    monkeypatch.delenv("SERVICE_NAME", raising=False)
    monkeypatch.setenv("service_name", "lowercase-ignored")

    config = LatticeConfig(_env_file=None)

    assert config.SERVICE_NAME == "vpc-lattice-function"
