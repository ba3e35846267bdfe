"""
Tests for settings and logging
"""
import logging

import pytest

from chainparams.core.config import LOG_LEVEL_ENV, NETWORK_ENV, Settings, load_settings
from chainparams.core.logging import get_logger


def test_default_settings():
    settings = load_settings({})
    assert settings == Settings(network="main", log_level="INFO")


def test_environment_settings():
    settings = load_settings({NETWORK_ENV: " Test ", LOG_LEVEL_ENV: "debug"})
    assert settings.network == "test"
    assert settings.log_level == "DEBUG"

    # An empty network falls back to the default
    assert load_settings({NETWORK_ENV: ""}).network == "main"


def test_invalid_log_level():
    with pytest.raises(ValueError):
        load_settings({LOG_LEVEL_ENV: "loud"})


def test_get_logger(tmp_path):
    log_file = tmp_path / "logs" / "chainparams.log"
    logger = get_logger("chainparams.test_config", log_level="DEBUG", log_file=log_file)

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    # Handlers are not duplicated on a second call
    assert get_logger("chainparams.test_config") is logger
    assert len(logger.handlers) == 2

    logger.debug("written to file")
    for handler in logger.handlers:
        handler.flush()
    assert "written to file" in log_file.read_text()


def test_logger_level_from_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "WARNING")
    assert get_logger("chainparams.test_config.env").level == logging.WARNING


def test_invalid_log_level_falls_back(monkeypatch, capsys):
    monkeypatch.setenv(LOG_LEVEL_ENV, "loud")
    logger = get_logger("chainparams.test_config.invalid_level")

    assert logger.level == logging.INFO
    assert "using INFO" in capsys.readouterr().out
