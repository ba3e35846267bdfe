"""
Runtime settings read from the environment

    CHAINPARAMS_NETWORK     network selected by select_network_from_settings() (default "main")
    CHAINPARAMS_LOG_LEVEL   level handed to get_logger() when none is given (default "INFO")
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

__all__ = ["Settings", "load_settings", "NETWORK_ENV", "LOG_LEVEL_ENV"]

NETWORK_ENV = "CHAINPARAMS_NETWORK"
LOG_LEVEL_ENV = "CHAINPARAMS_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    network: str = "main"
    log_level: str = "INFO"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ

    network = env.get(NETWORK_ENV, Settings.network).strip().lower()
    log_level = env.get(LOG_LEVEL_ENV, Settings.log_level).strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ValueError(f"{LOG_LEVEL_ENV} must be one of {', '.join(_LOG_LEVELS)}; received {log_level!r}")

    return Settings(network=network or Settings.network, log_level=log_level)
