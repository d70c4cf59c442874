import logging
import os
from functools import lru_cache
from pathlib import Path

DEFAULT_CONFIG_PATH = "./config.yaml"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8008
DEFAULT_LOG_LEVEL = "INFO"

# WARN is accepted as an alias of WARNING
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def parse_log_level(name: str) -> int:
    """Map a level name (case-insensitive) to a logging level."""
    try:
        return LOG_LEVELS[name.strip().upper()]
    except KeyError:
        choices = ", ".join(LOG_LEVELS)
        raise ValueError(f"Unknown log level {name!r} (expected one of: {choices})") from None


def parse_port(value: str | int) -> int:
    try:
        port = int(value)
    except ValueError:
        raise ValueError(f"Invalid port {value!r}") from None
    if not 0 <= port <= 65535:
        raise ValueError(f"Port out of range: {port}")
    return port


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.config_path = Path(os.environ.get("REDIRECTOR_CONFIG", DEFAULT_CONFIG_PATH))
        self.host = os.environ.get("HOST", DEFAULT_HOST)
        self.port = parse_port(os.environ.get("PORT", DEFAULT_PORT))
        self.log_level = parse_log_level(os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL))


@lru_cache
def get_settings() -> Settings:
    return Settings()
