import argparse
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import uvicorn

from redirector.api.main import create_app
from redirector.app_shell.config import get_settings, parse_log_level, parse_port
from redirector.components.redirects import ConfigError, Configuration, validate
from redirector.rules.loader import load_config

logger = logging.getLogger("redirector")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: int) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)


def run_redirector(
    *,
    config: Configuration | Mapping[str, Any] | None = None,
    config_path: Path | str | None = None,
    host: str | None = None,
    port: int | None = None,
    log_level: int | None = None,
) -> None:
    """
    Run the redirector HTTP server until interrupted.

    An inline config takes precedence over config_path; host, port and
    log_level fall back to the environment settings.

    Raises:
        FileNotFoundError: If no inline config is given and the file is missing.
        ConfigError: If the configuration is invalid.
    """
    settings = get_settings()
    level = log_level if log_level is not None else settings.log_level
    configure_logging(level)

    if config is not None:
        resolved = validate(config)
        logger.info("Using inline config")
    else:
        path = Path(config_path) if config_path is not None else settings.config_path
        resolved = load_config(path)
        logger.info(f"Config loaded from {path}")

    bind_host = host or settings.host
    bind_port = port if port is not None else settings.port
    logger.info(f"Listening on http://{bind_host}:{bind_port}/")

    uvicorn.run(create_app(resolved), host=bind_host, port=bind_port, log_level=level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="redirector",
        description="Redirect every request to a destination host",
    )
    parser.add_argument("--config", help="Path to the YAML config (env: REDIRECTOR_CONFIG)")
    parser.add_argument("--host", help="Host interface to bind (env: HOST)")
    parser.add_argument("--port", type=parse_port, help="TCP port to listen on (env: PORT)")
    parser.add_argument(
        "--log-level",
        type=parse_log_level,
        help="DEBUG, INFO, WARN, ERROR or CRITICAL (env: LOG_LEVEL)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    try:
        run_redirector(
            config_path=args.config,
            host=args.host,
            port=args.port,
            log_level=args.log_level,
        )
    except (ConfigError, FileNotFoundError) as e:
        logger.critical(f"Config load failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
