"""
Redirector - a configurable domain and path redirect server.

Requests to any path are redirected to the same path on a destination host,
unless an exact-path rule overrides the target.

Example config.yaml:

    destination: example.com
    redirectStatus: 307
    redirects:
      - from: /old
        to: /new
        status: 301
      - from: /blog
        to: https://blog.example.com
"""

from redirector.api.main import create_app
from redirector.app_shell.cli import run_redirector
from redirector.components.redirects import (
    ConfigError,
    Configuration,
    InvalidConfig,
    MissingDestination,
    RedirectRule,
    RedirectStatus,
    RequestURL,
    ResolvedRedirect,
    resolve,
    resolve_url,
    validate,
)
from redirector.rules.loader import load_config

__all__ = [
    "ConfigError",
    "Configuration",
    "InvalidConfig",
    "MissingDestination",
    "RedirectRule",
    "RedirectStatus",
    "RequestURL",
    "ResolvedRedirect",
    "create_app",
    "load_config",
    "resolve",
    "resolve_url",
    "run_redirector",
    "validate",
]
