"""
Redirects component - configuration model and redirect resolution.
"""

from ._impl import parse_request_url, resolve, resolve_url, validate
from .component import run, run_resolve, run_validate
from .models import (
    DEFAULT_STATUS,
    ConfigError,
    ConfigOutput,
    Configuration,
    InvalidConfig,
    MissingDestination,
    RedirectRule,
    RedirectStatus,
    RedirectValidationError,
    RequestURL,
    ResolvedRedirect,
    ResolveOutput,
    ResolveRedirectInput,
    ValidateConfigInput,
)

__all__ = [
    # Entry points
    "run",
    "run_resolve",
    "run_validate",
    # Input models
    "ResolveRedirectInput",
    "ValidateConfigInput",
    # Output models
    "ConfigOutput",
    "RedirectValidationError",
    "ResolveOutput",
    # Configuration
    "Configuration",
    "DEFAULT_STATUS",
    "RedirectRule",
    "RedirectStatus",
    # Errors
    "ConfigError",
    "InvalidConfig",
    "MissingDestination",
    # Engine
    "RequestURL",
    "ResolvedRedirect",
    "parse_request_url",
    "resolve",
    "resolve_url",
    "validate",
]
