"""
Redirects component - request-to-destination resolution.

Invariants:
- I1: destination is a non-empty string on every Configuration
- I2: status codes are 301 or 307 only
- I3: rule paths are compared verbatim (no trailing-slash, case or
  percent-decoding normalization)
- I4: resolution never mutates the Configuration
"""

from __future__ import annotations

from ._impl import resolve, validate
from .models import (
    ConfigError,
    ConfigOutput,
    Configuration,
    MissingDestination,
    RedirectValidationError,
    RequestURL,
    ResolveOutput,
    ResolveRedirectInput,
    ValidateConfigInput,
)


def _convert_error(error: ConfigError) -> RedirectValidationError:
    """Convert a raised config error to a component error."""
    if isinstance(error, MissingDestination):
        return RedirectValidationError(
            code="missing_destination",
            message=str(error),
            field="destination",
        )
    return RedirectValidationError(code="invalid_config", message=str(error))


# --- Component Entry Points ---


def run_validate(inp: ValidateConfigInput) -> ConfigOutput:
    """
    Validate a parsed configuration document without raising.

    Args:
        inp: Input containing the raw parsed document.

    Returns:
        ConfigOutput with the Configuration, or the errors found.
    """
    try:
        config = validate(inp.raw)
    except ConfigError as e:
        return ConfigOutput(config=None, errors=[_convert_error(e)], success=False)

    return ConfigOutput(config=config, errors=[], success=True)


def run_resolve(
    inp: ResolveRedirectInput,
    *,
    config: Configuration,
) -> ResolveOutput:
    """
    Resolve a request path and query against the configuration.

    Args:
        inp: Input containing the request path and raw query.
        config: Validated redirect configuration.

    Returns:
        ResolveOutput with the destination URL and status code.
    """
    result = resolve(RequestURL(path=inp.path, query=inp.query), config)

    return ResolveOutput(
        url=result.url,
        status_code=int(result.status),
    )


def run(
    inp: ValidateConfigInput | ResolveRedirectInput,
    *,
    config: Configuration | None = None,
) -> ConfigOutput | ResolveOutput:
    """
    Main entry point for the redirects component.

    Dispatches to appropriate handler based on input type.

    Args:
        inp: Input object determining the operation.
        config: Redirect configuration, required for resolution.

    Returns:
        Appropriate output object based on input type.
    """
    if isinstance(inp, ValidateConfigInput):
        return run_validate(inp)
    elif isinstance(inp, ResolveRedirectInput):
        if config is None:
            raise ValueError("config is required to resolve a redirect")
        return run_resolve(inp, config=config)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
