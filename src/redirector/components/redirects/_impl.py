"""
Redirect resolution engine.

Validates the redirect policy once, then maps every request to a
destination URL and status with a pure function.

Key behaviors:
- Rules are matched in declared order by exact path equality; first match wins
- Relative rule targets are joined to the destination host and keep the query
- Absolute rule targets (http/https) are returned verbatim, query dropped
- Unmatched paths keep their path and query on the destination host
- The scheme of the result is always https for non-absolute targets
- Rule status > configured redirectStatus > 307
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit

from pydantic import ValidationError

from .models import (
    Configuration,
    InvalidConfig,
    MissingDestination,
    RequestURL,
    ResolvedRedirect,
)

# --- Validation ---


def _describe(error: ValidationError) -> str:
    """Flatten pydantic errors into a single line."""
    parts = []
    for item in error.errors():
        loc = ".".join(str(p) for p in item["loc"])
        parts.append(f"{loc}: {item['msg']}" if loc else item["msg"])
    return "; ".join(parts)


def validate(raw: Any) -> Configuration:
    """
    Build a Configuration from a parsed document.

    Raises:
        MissingDestination: If `destination` is absent, empty or not a string.
        InvalidConfig: If the document is not a mapping, or any other field
            is malformed (including a status other than 301 or 307).
    """
    if isinstance(raw, Configuration):
        return raw

    # An empty document carries no destination either
    if raw is None:
        raise MissingDestination()

    if not isinstance(raw, Mapping):
        raise InvalidConfig(f"expected a mapping, got {type(raw).__name__}")

    destination = raw.get("destination")
    if not isinstance(destination, str) or not destination:
        raise MissingDestination()

    try:
        return Configuration.model_validate(dict(raw))
    except ValidationError as e:
        raise InvalidConfig(_describe(e)) from e


# --- Request URLs ---


def parse_request_url(url: str) -> RequestURL:
    """Split an absolute or origin-form URL into its path and raw query."""
    parts = urlsplit(url)
    path = parts.path or "/"
    query = f"?{parts.query}" if parts.query else ""
    return RequestURL(path=path, query=query)


# --- Resolution ---


def resolve(request_url: RequestURL, config: Configuration) -> ResolvedRedirect:
    """
    Resolve a request to its redirect target.

    Only `path` and `query` of the request are used.
    """
    default_status = config.redirect_status

    for rule in config.redirects:
        if rule.source != request_url.path:
            continue

        status = rule.status if rule.status is not None else default_status

        if rule.is_absolute:
            return ResolvedRedirect(url=rule.target, status=status)

        return ResolvedRedirect(
            url=f"https://{config.destination}{rule.target}{request_url.query}",
            status=status,
        )

    return ResolvedRedirect(
        url=f"https://{config.destination}{request_url.path}{request_url.query}",
        status=default_status,
    )


def resolve_url(url: str, config: Configuration) -> ResolvedRedirect:
    """Resolve a full request URL string."""
    return resolve(parse_request_url(url), config)

