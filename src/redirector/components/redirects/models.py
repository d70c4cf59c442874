"""
Redirects component models.

The configuration document models are pydantic (validated from untrusted
input); component inputs and outputs are frozen dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# --- Status ---


class RedirectStatus(IntEnum):
    """HTTP status codes a redirect may be issued with."""

    PERMANENT = 301
    TEMPORARY = 307


DEFAULT_STATUS = RedirectStatus.TEMPORARY


def _integer_status(value: Any) -> Any:
    """Reject statuses written as strings, floats or booleans."""
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise ValueError(f"status must be the integer 301 or 307, got {value!r}")
    return value


# --- Configuration Models ---


class RedirectRule(BaseModel):
    """Exact-path override: `from` is matched verbatim against the request path."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: str = Field(alias="from")
    target: str = Field(alias="to")
    status: RedirectStatus | None = None

    @field_validator("status", mode="before")
    @classmethod
    def _integer_rule_status(cls, value: Any) -> Any:
        return _integer_status(value)

    @property
    def is_absolute(self) -> bool:
        """True when the target is a full http(s) URL used as-is."""
        return self.target.startswith(("http://", "https://"))


class Configuration(BaseModel):
    """Validated, read-only redirect policy."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    destination: str = Field(min_length=1)
    redirect_status: RedirectStatus = Field(default=DEFAULT_STATUS, alias="redirectStatus")
    redirects: tuple[RedirectRule, ...] = ()

    @field_validator("redirect_status", mode="before")
    @classmethod
    def _default_status(cls, value: Any) -> Any:
        # `redirectStatus:` with no value in YAML parses to None
        return DEFAULT_STATUS if value is None else _integer_status(value)

    @field_validator("redirects", mode="before")
    @classmethod
    def _default_redirects(cls, value: Any) -> Any:
        return () if value is None else value


# --- Error Types ---


class ConfigError(ValueError):
    """Base configuration error."""

    pass


class MissingDestination(ConfigError):
    """The `destination` field is absent, empty or not a string."""

    def __init__(self) -> None:
        super().__init__("Config must include a 'destination' field")


class InvalidConfig(ConfigError):
    """The configuration document is malformed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid config: {reason}")


@dataclass(frozen=True)
class RedirectValidationError:
    """Configuration error reported by the non-raising entry points."""

    code: str
    message: str
    field: str | None = None


# --- Request / Result ---


@dataclass(frozen=True)
class RequestURL:
    """The parts of an incoming request URL that take part in resolution."""

    path: str
    query: str = ""  # raw, including the leading "?", or empty


@dataclass(frozen=True)
class ResolvedRedirect:
    """Where a request goes, and with which status."""

    url: str
    status: RedirectStatus


# --- Input Models ---


@dataclass(frozen=True)
class ValidateConfigInput:
    """Input for validating a parsed configuration document."""

    raw: Any


@dataclass(frozen=True)
class ResolveRedirectInput:
    """Input for resolving a request path and query."""

    path: str
    query: str = ""


# --- Output Models ---


@dataclass(frozen=True)
class ConfigOutput:
    """Output for configuration validation."""

    config: Configuration | None
    errors: list[RedirectValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class ResolveOutput:
    """Output for resolve operation. Resolution cannot fail, so there are no errors."""

    url: str
    status_code: int
