"""
Tests for the redirects component entry points.
"""

from __future__ import annotations

import pytest

from redirector.components.redirects import (
    ConfigOutput,
    Configuration,
    ResolveOutput,
    ResolveRedirectInput,
    ValidateConfigInput,
    run,
    run_resolve,
    run_validate,
    validate,
)


@pytest.fixture
def config() -> Configuration:
    return validate(
        {
            "destination": "bar.com",
            "redirects": [{"from": "/old", "to": "/new", "status": 301}],
        }
    )


class TestRunValidate:
    """Test non-raising configuration validation."""

    def test_valid_document(self) -> None:
        out = run_validate(ValidateConfigInput(raw={"destination": "bar.com"}))

        assert out.success
        assert out.errors == []
        assert out.config is not None
        assert out.config.destination == "bar.com"

    def test_missing_destination(self) -> None:
        out = run_validate(ValidateConfigInput(raw={"redirects": []}))

        assert not out.success
        assert out.config is None
        assert len(out.errors) == 1
        assert out.errors[0].code == "missing_destination"
        assert out.errors[0].field == "destination"

    def test_invalid_status(self) -> None:
        out = run_validate(ValidateConfigInput(raw={"destination": "bar.com", "redirectStatus": 302}))

        assert not out.success
        assert out.errors[0].code == "invalid_config"
        assert "redirectStatus" in out.errors[0].message


class TestRunResolve:
    """Test resolution through the component entry point."""

    def test_rule_match(self, config: Configuration) -> None:
        out = run_resolve(ResolveRedirectInput(path="/old", query="?a=1"), config=config)

        assert out.url == "https://bar.com/new?a=1"
        assert out.status_code == 301
        assert type(out.status_code) is int

    def test_output_has_no_error_fields(self, config: Configuration) -> None:
        out = run_resolve(ResolveRedirectInput(path="/old"), config=config)

        assert not hasattr(out, "errors")
        assert not hasattr(out, "success")

    def test_default(self, config: Configuration) -> None:
        out = run_resolve(ResolveRedirectInput(path="/elsewhere"), config=config)

        assert out.url == "https://bar.com/elsewhere"
        assert out.status_code == 307


class TestRunDispatch:
    """Test dispatch on input type."""

    def test_dispatches_validate(self) -> None:
        out = run(ValidateConfigInput(raw={"destination": "bar.com"}))

        assert isinstance(out, ConfigOutput)

    def test_dispatches_resolve(self, config: Configuration) -> None:
        out = run(ResolveRedirectInput(path="/old"), config=config)

        assert isinstance(out, ResolveOutput)
        assert out.status_code == 301

    def test_resolve_requires_config(self) -> None:
        with pytest.raises(ValueError, match="config is required"):
            run(ResolveRedirectInput(path="/old"))

    def test_unknown_input(self) -> None:
        with pytest.raises(ValueError, match="Unknown input type"):
            run("not an input")  # type: ignore[arg-type]
