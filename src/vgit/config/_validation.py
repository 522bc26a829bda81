# pyright: reportAny=false, reportExplicitAny=false
"""Configuration validation using Pydantic schemas."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, ConfigDict, ValidationError

from vgit.config._models._browser import BrowserConfig
from vgit.config._models._logging import LoggingConfig
from vgit.config._models._server import ServerConfig
from vgit.exceptions import ConfigValidationError

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """Represents a configuration validation issue.

    Attributes:
        key: Dotted path to the configuration key (e.g., "server.port").
        message: Human-readable description of the issue.
        expected: Description of expected value or type, if available.
        actual: The actual value that caused the issue.
    """

    key: str
    message: str
    expected: str | None
    actual: Any


class ConfigSchema(BaseModel):
    """Root configuration schema. Unknown keys are ignored."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    server: ServerConfig = ServerConfig()
    browser: BrowserConfig = BrowserConfig()


class LoggingConfigStrict(LoggingConfig):
    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")


class ServerConfigStrict(ServerConfig):
    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")


class BrowserConfigStrict(BrowserConfig):
    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")


class ConfigSchemaStrict(BaseModel):
    """Root configuration schema. Unknown keys are errors."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    logging: LoggingConfigStrict = LoggingConfigStrict()
    server: ServerConfigStrict = ServerConfigStrict()
    browser: BrowserConfigStrict = BrowserConfigStrict()


def _pydantic_error_to_issue(error: "ErrorDetails") -> ValidationIssue:  # noqa: UP037
    loc = error.get("loc", ())
    ctx = error.get("ctx")
    expected: str | None = None
    if ctx is not None and "expected" in ctx:
        expected = str(ctx["expected"])

    return ValidationIssue(
        key=".".join(str(part) for part in loc),
        message=str(error.get("msg", "Validation error")),
        expected=expected,
        actual=error.get("input"),
    )


def validate_config(
    config: dict[str, Any],
    *,
    strict: bool = False,
) -> list[ValidationIssue]:
    """Validate a merged configuration dictionary.

    Args:
        config: The merged configuration dictionary to validate.
        strict: If True, unknown keys are errors. If False, they are ignored.

    Returns:
        List of issues. Empty list indicates a valid config.
    """
    schema_class = ConfigSchemaStrict if strict else ConfigSchema

    try:
        _ = schema_class.model_validate(config)
    except ValidationError as e:
        return [_pydantic_error_to_issue(err) for err in e.errors()]
    else:
        return []


def raise_if_validation_errors(
    issues: list[ValidationIssue],
    source: str | None = None,
) -> None:
    """Raise ConfigValidationError for the first issue, if any.

    Raises:
        ConfigValidationError: If ``issues`` is not empty.
    """
    if issues:
        issue = issues[0]
        msg = f"Invalid configuration value for '{issue.key}'"
        raise ConfigValidationError(
            msg,
            key=issue.key,
            value=issue.actual,
            expected=issue.expected or issue.message,
            source=source,
        )
