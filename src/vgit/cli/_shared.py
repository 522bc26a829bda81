"""Shared CLI utilities for commands."""

from enum import IntEnum
from typing import TYPE_CHECKING, Any, Never

import orjson
from rich.console import Console

from vgit.browse import RepositoryBrowser
from vgit.cli._context import CLIContext
from vgit.utils import create_null_logger

if TYPE_CHECKING:
    from pathlib import Path


class ExitCode(IntEnum):
    """Standard exit codes for vgit CLI commands."""

    SUCCESS = 0
    LOAD_ERROR = 1
    VALIDATION_ERROR = 2
    NOT_FOUND = 3
    IO_ERROR = 4
    INTERNAL_ERROR = 5


def format_json(data: Any, *, indent: bool = True) -> str:  # pyright: ignore[reportExplicitAny]
    """Format data as JSON. Datetimes are emitted in RFC 3339 form."""
    options = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(data, option=options).decode("utf-8")


def get_error_console() -> Console:
    return Console(stderr=True)


def exit_with_error(
    message: str,
    code: ExitCode = ExitCode.INTERNAL_ERROR,
    *,
    console: Console | None = None,
) -> Never:
    """Print an error message and exit with the specified code.

    Raises:
        SystemExit: Always raised with the specified exit code.
    """
    if console is None:
        console = get_error_console()

    console.print(f"[red]Error:[/red] {message}")
    raise SystemExit(code)


def build_browser(ctx: CLIContext, root: "Path | None" = None) -> RepositoryBrowser:  # noqa: UP037
    """Build a browser from the CLI context, optionally overriding the root."""
    browser_config = ctx.config.browser
    return RepositoryBrowser(
        root if root is not None else browser_config.root_path,
        description_file=browser_config.description_file,
        max_workers=browser_config.max_workers,
        prefer_longest_ref=browser_config.prefer_longest_ref,
        logger=ctx.logger if ctx.logger is not None else create_null_logger(),
    )
