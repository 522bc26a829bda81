# pyright: reportUnusedCallResult=false
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing
"""Repository listing commands."""

from pathlib import Path
from typing import Annotated, Literal

from cyclopts import Parameter
from rich.table import Table

from vgit.cli._context import CLIContext
from vgit.cli._shared import ExitCode, build_browser, exit_with_error, format_json
from vgit.exceptions import RepositoryNotFoundError

OutputFormat = Literal["table", "json"]


def repos(
    *,
    root: Annotated[
        Path | None, Parameter(help="Directory containing the repositories.")
    ] = None,
    format: Annotated[OutputFormat, Parameter(help="Output format.")] = "table",  # noqa: A002
) -> None:
    """List repositories, most recently active first."""
    ctx = CLIContext.get_current()
    browser = build_browser(ctx, root)

    try:
        view = browser.list_repositories()
    except OSError as e:
        exit_with_error(f"Cannot list {browser.root}: {e}", ExitCode.IO_ERROR)

    if format == "json":
        ctx.console.print_json(
            format_json(
                [
                    {
                        "name": summary.name,
                        "description": summary.description,
                        "last_activity": summary.last_activity,
                        "last_activity_human": summary.last_activity_human,
                    }
                    for summary in view.repositories
                ]
            )
        )
        return

    table = Table(title=str(browser.root))
    table.add_column("Name", style="bold")
    table.add_column("Description")
    table.add_column("Last change")
    for summary in view.repositories:
        table.add_row(summary.name, summary.description, summary.last_activity_human)
    ctx.console.print(table)


def branches(
    repo: Annotated[str, Parameter(help="Repository name.")],
    *,
    root: Annotated[
        Path | None, Parameter(help="Directory containing the repositories.")
    ] = None,
) -> None:
    """List the local branches of a repository."""
    ctx = CLIContext.get_current()
    browser = build_browser(ctx, root)

    try:
        view = browser.list_branches(repo)
    except RepositoryNotFoundError as e:
        exit_with_error(str(e), ExitCode.NOT_FOUND)

    for branch in view.branches:
        marker = "*" if branch == view.default_branch else " "
        ctx.console.print(f"{marker} {branch}", highlight=False)
