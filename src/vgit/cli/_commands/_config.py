# pyright: reportUnusedCallResult=false
"""Effective configuration command."""

from typing import Annotated

from cyclopts import Parameter
from rich.table import Table

from vgit.cli._context import CLIContext


def config(
    *,
    all: Annotated[  # noqa: A002
        bool, Parameter(help="Include values equal to the defaults.")
    ] = False,
    sources: Annotated[
        bool, Parameter(help="List configuration sources instead of values.")
    ] = False,
) -> None:
    """Show the effective configuration as TOML."""
    ctx = CLIContext.get_current()

    if ctx.config_error:
        ctx.console.print(f"[yellow]Warning:[/yellow] {ctx.config_error}")

    if sources:
        table = Table()
        table.add_column("Source")
        table.add_column("Path")
        table.add_column("Exists")
        for source in ctx.config.sources:
            table.add_row(
                source.name.value,
                str(source.path) if source.path else "",
                "yes" if source.exists else "no",
            )
        ctx.console.print(table)
        return

    ctx.console.print(ctx.config.to_toml(include_defaults=all), markup=False, highlight=False)
