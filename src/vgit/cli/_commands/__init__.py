"""vgit CLI commands."""
# pyright: reportUnusedCallResult=false

from typing import TYPE_CHECKING

from ._config import config
from ._repos import branches, repos
from ._serve import app as serve_app, build_serve_config

if TYPE_CHECKING:
    from cyclopts import App

__all__ = [
    "branches",
    "build_serve_config",
    "config",
    "register_commands",
    "repos",
    "serve_app",
]


def register_commands(app: "App") -> None:  # noqa: UP037
    app.command(serve_app)
    app.command(repos)
    app.command(branches)
    app.command(config)

    @app.command(name="--prefix")
    def _prefix() -> None:  # pyright: ignore[reportUnusedFunction]
        """Show vgit's install path."""
        from vgit.utils import get_package_dir  # noqa: PLC0415

        print(get_package_dir())  # noqa: T201
