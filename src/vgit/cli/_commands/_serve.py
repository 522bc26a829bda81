# pyright: reportUnusedCallResult=false
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing
"""vgit web server command."""

from pathlib import Path
from typing import Annotated, Literal

from cyclopts import App, Parameter

from vgit.cli._context import CLIContext
from vgit.config import Config, deep_merge, set_nested_key

app = App(name="serve", help="Serve the repository browser over HTTP", help_on_error=True)

UvicornLogLevel = Literal["critical", "error", "warning", "info", "debug", "trace"]


def build_serve_config(
    config: Config,
    *,
    host: str | None = None,
    port: int | None = None,
    root: Path | None = None,
) -> Config:
    """Apply command-line overrides on top of the loaded configuration."""
    overrides: dict[str, object] = {}
    if host is not None:
        set_nested_key(overrides, "server.host", host)
    if port is not None:
        set_nested_key(overrides, "server.port", port)
    if root is not None:
        set_nested_key(overrides, "browser.root", str(root))
    if not overrides:
        return config
    return Config.from_dict(deep_merge(config.to_dict(), overrides))


@app.default
def serve(
    *,
    host: Annotated[str | None, Parameter(help="Bind socket to this host.")] = None,
    port: Annotated[int | None, Parameter(help="Bind socket to this port.")] = None,
    root: Annotated[
        Path | None, Parameter(help="Directory containing the repositories.")
    ] = None,
    log_level: Annotated[UvicornLogLevel, Parameter(help="Uvicorn log level.")] = "warning",
    timeout_keep_alive: Annotated[
        int,
        Parameter(help="Close Keep-Alive connections if no new data received in timeout."),
    ] = 5,
    proxy_headers: Annotated[
        bool,
        Parameter(help="Enable X-Forwarded-Proto, X-Forwarded-For for remote address info."),
    ] = True,
    forwarded_allow_ips: Annotated[
        str | None,
        Parameter(help="Comma-separated list of IPs to trust with proxy headers."),
    ] = None,
) -> None:
    """Run the vgit web server using uvicorn."""
    import uvicorn  # noqa: PLC0415

    from vgit.server import create_app  # noqa: PLC0415

    ctx = CLIContext.get_current()
    config = build_serve_config(ctx.config, host=host, port=port, root=root)

    options: dict[str, object] = {
        "host": config.server.host,
        "port": config.server.port,
        "log_level": log_level,
        # Requests are logged by the application itself.
        "access_log": False,
        "timeout_keep_alive": timeout_keep_alive,
        "proxy_headers": proxy_headers,
    }
    if forwarded_allow_ips is not None:
        options["forwarded_allow_ips"] = forwarded_allow_ips

    ctx.console.print(
        f"Serving {config.browser.root_path} on "
        f"http://{config.server.host}:{config.server.port}"
    )
    uvicorn.run(create_app(config, logger=ctx.logger), **options)  # pyright: ignore[reportArgumentType]
