"""Configuration file discovery."""

from pathlib import Path
from typing import Any, Final

import platformdirs

from vgit.config._defaults import DEFAULT_CONFIG
from vgit.config._models._common import ConfigSource, ConfigSourceName

PROJECT_CONFIG_FILENAME: Final = "vgit.toml"


def get_user_config_path() -> Path:
    r"""Get platform-specific user config file path.

    - Linux: ``~/.config/vgit/config.toml``
    - macOS: ``~/Library/Application Support/vgit/config.toml``
    - Windows: ``%APPDATA%\vgit\config.toml``

    The path is returned regardless of whether the file exists.
    """
    return platformdirs.user_config_path("vgit") / "config.toml"


def get_project_config_path(directory: Path | None = None) -> Path:
    """Get the path of the project config file in ``directory`` (default: cwd)."""
    return (directory or Path.cwd()) / PROJECT_CONFIG_FILENAME


def _file_exists(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        return False


def discover_sources(
    project_dir: Path | None = None,
    *,
    include_env: bool = True,
    include_cli: bool = False,
    cli_overrides: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny]
) -> list[ConfigSource]:
    """Discover all configuration sources.

    Args:
        project_dir: Directory searched for ``vgit.toml``. Defaults to cwd.
        include_env: Include environment variables as a source.
        include_cli: Include CLI overrides as a source.
        cli_overrides: CLI argument overrides. Only used if include_cli.

    Returns:
        Sources in precedence order (highest first). File sources that
        don't exist are still included with exists=False.
    """
    sources: list[ConfigSource] = []

    if include_cli:
        sources.append(
            ConfigSource(
                name=ConfigSourceName.CLI,
                path=None,
                exists=bool(cli_overrides),
                values=cli_overrides or {},
            )
        )

    if include_env:
        sources.append(
            ConfigSource(name=ConfigSourceName.ENV, path=None, exists=True, values={})
        )

    project_path = get_project_config_path(project_dir)
    sources.append(
        ConfigSource(
            name=ConfigSourceName.PROJECT,
            path=project_path,
            exists=_file_exists(project_path),
            values={},
        )
    )

    user_path = get_user_config_path()
    sources.append(
        ConfigSource(
            name=ConfigSourceName.USER,
            path=user_path,
            exists=_file_exists(user_path),
            values={},
        )
    )

    sources.append(
        ConfigSource(
            name=ConfigSourceName.DEFAULT,
            path=None,
            exists=True,
            values=DEFAULT_CONFIG,
        )
    )

    return sources
