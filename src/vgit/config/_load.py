import os
import sys
from pathlib import Path
from typing import Any

from vgit.exceptions import ConfigError

from ._loader import deep_merge
from ._models import Config


def _fail_or_warn(message: str, *, strict: bool) -> tuple[Config, str]:
    if strict:
        print(f"Error: {message}", file=sys.stderr)  # noqa: T201
        sys.exit(1)
    print(f"Warning: {message}", file=sys.stderr)  # noqa: T201
    return Config.from_dict({}), message


def safe_load_config(
    *,
    config_path: Path | None = None,
    project_dir: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny]
) -> tuple[Config, str | None]:
    """Load configuration with error handling.

    Errors are handled according to the VGIT_STRICT_CONFIG environment
    variable:
    - If unset or "0": warn to stderr and return the default config
    - If "1": fail fast with sys.exit(1)

    When config_path is provided, the file must exist (explicit user request)
    and discovery is skipped.

    Args:
        config_path: Explicit path to config file (--config flag).
        project_dir: Directory searched for ``vgit.toml``.
        cli_overrides: CLI argument overrides, applied last.

    Returns:
        Tuple of (Config, error_message). On success, error_message is None.
        On failure (non-strict mode), returns the default Config with the
        error message.
    """
    strict_mode = os.environ.get("VGIT_STRICT_CONFIG", "0") == "1"

    try:
        if config_path is not None:
            if not config_path.exists():
                print(f"Error: Config file not found: {config_path}", file=sys.stderr)  # noqa: T201
                sys.exit(1)
            config = Config.from_file(config_path)
            if cli_overrides:
                config = Config.from_dict(deep_merge(config.to_dict(), cli_overrides))
        else:
            config = Config.load(
                project_dir=project_dir,
                include_env=True,
                include_cli=cli_overrides is not None,
                cli_overrides=cli_overrides,
            )
    except (ConfigError, OSError) as e:
        return _fail_or_warn(f"Failed to load config: {e}", strict=strict_mode)
    else:
        return config, None
