"""Package path helpers."""

from importlib.resources import files
from pathlib import Path


def get_package_dir() -> Path:
    """Get the root directory of the installed vgit package."""
    return Path(str(files("vgit")))


def get_templates_dir() -> Path:
    """Get the path to the server's HTML templates directory."""
    return get_package_dir() / "server" / "_templates"
