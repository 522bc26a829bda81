"""Default configuration values.

This module defines the built-in default configuration values that are used
when no other configuration sources provide values.
"""

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "logging": {
        "level": "info",
        "format": "text",
        "file": "",
    },
    "server": {
        "host": "127.0.0.1",
        "port": 8000,
    },
    "browser": {
        "root": ".",
        "description_file": "description",
        "max_workers": 1,
        "prefer_longest_ref": False,
    },
}
