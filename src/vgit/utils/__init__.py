"""Utilities for vgit."""

from ._logging import LogFormatType, create_logger, create_null_logger
from ._paths import get_package_dir, get_templates_dir
from ._time import human_size, humanize_since

__all__ = [
    "LogFormatType",
    "create_logger",
    "create_null_logger",
    "get_package_dir",
    "get_templates_dir",
    "human_size",
    "humanize_since",
]
