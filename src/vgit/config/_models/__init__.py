"""Configuration models."""

from vgit.config._models._browser import BrowserConfig
from vgit.config._models._common import (
    ConfigSource,
    ConfigSourceName,
    LogFormat,
    LogLevel,
)
from vgit.config._models._config import Config
from vgit.config._models._logging import LoggingConfig
from vgit.config._models._server import ServerConfig

__all__ = [
    "BrowserConfig",
    "Config",
    "ConfigSource",
    "ConfigSourceName",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "ServerConfig",
]
