"""HTTP server configuration model."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class ServerConfig(BaseModel):
    """Server configuration section.

    Attributes:
        host: Interface the server binds to.
        port: TCP port the server listens on.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)
