"""Repository browser configuration model."""

from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class BrowserConfig(BaseModel):
    """Browser configuration section.

    Attributes:
        root: Directory containing the repositories to serve.
        description_file: Name of the description side-file in each
            repository's control directory.
        max_workers: Number of repositories opened concurrently when
            building the catalog. 1 opens them sequentially.
        prefer_longest_ref: Resolve overlapping reference shorthands such
            as ``v1`` and ``v1.2`` longest first rather than in store order.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    root: str = "."
    description_file: str = Field(default="description", min_length=1)
    max_workers: int = Field(default=1, ge=1, le=64)
    prefer_longest_ref: bool = False

    @property
    def root_path(self) -> Path:
        """The repository root with ``~`` expanded."""
        return Path(self.root).expanduser()
