from collections.abc import Iterator
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from vgit.browse import RepositoryBrowser
from vgit.cli import CLIContext
from vgit.config import Config
from vgit.exceptions import RepositoryOpenError
from vgit.repository import FakeRepository, RepositoryProtocol
from vgit.utils import create_null_logger


@pytest.fixture
def output() -> StringIO:
    return StringIO()


@pytest.fixture
def cli_context(output: StringIO) -> Iterator[CLIContext]:
    ctx = CLIContext(
        config=Config.from_dict({}),
        logger=create_null_logger(),
        console=Console(file=output, width=200, color_system=None),
    )
    CLIContext.set_current(ctx)
    yield ctx
    CLIContext.reset()


@pytest.fixture
def fake_browser(tmp_path: Path, fake_repo: FakeRepository) -> RepositoryBrowser:
    (tmp_path / "project").mkdir()

    def opener(path: Path) -> RepositoryProtocol:
        if path.name == "project":
            return fake_repo
        msg = f"Not a git repository: {path}"
        raise RepositoryOpenError(msg, path=path)

    return RepositoryBrowser(tmp_path, opener=opener)
