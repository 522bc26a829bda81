"""Shared test fixtures for vgit tests."""

import os
import shutil
import subprocess
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from pathlib import Path

import pytest

from vgit.repository import FakeRepository

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")

# Fixed reference time for recency labels
NOW = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)


def run_git(cwd: Path, *args: str, date: datetime | None = None) -> str:
    """Run a git command in the given directory and return its stdout."""
    env = {
        **os.environ,
        "GIT_CONFIG_NOSYSTEM": "1",
        "GIT_AUTHOR_NAME": "Test User",
        "GIT_AUTHOR_EMAIL": "test@example.com",
        "GIT_COMMITTER_NAME": "Test User",
        "GIT_COMMITTER_EMAIL": "test@example.com",
    }
    if date is not None:
        env["GIT_AUTHOR_DATE"] = date.isoformat()
        env["GIT_COMMITTER_DATE"] = date.isoformat()

    result = subprocess.run(  # noqa: S603 - Safe: controlled git args
        ["git", *args],
        cwd=str(cwd),
        capture_output=True,
        text=True,
        check=False,
        env=env,
    )
    if result.returncode != 0:
        msg = f"git {' '.join(args)} failed: {result.stderr}"
        raise RuntimeError(msg)
    return result.stdout


def init_repo(path: Path, *, branch: str = "master") -> Path:
    """Initialize an empty working-tree repository."""
    path.mkdir(parents=True, exist_ok=True)
    run_git(path, "init", "-q", "-b", branch)
    run_git(path, "config", "commit.gpgsign", "false")
    return path


def commit_files(
    repo: Path,
    files: Mapping[str, bytes | str],
    *,
    date: datetime,
    message: str = "Commit",
) -> str:
    """Write files, commit them at a fixed date and return the commit SHA."""
    for relative, content in files.items():
        target = repo / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(content)
    run_git(repo, "add", "-A")
    run_git(repo, "commit", "-q", "-m", message, date=date)
    return run_git(repo, "rev-parse", "HEAD").strip()


RepoFactory = Callable[..., Path]


@pytest.fixture
def repos_root(tmp_path: Path) -> Path:
    """Directory that holds the repositories under test."""
    root = tmp_path / "repos"
    root.mkdir()
    return root


@pytest.fixture
def make_repo(repos_root: Path) -> RepoFactory:
    """Create a repository with a single commit below ``repos_root``."""

    def _make(
        name: str,
        files: Mapping[str, bytes | str] | None = None,
        *,
        date: datetime = datetime(2024, 6, 1, tzinfo=UTC),
        description: str | None = None,
    ) -> Path:
        path = init_repo(repos_root / name)
        commit_files(path, files or {"README.md": f"# {name}\n"}, date=date)
        if description is not None:
            (path / ".git" / "description").write_text(description)
        return path

    return _make


@pytest.fixture
def fake_repo() -> FakeRepository:
    """A fake repository with a master branch and a small tree.

    Tree:
        README.md
        docs/guide.md
        src/main.py
        logo.png (binary)
    """
    repo = FakeRepository(name="project", description="A project")
    tree = repo.add_tree(
        {
            "README.md": b"# Project\n\nHello.\n",
            "docs/guide.md": b"Guide\n",
            "src/main.py": b"print('hi')\n",
            "logo.png": b"\x89PNG\x00\x00data",
        }
    )
    commit = repo.add_commit(
        tree=tree,
        timestamp=datetime(2024, 6, 12, 12, 0, tzinfo=UTC),
        message="Initial commit",
    )
    repo.add_reference("refs/heads/master", commit.sha)
    repo.head = "refs/heads/master"
    return repo


def corrupt_object(repo: Path, sha: str, data: bytes = b"garbage not zlib") -> Path:
    """Overwrite a loose object of a working-tree repository with ``data``."""
    target = repo / ".git" / "objects" / sha[:2] / sha[2:]
    target.chmod(0o644)
    target.write_bytes(data)
    return target
