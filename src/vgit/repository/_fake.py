# ruff: noqa: TC003  # datetime needed at runtime for method signatures
"""Fake repository for testing.

This module provides a FakeRepository class that implements RepositoryProtocol
for use in tests without requiring an actual Git repository.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from types import TracebackType
from typing import Self

from vgit.exceptions import (
    BlameComputationError,
    DescriptionUnavailableError,
    EntryNotFoundError,
    ReferenceNotFoundError,
)
from vgit.repository._models import (
    BlameHunk,
    BlobContent,
    CommitInfo,
    EntryKind,
    Reference,
    TreeEntry,
    TreeListing,
)

_DIRECTORY_MODE = 0o040000
_FILE_MODE = 0o100644


def _tree_order_key(entry: TreeEntry) -> str:
    # git sorts directories as if their name ended with "/"
    return f"{entry.name}/" if entry.is_directory else entry.name


@dataclass(slots=True)
class FakeRepository:
    """Fake Git repository for testing.

    Implements RepositoryProtocol with in-memory commits, trees and blobs.
    Helper methods build a tree from a flat mapping of paths to contents and
    register commits and references pointing at it.

    Example:
        >>> repo = FakeRepository()
        >>> tree = repo.add_tree({"README.md": b"# Hi", "src/main.py": b"pass"})
        >>> commit = repo.add_commit(tree=tree)
        >>> repo.add_reference("refs/heads/master", commit.sha)
        >>> [r.shorthand for r in repo.list_references()]
        ['master']
    """

    name: str = "fake"
    description: str | None = ""
    head: str | None = None
    references: list[Reference] = field(default_factory=list)
    commits: dict[str, CommitInfo] = field(default_factory=dict)
    trees: dict[str, TreeListing] = field(default_factory=dict)
    blobs: dict[str, BlobContent] = field(default_factory=dict)
    hunks: dict[tuple[str, str], list[BlameHunk]] = field(default_factory=dict)
    blame_failures: set[str] = field(default_factory=set)
    blame_calls: list[tuple[str, str]] = field(default_factory=list)
    closed: bool = False
    _counter: int = 0

    # =========================================================================
    # Context Manager Protocol
    # =========================================================================

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Mark the repository closed."""
        self.closed = True

    # =========================================================================
    # Test Setup Helpers
    # =========================================================================

    def _next_sha(self) -> str:
        self._counter += 1
        return f"{self._counter:040x}"

    def add_blob(self, data: bytes) -> str:
        """Store a blob and return its SHA."""
        sha = self._next_sha()
        self.blobs[sha] = BlobContent.from_bytes(data)
        return sha

    def add_tree(self, files: Mapping[str, bytes], *, path: str = "") -> str:
        """Build nested trees from a mapping of relative paths to contents.

        Args:
            files: Mapping of ``/`` separated paths to file contents. A path
                ending in ``/`` creates an empty directory.
            path: Repository-relative path of the tree being built.

        Returns:
            SHA of the root tree.
        """
        blobs: dict[str, bytes] = {}
        children: dict[str, dict[str, bytes]] = {}
        for file_path, data in files.items():
            head, sep, rest = file_path.partition("/")
            if sep:
                nested = children.setdefault(head, {})
                if rest:
                    nested[rest] = data
            else:
                blobs[head] = data

        entries: list[TreeEntry] = []
        for child_name, child_files in children.items():
            child_path = f"{path}/{child_name}" if path else child_name
            entries.append(
                TreeEntry(
                    name=child_name,
                    path=child_path,
                    kind=EntryKind.DIRECTORY,
                    mode=_DIRECTORY_MODE,
                    sha=self.add_tree(child_files, path=child_path),
                )
            )
        for blob_name, data in blobs.items():
            entries.append(
                TreeEntry(
                    name=blob_name,
                    path=f"{path}/{blob_name}" if path else blob_name,
                    kind=EntryKind.FILE,
                    mode=_FILE_MODE,
                    sha=self.add_blob(data),
                )
            )

        sha = self._next_sha()
        self.trees[sha] = TreeListing(
            sha=sha,
            path=path,
            entries=tuple(sorted(entries, key=_tree_order_key)),
        )
        return sha

    def add_commit(
        self,
        *,
        tree: str = "",
        timestamp: datetime | None = None,
        message: str = "Commit",
        sha: str | None = None,
    ) -> CommitInfo:
        """Register a commit and return it."""
        commit = CommitInfo(
            sha=sha if sha is not None else self._next_sha(),
            message=message,
            author_name="Test User",
            author_email="test@example.com",
            timestamp=timestamp if timestamp is not None else datetime.now(UTC),
            tree=tree,
        )
        self.commits[commit.sha] = commit
        return commit

    def add_reference(self, name: str, target: str) -> Reference:
        """Register a reference in listing order and return it."""
        reference = Reference(name=name, target=target)
        self.references.append(reference)
        return reference

    def set_blame(self, revision: str, path: str, hunks: list[BlameHunk]) -> None:
        """Set the hunks returned when blaming ``path`` at ``revision``."""
        self.hunks[revision, path] = hunks

    # =========================================================================
    # RepositoryProtocol Methods
    # =========================================================================

    def list_references(self) -> list[Reference]:
        return list(self.references)

    def default_reference(self) -> Reference:
        for ref in self.references:
            if ref.name == self.head:
                return ref
        for ref in self.references:
            if ref.is_branch:
                return ref
        msg = f"Repository {self.name} has no branches"
        raise ReferenceNotFoundError(msg, param="HEAD")

    def head_commit(self) -> CommitInfo:
        try:
            return self.reference_commit(self.default_reference())
        except KeyError as e:
            msg = f"Repository {self.name} has no HEAD commit"
            raise ReferenceNotFoundError(msg, param="HEAD") from e

    def reference_commit(self, reference: Reference) -> CommitInfo:
        return self.lookup_commit(reference.target)

    def lookup_commit(self, sha: str) -> CommitInfo:
        return self.commits[sha]

    def list_tree(self, tree_sha: str, path: str = "") -> TreeListing:
        try:
            listing = self.trees[tree_sha]
        except KeyError as e:
            msg = f"Tree not found: {path or '/'}"
            raise EntryNotFoundError(msg, path=path) from e
        return listing

    def lookup_path(self, tree_sha: str, path: str) -> TreeEntry:
        clean = path.strip("/")
        current = self.trees.get(tree_sha)
        found: TreeEntry | None = None
        for part in clean.split("/"):
            if current is None:
                found = None
                break
            found = next((e for e in current.entries if e.name == part), None)
            if found is None:
                break
            current = self.trees.get(found.sha) if found.is_directory else None
        if found is None:
            msg = f"Path not found: {clean}"
            raise EntryNotFoundError(msg, path=clean)
        return found

    def read_blob(self, sha: str) -> BlobContent:
        return self.blobs[sha]

    def blame(self, revision: str, path: str) -> list[BlameHunk]:
        self.blame_calls.append((revision, path))
        if path in self.blame_failures:
            msg = f"git blame failed for {path} at {revision}"
            raise BlameComputationError(msg, path=path, revision=revision)
        return list(self.hunks.get((revision, path), []))

    def read_description(self, filename: str = "description") -> str:
        if self.description is None:
            msg = f"Description unavailable: {filename}"
            raise DescriptionUnavailableError(msg)
        return self.description
