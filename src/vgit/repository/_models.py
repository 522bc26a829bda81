# ruff: noqa: TC003  # datetime needed at runtime for dataclass fields
"""Repository models.

This module defines the value objects read from a git object store:
references, commits, tree entries, blobs and blame hunks.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Final, Self

# Number of leading bytes inspected for NUL when detecting binary content
BINARY_SNIFF_LENGTH: Final = 8000

_SHORTHAND_PREFIXES: Final = ("refs/heads/", "refs/tags/", "refs/remotes/", "refs/")


class EntryKind(StrEnum):
    """Kind of a tree entry."""

    DIRECTORY = "directory"
    FILE = "file"
    SUBMODULE = "submodule"


def shorthand_for(name: str) -> str:
    """Return the short display name of a full reference name.

    Args:
        name: Full reference name such as ``refs/heads/master``.

    Returns:
        The shorthand, e.g. ``master``. Names outside ``refs/`` are returned
        unchanged.
    """
    for prefix in _SHORTHAND_PREFIXES:
        if name.startswith(prefix):
            return name[len(prefix) :]
    return name


@dataclass(frozen=True, slots=True)
class Reference:
    """A named pointer to a commit.

    Attributes:
        name: Full reference name (e.g. ``refs/heads/master``).
        target: Hex SHA of the commit the reference resolves to.
    """

    name: str
    target: str

    @property
    def shorthand(self) -> str:
        """Short display name of the reference."""
        return shorthand_for(self.name)

    @property
    def is_branch(self) -> bool:
        """True for local branches."""
        return self.name.startswith("refs/heads/")

    @property
    def is_tag(self) -> bool:
        """True for tags."""
        return self.name.startswith("refs/tags/")


@dataclass(frozen=True, slots=True)
class CommitInfo:
    """Information about a single commit.

    Attributes:
        sha: Full 40-character commit SHA hex string.
        message: Complete commit message (subject + body).
        author_name: Author name from commit.
        author_email: Author email from commit.
        timestamp: Commit (committer) time as a timezone-aware datetime.
        tree: Hex SHA of the commit's root tree.
        parent_shas: SHA hex strings of parent commits (empty tuple for initial commit).
    """

    sha: str
    message: str
    author_name: str
    author_email: str
    timestamp: datetime
    tree: str
    parent_shas: tuple[str, ...] = ()

    @property
    def subject(self) -> str:
        """First line of the commit message."""
        return self.message.split("\n", 1)[0]

    @property
    def short_sha(self) -> str:
        """Abbreviated SHA for display."""
        return self.sha[:7]


@dataclass(frozen=True, slots=True)
class TreeEntry:
    """One member of a git tree.

    Attributes:
        name: Base name of the entry.
        path: Repository-relative path using ``/`` separators.
        kind: Directory, file or submodule.
        mode: Git file mode.
        sha: Hex SHA of the entry's object.
    """

    name: str
    path: str
    kind: EntryKind
    mode: int
    sha: str

    @property
    def is_directory(self) -> bool:
        """True when the entry is a subtree."""
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        """True when the entry is a blob."""
        return self.kind is EntryKind.FILE


@dataclass(frozen=True, slots=True)
class TreeListing:
    """The entries of one tree, in git tree order.

    Attributes:
        sha: Hex SHA of the tree object.
        path: Repository-relative path of the tree (empty for the root).
        entries: Entries in the order the object store lists them.
    """

    sha: str
    path: str
    entries: tuple[TreeEntry, ...]

    @property
    def directories(self) -> list[TreeEntry]:
        """Subtree entries, in listing order."""
        return [entry for entry in self.entries if entry.is_directory]

    @property
    def files(self) -> list[TreeEntry]:
        """Non-directory entries, in listing order."""
        return [entry for entry in self.entries if not entry.is_directory]


@dataclass(frozen=True, slots=True)
class BlobContent:
    """Raw content of a blob.

    Attributes:
        data: The blob bytes.
        size: Size in bytes.
        is_binary: True when a NUL byte occurs in the first 8000 bytes.
    """

    data: bytes
    size: int
    is_binary: bool

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        """Build blob content, detecting binary data the way git does."""
        return cls(
            data=data,
            size=len(data),
            is_binary=b"\0" in data[:BINARY_SNIFF_LENGTH],
        )

    def text(self) -> str:
        """Decode the blob as UTF-8, replacing invalid bytes."""
        return self.data.decode("utf-8", errors="replace")


@dataclass(frozen=True, slots=True)
class BlameHunk:
    """A contiguous range of lines attributed to one commit.

    Attributes:
        start_line: 1-based line number of the first line in the current file.
        line_count: Number of lines in the hunk.
        sha: Commit SHA that last changed these lines (40-char hex).
    """

    start_line: int
    line_count: int
    sha: str
