"""Read-only git repository access.

This package wraps the dulwich object store in value objects consumed by the
browsing engine.

Classes:
    GitRepository: dulwich-backed repository opened from a directory.
    RepositoryProtocol: Runtime-checkable protocol for dependency injection.
    FakeRepository: In-memory implementation for tests.

Models:
    Reference: A branch, tag or other named pointer.
    CommitInfo: Metadata about a single commit.
    TreeEntry: One member of a tree.
    TreeListing: The entries of one tree.
    BlobContent: Raw file content with binary detection.
    BlameHunk: A line range attributed to one commit.

Example:
    >>> from vgit.repository import GitRepository
    >>> with GitRepository.open(Path("/srv/git/project.git")) as repo:
    ...     commit = repo.head_commit()
"""

from vgit.repository._blame import parse_blame_hunks, run_git_blame
from vgit.repository._fake import FakeRepository
from vgit.repository._models import (
    BlameHunk,
    BlobContent,
    CommitInfo,
    EntryKind,
    Reference,
    TreeEntry,
    TreeListing,
    shorthand_for,
)
from vgit.repository._protocol import RepositoryProtocol
from vgit.repository._repository import DEFAULT_DESCRIPTION_FILE, GitRepository

__all__ = [
    "DEFAULT_DESCRIPTION_FILE",
    "BlameHunk",
    "BlobContent",
    "CommitInfo",
    "EntryKind",
    "FakeRepository",
    "GitRepository",
    "Reference",
    "RepositoryProtocol",
    "TreeEntry",
    "TreeListing",
    "parse_blame_hunks",
    "run_git_blame",
    "shorthand_for",
]
