# ruff: noqa: TC003  # Path and datetime needed at runtime for dataclass fields
"""Browsing engine models.

Transient values produced while serving one request: resolved references,
navigation results with their parent context, annotated entries and the
catalog's repository summaries.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from pathlib import Path

from vgit.repository import CommitInfo, Reference, TreeEntry, TreeListing


class DisplayKind(StrEnum):
    """Route verb of a browse URL."""

    BLOB = "blob"
    TREE = "tree"
    RAW = "raw"


@dataclass(frozen=True, slots=True)
class PathResolution:
    """A reference matched from a combined ``<ref>/<path>`` string.

    Attributes:
        reference: The reference whose shorthand prefixed the input.
        path: The remaining relative path (empty for the tree root).
    """

    reference: Reference
    path: str


@dataclass(frozen=True, slots=True)
class EntryContext:
    """A resolved entry together with the tree that contains it.

    The parent is carried alongside the entry rather than stored on it.

    Attributes:
        entry: The resolved entry.
        parent: Listing of the tree the entry was found in.
    """

    entry: TreeEntry
    parent: TreeListing


@dataclass(frozen=True, slots=True)
class NavigationResult:
    """Outcome of descending a root tree to a path.

    Exactly one of ``tree`` and ``blob`` is set.

    Attributes:
        path: The relative path that was navigated (empty for the root).
        tree: Listing of the target directory, when the target is a tree.
        blob: The target entry, when the target is a file.
        context: The target entry and its parent tree. None for the root.
    """

    path: str
    tree: TreeListing | None = None
    blob: TreeEntry | None = None
    context: EntryContext | None = None

    @property
    def is_tree(self) -> bool:
        return self.tree is not None


@dataclass(frozen=True, slots=True)
class AnnotatedEntry:
    """A tree entry paired with the commit that last modified it.

    Attributes:
        entry: The tree entry.
        commit: Most recent commit among the file's blame hunks. None for
            directories, submodules and empty files.
        recency: Human-relative age of the commit, e.g. "2 days ago".
    """

    entry: TreeEntry
    commit: CommitInfo | None = None
    recency: str = ""

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def is_directory(self) -> bool:
        return self.entry.is_directory


@dataclass(frozen=True, slots=True)
class RepositorySummary:
    """A repository discovered by the catalog.

    Attributes:
        name: Directory name of the repository.
        path: Filesystem location.
        description: Free-text description, empty when unavailable.
        last_activity: Commit time of the head commit.
        last_activity_human: Human-relative form of ``last_activity``.
    """

    name: str
    path: Path
    description: str
    last_activity: datetime
    last_activity_human: str


@dataclass(frozen=True, slots=True)
class Breadcrumb:
    """One link in a path breadcrumb trail.

    Attributes:
        name: The path segment shown to the user.
        href: Display path the segment links to.
    """

    name: str
    href: str
