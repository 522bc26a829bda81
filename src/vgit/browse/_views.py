"""View-models handed to the rendering layer."""

from dataclasses import dataclass, field

from vgit.browse._models import AnnotatedEntry, Breadcrumb, RepositorySummary
from vgit.repository import CommitInfo, Reference

BINARY_PLACEHOLDER = "(Binary not shown)"


@dataclass(frozen=True, slots=True)
class IndexView:
    """The repository listing page."""

    repositories: list[RepositorySummary]


@dataclass(frozen=True, slots=True)
class TreeView:
    """A directory listing at a reference.

    Attributes:
        repo_name: Repository name.
        reference: The reference being browsed.
        commit: The commit the reference resolves to.
        path: Relative path of the directory (empty for the root).
        breadcrumbs: Links for each segment of ``path``.
        directories: Subdirectories and submodules, in listing order.
        files: Files with their last-modifying commit, in listing order.
        readme: Rendered readme HTML, if the directory has one.
        parent_href: Link to the parent directory, None at the root.
    """

    repo_name: str
    reference: Reference
    commit: CommitInfo
    path: str
    breadcrumbs: list[Breadcrumb]
    directories: list[AnnotatedEntry]
    files: list[AnnotatedEntry]
    readme: str | None = None
    parent_href: str | None = None


@dataclass(frozen=True, slots=True)
class BlobView:
    """A single file at a reference.

    Binary files never expose their bytes: ``content`` holds a fixed
    placeholder instead.
    """

    repo_name: str
    reference: Reference
    commit: CommitInfo
    path: str
    filename: str
    breadcrumbs: list[Breadcrumb]
    size: int
    size_human: str
    content: str
    is_binary: bool
    raw_href: str
    tree_href: str


@dataclass(frozen=True, slots=True)
class RawView:
    """Raw bytes of a file."""

    filename: str
    data: bytes
    is_binary: bool


@dataclass(frozen=True, slots=True)
class BranchesView:
    """Local branches of a repository."""

    repo_name: str
    branches: list[str] = field(default_factory=list)
    default_branch: str | None = None
