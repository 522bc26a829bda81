"""Repository browsing engine.

Turns route parameters into view-models: resolves ``<ref>/<path>`` strings,
walks trees, annotates entries with their last-modifying commit, finds
readmes and ranks repositories by recency.

Example:
    >>> from vgit.browse import RepositoryBrowser
    >>> browser = RepositoryBrowser(Path("/srv/git"))
    >>> index = browser.list_repositories()
"""

from vgit.browse._browser import RepositoryBrowser, validate_repository_name
from vgit.browse._catalog import (
    RepositoryOpener,
    list_candidates,
    list_repositories,
    summarize_repository,
)
from vgit.browse._history import annotate_entries, last_modifying_commit
from vgit.browse._models import (
    AnnotatedEntry,
    Breadcrumb,
    DisplayKind,
    EntryContext,
    NavigationResult,
    PathResolution,
    RepositorySummary,
)
from vgit.browse._navigator import navigate
from vgit.browse._paths import (
    build_breadcrumbs,
    build_display_path,
    entry_display_path,
    split_path,
)
from vgit.browse._readme import MarkdownRenderer, find_readme, render_markdown, render_readme
from vgit.browse._resolver import resolve_reference_path, sort_longest_first
from vgit.browse._views import (
    BINARY_PLACEHOLDER,
    BlobView,
    BranchesView,
    IndexView,
    RawView,
    TreeView,
)

__all__ = [
    "BINARY_PLACEHOLDER",
    "AnnotatedEntry",
    "BlobView",
    "BranchesView",
    "Breadcrumb",
    "DisplayKind",
    "EntryContext",
    "IndexView",
    "MarkdownRenderer",
    "NavigationResult",
    "PathResolution",
    "RawView",
    "RepositoryBrowser",
    "RepositoryOpener",
    "RepositorySummary",
    "TreeView",
    "annotate_entries",
    "build_breadcrumbs",
    "build_display_path",
    "entry_display_path",
    "find_readme",
    "last_modifying_commit",
    "list_candidates",
    "list_repositories",
    "navigate",
    "render_markdown",
    "render_readme",
    "resolve_reference_path",
    "sort_longest_first",
    "split_path",
    "summarize_repository",
]
