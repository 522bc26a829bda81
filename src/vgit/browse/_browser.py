# ruff: noqa: TC003  # Path needed at runtime for the constructor signature
"""Repository browser.

The façade behind every browse route. Each call opens a fresh repository
handle, runs one sequential chain of store operations and closes the handle
before returning a view-model.
"""

from contextlib import closing
from pathlib import Path
from typing import TYPE_CHECKING, Final

from vgit.browse._catalog import RepositoryOpener, list_repositories
from vgit.browse._history import annotate_entries
from vgit.browse._models import DisplayKind, NavigationResult, PathResolution
from vgit.browse._navigator import navigate
from vgit.browse._paths import build_breadcrumbs, build_display_path, split_path
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
from vgit.exceptions import (
    EntryKindMismatchError,
    EntryNotFoundError,
    RepositoryNotFoundError,
    RepositoryOpenError,
)
from vgit.repository import (
    DEFAULT_DESCRIPTION_FILE,
    BlobContent,
    CommitInfo,
    GitRepository,
    Reference,
    RepositoryProtocol,
    TreeEntry,
)
from vgit.utils import create_null_logger, human_size

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

_INVALID_NAMES: Final = frozenset({"", ".", ".."})
_SEPARATORS: Final = ("/", "\\")


def validate_repository_name(name: str) -> str:
    """Reject names that could escape the repository root.

    Raises:
        RepositoryNotFoundError: If ``name`` is empty, ``.``, ``..`` or
            contains a path separator.
    """
    if name in _INVALID_NAMES or any(sep in name for sep in _SEPARATORS):
        msg = f"Repository not found: {name!r}"
        raise RepositoryNotFoundError(msg, name=name)
    return name


class RepositoryBrowser:
    """Browse the repositories below one root directory.

    Args:
        root: Directory containing the repositories.
        opener: Factory that opens a directory as a repository.
        description_file: Name of the description side-file.
        max_workers: Concurrency of the catalog scan.
        prefer_longest_ref: Try longer reference shorthands first when
            resolving ``<ref>/<path>`` strings instead of store order.
        markdown_renderer: Markdown to HTML renderer for readmes.
        logger: Logger for request-level events.

    Example:
        >>> browser = RepositoryBrowser(Path("/srv/git"))
        >>> view = browser.browse_tree("project", "master/src")
        >>> [entry.name for entry in view.files]
        ['main.py']
    """

    def __init__(  # noqa: PLR0913
        self,
        root: Path,
        *,
        opener: RepositoryOpener = GitRepository.open,
        description_file: str = DEFAULT_DESCRIPTION_FILE,
        max_workers: int = 1,
        prefer_longest_ref: bool = False,
        markdown_renderer: MarkdownRenderer = render_markdown,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> None:
        self._root = root
        self._opener = opener
        self._description_file = description_file
        self._max_workers = max_workers
        self._prefer_longest_ref = prefer_longest_ref
        self._markdown_renderer = markdown_renderer
        self._logger = logger if logger is not None else create_null_logger()

    @property
    def root(self) -> Path:
        return self._root

    @property
    def prefer_longest_ref(self) -> bool:
        return self._prefer_longest_ref

    def _open(self, repo_name: str) -> RepositoryProtocol:
        validate_repository_name(repo_name)
        path = self._root / repo_name
        if not path.is_dir():
            msg = f"Repository not found: {repo_name}"
            raise RepositoryNotFoundError(msg, name=repo_name)
        try:
            return self._opener(path)
        except RepositoryOpenError as e:
            msg = f"Repository not found: {repo_name}"
            raise RepositoryNotFoundError(msg, name=repo_name) from e

    def _resolve(self, repo: RepositoryProtocol, ref_path: str) -> PathResolution:
        references = repo.list_references()
        if self._prefer_longest_ref:
            references = sort_longest_first(references)
        return resolve_reference_path(references, ref_path)

    # =========================================================================
    # Catalog
    # =========================================================================

    def list_repositories(self) -> IndexView:
        """List every repository below the root, most recently active first."""
        repositories = list_repositories(
            self._root,
            opener=self._opener,
            description_file=self._description_file,
            max_workers=self._max_workers,
            logger=self._logger,
        )
        self._logger.debug("repositories_listed", count=len(repositories))
        return IndexView(repositories=repositories)

    def list_branches(self, repo_name: str) -> BranchesView:
        """List the shorthands of a repository's local branches in store order."""
        with closing(self._open(repo_name)) as repo:
            branches = [ref.shorthand for ref in repo.list_references() if ref.is_branch]
            try:
                default: str | None = repo.default_reference().shorthand
            except KeyError:
                default = None
        return BranchesView(repo_name=repo_name, branches=branches, default_branch=default)

    # =========================================================================
    # Trees
    # =========================================================================

    def browse_root(self, repo_name: str) -> TreeView:
        """Show the root tree of the default branch.

        Raises:
            RepositoryNotFoundError: If the repository does not exist.
            ReferenceNotFoundError: If the repository has no branches.
            BlameComputationError: If annotating the listing fails.
        """
        with closing(self._open(repo_name)) as repo:
            reference = repo.default_reference()
            return self._tree_view(repo, repo_name, reference, "")

    def browse_tree(self, repo_name: str, ref_path: str) -> TreeView:
        """Show the directory named by a combined ``<ref>/<path>`` string.

        Raises:
            RepositoryNotFoundError: If the repository does not exist.
            ReferenceNotFoundError: If no reference prefixes ``ref_path``.
            EntryNotFoundError: If the path does not exist.
            EntryKindMismatchError: If the path names a file.
            BlameComputationError: If annotating the listing fails.
        """
        with closing(self._open(repo_name)) as repo:
            resolution = self._resolve(repo, ref_path)
            return self._tree_view(repo, repo_name, resolution.reference, resolution.path)

    def _tree_view(
        self,
        repo: RepositoryProtocol,
        repo_name: str,
        reference: Reference,
        path: str,
    ) -> TreeView:
        commit = repo.reference_commit(reference)
        result = navigate(repo, commit.tree, path)
        if result.tree is None:
            msg = f"Not a directory: {result.path}"
            raise EntryKindMismatchError(
                msg,
                repo_name=repo_name,
                ref_shorthand=reference.shorthand,
                path=result.path,
                is_file=True,
            )

        listing = result.tree
        annotated = annotate_entries(repo, listing.entries, revision=commit.sha)
        readme = render_readme(repo, find_readme(listing.files), self._markdown_renderer)

        segments = split_path(result.path)
        parent_href = None
        if segments:
            parent_href = build_display_path(
                repo_name, DisplayKind.TREE, reference.shorthand, segments[:-1]
            )

        self._logger.debug(
            "tree_viewed",
            repo=repo_name,
            ref=reference.shorthand,
            path=result.path,
            entries=len(annotated),
        )
        return TreeView(
            repo_name=repo_name,
            reference=reference,
            commit=commit,
            path=result.path,
            breadcrumbs=build_breadcrumbs(repo_name, reference.shorthand, segments),
            directories=[entry for entry in annotated if entry.is_directory],
            files=[entry for entry in annotated if not entry.is_directory],
            readme=readme,
            parent_href=parent_href,
        )

    # =========================================================================
    # Files
    # =========================================================================

    def _resolve_file(
        self, repo: RepositoryProtocol, repo_name: str, ref_path: str
    ) -> tuple[PathResolution, CommitInfo, TreeEntry, BlobContent]:
        resolution = self._resolve(repo, ref_path)
        commit = repo.reference_commit(resolution.reference)
        result: NavigationResult = navigate(repo, commit.tree, resolution.path)

        if result.is_tree:
            msg = f"Not a file: {result.path or '/'}"
            raise EntryKindMismatchError(
                msg,
                repo_name=repo_name,
                ref_shorthand=resolution.reference.shorthand,
                path=result.path,
                is_file=False,
            )

        entry = result.blob
        if entry is None or not entry.is_file:
            msg = f"File not found: {result.path}"
            raise EntryNotFoundError(msg, path=result.path)

        try:
            blob = repo.read_blob(entry.sha)
        except KeyError as e:
            msg = f"File not found: {result.path}"
            raise EntryNotFoundError(msg, path=result.path) from e
        return resolution, commit, entry, blob

    def view_blob(self, repo_name: str, ref_path: str) -> BlobView:
        """Show one file. Binary content is replaced with a placeholder.

        Raises:
            RepositoryNotFoundError: If the repository does not exist.
            ReferenceNotFoundError: If no reference prefixes ``ref_path``.
            EntryNotFoundError: If the path does not exist or is a submodule.
            EntryKindMismatchError: If the path names a directory.
        """
        with closing(self._open(repo_name)) as repo:
            resolution, commit, entry, blob = self._resolve_file(repo, repo_name, ref_path)

        shorthand = resolution.reference.shorthand
        segments = split_path(entry.path)
        self._logger.debug(
            "blob_viewed", repo=repo_name, ref=shorthand, path=entry.path, size=blob.size
        )
        return BlobView(
            repo_name=repo_name,
            reference=resolution.reference,
            commit=commit,
            path=entry.path,
            filename=entry.name,
            breadcrumbs=build_breadcrumbs(repo_name, shorthand, segments, last_is_file=True),
            size=blob.size,
            size_human=human_size(blob.size),
            content=BINARY_PLACEHOLDER if blob.is_binary else blob.text(),
            is_binary=blob.is_binary,
            raw_href=build_display_path(repo_name, DisplayKind.RAW, shorthand, segments),
            tree_href=build_display_path(repo_name, DisplayKind.TREE, shorthand, segments[:-1]),
        )

    def view_raw(self, repo_name: str, ref_path: str) -> RawView:
        """Return the raw bytes of one file.

        Raises:
            RepositoryNotFoundError: If the repository does not exist.
            ReferenceNotFoundError: If no reference prefixes ``ref_path``.
            EntryNotFoundError: If the path does not exist or is a submodule.
            EntryKindMismatchError: If the path names a directory.
        """
        with closing(self._open(repo_name)) as repo:
            _, _, entry, blob = self._resolve_file(repo, repo_name, ref_path)
        return RawView(filename=entry.name, data=blob.data, is_binary=blob.is_binary)
