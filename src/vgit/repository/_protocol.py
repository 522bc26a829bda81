"""Repository protocol for type-safe dependency injection.

This module defines a runtime-checkable Protocol that GitRepository
satisfies, enabling the browsing engine to be tested with fakes.
"""

from typing import Protocol, runtime_checkable

from vgit.repository._models import (
    BlameHunk,
    BlobContent,
    CommitInfo,
    Reference,
    TreeEntry,
    TreeListing,
)


@runtime_checkable
class RepositoryProtocol(Protocol):
    """Protocol for read-only git object store access.

    Example:
        >>> def branch_names(repo: RepositoryProtocol) -> list[str]:
        ...     return [r.shorthand for r in repo.list_references() if r.is_branch]
    """

    @property
    def name(self) -> str:
        """Repository display name."""
        ...

    def close(self) -> None:
        """Release resources held by the repository."""
        ...

    def list_references(self) -> list[Reference]:
        """List references in store order."""
        ...

    def default_reference(self) -> Reference:
        """Return the reference HEAD points to.

        Raises:
            ReferenceNotFoundError: If the repository has no branches.
        """
        ...

    def head_commit(self) -> CommitInfo:
        """Return the commit HEAD resolves to.

        Raises:
            ReferenceNotFoundError: If HEAD does not resolve.
        """
        ...

    def reference_commit(self, reference: Reference) -> CommitInfo:
        """Return the commit a reference resolves to."""
        ...

    def lookup_commit(self, sha: str) -> CommitInfo:
        """Look up a commit by hex SHA.

        Raises:
            KeyError: If the commit does not exist.
        """
        ...

    def list_tree(self, tree_sha: str, path: str = "") -> TreeListing:
        """List a tree's entries in git tree order."""
        ...

    def lookup_path(self, tree_sha: str, path: str) -> TreeEntry:
        """Look up the entry at a relative path below a tree.

        Raises:
            EntryNotFoundError: If nothing exists at the path.
        """
        ...

    def read_blob(self, sha: str) -> BlobContent:
        """Read a blob's content.

        Raises:
            KeyError: If the blob does not exist.
        """
        ...

    def blame(self, revision: str, path: str) -> list[BlameHunk]:
        """Compute blame hunks for a file at a revision.

        Raises:
            BlameComputationError: If blame cannot be computed.
        """
        ...

    def read_description(self, filename: str = "description") -> str:
        """Read the free-text description side-file.

        Raises:
            DescriptionUnavailableError: If the file is absent or unreadable.
        """
        ...
