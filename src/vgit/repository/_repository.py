# ruff: noqa: TC003  # Path needed at runtime for method bodies
"""Read-only git repository access.

This module provides the GitRepository class, a thin read-only adapter over a
dulwich Repo that exposes references, commits, trees, blobs and blame in the
shapes the browsing engine consumes.
"""

import stat
import zlib
from datetime import datetime, timedelta, timezone
from pathlib import Path
from types import TracebackType
from typing import Final, Self

from dulwich.errors import (
    ChecksumMismatch,
    FileFormatException,
    NotGitRepository,
    NotTreeError,
)
from dulwich.object_store import tree_lookup_path
from dulwich.objects import S_ISGITLINK, Blob, Commit, ShaFile, Tree
from dulwich.repo import Repo

from vgit.exceptions import (
    DescriptionUnavailableError,
    EntryNotFoundError,
    ReferenceNotFoundError,
    RepositoryCorruptError,
    RepositoryOpenError,
)
from vgit.repository._blame import parse_blame_hunks, run_git_blame
from vgit.repository._models import (
    BlameHunk,
    BlobContent,
    CommitInfo,
    EntryKind,
    Reference,
    TreeEntry,
    TreeListing,
)


_HEAD: Final = b"HEAD"
_REFS_PREFIX: Final = b"refs/"
DEFAULT_DESCRIPTION_FILE: Final = "description"

# Raised by dulwich for unreadable or malformed object data
_CORRUPTION_ERRORS: Final = (FileFormatException, ChecksumMismatch, zlib.error)


def _decode(value: bytes) -> str:
    """Decode a git name, keeping undecodable bytes round-trippable."""
    return value.decode("utf-8", errors="surrogateescape")


def _encode(value: str) -> bytes:
    """Encode a path for lookup, reversing ``_decode``."""
    return value.encode("utf-8", errors="surrogateescape")


def _join(base: str, name: str) -> str:
    return f"{base}/{name}" if base else name


def _entry_kind(mode: int) -> EntryKind:
    if S_ISGITLINK(mode):
        return EntryKind.SUBMODULE
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    return EntryKind.FILE


def _commit_timestamp(commit: Commit) -> datetime:
    """Convert a commit's committer time and offset to an aware datetime."""
    tz = timezone(timedelta(seconds=commit.commit_timezone))
    return datetime.fromtimestamp(commit.commit_time, tz=tz)


def _split_identity(identity: bytes) -> tuple[str, str]:
    """Split ``Name <email>`` into its parts."""
    name, _, rest = identity.partition(b" <")
    email = rest.rstrip(b">")
    return (
        name.decode("utf-8", errors="replace"),
        email.decode("utf-8", errors="replace"),
    )


class GitRepository:
    """Read-only view of a git repository on disk.

    The class implements the context manager protocol. When used as a context
    manager, the underlying dulwich Repo is closed when exiting the context.
    Instances are opened per request and never shared.

    Attributes:
        name: The repository name (its directory name).
        path: The directory the repository was opened from.

    Example:
        with GitRepository.open(Path("/srv/git/project.git")) as repo:
            for ref in repo.list_references():
                print(ref.shorthand)
    """

    __slots__: Final = ("_name", "_path", "_repo")
    _name: str
    _path: Path
    _repo: Repo

    def __init__(self, repo: Repo, path: Path, *, name: str | None = None) -> None:
        """Wrap an already opened dulwich Repo.

        Args:
            repo: The dulwich repository.
            path: The directory the repository lives in.
            name: Display name. Defaults to the directory name.
        """
        self._repo = repo
        self._path = path
        self._name = name if name is not None else path.name

    @classmethod
    def open(cls, path: Path, *, name: str | None = None) -> Self:
        """Open a directory as a repository.

        Only the given directory is considered: parent directories are never
        searched. Both bare repositories and working trees are accepted.

        Args:
            path: Directory to open.
            name: Display name. Defaults to the directory name.

        Returns:
            The opened repository.

        Raises:
            RepositoryOpenError: If the directory is not a readable git
                repository.
        """
        try:
            repo = Repo(str(path))
        except NotGitRepository as e:
            msg = f"Not a git repository: {path}"
            raise RepositoryOpenError(msg, path=path) from e
        except (OSError, ValueError) as e:
            msg = f"Failed to open repository {path}: {e}"
            raise RepositoryOpenError(msg, path=path) from e
        return cls(repo, path, name=name)

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
        """Close the underlying dulwich Repo."""
        self._repo.close()

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> Path:
        return self._path

    @property
    def git_dir(self) -> Path:
        """The control directory (``.git`` for working trees)."""
        return Path(self._repo.controldir())

    # =========================================================================
    # References
    # =========================================================================

    def list_references(self) -> list[Reference]:
        """List references in store order.

        Store order is the byte order of full reference names, so branches
        come before remotes, which come before tags. Annotated tags are peeled
        to their commit. Dangling symbolic references are left out.

        Returns:
            References in store listing order.
        """
        references: list[Reference] = []
        for name in sorted(self._repo.refs.allkeys()):
            if not name.startswith(_REFS_PREFIX):
                continue
            try:
                target = self._repo.get_peeled(name)
            except KeyError:
                continue
            if target is None:
                continue
            references.append(Reference(name=_decode(name), target=_decode(target)))
        return references

    def default_reference(self) -> Reference:
        """Return the branch HEAD points to.

        Falls back to the first branch in store order when HEAD is detached
        or points to a branch that does not exist.

        Returns:
            The default reference.

        Raises:
            ReferenceNotFoundError: If the repository has no branches.
        """
        references = self.list_references()
        try:
            names, _ = self._repo.refs.follow(_HEAD)
        except KeyError:
            names = []
        if names:
            head_target = _decode(names[-1])
            for ref in references:
                if ref.name == head_target:
                    return ref

        for ref in references:
            if ref.is_branch:
                return ref

        msg = f"Repository {self._name} has no branches"
        raise ReferenceNotFoundError(msg, param="HEAD")

    # =========================================================================
    # Commits
    # =========================================================================

    def head_commit(self) -> CommitInfo:
        """Return the commit HEAD resolves to.

        Raises:
            ReferenceNotFoundError: If HEAD does not resolve (empty repository).
        """
        try:
            sha = self._repo.head()
        except KeyError as e:
            msg = f"Repository {self._name} has no HEAD commit"
            raise ReferenceNotFoundError(msg, param="HEAD") from e
        return self.lookup_commit(_decode(sha))

    def reference_commit(self, reference: Reference) -> CommitInfo:
        """Return the commit a reference resolves to.

        Raises:
            ReferenceNotFoundError: If the reference does not point to a commit.
        """
        try:
            return self.lookup_commit(reference.target)
        except KeyError as e:
            msg = f"Reference {reference.shorthand} does not point to a commit"
            raise ReferenceNotFoundError(msg, param=reference.shorthand) from e

    def _get_object(self, sha: bytes) -> ShaFile:
        try:
            return self._repo[sha]
        except _CORRUPTION_ERRORS as e:
            hex_sha = _decode(sha)
            msg = f"Corrupt object {hex_sha} in {self._path}: {e}"
            raise RepositoryCorruptError(msg, path=self._path, sha=hex_sha) from e

    def lookup_commit(self, sha: str) -> CommitInfo:
        """Look up a commit by its hex SHA.

        Raises:
            KeyError: If no commit with that SHA exists.
            RepositoryCorruptError: If the commit object cannot be parsed.
        """
        obj = self._get_object(sha.encode("ascii"))
        if not isinstance(obj, Commit):
            msg = f"Not a commit: {sha}"
            raise KeyError(msg)
        try:
            author_name, author_email = _split_identity(obj.author)
            return CommitInfo(
                sha=sha,
                message=obj.message.decode("utf-8", errors="replace"),
                author_name=author_name,
                author_email=author_email,
                timestamp=_commit_timestamp(obj),
                tree=_decode(obj.tree),
                parent_shas=tuple(_decode(parent) for parent in obj.parents),
            )
        except _CORRUPTION_ERRORS as e:
            msg = f"Corrupt commit {sha} in {self._path}: {e}"
            raise RepositoryCorruptError(msg, path=self._path, sha=sha) from e

    # =========================================================================
    # Trees and Blobs
    # =========================================================================

    def list_tree(self, tree_sha: str, path: str = "") -> TreeListing:
        """List the entries of a tree in git tree order.

        Args:
            tree_sha: Hex SHA of the tree.
            path: Repository-relative path of the tree, used to build entry
                paths.

        Raises:
            EntryNotFoundError: If the object is missing or not a tree.
        """
        try:
            obj = self._get_object(tree_sha.encode("ascii"))
        except KeyError as e:
            msg = f"Tree not found: {path or '/'}"
            raise EntryNotFoundError(msg, path=path) from e
        if not isinstance(obj, Tree):
            msg = f"Not a directory: {path}"
            raise EntryNotFoundError(msg, path=path)

        entries = tuple(
            TreeEntry(
                name=_decode(item.path),
                path=_join(path, _decode(item.path)),
                kind=_entry_kind(item.mode),
                mode=item.mode,
                sha=_decode(item.sha),
            )
            for item in obj.iteritems()
        )
        return TreeListing(sha=tree_sha, path=path, entries=entries)

    def lookup_path(self, tree_sha: str, path: str) -> TreeEntry:
        """Look up the entry at a full relative path below a tree.

        Args:
            tree_sha: Hex SHA of the root tree.
            path: Relative path (``/`` separated, surrounding slashes ignored).

        Raises:
            EntryNotFoundError: If nothing exists at the path.
        """
        clean = path.strip("/")
        try:
            mode, sha = tree_lookup_path(
                self._get_object,
                tree_sha.encode("ascii"),
                _encode(clean),
            )
        except (KeyError, NotTreeError) as e:
            msg = f"Path not found: {clean}"
            raise EntryNotFoundError(msg, path=clean) from e

        return TreeEntry(
            name=clean.rsplit("/", 1)[-1],
            path=clean,
            kind=_entry_kind(mode),
            mode=mode,
            sha=_decode(sha),
        )

    def read_blob(self, sha: str) -> BlobContent:
        """Read a blob's content.

        Raises:
            KeyError: If the object is missing or not a blob.
        """
        obj = self._get_object(sha.encode("ascii"))
        if not isinstance(obj, Blob):
            msg = f"Not a blob: {sha}"
            raise KeyError(msg)
        return BlobContent.from_bytes(obj.as_raw_string())

    # =========================================================================
    # History
    # =========================================================================

    def blame(self, revision: str, path: str) -> list[BlameHunk]:
        """Compute blame hunks for a file at a revision.

        Args:
            revision: Commit SHA to blame at.
            path: Repository-relative file path.

        Returns:
            Hunks in file order. Empty for an empty file.

        Raises:
            BlameComputationError: If git blame fails.
        """
        output = run_git_blame(self.git_dir, revision, path)
        if not output:
            return []
        return parse_blame_hunks(output)

    # =========================================================================
    # Metadata
    # =========================================================================

    def read_description(self, filename: str = DEFAULT_DESCRIPTION_FILE) -> str:
        """Read the free-text description side-file.

        Args:
            filename: Name of the file inside the control directory.

        Returns:
            The description with surrounding whitespace removed.

        Raises:
            DescriptionUnavailableError: If the file is absent or unreadable.
        """
        description_path = self.git_dir / filename
        try:
            return description_path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as e:
            msg = f"Description unavailable: {description_path}"
            raise DescriptionUnavailableError(msg, path=description_path) from e
