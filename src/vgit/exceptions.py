"""vgit exceptions."""

from pathlib import Path
from typing import Any


class VgitError(Exception):
    """Base exception for vgit errors."""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(VgitError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source


# =============================================================================
# Repository Exceptions
# =============================================================================


class RepositoryError(VgitError):
    """Base exception for repository browsing errors."""


class RepositoryOpenError(RepositoryError):
    """Raised when a directory cannot be opened as a git repository.

    Attributes:
        path: The directory that failed to open.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        """Initialize with error message and path context.

        Args:
            message: Human-readable error message.
            path: The directory that failed to open.
        """
        super().__init__(message)
        self.path: Path | None = path


class RepositoryCorruptError(RepositoryError):
    """Raised when a stored object cannot be read or parsed.

    Attributes:
        path: The repository directory.
        sha: The object that failed to load.
    """

    def __init__(
        self, message: str, *, path: Path | None = None, sha: str | None = None
    ) -> None:
        super().__init__(message)
        self.path: Path | None = path
        self.sha: str | None = sha


class RepositoryNotFoundError(RepositoryError, KeyError):
    """Raised when a named repository does not exist under the root.

    Attributes:
        name: The repository name that was requested.
    """

    def __init__(self, message: str, *, name: str | None = None) -> None:
        """Initialize with error message and repository context.

        Args:
            message: Human-readable error message.
            name: The repository name that was requested.
        """
        super().__init__(message)
        self.name: str | None = name

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class ReferenceNotFoundError(RepositoryError, KeyError):
    """Raised when no reference shorthand prefixes a requested path.

    Attributes:
        param: The combined reference and path string that failed to resolve.
    """

    def __init__(self, message: str, *, param: str | None = None) -> None:
        """Initialize with error message and lookup context.

        Args:
            message: Human-readable error message.
            param: The combined reference and path string.
        """
        super().__init__(message)
        self.param: str | None = param

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class EntryNotFoundError(RepositoryError, KeyError):
    """Raised when a path does not exist in the resolved tree.

    Attributes:
        path: The repository-relative path that was not found.
    """

    def __init__(self, message: str, *, path: str | None = None) -> None:
        """Initialize with error message and path context.

        Args:
            message: Human-readable error message.
            path: The repository-relative path that was not found.
        """
        super().__init__(message)
        self.path: str | None = path

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class EntryKindMismatchError(RepositoryError):
    """Raised when a tree view targets a file or a blob view targets a directory.

    Attributes:
        repo_name: Repository the entry belongs to.
        ref_shorthand: Shorthand of the resolved reference.
        path: Repository-relative path of the entry.
        is_file: True when the entry is a file.
    """

    def __init__(
        self,
        message: str,
        *,
        repo_name: str,
        ref_shorthand: str,
        path: str,
        is_file: bool,
    ) -> None:
        """Initialize with error message and entry context."""
        super().__init__(message)
        self.repo_name: str = repo_name
        self.ref_shorthand: str = ref_shorthand
        self.path: str = path
        self.is_file: bool = is_file


class BlameComputationError(RepositoryError):
    """Raised when git blame fails for a file.

    Attributes:
        path: The repository-relative path being blamed.
        revision: The revision the blame was computed at.
        stderr: Output captured from git, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str,
        revision: str,
        stderr: str | None = None,
    ) -> None:
        """Initialize with error message and blame context.

        Args:
            message: Human-readable error message.
            path: The repository-relative path being blamed.
            revision: The revision the blame was computed at.
            stderr: Output captured from git, if any.
        """
        super().__init__(message)
        self.path: str = path
        self.revision: str = revision
        self.stderr: str | None = stderr


class DescriptionUnavailableError(RepositoryError):
    """Raised when a repository description file cannot be read.

    Attributes:
        path: The description file path.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        """Initialize with error message and path context.

        Args:
            message: Human-readable error message.
            path: The description file path.
        """
        super().__init__(message)
        self.path: Path | None = path
