# ruff: noqa: TC003  # Path needed at runtime for function signatures
"""Repository catalog.

Discovers the repositories below a root directory and ranks them by the time
of their head commit. Candidates that cannot be opened are skipped.
"""

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from vgit.browse._models import RepositorySummary
from vgit.exceptions import DescriptionUnavailableError, VgitError
from vgit.repository import DEFAULT_DESCRIPTION_FILE, GitRepository, RepositoryProtocol
from vgit.utils import create_null_logger, humanize_since

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

RepositoryOpener = Callable[[Path], RepositoryProtocol]


def list_candidates(root: Path) -> list[Path]:
    """List candidate repository directories below ``root``, sorted by name.

    Raises:
        OSError: If ``root`` cannot be listed.
    """
    return sorted(root.iterdir(), key=lambda p: p.name)


def summarize_repository(
    path: Path,
    *,
    opener: RepositoryOpener = GitRepository.open,
    description_file: str = DEFAULT_DESCRIPTION_FILE,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    now: datetime | None = None,
) -> RepositorySummary | None:
    """Open one candidate and collect its catalog metadata.

    Args:
        path: Candidate directory.
        opener: Factory that opens a directory as a repository.
        description_file: Name of the description side-file.
        logger: Logger for skipped candidates.
        now: Reference time for the recency label.

    Returns:
        The summary, or None if the candidate is not a usable repository
        (cannot be opened, has no head commit, or is corrupt).
    """
    log = logger if logger is not None else create_null_logger()

    try:
        repo = opener(path)
    except VgitError as e:
        log.debug("repository_skipped", path=str(path), reason=str(e))
        return None

    try:
        try:
            description = repo.read_description(description_file)
        except DescriptionUnavailableError as e:
            log.debug("description_unavailable", path=str(path), reason=str(e))
            description = ""

        head = repo.head_commit()
    except (VgitError, KeyError, OSError, ValueError) as e:
        log.debug("repository_skipped", path=str(path), reason=str(e))
        return None
    finally:
        repo.close()

    return RepositorySummary(
        name=path.name,
        path=path,
        description=description,
        last_activity=head.timestamp,
        last_activity_human=humanize_since(head.timestamp, now=now),
    )


def list_repositories(
    root: Path,
    *,
    opener: RepositoryOpener = GitRepository.open,
    description_file: str = DEFAULT_DESCRIPTION_FILE,
    max_workers: int = 1,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    now: datetime | None = None,
) -> list[RepositorySummary]:
    """List the repositories below ``root``, most recently active first.

    Each candidate is opened independently. With ``max_workers`` above one
    the candidates are opened on a thread pool; the result is the same as a
    sequential run.

    Args:
        root: Directory containing candidate repositories.
        opener: Factory that opens a directory as a repository.
        description_file: Name of the description side-file.
        max_workers: Number of candidates opened concurrently.
        logger: Logger for skipped candidates.
        now: Reference time for the recency labels.

    Returns:
        Summaries sorted by last activity, newest first. Repositories with
        equal timestamps keep their name order.

    Raises:
        OSError: If ``root`` cannot be listed.
    """
    candidates = list_candidates(root)

    def summarize(path: Path) -> RepositorySummary | None:
        return summarize_repository(
            path,
            opener=opener,
            description_file=description_file,
            logger=logger,
            now=now,
        )

    if max_workers > 1 and len(candidates) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = list(executor.map(summarize, candidates))
    else:
        results = [summarize(path) for path in candidates]

    summaries = [summary for summary in results if summary is not None]
    summaries.sort(key=lambda s: s.last_activity, reverse=True)
    return summaries
