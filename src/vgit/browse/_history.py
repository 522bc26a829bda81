"""Per-entry history annotation.

Each file in a directory listing is labelled with the commit that last
modified it. The commit is reconstructed from blame: of all commits that own
at least one hunk of the file's current content, the one with the latest
commit time is the last to touch the file.

This costs one blame and one commit lookup per hunk for every file in the
listing, which is fine for small repositories and slow for large ones.
Results are not cached.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from vgit.browse._models import AnnotatedEntry
from vgit.repository import CommitInfo, RepositoryProtocol, TreeEntry
from vgit.utils import humanize_since

if TYPE_CHECKING:
    from collections.abc import Iterable


def last_modifying_commit(
    repo: RepositoryProtocol, revision: str, path: str
) -> CommitInfo | None:
    """Find the most recent commit among a file's blame hunks.

    Commits are examined in hunk order. On equal commit times the commit of
    the later hunk wins.

    Args:
        repo: The repository to read from.
        revision: Commit SHA the listing was resolved at.
        path: Repository-relative file path.

    Returns:
        The latest commit, or None when the file has no hunks (empty file).

    Raises:
        BlameComputationError: If blame cannot be computed.
    """
    latest: CommitInfo | None = None
    for hunk in repo.blame(revision, path):
        commit = repo.lookup_commit(hunk.sha)
        if latest is None or commit.timestamp >= latest.timestamp:
            latest = commit
    return latest


def annotate_entries(
    repo: RepositoryProtocol,
    entries: "Iterable[TreeEntry]",  # noqa: UP037
    *,
    revision: str,
    now: datetime | None = None,
) -> list[AnnotatedEntry]:
    """Pair each entry with the commit that last modified it.

    Only files are blamed. Directories and submodules are returned without a
    commit. Any blame failure aborts the whole listing.

    Args:
        repo: The repository to read from.
        entries: Entries of one tree, in listing order. Their ``path`` is the
            full repository-relative path used for blame.
        revision: Commit SHA the listing was resolved at.
        now: Reference time for the recency label. Defaults to now.

    Returns:
        Annotated entries in the same order as ``entries``.

    Raises:
        BlameComputationError: If blame fails for any file.
    """
    annotated: list[AnnotatedEntry] = []
    for entry in entries:
        if not entry.is_file:
            annotated.append(AnnotatedEntry(entry=entry))
            continue

        commit = last_modifying_commit(repo, revision, entry.path)
        if commit is None:
            annotated.append(AnnotatedEntry(entry=entry))
            continue

        annotated.append(
            AnnotatedEntry(
                entry=entry,
                commit=commit,
                recency=humanize_since(commit.timestamp, now=now),
            )
        )
    return annotated
