from datetime import UTC, datetime, timedelta

import pytest

from vgit.browse import annotate_entries, last_modifying_commit
from vgit.exceptions import BlameComputationError
from vgit.repository import BlameHunk, FakeRepository

from tests.conftest import NOW

REV = "f" * 40


def _repo_with_commits(*days_ago: int) -> tuple[FakeRepository, list[str]]:
    repo = FakeRepository()
    shas = [
        repo.add_commit(timestamp=NOW - timedelta(days=days), message=f"c{i}").sha
        for i, days in enumerate(days_ago)
    ]
    return repo, shas


class TestLastModifyingCommit:
    def test_single_hunk(self) -> None:
        repo, (sha,) = _repo_with_commits(3)
        repo.set_blame(REV, "a.txt", [BlameHunk(1, 5, sha)])

        commit = last_modifying_commit(repo, REV, "a.txt")

        assert commit is not None
        assert commit.sha == sha

    def test_latest_timestamp_wins(self) -> None:
        repo, (old, new, mid) = _repo_with_commits(10, 1, 5)
        repo.set_blame(
            REV,
            "a.txt",
            [BlameHunk(1, 1, old), BlameHunk(2, 1, new), BlameHunk(3, 1, mid)],
        )

        commit = last_modifying_commit(repo, REV, "a.txt")

        assert commit is not None
        assert commit.sha == new

    def test_tie_goes_to_last_hunk(self) -> None:
        repo, (first, second) = _repo_with_commits(2, 2)
        repo.set_blame(REV, "a.txt", [BlameHunk(1, 1, first), BlameHunk(2, 1, second)])

        commit = last_modifying_commit(repo, REV, "a.txt")

        assert commit is not None
        assert commit.sha == second

    def test_no_hunks(self) -> None:
        repo = FakeRepository()

        assert last_modifying_commit(repo, REV, "empty.txt") is None


class TestAnnotateEntries:
    def test_files_annotated_directories_passed_through(self) -> None:
        repo = FakeRepository()
        tree = repo.add_tree({"src/x.py": b"x", "a.txt": b"a"})
        commit = repo.add_commit(tree=tree, timestamp=NOW - timedelta(days=3))
        repo.set_blame(REV, "a.txt", [BlameHunk(1, 1, commit.sha)])

        annotated = annotate_entries(repo, repo.list_tree(tree).entries, revision=REV, now=NOW)

        assert [a.name for a in annotated] == ["a.txt", "src"]
        assert annotated[0].commit == commit
        assert annotated[0].recency == "3 days ago"
        assert annotated[1].commit is None
        assert annotated[1].recency == ""
        assert repo.blame_calls == [(REV, "a.txt")]

    def test_blames_full_path_at_revision(self) -> None:
        repo = FakeRepository()
        tree = repo.add_tree({"src/x.py": b"x"})
        src = repo.list_tree(tree).entries[0]

        annotate_entries(repo, repo.list_tree(src.sha, "src").entries, revision=REV, now=NOW)

        assert repo.blame_calls == [(REV, "src/x.py")]

    def test_empty_file_has_no_commit(self) -> None:
        repo = FakeRepository()
        tree = repo.add_tree({"empty.txt": b""})

        (entry,) = annotate_entries(repo, repo.list_tree(tree).entries, revision=REV)

        assert entry.commit is None
        assert entry.recency == ""

    def test_blame_failure_aborts(self) -> None:
        repo = FakeRepository()
        tree = repo.add_tree({"a.txt": b"a", "b.txt": b"b"})
        repo.blame_failures.add("a.txt")

        with pytest.raises(BlameComputationError):
            annotate_entries(repo, repo.list_tree(tree).entries, revision=REV)

    def test_preserves_order(self) -> None:
        repo = FakeRepository()
        tree = repo.add_tree({"c.txt": b"c", "a.txt": b"a", "b.txt": b"b"})

        annotated = annotate_entries(
            repo, repo.list_tree(tree).entries, revision=REV, now=datetime.now(UTC)
        )

        assert [a.name for a in annotated] == ["a.txt", "b.txt", "c.txt"]
