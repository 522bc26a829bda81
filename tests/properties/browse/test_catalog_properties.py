import tempfile
from datetime import UTC, datetime, timedelta
from pathlib import Path

from hypothesis import given, settings, strategies as st

from tests.conftest import NOW
from vgit.browse import RepositoryOpener, list_repositories
from vgit.exceptions import RepositoryOpenError
from vgit.repository import FakeRepository, RepositoryProtocol

BASE = datetime(2024, 1, 1, tzinfo=UTC)

catalogs = st.dictionaries(
    keys=st.from_regex(r"[a-z][a-z0-9]{0,7}", fullmatch=True),
    values=st.one_of(st.none(), st.integers(min_value=0, max_value=4)),
    max_size=8,
)


def _opener(days: dict[str, int | None]) -> RepositoryOpener:
    def open_repo(path: Path) -> RepositoryProtocol:
        offset = days[path.name]
        if offset is None:
            msg = f"Not a git repository: {path}"
            raise RepositoryOpenError(msg, path=path)
        repo = FakeRepository(name=path.name)
        commit = repo.add_commit(timestamp=BASE + timedelta(days=offset))
        repo.add_reference("refs/heads/master", commit.sha)
        return repo

    return open_repo


@settings(max_examples=50, deadline=None)
@given(days=catalogs, workers=st.integers(min_value=1, max_value=4))
def test_catalog_is_newest_first_and_skips_broken(
    days: dict[str, int | None], workers: int
) -> None:
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        for name in days:
            (root / name).mkdir()

        summaries = list_repositories(
            root, opener=_opener(days), max_workers=workers, now=NOW
        )

    assert {s.name for s in summaries} == {n for n, d in days.items() if d is not None}
    keys = [(-(s.last_activity - BASE).days, s.name) for s in summaries]
    assert keys == sorted(keys)
