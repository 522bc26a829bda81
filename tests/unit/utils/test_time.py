from datetime import UTC, datetime, timedelta

import pytest

from tests.conftest import NOW
from vgit.utils import human_size, humanize_since


class TestHumanizeSince:
    @pytest.mark.parametrize(
        ("delta", "expected"),
        [
            (timedelta(days=3), "3 days ago"),
            (timedelta(hours=1), "1 hour ago"),
            (timedelta(days=14), "2 weeks ago"),
        ],
    )
    def test_past(self, delta: timedelta, expected: str) -> None:
        assert humanize_since(NOW - delta, now=NOW) == expected

    def test_defaults_to_now(self) -> None:
        moment = datetime.now(UTC) - timedelta(days=2)

        assert humanize_since(moment) == "2 days ago"


class TestHumanSize:
    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0, "0 bytes"),
            (1023, "1023 bytes"),
            (1024, "1.0 KB"),
            (1536, "1.5 KB"),
            (5 * 1024 * 1024, "5.0 MB"),
            (3 * 1024**3, "3.0 GB"),
        ],
    )
    def test_formats(self, size: int, expected: str) -> None:
        assert human_size(size) == expected
