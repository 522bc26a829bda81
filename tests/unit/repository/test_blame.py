import subprocess
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from vgit.exceptions import BlameComputationError
from vgit.repository import BlameHunk, parse_blame_hunks, run_git_blame

if TYPE_CHECKING:
    from pytest_mock import MockerFixture

SHA_A = "a" * 40
SHA_B = "b" * 40

PORCELAIN = f"""\
{SHA_A} 1 1 2
author Alice
author-mail <alice@example.com>
author-time 1700000000
author-tz +0000
committer Alice
committer-mail <alice@example.com>
committer-time 1700000000
committer-tz +0000
summary First
filename main.py
\tline one
{SHA_A} 2 2
\tline two
{SHA_B} 3 3 1
author Bob
summary Second
filename main.py
\tline three
"""


class TestParseBlameHunks:
    def test_parses_hunk_headers_in_order(self) -> None:
        assert parse_blame_hunks(PORCELAIN) == [
            BlameHunk(start_line=1, line_count=2, sha=SHA_A),
            BlameHunk(start_line=3, line_count=1, sha=SHA_B),
        ]

    def test_continuation_headers_are_skipped(self) -> None:
        hunks = parse_blame_hunks(PORCELAIN)

        assert all(h.sha in {SHA_A, SHA_B} for h in hunks)
        assert len(hunks) == 2

    def test_content_resembling_header_is_ignored(self) -> None:
        output = f"{SHA_A} 1 1 1\nsummary x\n\t{SHA_B} 1 1 1\n"

        assert parse_blame_hunks(output) == [BlameHunk(1, 1, SHA_A)]

    @pytest.mark.parametrize("separator", ["\r", "\x0b", "\x0c", "\x1c", "\x85", "\u2028"])
    def test_content_with_line_breaking_characters(self, separator: str) -> None:
        output = f"{SHA_A} 1 1 1\nsummary x\n\tcode{separator}{SHA_B} 1 2 1\n"

        assert parse_blame_hunks(output) == [BlameHunk(1, 1, SHA_A)]

    def test_empty_output(self) -> None:
        assert parse_blame_hunks("") == []

    def test_sha256_object_names(self) -> None:
        sha = "c" * 64

        assert parse_blame_hunks(f"{sha} 1 1 4\n") == [BlameHunk(1, 4, sha)]


class TestRunGitBlame:
    def test_invokes_git_with_revision_and_path(self, mocker: "MockerFixture") -> None:
        run = mocker.patch(
            "vgit.repository._blame.subprocess.run",
            return_value=subprocess.CompletedProcess([], 0, stdout="out", stderr=""),
        )

        assert run_git_blame(Path("/repo/.git"), SHA_A, "src/main.py") == "out"

        args = run.call_args.args[0]
        assert args == [
            "git",
            "--git-dir=/repo/.git",
            "blame",
            "--porcelain",
            SHA_A,
            "--",
            "src/main.py",
        ]

    def test_nonzero_exit_raises(self, mocker: "MockerFixture") -> None:
        mocker.patch(
            "vgit.repository._blame.subprocess.run",
            return_value=subprocess.CompletedProcess(
                [], 128, stdout="", stderr="fatal: no such path\n"
            ),
        )

        with pytest.raises(BlameComputationError) as exc_info:
            run_git_blame(Path("/repo/.git"), SHA_A, "missing.py")

        assert exc_info.value.path == "missing.py"
        assert exc_info.value.revision == SHA_A
        assert exc_info.value.stderr == "fatal: no such path"

    def test_missing_git_executable_raises(self, mocker: "MockerFixture") -> None:
        mocker.patch(
            "vgit.repository._blame.subprocess.run",
            side_effect=FileNotFoundError("git"),
        )

        with pytest.raises(BlameComputationError):
            run_git_blame(Path("/repo/.git"), SHA_A, "main.py")
