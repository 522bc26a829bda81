"""Blame computation via native git.

dulwich has no blame implementation that reports hunks, so blame is computed
by running ``git blame --porcelain`` against the repository's control
directory and parsing the hunk headers from its output.
"""

import re
import subprocess
from pathlib import Path
from typing import Final

from vgit.exceptions import BlameComputationError
from vgit.repository._models import BlameHunk

# Hunk header: <sha> <orig_line> <final_line> <num_lines>
_HUNK_HEADER: Final = re.compile(
    r"^(?P<sha>[0-9a-f]{40}(?:[0-9a-f]{24})?) \d+ (?P<final>\d+) (?P<count>\d+)$"
)


def run_git_blame(git_dir: Path, revision: str, path: str) -> str:
    """Execute git blame and return raw porcelain output.

    Args:
        git_dir: The repository control directory (``.git`` or a bare repo).
        revision: Commit SHA or reference name to blame at.
        path: Repository-relative path of the file.

    Returns:
        Raw porcelain output. Empty string for an empty file.

    Raises:
        BlameComputationError: If git exits with a non-zero status or cannot
            be executed.
    """
    cmd = [
        "git",
        f"--git-dir={git_dir}",
        "blame",
        "--porcelain",
        revision,
        "--",
        path,
    ]

    try:
        result = subprocess.run(  # noqa: S603
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as e:
        msg = f"Failed to run git blame for {path}: {e}"
        raise BlameComputationError(msg, path=path, revision=revision) from e

    if result.returncode != 0:
        msg = f"git blame failed for {path} at {revision}"
        raise BlameComputationError(
            msg,
            path=path,
            revision=revision,
            stderr=result.stderr.strip(),
        )

    return result.stdout


def parse_blame_hunks(output: str) -> list[BlameHunk]:
    """Parse hunk headers from git blame --porcelain output.

    The porcelain format opens every hunk with a header carrying the number
    of lines in the group::

        <sha> <orig_line> <final_line> <num_lines>
        author <name>
        ... other headers ...
            <content>
        <sha> <orig_line> <final_line>
            <content>

    Lines that continue a hunk have a three-field header and are skipped.

    Args:
        output: Raw porcelain output from git blame.

    Returns:
        Hunks in file order.
    """
    hunks: list[BlameHunk] = []
    for line in output.split("\n"):
        # Content lines are tab-prefixed and never match the header pattern
        match = _HUNK_HEADER.match(line)
        if match is None:
            continue
        hunks.append(
            BlameHunk(
                start_line=int(match.group("final")),
                line_count=int(match.group("count")),
                sha=match.group("sha"),
            )
        )
    return hunks
