"""Display path construction.

Builds the canonical browse URLs emitted by the HTML layer::

    /<repo>/<kind>/<ref shorthand>/<path segments...>
"""

from collections.abc import Sequence
from urllib.parse import quote

from vgit.browse._models import Breadcrumb, DisplayKind
from vgit.repository import TreeEntry


def _quote(value: str) -> str:
    return quote(value, safe="/")


def split_path(path: str) -> list[str]:
    """Split a relative path into its non-empty segments."""
    return [segment for segment in path.split("/") if segment]


def build_display_path(
    repo_name: str,
    kind: DisplayKind | str,
    ref_shorthand: str,
    segments: Sequence[str] = (),
    index: int | None = None,
) -> str:
    """Build a display path up to and including ``segments[index]``.

    Args:
        repo_name: Repository name.
        kind: Route verb (blob, tree or raw).
        ref_shorthand: Shorthand of the reference being browsed.
        segments: Path segments consumed so far.
        index: Index of the last segment to include. None includes all.

    Returns:
        The display path, e.g. ``/project/tree/master/src/lib``.

    Example:
        >>> build_display_path("project", "tree", "master", ["src", "lib"], 0)
        '/project/tree/master/src'
    """
    included = segments if index is None else segments[: index + 1]
    parts = [repo_name, str(DisplayKind(kind)), ref_shorthand, *included]
    return "/" + "/".join(_quote(part.strip("/")) for part in parts if part.strip("/"))


def entry_display_path(repo_name: str, ref_shorthand: str, entry: TreeEntry) -> str:
    """Link to a tree entry: tree view for directories, blob view otherwise."""
    kind = DisplayKind.TREE if entry.is_directory else DisplayKind.BLOB
    return build_display_path(repo_name, kind, ref_shorthand, split_path(entry.path))


def build_breadcrumbs(
    repo_name: str,
    ref_shorthand: str,
    segments: Sequence[str],
    *,
    last_is_file: bool = False,
) -> list[Breadcrumb]:
    """Build breadcrumb links for each segment of a path.

    Every crumb links to the tree view of its prefix, except the final crumb
    which links to the blob view when ``last_is_file`` is set.
    """
    crumbs: list[Breadcrumb] = []
    last = len(segments) - 1
    for index, segment in enumerate(segments):
        kind = DisplayKind.BLOB if last_is_file and index == last else DisplayKind.TREE
        crumbs.append(
            Breadcrumb(
                name=segment,
                href=build_display_path(repo_name, kind, ref_shorthand, segments, index),
            )
        )
    return crumbs
