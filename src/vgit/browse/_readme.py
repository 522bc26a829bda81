"""Readme detection and rendering."""

from collections.abc import Callable, Iterable
from typing import Final

import markdown

from vgit.repository import RepositoryProtocol, TreeEntry

_README_PREFIX: Final = "readme"
_MARKDOWN_EXTENSIONS: Final = ("fenced_code", "tables", "sane_lists")

MarkdownRenderer = Callable[[str], str]


def render_markdown(text: str) -> str:
    """Render markdown text to an HTML fragment."""
    return markdown.markdown(text, extensions=list(_MARKDOWN_EXTENSIONS))


def find_readme(entries: Iterable[TreeEntry]) -> TreeEntry | None:
    """Return the first file whose lower-cased name starts with "readme".

    ``README.md``, ``readme.txt`` and ``ReadMe`` all match; ``notreadme.md``
    does not. Directories named readme are ignored.
    """
    for entry in entries:
        if entry.is_file and entry.name.lower().startswith(_README_PREFIX):
            return entry
    return None


def render_readme(
    repo: RepositoryProtocol,
    entry: TreeEntry | None,
    renderer: MarkdownRenderer = render_markdown,
) -> str | None:
    """Fetch a readme blob and render it to HTML.

    Args:
        repo: The repository to read from.
        entry: The readme entry, as returned by ``find_readme``.
        renderer: Markdown to HTML renderer.

    Returns:
        The HTML fragment, or None when there is no readme, the blob cannot
        be fetched, or its content is binary.
    """
    if entry is None:
        return None
    try:
        blob = repo.read_blob(entry.sha)
    except KeyError:
        return None
    if blob.is_binary:
        return None
    return renderer(blob.text())
