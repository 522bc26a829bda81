"""Reference path resolution.

Splits the ``<ref>/<path>`` remainder of a browse URL into a reference and a
relative path. Reference shorthands may themselves contain ``/`` and may be
prefixes of each other, so the split is driven by the repository's references
rather than by the separator.
"""

from typing import TYPE_CHECKING

from vgit.browse._models import PathResolution
from vgit.exceptions import ReferenceNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from vgit.repository import Reference


def resolve_reference_path(
    references: "Iterable[Reference]", param: str  # noqa: UP037
) -> PathResolution:
    """Resolve a combined reference and path string.

    References are examined in the order given (store listing order). The
    first one whose shorthand is a literal prefix of ``param`` wins, even
    when a later reference would match more specifically: with ``v1`` listed
    before ``v1.2``, ``v1.2/src`` resolves to ``v1`` with path ``2/src``.

    Args:
        references: The repository's references in store order.
        param: URL remainder after the repository name and route verb.

    Returns:
        The matched reference and the remaining path. The path is empty when
        ``param`` equals the shorthand; otherwise the character following the
        shorthand is dropped and the rest is returned verbatim.

    Raises:
        ReferenceNotFoundError: If no shorthand prefixes ``param``.

    Example:
        >>> resolve_reference_path(refs, "master/src/main.go")
        PathResolution(reference=Reference(name='refs/heads/master', ...),
                       path='src/main.go')
    """
    for reference in references:
        shorthand = reference.shorthand
        if param.startswith(shorthand):
            return PathResolution(
                reference=reference,
                path=param[len(shorthand) + 1 :],
            )

    msg = f"No reference matches path: {param}"
    raise ReferenceNotFoundError(msg, param=param)


def sort_longest_first(
    references: "Iterable[Reference]",  # noqa: UP037
) -> "list[Reference]":  # noqa: UP037
    """Order references so that longer shorthands are tried first.

    Passing the result to ``resolve_reference_path`` gives exact-match
    priority for overlapping shorthands such as ``release`` and
    ``release-2``. Equal lengths keep their store order.
    """
    return sorted(references, key=lambda ref: len(ref.shorthand), reverse=True)
