"""Tree navigation."""

from vgit.browse._models import EntryContext, NavigationResult
from vgit.repository import RepositoryProtocol, TreeListing


def _parent_listing(
    repo: RepositoryProtocol, root_tree: str, path: str
) -> TreeListing:
    parent_path = path.rpartition("/")[0]
    if not parent_path:
        return repo.list_tree(root_tree, "")
    parent = repo.lookup_path(root_tree, parent_path)
    return repo.list_tree(parent.sha, parent.path)


def navigate(repo: RepositoryProtocol, root_tree: str, path: str) -> NavigationResult:
    """Locate the tree or file at ``path`` below a root tree.

    The entry is found with a single full-path lookup. Directories are
    expanded to their own listing; files are returned as entries. The parent
    tree of the target is returned in the result's context for breadcrumb
    construction.

    Args:
        repo: The repository to read from.
        root_tree: Hex SHA of the commit's root tree.
        path: Relative path; empty (or only slashes) means the root.

    Returns:
        The navigation result.

    Raises:
        EntryNotFoundError: If nothing exists at ``path``.
    """
    clean = path.strip("/")
    if not clean:
        return NavigationResult(path="", tree=repo.list_tree(root_tree, ""))

    entry = repo.lookup_path(root_tree, clean)
    context = EntryContext(entry=entry, parent=_parent_listing(repo, root_tree, clean))

    if entry.is_directory:
        return NavigationResult(
            path=clean,
            tree=repo.list_tree(entry.sha, entry.path),
            context=context,
        )
    return NavigationResult(path=clean, blob=entry, context=context)
