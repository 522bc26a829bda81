"""vgit: a read-only browser for git repositories."""

__version__ = "0.1.0"
