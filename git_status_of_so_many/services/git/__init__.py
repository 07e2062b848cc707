"""Git-related services for git-status-of-so-many."""

from .queries import GitQueries

__all__ = ["GitQueries"]
