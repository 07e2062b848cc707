"""Version information for git-status-of-so-many."""

__version__ = "0.1.0"
