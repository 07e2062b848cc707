"""Data models for git-status-of-so-many."""

from .repository import RepositoryStatus, RepositoryStatusBuilder, is_noteworthy

__all__ = ["RepositoryStatus", "RepositoryStatusBuilder", "is_noteworthy"]
