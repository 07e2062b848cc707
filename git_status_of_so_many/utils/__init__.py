"""Utility functions for git-status-of-so-many."""

from .prompt import question

__all__ = ["question"]
