"""Custom exceptions for git-status-of-so-many"""

from typing import Optional


class GitStatusOfSoManyError(Exception):
    """Base exception for all git-status-of-so-many errors."""
    pass


class ConfigurationError(GitStatusOfSoManyError):
    """Exception raised when the settings document cannot be used."""

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(message)


class GitQueryError(GitStatusOfSoManyError):
    """Exception raised when a git query cannot be run in a repository."""

    def __init__(self, query: str, path: Optional[str] = None, message: Optional[str] = None):
        self.query = query
        self.path = path
        self.message = message

        error_msg = f"Git query '{query}' failed"
        if path:
            error_msg += f" in '{path}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)
