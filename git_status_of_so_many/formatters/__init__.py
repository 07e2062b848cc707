"""Formatting utilities for git-status-of-so-many.

This package provides the formatting functions for the report, organized into
logical modules:
- colors: Color enum and markup wrapping
- report: Header, notice and summary lines
"""

from .colors import Color, colorize
from .report import (
    format_header,
    format_stashes,
    format_untracked,
    format_unstaged,
    format_outgoing,
    format_commits_above_tag,
    format_summary,
)

__all__ = [
    # Colors
    "Color",
    "colorize",
    # Report
    "format_header",
    "format_stashes",
    "format_untracked",
    "format_unstaged",
    "format_outgoing",
    "format_commits_above_tag",
    "format_summary",
]
