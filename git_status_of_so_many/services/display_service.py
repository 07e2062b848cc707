"""Display service for repository status reports"""
from typing import Optional

from rich.console import Console

from git_status_of_so_many.config import Options
from git_status_of_so_many.formatters import (
    format_commits_above_tag,
    format_header,
    format_outgoing,
    format_stashes,
    format_summary,
    format_unstaged,
    format_untracked,
)
from git_status_of_so_many.logging_config import get_logger
from git_status_of_so_many.models.repository import RepositoryStatus

logger = get_logger(__name__)


class ReportRenderer:
    """Prints the report for repositories that have something to show."""

    def __init__(self, options: Options, console: Optional[Console] = None):
        self.options = options
        self.console = console or Console()

    def print(self, text: str = "") -> None:
        """Print one line of markup without wrapping it at the terminal width."""
        self.console.print(text, soft_wrap=True, highlight=False, emoji=False)

    def render(self, status: RepositoryStatus) -> bool:
        """Print the report for one repository.

        Returns:
            True if anything was printed, False for a repository with nothing to show
        """
        if not status.is_noteworthy:
            logger.debug(f"Nothing to show for {status.path}")
            return False

        self.print(format_header(status))
        if self.options.silent:
            return True

        if status.raw_stash_lines:
            for line in format_stashes(status.raw_stash_lines):
                self.print(line)
        if status.has_untracked_files:
            self.print(format_untracked())
        if status.has_unstaged_changes:
            self.print(format_unstaged())
        if status.has_outgoing_commits:
            self.print(format_outgoing(status.outgoing_commit_count))
        if self.options.show_commits_after_tag and status.latest_tag and status.commits_since_tag:
            for line in format_commits_above_tag(status.latest_tag, status.commits_since_tag):
                self.print(line)
        self.print()
        return True

    def render_summary(self, dirty: int, total: int) -> None:
        """Print the closing count of repositories with something to show."""
        self.print(format_summary(dirty, total))
