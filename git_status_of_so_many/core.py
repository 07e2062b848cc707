"""Core functionality for git-status-of-so-many"""

from typing import List, Optional

from rich.console import Console

from git_status_of_so_many.config import Options, Settings
from git_status_of_so_many.formatters import Color, colorize
from git_status_of_so_many.logging_config import get_logger
from git_status_of_so_many.models.repository import RepositoryStatus
from git_status_of_so_many.services.discovery import discover_repositories
from git_status_of_so_many.services.display_service import ReportRenderer
from git_status_of_so_many.services.status_service import StatusCollector
from git_status_of_so_many.utils.prompt import question

logger = get_logger(__name__)


class StatusReport:
    """Main class for reporting on many repositories at once."""

    def __init__(
        self,
        settings: Settings,
        options: Options,
        console: Optional[Console] = None,
        collector: Optional[StatusCollector] = None,
    ):
        """Initialize StatusReport.

        Args:
            settings: Where to look for repositories
            options: Flags for this run
            console: Console to print the report on
            collector: Status collector, built from options when not given
        """
        self.settings = settings
        self.options = options
        self.console = console or Console()
        self.collector = collector or StatusCollector(options)
        self.renderer = ReportRenderer(options, self.console)
        self.statuses: List[RepositoryStatus] = []

    def run(self) -> int:
        """Report on every repository and print the summary.

        Returns:
            Number of repositories that had something to show
        """
        repos = discover_repositories(self.settings, self.options)
        dirty = 0
        for path in repos:
            if self.options.verbose:
                self.renderer.print(colorize(Color.BLUE, f"Checking {path}"))
            status = self.collector.collect(path)
            self.statuses.append(status)
            if status.is_noteworthy:
                dirty += 1
            printed = self.renderer.render(status)
            if printed and self.options.pause:
                question(console=self.console)

        logger.info(f"{dirty} of {len(repos)} repositories have something to show")
        self.renderer.render_summary(dirty, len(repos))
        return dirty
