"""Service for collecting the status of a repository"""

from pathlib import Path
from typing import Callable

from git_status_of_so_many.config import Options
from git_status_of_so_many.logging_config import get_logger
from git_status_of_so_many.models.repository import RepositoryStatus, RepositoryStatusBuilder
from git_status_of_so_many.services.git import GitQueries
from git_status_of_so_many.services.status_parser import parse_latest_tag, parse_status

logger = get_logger(__name__)


class StatusCollector:
    """Service for gathering a RepositoryStatus from git."""

    def __init__(self, options: Options, queries_factory: Callable[[Path], GitQueries] = GitQueries):
        """Initialize the service.

        Args:
            options: Run options; decide which optional queries are issued
            queries_factory: Builds the git query service for a repository path
        """
        self.options = options
        self.queries_factory = queries_factory

    def collect(self, path: Path) -> RepositoryStatus:
        """Run the status queries for one repository and freeze the result."""
        logger.debug(f"Collecting status for {path}")
        queries = self.queries_factory(path)
        builder = RepositoryStatusBuilder(path=path)

        builder.raw_status_lines = queries.status()
        fields = parse_status(builder.raw_status_lines)
        builder.branch_name = fields.branch_name
        builder.has_untracked_files = fields.has_untracked_files
        builder.has_unstaged_changes = fields.has_unstaged_changes
        builder.has_outgoing_commits = fields.has_outgoing_commits
        builder.outgoing_commit_count = fields.outgoing_commit_count

        if self.options.show_stashes:
            builder.raw_stash_lines = queries.stash_list()

        if self.options.show_commits_after_tag:
            self._collect_commits_after_tag(queries, builder)

        status = builder.build(self.options)
        logger.debug(f"{path}: branch={status.branch_name}, noteworthy={status.is_noteworthy}")
        return status

    def _collect_commits_after_tag(self, queries: GitQueries, builder: RepositoryStatusBuilder) -> None:
        """Find the latest tag and the commits made on top of it."""
        tag = parse_latest_tag(queries.decorated_log())
        if not tag:
            logger.debug(f"No tag found in {builder.path}")
            return
        builder.latest_tag = tag

        commit = queries.tagged_commit(tag)
        if not commit:
            logger.debug(f"Could not resolve tag {tag} in {builder.path}")
            return

        commits = queries.commits_since(commit)
        if commits:
            builder.commits_since_tag = commits
