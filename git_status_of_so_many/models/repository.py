"""Repository status model"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from git_status_of_so_many.config import Options
from git_status_of_so_many.constants import UNKNOWN_BRANCH


@dataclass(frozen=True)
class RepositoryStatus:
    """Everything gathered about one repository, as handed to the renderer."""
    path: Path
    branch_name: str
    raw_status_lines: Tuple[str, ...]
    raw_stash_lines: Tuple[str, ...]
    has_untracked_files: bool
    has_unstaged_changes: bool
    has_outgoing_commits: bool
    outgoing_commit_count: int
    latest_tag: Optional[str]
    commits_since_tag: Optional[Tuple[str, ...]]
    is_noteworthy: bool


@dataclass
class RepositoryStatusBuilder:
    """Collects fields for a RepositoryStatus while queries are running."""
    path: Path
    branch_name: str = UNKNOWN_BRANCH
    raw_status_lines: List[str] = field(default_factory=list)
    raw_stash_lines: List[str] = field(default_factory=list)
    has_untracked_files: bool = False
    has_unstaged_changes: bool = False
    has_outgoing_commits: bool = False
    outgoing_commit_count: int = 0
    latest_tag: Optional[str] = None
    commits_since_tag: Optional[List[str]] = None

    def build(self, options: Options) -> RepositoryStatus:
        """Freeze the collected fields and derive whether there is anything to show."""
        commits_since_tag = tuple(self.commits_since_tag) if self.commits_since_tag else None
        return RepositoryStatus(
            path=self.path,
            branch_name=self.branch_name,
            raw_status_lines=tuple(self.raw_status_lines),
            raw_stash_lines=tuple(self.raw_stash_lines),
            has_untracked_files=self.has_untracked_files,
            has_unstaged_changes=self.has_unstaged_changes,
            has_outgoing_commits=self.has_outgoing_commits,
            outgoing_commit_count=self.outgoing_commit_count,
            latest_tag=self.latest_tag,
            commits_since_tag=commits_since_tag,
            is_noteworthy=is_noteworthy(
                has_untracked_files=self.has_untracked_files,
                stash_lines=self.raw_stash_lines,
                has_unstaged_changes=self.has_unstaged_changes,
                outgoing_commit_count=self.outgoing_commit_count,
                commits_since_tag=commits_since_tag,
                options=options,
            ),
        )


def is_noteworthy(
    has_untracked_files: bool,
    stash_lines,
    has_unstaged_changes: bool,
    outgoing_commit_count: int,
    commits_since_tag,
    options: Options,
) -> bool:
    """Return True if a repository has anything worth reporting."""
    if has_untracked_files or has_unstaged_changes:
        return True
    if outgoing_commit_count > 0:
        return True
    if options.show_stashes and stash_lines:
        return True
    if options.show_commits_after_tag and commits_since_tag:
        return True
    return False
