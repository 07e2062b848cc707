"""Formatting of the per-repository report lines."""

import shlex
from typing import List, Sequence

from git_status_of_so_many.constants import (
    COMMIT_MARKER,
    GIT_MSG_IS_DIRTY,
    INSPECT_COMMAND,
    MAX_COMMITS_ABOVE_TAG,
)
from git_status_of_so_many.formatters.colors import Color, colorize
from git_status_of_so_many.models.repository import RepositoryStatus


def format_header(status: RepositoryStatus) -> str:
    """
    Format the header line for a repository.

    The line is a command that can be pasted into a shell to inspect the
    repository, followed by the current branch as a shell comment, e.g.
    "cd /home/me/code/app; git status  # main".
    """
    path = colorize(Color.YELLOW, shlex.quote(str(status.path)))
    branch = colorize(Color.CYAN, status.branch_name)
    return f"cd {path}; {INSPECT_COMMAND}  # {branch}"


def format_stashes(stash_lines: Sequence[str]) -> List[str]:
    """Format the stash list under a heading, one entry per line."""
    lines = [colorize(Color.YELLOW, "STASHES:")]
    lines.extend(f"  {colorize(Color.WHITE, stash)}" for stash in stash_lines)
    return lines


def format_untracked() -> str:
    return colorize(Color.RED, "Has untracked files")


def format_unstaged() -> str:
    return colorize(Color.YELLOW, f"Has {GIT_MSG_IS_DIRTY}")


def format_outgoing(count: int) -> str:
    return colorize(Color.RED, f"Has commits to push: {count}")


def format_commits_above_tag(tag: str, commits: Sequence[str]) -> List[str]:
    """
    Format the commits sitting above the latest tag.

    At most MAX_COMMITS_ABOVE_TAG commits are listed; the closing notice
    always carries the full count.

    Args:
        tag: Name of the latest tag
        commits: One-line commit summaries, newest first

    Returns:
        Lines like "  -> abc1234 Fix typo" followed by "2 commits above tag v1.0"
    """
    lines = [f"  {COMMIT_MARKER} {colorize(Color.WHITE, commit)}" for commit in commits[:MAX_COMMITS_ABOVE_TAG]]
    noun = "commit" if len(commits) == 1 else "commits"
    lines.append(colorize(Color.MAGENTA, f"{len(commits)} {noun} above tag {tag}"))
    return lines


def format_summary(dirty: int, total: int) -> str:
    """Format the closing line of a run."""
    return colorize(Color.GREEN, f"OK. {dirty} of {total} repos dirty")
