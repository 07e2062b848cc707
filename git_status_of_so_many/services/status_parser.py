"""Parsing of `git status` output into repository status fields.

`git status` is meant for people, not programs, so everything here keys on
its exact English wording. The collector runs git with LC_ALL=C so the
wording below is what it prints.
"""

import re
from dataclasses import dataclass
from typing import Sequence

from git_status_of_so_many.constants import (
    BRANCH_PREFIX,
    GIT_MSG_BRANCH,
    GIT_MSG_HAS_COMMITS,
    GIT_MSG_IS_DIRTY,
    GIT_MSG_UNTRACKED,
    LEGACY_COMMENT_PREFIX,
    SYMBOL_TAG,
    UNKNOWN_BRANCH,
)

_LEADING_NUMBER = re.compile(r"^\s*(\d+)")
# "abc1234 (HEAD -> main, tag: v1.2, origin/main) Message"
_DECORATION = re.compile(r"^\S+ \(([^)]*)\)")


@dataclass(frozen=True)
class StatusFields:
    """Fields derived from one `git status` listing."""
    branch_name: str
    has_untracked_files: bool
    has_unstaged_changes: bool
    has_outgoing_commits: bool
    outgoing_commit_count: int


def parse_branch_name(lines: Sequence[str]) -> str:
    """Return the current branch from the first line mentioning a branch.

    The name is whatever follows the fixed "On branch " prefix; older git
    versions prefixed the line with "# ", which is dropped first.
    """
    for line in lines:
        if GIT_MSG_BRANCH in line:
            if line.startswith(LEGACY_COMMENT_PREFIX):
                line = line[len(LEGACY_COMMENT_PREFIX):]
            return line[len(BRANCH_PREFIX):].strip()
    return UNKNOWN_BRANCH


def has_untracked_files(lines: Sequence[str]) -> bool:
    return any(GIT_MSG_UNTRACKED in line.lower() for line in lines)


def has_unstaged_changes(lines: Sequence[str]) -> bool:
    return any(GIT_MSG_IS_DIRTY in line for line in lines)


def has_outgoing_commits(lines: Sequence[str]) -> bool:
    return any(GIT_MSG_HAS_COMMITS in line for line in lines)


def parse_outgoing_commit_count(lines: Sequence[str]) -> int:
    """Return how many commits the branch is ahead of its upstream.

    Reads "Your branch is ahead of 'origin/main' by 3 commits." as 3. An
    ahead line without a readable " by N" part counts as 1; no ahead line
    at all counts as 0.
    """
    for line in lines:
        if GIT_MSG_HAS_COMMITS not in line:
            continue
        parts = line.rsplit(" by ", 1)
        if len(parts) < 2:
            return 1
        match = _LEADING_NUMBER.match(parts[1])
        return int(match.group(1)) if match else 1
    return 0


def parse_status(lines: Sequence[str]) -> StatusFields:
    """Derive all status fields from raw `git status` lines."""
    return StatusFields(
        branch_name=parse_branch_name(lines),
        has_untracked_files=has_untracked_files(lines),
        has_unstaged_changes=has_unstaged_changes(lines),
        has_outgoing_commits=has_outgoing_commits(lines),
        outgoing_commit_count=parse_outgoing_commit_count(lines),
    )


def parse_latest_tag(decorated_log_lines: Sequence[str]) -> str:
    """Return the first tag found scanning a decorated log from HEAD backwards.

    Only the decoration in parentheses after the hash is looked at, so a
    commit message mentioning "tag: " is not mistaken for a tag. Returns an
    empty string when no line carries a tag.
    """
    for line in decorated_log_lines:
        match = _DECORATION.match(line)
        if not match:
            continue
        for ref in match.group(1).split(","):
            ref = ref.strip()
            if ref.startswith(SYMBOL_TAG):
                return ref[len(SYMBOL_TAG):].strip()
    return ""
