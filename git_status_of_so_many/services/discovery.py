"""Service for finding repositories below the configured root"""

import os
import re
from fnmatch import fnmatch
from pathlib import Path
from typing import Iterator, List, Sequence

from git_status_of_so_many.config import Options, Settings
from git_status_of_so_many.constants import GIT_DIR, MAX_SEARCH_DEPTH
from git_status_of_so_many.logging_config import get_logger

logger = get_logger(__name__)


def discover_repositories(settings: Settings, options: Options) -> List[Path]:
    """Return the repositories to report on, sorted by path.

    Directories one to three levels below settings.repos_home that hold a
    .git directory are candidates. With options.favorites_only only paths
    matching a favorite pattern are kept; paths matching an excluded pattern
    are always dropped, even when they are favorites.
    """
    repos = set()
    for directory in iter_directories(settings.repos_home, MAX_SEARCH_DEPTH):
        if not is_repository(directory):
            continue
        if options.favorites_only and not matches_any(directory, settings.favorite_repos):
            logger.debug(f"Skipping {directory}: not a favorite")
            continue
        if matches_any(directory, settings.excluded_repos):
            logger.debug(f"Skipping {directory}: excluded")
            continue
        repos.add(directory)

    logger.info(f"Found {len(repos)} repositories under {settings.repos_home}")
    return sorted(repos)


def iter_directories(root: Path, max_depth: int) -> Iterator[Path]:
    """Yield directories below root, at most max_depth levels deep.

    Hidden entries are not visited. Directories that cannot be listed are
    skipped.
    """
    if max_depth < 1:
        return
    try:
        entries = sorted(os.scandir(root), key=lambda entry: entry.name)
    except OSError as e:
        logger.debug(f"Cannot list {root}: {e}")
        return

    for entry in entries:
        if entry.name.startswith("."):
            continue
        try:
            if not entry.is_dir():
                continue
        except OSError as e:
            logger.debug(f"Cannot stat {entry.path}: {e}")
            continue
        path = Path(entry.path)
        yield path
        yield from iter_directories(path, max_depth - 1)


def is_repository(directory: Path) -> bool:
    """Check if a directory holds a git metadata directory."""
    try:
        return (directory / GIT_DIR).is_dir()
    except OSError:
        return False


def matches_any(directory: Path, patterns: Sequence[str]) -> bool:
    """Check if a repository path matches any of the patterns.

    Matching is done against the path with a trailing separator, so
    "/work/" only matches a whole path component.
    """
    target = f"{directory}{os.sep}"
    return any(matches(pattern, target) for pattern in patterns)


def matches(pattern: str, target: str) -> bool:
    """Match one pattern as a shell glob, a regular expression, or a substring."""
    if fnmatch(target, pattern):
        return True
    try:
        return re.search(pattern, target) is not None
    except re.error:
        return pattern in target
