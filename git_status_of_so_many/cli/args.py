"""Command-line argument parsing for git-status-of-so-many."""

import argparse
from typing import List, Optional

from git_status_of_so_many.__version__ import __version__
from git_status_of_so_many.constants import DEFAULT_SETTINGS_FILE


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="git-status-of-so-many",
        description="Show which of your git repositories have uncommitted, unpushed or untagged work",
        epilog=f"Setup: copy settings.yml.example to {DEFAULT_SETTINGS_FILE} and set repos_home.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Print each repository as it is checked")
    parser.add_argument("--version", action="version", version=f"git-status-of-so-many {__version__}")
    parser.add_argument("-s", "--silent", action="store_true", help="Run with little output (header line only)")
    parser.add_argument(
        "-a", "--show-stashes", action="store_true", help="Show stashes and count them as work to look at"
    )
    parser.add_argument(
        "-t",
        "--above-tag-commits",
        action="store_true",
        help="Show commits made since the latest tag",
    )
    parser.add_argument(
        "-f", "--fav-repos", action="store_true", help="Only check repositories matching favorite_repos"
    )
    parser.add_argument(
        "-c",
        "--config",
        default=DEFAULT_SETTINGS_FILE,
        metavar="PATH",
        help=f"Settings file (default: {DEFAULT_SETTINGS_FILE})",
    )
    parser.add_argument(
        "-p", "--pause", action="store_true", help="Wait for ENTER after each reported repository"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )

    return parser.parse_args(argv)
