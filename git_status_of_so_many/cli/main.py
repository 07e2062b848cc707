"""Command-line entry point for git-status-of-so-many"""

import sys
from typing import List, Optional

from rich.console import Console

from git_status_of_so_many.cli.args import parse_args
from git_status_of_so_many.config import Options, load_settings
from git_status_of_so_many.core import StatusReport
from git_status_of_so_many.exceptions import ConfigurationError, GitStatusOfSoManyError
from git_status_of_so_many.formatters import Color, colorize
from git_status_of_so_many.logging_config import setup_logging

console = Console()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

    options = Options(
        verbose=parsed_args.verbose,
        silent=parsed_args.silent,
        show_stashes=parsed_args.show_stashes,
        show_commits_after_tag=parsed_args.above_tag_commits,
        favorites_only=parsed_args.fav_repos,
        pause=parsed_args.pause,
        debug=parsed_args.debug,
    )

    try:
        settings = load_settings(parsed_args.config)
        if parsed_args.debug:
            console.print("[yellow]Debug mode enabled[/yellow]")
            console.print(f"  settings: {settings}", highlight=False)
            console.print(f"  options: {options}", highlight=False)
        StatusReport(settings, options, console=console).run()
        return 0
    except ConfigurationError as e:
        console.print(colorize(Color.RED, e.message), soft_wrap=True)
        if e.hint:
            console.print(colorize(Color.RED, e.hint), soft_wrap=True)
        return 1
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except GitStatusOfSoManyError as e:
        console.print(colorize(Color.RED, f"Error: {e}"), soft_wrap=True)
        if parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
