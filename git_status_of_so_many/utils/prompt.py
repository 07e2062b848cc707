"""Interactive confirmation prompt."""

from typing import Optional

from rich.console import Console

from git_status_of_so_many.formatters.colors import Color, colorize


def question(message: str = "", console: Optional[Console] = None) -> str:
    """Show a message and wait for the user to press ENTER.

    Ctrl-C or end of input ends the whole program quietly.

    Returns:
        The line the user typed, stripped
    """
    console = console or Console()
    if message:
        console.print(message, soft_wrap=True, highlight=False, emoji=False)
    console.print(colorize(Color.BLUE, "Press [ENTER] to continue. CTRL-C to abort."), highlight=False)
    try:
        return console.input().strip()
    except (KeyboardInterrupt, EOFError):
        console.print()
        raise SystemExit(0)
