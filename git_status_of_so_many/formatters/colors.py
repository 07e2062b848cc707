"""Terminal color formatting."""

from enum import Enum

from rich.markup import escape


class Color(Enum):
    """Colors understood by the report console."""
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"


def colorize(color: Color, text: str) -> str:
    """
    Wrap text in console markup for the given color.

    Args:
        color: Color to render the text in
        text: Plain text; any markup-like brackets in it are escaped

    Returns:
        Markup string, e.g. colorize(Color.GREEN, "Hello") -> "[green]Hello[/green]"
    """
    return f"[{color.value}]{escape(text)}[/{color.value}]"
