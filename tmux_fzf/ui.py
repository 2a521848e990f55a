"""
Console output for the user, on stderr so stdout stays reserved for data
(fzf reads the ls-switch-from listing from it).
"""

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

_THEME = Theme(
    {
        "ui.info": "cyan",
        "ui.warn": "yellow bold",
        "ui.error": "red bold",
    }
)

console = Console(theme=_THEME, stderr=True, highlight=False)


def log_warning(message: str) -> None:
    console.print(Text(message, style="ui.warn"), soft_wrap=True)


def log_error(message: str) -> None:
    console.print(Text(message, style="ui.error"), soft_wrap=True)
