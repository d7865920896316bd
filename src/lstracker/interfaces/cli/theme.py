"""Console styling shared by CLI commands."""

import sys

from rich.console import Console
from rich.theme import Theme

from lstracker import __version__

VERSION = __version__

THEME = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "bold red",
        "dim": "dim",
        "tag": "magenta",
    }
)

console = Console(theme=THEME)
# Warnings and progress go to stderr so --json output stays parseable.
stderr_console = Console(theme=THEME, stderr=True)


def is_interactive() -> bool:
    return sys.stdin.isatty() and console.is_terminal


def print_success(message: str) -> None:
    console.print(f"[success]✓ {message}[/success]")


def print_warning(message: str) -> None:
    stderr_console.print(f"[warning]⚠ {message}[/warning]")


def print_error(message: str) -> None:
    stderr_console.print(f"[error]✗ {message}[/error]")


def progress_bar(percent: int, width: int = 20) -> str:
    p = max(0, min(100, percent))
    filled = round(width * p / 100)
    return f"[success]{'█' * filled}[/success][dim]{'░' * (width - filled)}[/dim] {p}%"
