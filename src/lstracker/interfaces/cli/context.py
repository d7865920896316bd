"""Access to the Config and Tracker carried on the Typer context."""

from contextlib import contextmanager
from typing import Iterator

import typer

from lstracker.modules.tracker import Tracker
from lstracker.shared.config import Config
from lstracker.shared.exceptions import ImportParseError, StorageWriteError

from .theme import print_error, print_success, print_warning


def get_config(ctx: typer.Context) -> Config:
    root = ctx.find_root()
    if isinstance(root.obj, Config):
        return root.obj
    config = Config()
    root.obj = config
    return config


def get_tracker(ctx: typer.Context) -> Tracker:
    """Open the tracker for the configured data dir (loads persisted state)."""
    return Tracker.from_config(get_config(ctx))


@contextmanager
def reporting_errors() -> Iterator[None]:
    """Turn storage/import failures into an error line and exit code 1."""
    try:
        yield
    except (ImportParseError, StorageWriteError) as exc:
        print_error(str(exc))
        raise typer.Exit(code=1)


def require_choice(value: str, choices: list[str], *, label: str) -> str:
    if choices and value not in choices:
        print_error(f"Unknown {label} '{value}' (choose from: {', '.join(choices)})")
        raise typer.Exit(code=1)
    return value


def report_found(found: object, *, kind: str, record_id: str, message: str) -> None:
    if not found:
        print_warning(f"No {kind} with id '{record_id}'")
        raise typer.Exit(code=1)
    print_success(message)
