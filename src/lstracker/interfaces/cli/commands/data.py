"""Export, import and reset commands."""

from pathlib import Path
from typing import Optional

import typer
from rich.prompt import Confirm

from ..context import get_config, get_tracker, reporting_errors
from ..theme import console, is_interactive, print_error, print_success, print_warning


def export(
    ctx: typer.Context,
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="File or directory to write (default: ./<export filename>)",
    ),
):
    """Export everything as one JSON file."""
    config = get_config(ctx)
    tracker = get_tracker(ctx)
    target = output if output is not None else Path.cwd()
    try:
        path = tracker.export_file(target, filename=config.export_filename)
    except OSError as exc:
        print_error(f"Export failed: {exc}")
        raise typer.Exit(code=1)
    print_success(f"Exported to {path}")


def import_cmd(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="Export JSON file", show_default=False),
):
    """Replace ALL data with the contents of an export file."""
    tracker = get_tracker(ctx)
    with reporting_errors():
        state = tracker.import_file(file)
    total = sum(
        len(items)
        for items in (
            state.skills,
            state.projects,
            state.ksb_library,
            state.evidence,
            state.notes,
            state.reflections,
        )
    )
    print_success(f"Import complete ({total} records)")


def reset(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
):
    """Reset EVERYTHING back to the starter data."""
    if not yes:
        if not is_interactive():
            print_error("Refusing to reset without --yes in non-interactive mode")
            raise typer.Exit(code=1)
        if not Confirm.ask(
            "Reset EVERYTHING? This clears all skills, projects, notes, KSBs, evidence, reflections."
        ):
            print_warning("Reset cancelled")
            raise typer.Exit(code=0)

    tracker = get_tracker(ctx)
    with reporting_errors():
        tracker.reset()
    print_success("Reset to starter data")
    console.print(f"[dim]{get_config(ctx).storage_path}[/dim]")
