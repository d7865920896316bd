"""Typer-based CLI entry point.

The tracker CLI manages your learning record:
- dashboard: Overview of skills and projects
- skill / project / ksb / evidence / note / reflection: Add, list, update, delete
- export / import: Move all data as one JSON file
- reset: Restore the starter data
"""

from pathlib import Path
from typing import Optional

import typer

from lstracker.shared.config import Config

from .commands.dashboard import dashboard
from .commands.data import export, import_cmd, reset
from .commands.ksb import evidence_app, ksb_app
from .commands.note import note_app
from .commands.project import project_app
from .commands.reflection import reflection_app
from .commands.skill import skill_app
from .config import load_project_config
from .theme import VERSION, console, print_error


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"lstracker [info]{VERSION}[/info]")
        raise typer.Exit()


app = typer.Typer(
    name="lstracker",
    help="[bold]Learning & Skills Tracker[/bold]\n\n"
         "Skills, projects, KSB evidence, notes and weekly reflections, "
         "stored locally as one JSON file.",
    rich_markup_mode="rich",
    no_args_is_help=True,
    add_completion=True,
    pretty_exceptions_show_locals=False,
)


@app.callback()
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        help="Override data directory (CLI > env > .lstrackerrc > default)",
    ),
):
    """Learning & Skills Tracker."""
    try:
        project_config = load_project_config()
    except ValueError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1)

    overrides = {}
    if data_dir:
        overrides["data_dir"] = data_dir.expanduser().resolve()
    elif project_config.data_dir:
        overrides["data_dir"] = project_config.data_dir

    config = Config()
    if overrides:
        config = config.with_overrides(**overrides)
    ctx.obj = config


app.command(
    "dashboard",
    help="Show the overview.\n\n"
         "[bold]Examples:[/bold]\n\n"
         "  lstracker dashboard\n\n"
         "  lstracker dashboard --json",
)(dashboard)

app.add_typer(skill_app, name="skill")
app.add_typer(project_app, name="project")
app.add_typer(ksb_app, name="ksb")
app.add_typer(evidence_app, name="evidence")
app.add_typer(note_app, name="note")
app.add_typer(reflection_app, name="reflection")

app.command(
    "export",
    help="Export all data as JSON.\n\n"
         "[bold]Examples:[/bold]\n\n"
         "  lstracker export\n\n"
         "  lstracker export -o backups/",
)(export)

app.command(
    "import",
    help="Replace all data with an export file.\n\n"
         "[bold]Examples:[/bold]\n\n"
         "  lstracker import learning-skills-tracker-export.json",
)(import_cmd)

app.command(
    "reset",
    help="Restore the starter data (clears everything).\n\n"
         "[bold]Examples:[/bold]\n\n"
         "  lstracker reset --yes",
)(reset)


def run():
    """Entry point for CLI."""
    app()
