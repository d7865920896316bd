"""Project commands."""

from typing import Optional

import typer
from rich.table import Table

from lstracker.modules.tracker import (
    PROJECT_STATUSES,
    add_project,
    cycle_project_status,
    delete_project,
    list_projects,
)
from lstracker.modules.tracker.internal import field_list, field_text

from ..context import get_config, get_tracker, report_found, reporting_errors, require_choice
from ..theme import console, print_success

project_app = typer.Typer(help="Projects: your output log and learning proof.", no_args_is_help=True)


def _tags(record: dict) -> str:
    tags = [*field_list(record, "skills"), *field_list(record, "ksbs")]
    return ", ".join(tags)


@project_app.command("add")
def add(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Project name", show_default=False),
    project_type: str = typer.Option("Personal", "--type", "-t", help="Project type"),
    skills: str = typer.Option("", "--skills", help="Comma-separated skill tags"),
    ksbs: str = typer.Option("", "--ksbs", help="Comma-separated KSB codes"),
    learned: str = typer.Option("", "--learned", "-l", help="What you learned"),
    status: str = typer.Option(PROJECT_STATUSES[0], "--status", help="In progress, Completed or Paused"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Log a project."""
    config = get_config(ctx)
    require_choice(project_type, config.project_types, label="project type")
    require_choice(status, list(PROJECT_STATUSES), label="status")
    tracker = get_tracker(ctx)
    with reporting_errors():
        record = add_project(tracker, name, project_type, skills, ksbs, learned, status)

    if json_output:
        console.print_json(data=record)
        return
    print_success(f"Added project '{record['name']}' ({record['id']})")


@project_app.command("list")
def list_cmd(
    ctx: typer.Context,
    search: str = typer.Option("", "--search", "-s", help="Filter by text"),
    project_type: Optional[str] = typer.Option(None, "--type", "-t", help="Only this type"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """List projects, newest first."""
    rows = list_projects(get_tracker(ctx).state, search, project_type)

    if json_output:
        console.print_json(data={"projects": rows, "total": len(rows)})
        return

    if not rows:
        console.print("[dim]No projects yet. Add one with 'lstracker project add'.[/dim]")
        return

    table = Table(title=f"Projects ({len(rows)})")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Type")
    table.add_column("Status")
    table.add_column("Tags", style="tag")
    table.add_column("Learned")
    for p in rows:
        table.add_row(
            field_text(p, "id"),
            field_text(p, "name"),
            field_text(p, "type"),
            field_text(p, "status"),
            _tags(p),
            field_text(p, "learned"),
        )
    console.print(table)


@project_app.command("cycle")
def cycle(
    ctx: typer.Context,
    project_id: str = typer.Argument(..., help="Project id", show_default=False),
):
    """Advance status: In progress → Completed → Paused → In progress."""
    tracker = get_tracker(ctx)
    with reporting_errors():
        project = cycle_project_status(tracker, project_id)
    report_found(
        project,
        kind="project",
        record_id=project_id,
        message=f"Status is now '{project['status']}'" if project else "",
    )


@project_app.command("delete")
def delete(
    ctx: typer.Context,
    project_id: str = typer.Argument(..., help="Project id", show_default=False),
):
    """Delete a project."""
    tracker = get_tracker(ctx)
    with reporting_errors():
        removed = delete_project(tracker, project_id)
    report_found(removed, kind="project", record_id=project_id, message=f"Deleted project '{project_id}'")
