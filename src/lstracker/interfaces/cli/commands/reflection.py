"""Weekly reflection commands."""

import typer
from rich.panel import Panel

from lstracker.modules.tracker import add_reflection, delete_reflection, list_reflections
from lstracker.modules.tracker.internal import field_text

from ..context import get_tracker, report_found, reporting_errors
from ..theme import console, print_success

reflection_app = typer.Typer(help="Weekly reflections.", no_args_is_help=True)


@reflection_app.command("add")
def add(
    ctx: typer.Context,
    week: str = typer.Argument(..., help="Label, e.g. 'Week of 2026-01-26'", show_default=False),
    learned: str = typer.Option("", "--learned", "-l", help="What you learned"),
    next_steps: str = typer.Option("", "--next", "-n", help="What comes next"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Write a weekly reflection."""
    tracker = get_tracker(ctx)
    with reporting_errors():
        record = add_reflection(tracker, week, learned, next_steps)

    if json_output:
        console.print_json(data=record)
        return
    print_success(f"Saved reflection '{record['week']}' ({record['id']})")


@reflection_app.command("list")
def list_cmd(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """List reflections, newest first."""
    rows = list_reflections(get_tracker(ctx).state)

    if json_output:
        console.print_json(data={"reflections": rows, "total": len(rows)})
        return

    if not rows:
        console.print("[dim]No reflections yet.[/dim]")
        return

    for r in rows:
        lines = []
        if field_text(r, "learned"):
            lines.append(f"[bold]Learned:[/bold] {field_text(r, 'learned')}")
        if field_text(r, "next"):
            lines.append(f"[bold]Next:[/bold] {field_text(r, 'next')}")
        console.print(
            Panel(
                "\n".join(lines) or "[dim]—[/dim]",
                title=field_text(r, "week") or "Weekly Reflection",
                subtitle=f"[dim]{field_text(r, 'id')}[/dim]",
                expand=False,
            )
        )


@reflection_app.command("delete")
def delete(
    ctx: typer.Context,
    reflection_id: str = typer.Argument(..., help="Reflection id", show_default=False),
):
    """Delete a reflection."""
    tracker = get_tracker(ctx)
    with reporting_errors():
        removed = delete_reflection(tracker, reflection_id)
    report_found(
        removed, kind="reflection", record_id=reflection_id, message=f"Deleted reflection '{reflection_id}'"
    )
