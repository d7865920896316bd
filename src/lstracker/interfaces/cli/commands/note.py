"""Notes & certificates commands."""

import typer
from rich.table import Table

from lstracker.modules.tracker import add_note, delete_note, list_notes
from lstracker.modules.tracker.internal import field_list, field_text

from ..context import get_tracker, report_found, reporting_errors
from ..theme import console, print_success

note_app = typer.Typer(help="Notes and certificates.", no_args_is_help=True)


@note_app.command("add")
def add(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="Note title", show_default=False),
    tags: str = typer.Option("", "--tags", "-t", help="Comma-separated tags"),
    link: str = typer.Option("", "--link", "-l", help="Optional URL"),
    body: str = typer.Option("", "--body", "-b", help="Note text"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Add a note."""
    tracker = get_tracker(ctx)
    with reporting_errors():
        record = add_note(tracker, title, tags, link, body)

    if json_output:
        console.print_json(data=record)
        return
    print_success(f"Added note '{record['title']}' ({record['id']})")


@note_app.command("list")
def list_cmd(
    ctx: typer.Context,
    search: str = typer.Option("", "--search", "-s", help="Filter by text"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """List notes, newest first."""
    rows = list_notes(get_tracker(ctx).state, search)

    if json_output:
        console.print_json(data={"notes": rows, "total": len(rows)})
        return

    if not rows:
        console.print("[dim]No notes yet. Add one with 'lstracker note add'.[/dim]")
        return

    table = Table(title=f"Notes ({len(rows)})")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Tags", style="tag")
    table.add_column("Body")
    table.add_column("Link", style="info")
    for n in rows:
        table.add_row(
            field_text(n, "id"),
            field_text(n, "title"),
            ", ".join(field_list(n, "tags")),
            field_text(n, "body"),
            field_text(n, "link"),
        )
    console.print(table)


@note_app.command("delete")
def delete(
    ctx: typer.Context,
    note_id: str = typer.Argument(..., help="Note id", show_default=False),
):
    """Delete a note."""
    tracker = get_tracker(ctx)
    with reporting_errors():
        removed = delete_note(tracker, note_id)
    report_found(removed, kind="note", record_id=note_id, message=f"Deleted note '{note_id}'")
