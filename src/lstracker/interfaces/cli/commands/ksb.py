"""KSB library and evidence commands."""

import typer
from rich.table import Table

from lstracker.modules.tracker import (
    add_evidence,
    add_ksb,
    delete_evidence,
    delete_ksb,
    list_evidence,
    list_ksbs,
)
from lstracker.modules.tracker.internal import field_list, field_text

from ..context import get_tracker, report_found, reporting_errors
from ..theme import console, print_success

ksb_app = typer.Typer(help="KSB library (Knowledge, Skills, Behaviours).", no_args_is_help=True)
evidence_app = typer.Typer(help="Evidence mapped to KSB codes.", no_args_is_help=True)


@ksb_app.command("add")
def add(
    ctx: typer.Context,
    code: str = typer.Argument(..., help="KSB code, e.g. K1 or B5", show_default=False),
    text: str = typer.Argument("", help="Description"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Add a KSB to the library."""
    tracker = get_tracker(ctx)
    with reporting_errors():
        record = add_ksb(tracker, code, text)

    if json_output:
        console.print_json(data=record)
        return
    print_success(f"Added KSB '{record['code']}' ({record['id']})")


@ksb_app.command("list")
def list_cmd(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """List KSBs by code with their evidence counts."""
    rows = list_ksbs(get_tracker(ctx).state)

    if json_output:
        console.print_json(data={"ksbs": [k.model_dump() for k in rows], "total": len(rows)})
        return

    if not rows:
        console.print("[dim]No KSBs yet. Add one with 'lstracker ksb add'.[/dim]")
        return

    table = Table(title=f"KSB library ({len(rows)})")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Code", style="bold")
    table.add_column("Evidence", justify="right")
    table.add_column("Description")
    for k in rows:
        table.add_row(k.id, k.code, str(k.evidence_count), k.text)
    console.print(table)


@ksb_app.command("delete")
def delete(
    ctx: typer.Context,
    ksb_id: str = typer.Argument(..., help="KSB id", show_default=False),
):
    """Delete a KSB (evidence citing its code is kept)."""
    tracker = get_tracker(ctx)
    with reporting_errors():
        removed = delete_ksb(tracker, ksb_id)
    report_found(removed, kind="KSB", record_id=ksb_id, message=f"Deleted KSB '{ksb_id}'")


@evidence_app.command("add")
def add_evidence_cmd(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="What you did", show_default=False),
    ksbs: str = typer.Option("", "--ksbs", "-k", help="Comma-separated KSB codes"),
    notes: str = typer.Option("", "--notes", "-n", help="Details"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Log a piece of evidence."""
    tracker = get_tracker(ctx)
    with reporting_errors():
        record = add_evidence(tracker, title, ksbs, notes)

    if json_output:
        console.print_json(data=record)
        return
    print_success(f"Logged evidence '{record['title']}' ({record['id']})")


@evidence_app.command("list")
def list_evidence_cmd(
    ctx: typer.Context,
    search: str = typer.Option("", "--search", "-s", help="Filter by text"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """List evidence, newest first."""
    rows = list_evidence(get_tracker(ctx).state, search)

    if json_output:
        console.print_json(data={"evidence": rows, "total": len(rows)})
        return

    if not rows:
        console.print("[dim]No evidence logged yet.[/dim]")
        return

    table = Table(title=f"Evidence ({len(rows)})")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("KSBs", style="tag")
    table.add_column("Notes")
    for ev in rows:
        table.add_row(
            field_text(ev, "id"),
            field_text(ev, "title"),
            ", ".join(field_list(ev, "ksbs")),
            field_text(ev, "notes"),
        )
    console.print(table)


@evidence_app.command("delete")
def delete_evidence_cmd(
    ctx: typer.Context,
    evidence_id: str = typer.Argument(..., help="Evidence id", show_default=False),
):
    """Delete an evidence entry."""
    tracker = get_tracker(ctx)
    with reporting_errors():
        removed = delete_evidence(tracker, evidence_id)
    report_found(
        removed, kind="evidence", record_id=evidence_id, message=f"Deleted evidence '{evidence_id}'"
    )
