"""Skill commands."""

from typing import Optional

import typer
from rich.table import Table

from lstracker.modules.tracker import add_skill, adjust_skill_progress, delete_skill, list_skills
from lstracker.modules.tracker.internal import coerce_progress, field_text

from ..context import get_config, get_tracker, report_found, reporting_errors, require_choice
from ..theme import console, print_success, progress_bar

skill_app = typer.Typer(help="Skills and their progress.", no_args_is_help=True)


@skill_app.command("add")
def add(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Skill name", show_default=False),
    category: str = typer.Option("Other", "--category", "-c", help="Skill category"),
    progress: int = typer.Option(10, "--progress", "-p", help="Starting progress (0-100)"),
    goal: str = typer.Option("", "--goal", "-g", help="What 'done' looks like"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Add a skill."""
    config = get_config(ctx)
    require_choice(category, config.skill_categories, label="category")
    tracker = get_tracker(ctx)
    with reporting_errors():
        record = add_skill(tracker, name, category, progress, goal)

    if json_output:
        console.print_json(data=record)
        return
    print_success(f"Added skill '{record['name']}' ({record['id']})")


@skill_app.command("list")
def list_cmd(
    ctx: typer.Context,
    search: str = typer.Option("", "--search", "-s", help="Filter by text"),
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Only this category"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """List skills, highest progress first."""
    rows = list_skills(get_tracker(ctx).state, search, category)

    if json_output:
        console.print_json(data={"skills": rows, "total": len(rows)})
        return

    if not rows:
        console.print("[dim]No skills yet. Add one with 'lstracker skill add'.[/dim]")
        return

    table = Table(title=f"Skills ({len(rows)})", show_lines=False)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Category")
    table.add_column("Progress", no_wrap=True)
    table.add_column("Goal")
    for s in rows:
        table.add_row(
            field_text(s, "id"),
            field_text(s, "name"),
            field_text(s, "category"),
            progress_bar(coerce_progress(s.get("progress"))),
            field_text(s, "goal") or "—",
        )
    console.print(table)


@skill_app.command("adjust")
def adjust(
    ctx: typer.Context,
    skill_id: str = typer.Argument(..., help="Skill id", show_default=False),
    by: Optional[int] = typer.Option(None, "--by", "-b", help="Percentage points to add (negative to subtract)"),
):
    """Move a skill's progress up or down (clamped to 0-100)."""
    delta = by if by is not None else get_config(ctx).progress_step
    tracker = get_tracker(ctx)
    with reporting_errors():
        skill = adjust_skill_progress(tracker, skill_id, delta)
    report_found(
        skill,
        kind="skill",
        record_id=skill_id,
        message=f"Progress is now {skill['progress']}%" if skill else "",
    )


@skill_app.command("delete")
def delete(
    ctx: typer.Context,
    skill_id: str = typer.Argument(..., help="Skill id", show_default=False),
):
    """Delete a skill."""
    tracker = get_tracker(ctx)
    with reporting_errors():
        removed = delete_skill(tracker, skill_id)
    report_found(removed, kind="skill", record_id=skill_id, message=f"Deleted skill '{skill_id}'")
