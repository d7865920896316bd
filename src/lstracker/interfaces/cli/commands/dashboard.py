"""Dashboard command."""

import typer
from rich.table import Table

from lstracker.modules.tracker import dashboard_summary
from lstracker.modules.tracker.internal import coerce_progress, field_list, field_text

from ..context import get_tracker
from ..theme import console, progress_bar


def dashboard(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show the overview: stats, top skills and recent projects."""
    summary = dashboard_summary(get_tracker(ctx).state)

    if json_output:
        console.print_json(data=summary.model_dump())
        return

    console.print(
        f"[bold]{summary.skill_count}[/bold] skills • "
        f"[bold]{summary.project_count}[/bold] projects • "
        f"[bold]{summary.completed_projects}[/bold] completed"
    )
    console.print(
        f"Avg skill progress [info]{summary.average_progress}%[/info] • "
        f"KSB evidence items [info]{summary.evidence_count}[/info]\n"
    )

    skills = Table(title="Top skills", show_header=False, box=None)
    skills.add_column("Name", style="bold")
    skills.add_column("Progress", no_wrap=True)
    for s in summary.top_skills:
        skills.add_row(field_text(s, "name"), progress_bar(coerce_progress(s.get("progress"))))
    if not summary.top_skills:
        skills.add_row("[dim]No skills yet.[/dim]", "")
    console.print(skills)

    projects = Table(title="Recent projects", show_header=False, box=None)
    projects.add_column("Name", style="bold")
    projects.add_column("Status")
    projects.add_column("Tags", style="tag")
    for p in summary.recent_projects:
        tags = [*field_list(p, "skills"), *field_list(p, "ksbs")]
        projects.add_row(field_text(p, "name"), field_text(p, "status"), ", ".join(tags))
    if not summary.recent_projects:
        projects.add_row("[dim]No projects yet.[/dim]", "", "")
    console.print(projects)
