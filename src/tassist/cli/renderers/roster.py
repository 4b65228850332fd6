"""Roster Rich renderer helpers."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tassist.commands.types import CommandResult

_DETAIL_TITLES = {
    "person_added": "Person Added",
    "person_edited": "Person Edited",
    "person_deleted": "Person Deleted",
    "github_added": "GitHub Added",
    "github_removed": "GitHub Removed",
    "repository_set": "Repository Recorded",
    "class_set": "Class Updated",
    "progress_set": "Progress Updated",
}


def render_person_list(console: Console, result: CommandResult) -> bool:
    """Render `list`/`find` output as a person table.

    Args:
        console: Rich console.
        result: Command result payload.

    Returns:
        ``True`` when rendered.
    """
    data = result.data if isinstance(result.data, dict) else None
    raw_persons = data.get("persons") if data is not None else None
    if not isinstance(raw_persons, list):
        return False
    if not raw_persons:
        console.print(
            Panel(
                Text(result.message),
                title="Roster",
                border_style="yellow",
                expand=True,
            )
        )
        return True
    table = Table(title=result.message, show_header=True, header_style="bold cyan")
    table.add_column("#", style="green", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Student ID", style="magenta", no_wrap=True)
    table.add_column("Class", no_wrap=True)
    table.add_column("Phone")
    table.add_column("Email")
    table.add_column("GitHub")
    table.add_column("Progress", justify="right")
    table.add_column("Tags")
    for row in raw_persons:
        if not isinstance(row, dict):
            continue
        tags = row.get("tags")
        table.add_row(
            str(row.get("index", "")),
            str(row.get("name", "")),
            str(row.get("student_id", "")),
            str(row.get("class_number", "")),
            str(row.get("phone", "")),
            str(row.get("email", "")),
            str(row.get("github", "")),
            f"{row.get('progress', '')}%",
            ", ".join(str(tag) for tag in tags) if isinstance(tags, list) else "",
        )
    console.print(table)
    return True


def render_person_detail(console: Console, result: CommandResult) -> bool:
    """Render a single-person mutation result as message + field panel.

    Args:
        console: Rich console.
        result: Command result payload.

    Returns:
        ``True`` when rendered.
    """
    data = result.data if isinstance(result.data, dict) else None
    person = data.get("person") if data is not None else None
    if not isinstance(person, dict):
        return False
    details = Table(show_header=False, box=None, expand=True)
    details.add_column("Field", style="bold cyan", no_wrap=True)
    details.add_column("Value")
    for label, key in (
        ("Name", "name"),
        ("Student ID", "student_id"),
        ("Class", "class_number"),
        ("Phone", "phone"),
        ("Email", "email"),
        ("GitHub", "github"),
        ("Repository", "repository"),
        ("Progress", "progress"),
    ):
        details.add_row(label, str(person.get(key, "")))
    tags = person.get("tags")
    details.add_row("Tags", ", ".join(tags) if isinstance(tags, list) else "")
    title = _DETAIL_TITLES.get(result.code, "Person")
    console.print(
        Panel(
            details,
            title=Text(f"{title} [{result.code}]"),
            border_style="green",
            expand=True,
        )
    )
    return True
