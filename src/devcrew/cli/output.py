"""Rich console output helpers."""

from __future__ import annotations

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from ..agents.registry import get_profile
from ..manager.models import ComplianceRequirement, SecurityFinding, TaskAssignmentMap

# Shared console instance
console = Console()
error_console = Console(stderr=True)

SEVERITY_STYLES = {
    "critical": "bold red",
    "high": "red",
    "medium": "yellow",
    "low": "dim",
}

STATUS_STYLES = {
    "passed": "green",
    "warning": "yellow",
    "failed": "red",
}


def print_error(message: str) -> None:
    """Print an error message."""
    error_console.print(f"[red]Error:[/red] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/green]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[dim]{message}[/dim]")


def create_table(title: str, columns: list[tuple[str, str]]) -> Table:
    """Create a styled table.

    Args:
        title: Table title
        columns: List of (name, style) tuples
    """
    table = Table(title=title, show_header=True, header_style="bold")
    for name, style in columns:
        table.add_column(name, style=style)
    return table


def print_reply(title: str, reply: str) -> None:
    """Print an agent reply as markdown in a panel."""
    console.print(Panel(Markdown(reply), title=f"[bold cyan]{title}[/bold cyan]", expand=False))


def print_assignment_table(assignments: TaskAssignmentMap) -> None:
    table = create_table(
        "Task Assignments",
        [("Specialist", "cyan"), ("Tasks", "magenta"), ("Titles", "")],
    )
    for category, tasks in assignments.items():
        if not tasks:
            continue
        titles = ", ".join(t.title for t in tasks)
        if len(titles) > 60:
            titles = titles[:57] + "..."
        table.add_row(get_profile(category).title, str(len(tasks)), titles)
    console.print(table)


def print_findings_table(findings: list[SecurityFinding]) -> None:
    if not findings:
        print_info("No security findings")
        return

    table = create_table(
        "Security Findings",
        [("ID", "dim"), ("Severity", ""), ("Type", "magenta"), ("Description", "")],
    )
    for finding in findings:
        severity = finding.severity.value
        style = SEVERITY_STYLES.get(severity, "")
        table.add_row(
            finding.id,
            f"[{style}]{severity}[/{style}]",
            finding.type.value,
            finding.description,
        )
    console.print(table)


def print_compliance_table(requirements: list[ComplianceRequirement], standard: str) -> None:
    table = create_table(
        f"{standard.upper()} Compliance",
        [("Requirement", "cyan"), ("Status", "")],
    )
    for req in requirements:
        status = req.status.value
        style = STATUS_STYLES.get(status, "")
        table.add_row(req.name, f"[{style}]{status}[/{style}]")
    console.print(table)
