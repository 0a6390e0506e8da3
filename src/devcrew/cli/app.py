"""Main CLI application using Typer."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from ..agents.classifier import determine_agent_type, explain_routing
from ..agents.factory import AgentFactory
from ..agents.models import AgentCategory
from ..agents.registry import AgentRegistry
from ..core import defaults as D
from ..core.config import Config
from ..manager.agent import ManagerAgent
from ..manager.security import SUPPORTED_STANDARDS
from .commands import config
from .output import (
    console,
    create_table,
    print_assignment_table,
    print_compliance_table,
    print_error,
    print_findings_table,
    print_info,
    print_reply,
)

app = typer.Typer(
    name="devcrew",
    help="Simulated team of specialised development agents for e-commerce projects",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register command groups
app.add_typer(config.app, name="config")


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=D.LOG_FORMAT,
    )


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Verbose output (debug logging)"),
    ] = False,
):
    """Route messages to specialist agents and analyse project requirements.

    Examples:
        devcrew route "add a checkout page"
        devcrew chat "design the product schema"
        devcrew chat -a devops "set up the release pipeline"
        devcrew tasks requirements.md
        devcrew scan app.js --standard gdpr
    """
    level = "DEBUG" if verbose else Config.load().log_level
    setup_logging(level)


def _read_file(path: Path) -> str:
    try:
        return path.read_text()
    except OSError as e:
        print_error(f"Could not read {path}: {e}")
        raise typer.Exit(1)


@app.command("route")
def route(
    message: Annotated[str, typer.Argument(help="Message to route")],
):
    """Show which agent a message is routed to."""
    category = determine_agent_type(message)
    registry = AgentRegistry()
    profile = registry.get(category)

    console.print(
        f"Routed to [bold cyan]{profile.title}[/bold cyan] "
        f"[dim](rule: {explain_routing(message)})[/dim]\n"
    )

    table = create_table(
        "Applicable Agents",
        [("Category", "magenta"), ("Name", "cyan"), ("Title", "")],
    )
    for candidate in registry.list_for_message(message):
        table.add_row(candidate.category.value, candidate.name, candidate.title)
    console.print(table)


@app.command("chat")
def chat(
    message: Annotated[str, typer.Argument(help="Your message")],
    agent: Annotated[
        Optional[str],
        typer.Option("--agent", "-a", help="Agent category to ask (default: routed)"),
    ] = None,
    requirements: Annotated[
        Optional[Path],
        typer.Option("--requirements", "-r", help="Requirements markdown to load first"),
    ] = None,
):
    """Send one message to an agent and print the reply."""
    cfg = Config.load()

    if agent:
        category = AgentCategory.from_string(agent)
        if category is None:
            print_error(f"Unknown agent: {agent}")
            console.print(f"Available: {', '.join(c.value for c in AgentCategory)}")
            raise typer.Exit(1)
    else:
        category = determine_agent_type(message)

    factory = AgentFactory(config=cfg.coordination)
    if category is AgentCategory.MANAGER:
        responder = ManagerAgent(
            services=factory.services,
            factory=factory,
            config=cfg.coordination,
            reports=cfg.reports,
        )
        if requirements is not None:
            responder.process_markdown(_read_file(requirements))
    else:
        responder = factory.create(category)

    try:
        reply = asyncio.run(responder.generate_response(message))
    except KeyboardInterrupt:
        print_info("\nInterrupted")
        raise typer.Exit(130)

    print_reply(responder.title, reply)


@app.command("tasks")
def tasks(
    path: Annotated[Path, typer.Argument(help="Requirements markdown file")],
    basic: Annotated[
        bool,
        typer.Option("--basic", help="Heading parser only (no dependencies or priorities)"),
    ] = False,
):
    """Extract tasks from a requirements document and assign them."""
    cfg = Config.load()
    markdown = _read_file(path)
    manager = ManagerAgent(config=cfg.coordination, reports=cfg.reports)

    if basic:
        from ..manager.tasks import (
            assign_tasks_to_specialists,
            extract_tasks_from_markdown,
            generate_task_summary,
        )

        parsed = extract_tasks_from_markdown(markdown)
        assignments = assign_tasks_to_specialists(parsed)
        summary = generate_task_summary(parsed, assignments, cfg.reports.summary_preview_limit)
    else:
        summary = manager.process_markdown(markdown)
        assignments = manager.project.assigned_tasks

    print_reply(manager.title, summary)
    print_assignment_table(assignments)


@app.command("scan")
def scan(
    path: Annotated[Path, typer.Argument(help="Source file to scan")],
    standard: Annotated[
        Optional[str],
        typer.Option("--standard", "-s", help="Compliance standard (owasp or gdpr)"),
    ] = None,
    report: Annotated[
        bool,
        typer.Option("--report", help="Print the full markdown report"),
    ] = False,
):
    """Run the security scan and compliance check over a file."""
    cfg = Config.load()
    standard = (standard or cfg.reports.compliance_standard).lower()
    if standard not in SUPPORTED_STANDARDS:
        print_error(f"Unknown compliance standard: {standard}")
        console.print(f"Available: {', '.join(SUPPORTED_STANDARDS)}")
        raise typer.Exit(1)

    code = _read_file(path)
    manager = ManagerAgent(config=cfg.coordination, reports=cfg.reports)
    findings = manager.perform_security_scan(code)
    requirements = manager.perform_compliance_check(code, standard)

    print_findings_table(findings)
    print_compliance_table(requirements, standard)

    if report:
        print_reply("Security Assessment", manager.generate_security_report(findings, requirements))


if __name__ == "__main__":
    app()
