"""Configuration commands."""

from __future__ import annotations

from typing import Annotated

import typer

from ...core.config import Config
from ..output import console, print_error, print_info, print_success

app = typer.Typer(help="Manage configuration")


@app.command("show")
def show_config(
    section: Annotated[
        str | None,
        typer.Argument(help="Section to show (coordination, reports, logging)"),
    ] = None,
):
    """Show current configuration."""
    config = Config.load()

    def show_coordination():
        console.print("[bold]Coordination:[/bold]")
        console.print(f"  service_timeout: {config.coordination.service_timeout}s")
        console.print(f"  enrichment_enabled: {config.coordination.enrichment_enabled}")

    def show_reports():
        console.print("[bold]Reports:[/bold]")
        console.print(f"  summary_preview_limit: {config.reports.summary_preview_limit}")
        console.print(f"  compliance_standard: {config.reports.compliance_standard}")

    def show_logging():
        console.print("[bold]Logging:[/bold]")
        console.print(f"  log_level: {config.log_level}")

    sections = {
        "coordination": show_coordination,
        "reports": show_reports,
        "logging": show_logging,
    }

    console.print("[cyan]Current Configuration[/cyan]\n")

    if section:
        if section.lower() in sections:
            sections[section.lower()]()
        else:
            print_error(f"Unknown section: {section}")
            console.print(f"Available: {', '.join(sections.keys())}")
            raise typer.Exit(1)
    else:
        for show_fn in sections.values():
            show_fn()
            console.print()

        console.print("[bold]Paths:[/bold]")
        console.print(f"  user config: {Config.USER_CONFIG_FILE}")
        console.print(f"  project config: {Config.PROJECT_CONFIG_FILE}")

        if Config.USER_CONFIG_FILE.exists():
            print_info("\nUser config file exists")
        else:
            print_info("\nNo user config file (using defaults)")


@app.command("set")
def set_config(
    key: Annotated[str, typer.Argument(help="Config key (e.g., 'timeout', 'standard')")],
    value: Annotated[str, typer.Argument(help="Config value")],
):
    """Set a configuration value in the user config file.

    Available keys:
    - timeout: Per-call service timeout in seconds
    - enrichment: Enable enrichment (true/false)
    - preview: Tasks listed per category in summaries
    - standard: Default compliance standard (owasp/gdpr)
    - log_level: Logging level
    """
    config = Config.load()
    key_lower = key.lower()

    def parse_bool(v: str) -> bool:
        return v.lower() in ("true", "1", "yes", "on")

    def parse_int(v: str) -> int:
        try:
            return int(v)
        except ValueError:
            print_error(f"Invalid integer: {v}")
            raise typer.Exit(1)

    def parse_float(v: str) -> float:
        try:
            return float(v)
        except ValueError:
            print_error(f"Invalid number: {v}")
            raise typer.Exit(1)

    if key_lower == "timeout":
        config.coordination.service_timeout = parse_float(value)
    elif key_lower == "enrichment":
        config.coordination.enrichment_enabled = parse_bool(value)
    elif key_lower == "preview":
        config.reports.summary_preview_limit = parse_int(value)
    elif key_lower == "standard":
        if value.lower() not in ("owasp", "gdpr"):
            print_error(f"Unknown compliance standard: {value}")
            raise typer.Exit(1)
        config.reports.compliance_standard = value.lower()
    elif key_lower == "log_level":
        config.log_level = value.upper()
    else:
        print_error(f"Unknown config key: {key}")
        raise typer.Exit(1)

    config.save_user_config()
    print_success(f"Set {key} = {value}")
