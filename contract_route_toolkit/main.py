#!/usr/bin/env python3
"""
Contract Route Toolkit - Command Line Interface

Audit contract files for compliance and plan multi-destination routes.

Usage:
    contract-route audit --contract path/to/contract.pdf --type service_agreement
    contract-route audit -c contract.txt -t maintenance -o report.md -v
    contract-route route Paris Rome Barcelona --style budget --days 8
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from contract_route_toolkit import __version__
from contract_route_toolkit.compliance import (
    FileAuditor,
    RuleSet,
    generate_action_items,
    print_report,
    save_report,
)
from contract_route_toolkit.config import get_config
from contract_route_toolkit.models import ContractType, TravelStyle
from contract_route_toolkit.routing import NoValidDestinationsError, RoutePlanner, render_itinerary
from contract_route_toolkit.routing.catalog import CityCatalog
from contract_route_toolkit.tools import create_geocoder


# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="contract-route",
    help="Keyword-based contract compliance audits and travel route planning.",
    add_completion=False,
)

console = Console()

RISK_COLORS = {"low": "green", "medium": "yellow", "high": "red", "critical": "bold red"}


def configure_logging(verbose: bool):
    """Send library logs to stderr, DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# =============================================================================
# Main Commands
# =============================================================================

@app.command()
def audit(
    contract: Path = typer.Option(
        ...,
        "--contract", "-c",
        help="Path to the contract file (PDF or TXT)",
        exists=True,
        readable=True,
    ),
    contract_type: ContractType = typer.Option(
        ...,
        "--type", "-t",
        help="Contract type",
    ),
    contract_id: Optional[str] = typer.Option(
        None,
        "--id",
        help="Contract identifier (generated if omitted)",
    ),
    company: Optional[str] = typer.Option(
        None,
        "--company",
        help="Company the contract belongs to",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output", "-o",
        help="Output file path for the report",
    ),
    format: str = typer.Option(
        "markdown",
        "--format", "-f",
        help="Output format: markdown, json, or text",
    ),
    rules: Optional[Path] = typer.Option(
        None,
        "--rules", "-r",
        help="Path to custom compliance rules YAML",
    ),
    allow_docx: bool = typer.Option(
        False,
        "--allow-docx",
        help="Accept DOCX files (best-effort text extraction)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable verbose output",
    ),
):
    """
    Audit a contract file for compliance issues.

    Examples:
        contract-route audit -c sample.pdf -t service_agreement
        contract-route audit -c dashboard.txt -t visualization_dashboard -o report.md
    """
    configure_logging(verbose)

    config = get_config(rules_path=rules, verbose=verbose)
    config.file_audit.allow_docx = allow_docx

    try:
        auditor = FileAuditor(config=config)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            task = progress.add_task(f"Auditing {contract.name}...", total=None)
            result = auditor.audit_file(
                contract.read_bytes(),
                contract.name,
                contract_type,
                contract_id=contract_id,
                company_name=company,
            )
            progress.remove_task(task)

        if output:
            save_report(result, str(output), format=format,
                        action_items=generate_action_items(result))
            console.print(f"[green]Report saved to:[/green] {output}")
        else:
            print_report(result, verbose=verbose)

        risk = result.overall_risk_level.value
        risk_color = RISK_COLORS.get(risk, "white")

        console.print()
        console.print(f"[bold]Compliance Score:[/bold] {result.compliance_score}/100")
        console.print(f"[bold]Risk Level:[/bold] [{risk_color}]{risk.upper()}[/{risk_color}]")

    except FileNotFoundError as e:
        console.print(f"[red]File Not Found:[/red] {e}")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)


@app.command()
def route(
    destinations: list[str] = typer.Argument(
        ...,
        help="Destination names, in the order given",
    ),
    style: TravelStyle = typer.Option(
        TravelStyle.COMFORT,
        "--style", "-s",
        help="Travel style",
    ),
    days: int = typer.Option(
        7,
        "--days", "-d",
        help="Total trip duration in days",
    ),
    start: Optional[str] = typer.Option(
        None,
        "--start",
        help="Starting location",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the route plan as JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable verbose output",
    ),
):
    """
    Plan a travel route through several destinations.

    Examples:
        contract-route route Paris Rome --style budget --days 6
        contract-route route Tokyo Beijing Shanghai --json
    """
    configure_logging(verbose)

    config = get_config(verbose=verbose)

    try:
        with create_geocoder(config.geocoding) as geocoder:
            planner = RoutePlanner(
                geocoder,
                catalog=CityCatalog.from_config(
                    config.catalog_path, config.route.default_recommended_days
                ),
                config=config.route,
            )
            with console.status("Planning route..."):
                plan = planner.plan_route(destinations, style, days, start)

    except NoValidDestinationsError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if as_json:
        console.print_json(plan.model_dump_json(by_alias=True))
    else:
        console.print(render_itinerary(plan))


@app.command()
def list_rules(
    contract_type: Optional[ContractType] = typer.Option(
        None,
        "--type", "-t",
        help="Only show rules applied to this contract type",
    ),
    rules: Optional[Path] = typer.Option(
        None,
        "--rules", "-r",
        help="Path to custom compliance rules YAML",
    ),
):
    """
    List the compliance rule battery.
    """
    rule_set = RuleSet.from_config(get_config(rules_path=rules).rules_path)

    if contract_type:
        sections = [(contract_type.value, rule_set.rules_for(contract_type))]
    else:
        sections = [("all contracts", rule_set.base_rules)]
        sections.extend(
            (ct.value, domain_rules) for ct, domain_rules in rule_set.domain_rules.items()
        )
    sections.append(("pattern rules", rule_set.supplemental_rules))

    console.print("[bold]Compliance Rules[/bold]")
    console.print()

    for title, section_rules in sections:
        console.print(f"[bold cyan]{title}[/bold cyan]")
        for rule in section_rules:
            console.print(f"[bold]{rule.category}[/bold]: {rule.requirement}")
            console.print(f"  Keywords: {', '.join(rule.keywords)}")
            console.print(f"  {rule.description}")
        console.print()


@app.command()
def version():
    """
    Show version information.
    """
    console.print(f"[bold]Contract Route Toolkit[/bold] v{__version__}")
    console.print()
    console.print("Keyword-based contract compliance audits and travel route planning.")


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    app()
