#!/usr/bin/env python3
"""Brand Orchestrator CLI - routing, workflow and quality-gate tools.

Usage:
    # List the agents of one cluster
    python main.py agents --cluster strategy

    # Which agents can run once market analysis is done
    python main.py workflow --completed market-analyzer

    # Route a request
    python main.py route "SWOT and competitor analysis for our market"

    # Score an agent's output
    python main.py validate market-analyzer ./output.json --brand ./brand.json

    # Run the content guard
    python main.py guard "Just do it with a Picasso style poster" --brand ./brand.json
"""

import sys
import json
from pathlib import Path
from typing import Any, List, Optional, Tuple

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from contracts import BrandContext, Cluster, GuardStatus, JobRequest, PriorOutputRecord
from registry import get_registry, get_workflow_order, next_ready_agents
from router import extract_keywords
from quality import QualityGate
from guard import DataGuardian
from orchestrator import OrchestratorEngine
from config import configure_logging, PHASE_LABELS, CLUSTER_LABELS


console = Console()

EXIT_INPUT_ERROR = 1
EXIT_GATE_FAILED = 2


def _fail(message: str) -> None:
    console.print(f"[red]Error: {escape(message)}[/red]", soft_wrap=True)
    sys.exit(EXIT_INPUT_ERROR)


def read_json_file(path: str) -> Any:
    """Read a JSON file, exiting with a readable error when it is unusable."""
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        _fail(f"cannot read {path}: {e}")
    except ValueError as e:
        _fail(f"{path} is not valid JSON: {e}")


def load_brand(path: Optional[str]) -> Optional[BrandContext]:
    if not path:
        return None
    try:
        return BrandContext.model_validate(read_json_file(path))
    except ValidationError as e:
        _fail(f"{path} is not a valid brand context: {e}")


def load_prior_outputs(path: Optional[str]) -> List[PriorOutputRecord]:
    """Load a JSON list of prior-output records."""
    if not path:
        return []
    data = read_json_file(path)
    if not isinstance(data, list):
        _fail(f"{path} must contain a JSON list of prior outputs")
    try:
        return [PriorOutputRecord.model_validate(item) for item in data]
    except ValidationError as e:
        _fail(f"{path} contains an invalid prior output: {e}")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def cli(verbose: bool):
    """Brand Orchestrator: agent routing and output quality gate."""
    configure_logging("DEBUG" if verbose else None)


@cli.command()
@click.option(
    "--cluster",
    type=click.Choice([c.value for c in Cluster]),
    default=None,
    help="Only show agents of this cluster",
)
def agents(cluster: Optional[str]):
    """List the registered agents."""
    registry = get_registry()
    descriptors = registry.by_cluster(Cluster(cluster)) if cluster else registry.all_agents()

    table = Table(title="Agents")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Cluster")
    table.add_column("Phase", justify="right")
    table.add_column("Depends on", style="dim")
    for descriptor in descriptors:
        table.add_row(
            descriptor.agent_id,
            descriptor.name,
            CLUSTER_LABELS[descriptor.cluster.value],
            str(descriptor.execution_phase),
            ", ".join(descriptor.dependency_ids()) or "-",
        )
    console.print(table)


@cli.command()
@click.option(
    "--completed", "-c",
    multiple=True,
    help="Agent that has already completed (repeatable)",
)
def workflow(completed: Tuple[str, ...]):
    """Show the workflow phases and the agents ready to run next."""
    done = set(completed)
    table = Table(title="Workflow")
    table.add_column("Phase", justify="right")
    table.add_column("Stage")
    table.add_column("Agents")
    for phase, agent_ids in enumerate(get_workflow_order(), start=1):
        rendered = [f"[green]{a}[/green]" if a in done else a for a in agent_ids]
        table.add_row(str(phase), PHASE_LABELS[phase], ", ".join(rendered) or "-")
    console.print(table)

    ready = next_ready_agents(done)
    if ready:
        console.print(f"\n[bold]Ready next:[/bold] {', '.join(ready)}")
    else:
        console.print("\n[bold]Ready next:[/bold] nothing, the workflow is complete")


@cli.command()
@click.argument("text")
@click.option("--keyword", "-k", "keywords", multiple=True, help="Use these keywords instead of extracting them")
@click.option("--brand", "brand_path", default=None, help="Brand context JSON file")
@click.option("--completed", "-c", multiple=True, help="Agent that has already completed (repeatable)")
def route(text: str, keywords: Tuple[str, ...], brand_path: Optional[str], completed: Tuple[str, ...]):
    """Route a request to an agent."""
    brand = load_brand(brand_path)
    request = JobRequest(
        intent=text,
        keywords=list(keywords) if keywords else extract_keywords(text),
        brand_id=brand.brand_id if brand else None,
    )
    engine = OrchestratorEngine()
    plan = engine.plan(request, brand, completed)
    decision = plan.routing

    console.print(f"[dim]Keywords:[/dim] {', '.join(request.keywords) or '-'}")
    if decision.is_escalation:
        console.print(f"[yellow]No agent matched; escalating to {decision.primary_agent}[/yellow]")
    else:
        console.print(f"[green]Primary agent:[/green] {decision.primary_agent} ({decision.job_type})")
        console.print(f"[green]Secondary agents:[/green] {', '.join(decision.secondary_agents) or '-'}")
    console.print(f"[green]Confidence:[/green] {decision.confidence:.0%}")
    console.print(f"[green]Reasoning:[/green] {decision.reasoning}")
    if decision.anti_overlap.needs_dedup:
        console.print(f"[green]Do not overlap with:[/green] {', '.join(decision.anti_overlap.skip_agents)}")

    if brand is not None:
        if plan.ready:
            console.print("\n[bold green]Ready to run[/bold green]")
        else:
            console.print("\n[bold yellow]Not ready:[/bold yellow]")
            for blocker in plan.blockers:
                console.print(f"  - {blocker}")


@cli.command()
@click.argument("agent_id")
@click.argument("output_file")
@click.option("--brand", "brand_path", default=None, help="Brand context JSON file")
@click.option("--prior", "prior_path", default=None, help="JSON list of prior outputs")
@click.option("--json", "as_json", is_flag=True, help="Print the raw validation result as JSON")
def validate(agent_id: str, output_file: str, brand_path: Optional[str], prior_path: Optional[str], as_json: bool):
    """Run the quality gate over an agent's output file."""
    try:
        output = Path(output_file).read_text(encoding="utf-8")
    except OSError as e:
        _fail(f"cannot read {output_file}: {e}")

    brand = load_brand(brand_path)
    prior_outputs = load_prior_outputs(prior_path)
    result = QualityGate().validate(agent_id, output, brand, prior_outputs)

    if as_json:
        click.echo(result.model_dump_json(indent=2))
    else:
        table = Table(title=f"Quality gate: {agent_id}")
        table.add_column("Rule")
        table.add_column("Result")
        table.add_column("Message")
        for check in result.checklist:
            mark = "[green]PASS[/green]" if check.passed else f"[red]{check.severity.value.upper()}[/red]"
            table.add_row(check.label, mark, escape(check.message))
        console.print(table)

        colour = "green" if result.passed else "red"
        console.print(Panel.fit(
            f"[bold {colour}]{'PASSED' if result.passed else 'FAILED'}[/bold {colour}]  score {result.score}/100",
            border_style=colour,
        ))
        for recommendation in result.recommendations:
            console.print(f"  - {recommendation}")

    if not result.passed:
        sys.exit(EXIT_GATE_FAILED)


@cli.command()
@click.argument("text")
@click.option("--brand", "brand_path", required=True, help="Brand context JSON file")
@click.option("--original", default=None, help="Original text when TEXT is a rephrase")
@click.option("--reference", "references", multiple=True, help="Source backing the content (repeatable)")
def guard(text: str, brand_path: str, original: Optional[str], references: Tuple[str, ...]):
    """Run the Data Guardian checks over a piece of content."""
    brand = load_brand(brand_path)
    guardian = DataGuardian()
    report = guardian.validate_content(brand, text, original_content=original, references=list(references))

    colour = {
        GuardStatus.PASSED: "green",
        GuardStatus.WARNING: "yellow",
        GuardStatus.BLOCKED: "red",
    }[report.overall_status]
    console.print(guardian.render_report(report), style=colour, markup=False, highlight=False)


@cli.command()
@click.option("--brand", "brand_path", default=None, help="Brand context JSON file")
def summary(brand_path: Optional[str]):
    """Print the engine status summary for a brand."""
    console.print(OrchestratorEngine().system_summary(load_brand(brand_path)), highlight=False)


if __name__ == "__main__":
    cli()
