"""Command-line interface for planning a day of device usage."""

import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import load_plan_config
from .errors import LoadPlanError
from .models import Schedule
from .planner import run_plan, validate_devices
from .reports.energy import format_report_text
from .tariffs import build_day

console = Console()


def _fail(error: Exception):
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    raise SystemExit(1)


def _load(config):
    """Load the plan input, exiting with an error message on failure."""
    try:
        return load_plan_config(Path(config) if config else None)
    except (LoadPlanError, FileNotFoundError) as e:
        _fail(e)


def _slot_table(schedule: Schedule, title: str, with_devices: bool = False) -> Table:
    table = Table(title=title)
    table.add_column("Hour", style="cyan")
    table.add_column("Price", justify="right")
    table.add_column("Mode")
    if with_devices:
        table.add_column("Load (W)", justify="right")
        table.add_column("Devices")

    for slot in schedule:
        mode = "[blue]night[/blue]" if slot.mode == "night" else "[yellow]day[/yellow]"
        row = [f"{slot.hour:02d}:00", f"{slot.price:.2f}", mode]
        if with_devices:
            row.append(f"{slot.total_power:.0f}")
            row.append(escape(", ".join(d.name or d.id for d in slot.devices)) or "[dim]-[/dim]")
        table.add_row(*row)
    return table


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def cli(verbose):
    """Plan device usage across a day of tariff rates."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@cli.command()
@click.option("--config", type=click.Path(exists=True, dir_okay=False), help="Path to plan input (YAML or JSON)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--plain", is_flag=True, help="Output as plain text")
def plan(config, as_json, plain):
    """Schedule every device and report energy consumed."""
    plan_config = _load(config)
    try:
        schedule, report = run_plan(plan_config)
    except LoadPlanError as e:
        _fail(e)

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
        return
    if plain:
        click.echo(format_report_text(report))
        return

    console.print(_slot_table(schedule, f"Day plan (max {plan_config.max_power:.0f} W)", with_devices=True))

    table = Table(title="Consumed Energy")
    table.add_column("Device", style="cyan")
    table.add_column("Name")
    table.add_column("Energy", justify="right")
    for device in plan_config.devices:
        consumed = report.per_device[device.id]
        energy = f"{consumed:.3f}"
        if not any(device.id in ids for ids in report.schedule):
            energy = f"[yellow]{energy} (not placed)[/yellow]"
        table.add_row(escape(device.id), escape(device.name or ""), energy)
    table.add_row("[bold]Total[/bold]", "", f"[bold]{report.total:.3f}[/bold]")
    console.print(table)


@cli.command()
@click.option("--config", type=click.Path(exists=True, dir_okay=False), help="Path to plan input (YAML or JSON)")
def rates(config):
    """Show the hourly slots produced by the tariff rates."""
    plan_config = _load(config)
    try:
        schedule = build_day(plan_config.rates)
    except LoadPlanError as e:
        _fail(e)
    console.print(_slot_table(schedule, "Tariff Rates by Hour"))


@cli.command()
@click.option("--config", type=click.Path(exists=True, dir_okay=False), help="Path to plan input (YAML or JSON)")
def check(config):
    """Validate the plan input without scheduling."""
    plan_config = _load(config)
    try:
        schedule = build_day(plan_config.rates)
        validate_devices(schedule, plan_config.devices)
    except LoadPlanError as e:
        _fail(e)

    console.print(
        f"[green]OK: {len(plan_config.rates)} rate(s), "
        f"{len(plan_config.devices)} device(s), max {plan_config.max_power:.0f} W[/green]"
    )


if __name__ == "__main__":
    cli()
