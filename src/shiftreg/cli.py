"""Command line interface for replaying shift register scenarios."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import ConfigError, ScenarioConfig
from .inputs import InputError
from .runner import CycleRunner

app = typer.Typer(help="Shift register scenario CLI")
console = Console()


def _configure_logging(level: str) -> None:
    try:
        logging.basicConfig(
            level=level.upper(),
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(console=console, show_path=False)],
            force=True,
        )
    except ValueError as exc:
        console.print(f"[bold red]Invalid log level:[/] {exc}")
        raise typer.Exit(code=1) from exc


def _load(path: Path) -> ScenarioConfig:
    try:
        return ScenarioConfig.from_file(path)
    except ConfigError as exc:
        console.print(f"[bold red]Invalid scenario:[/] {exc}")
        raise typer.Exit(code=1) from exc


def _format_inputs(inputs: dict[str, Any]) -> str:
    return ", ".join(f"{key}={value}" for key, value in inputs.items())


def _format_values(values: list[float]) -> str:
    return "[" + ", ".join(f"{value:g}" for value in values) + "]"


@app.command()
def replay(
    scenario_path: Path = typer.Argument(..., help="Path to scenario YAML"),
    log_level: str = typer.Option("WARNING", help="Logging level"),
    counters: bool = typer.Option(False, "--counters", help="Print the final counter mapping"),
) -> None:
    """Run every cycle of a scenario and print the register after each one."""

    _configure_logging(log_level)
    config = _load(scenario_path)
    console.print(f"[bold green]Replaying scenario[/] {config.name}")

    runner = CycleRunner()
    table = Table(title="Cycles", show_lines=True)
    table.add_column("Cycle")
    table.add_column("Inputs")
    table.add_column("Branch", no_wrap=True)
    table.add_column("Values", no_wrap=True)
    table.add_column("Count")
    try:
        results = runner.run_scenario(config)
    except InputError as exc:
        console.print(f"[bold red]Invalid input:[/] {exc}")
        raise typer.Exit(code=1) from exc
    for result in results:
        table.add_row(
            str(result.index),
            _format_inputs(result.inputs),
            result.branch.value,
            escape(_format_values(result.values)),
            str(result.count),
        )
    console.print(table)

    if counters:
        console.print(f"[bold]Counters:[/] {dict(runner.step.read_counter())}")


@app.command()
def inspect(scenario_path: Path = typer.Argument(..., help="Scenario to inspect")) -> None:
    """Print the defaults and resolved per-cycle inputs of a scenario without running it."""

    config = _load(scenario_path)
    console.print(f"[bold]Scenario:[/] {config.name}\n{config.description or ''}")
    console.print(f"[bold]Defaults[/] {_format_inputs(config.defaults.as_dict())}")
    console.print("[bold]Cycles[/]")
    for index in range(len(config.cycles)):
        console.print(f"- {index + 1}: {_format_inputs(config.resolved_inputs(index))}")


if __name__ == "__main__":  # pragma: no cover
    app()
