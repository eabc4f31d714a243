"""CLI interface for tagcheck using Typer framework."""

import importlib
import json as jsonlib
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tagcheck import __description__, __version__
from tagcheck.config import Locale, LogLevel, load_config
from tagcheck.constants import DEFAULT_OMIT_TAG
from tagcheck.errors import DecodeError, RootTypeError, RuleDefinitionError
from tagcheck.grammar import parse_tag
from tagcheck.rules import RuleTable
from tagcheck.validator import Validator

app = typer.Typer(
    name="tagcheck",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

_LOG_LEVELS = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"tagcheck version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """tagcheck - declarative rule-tag validation."""


def _load_model(spec: str) -> type:
    """Import ``module:Class`` and return the class."""
    module_name, _, class_name = spec.partition(":")
    if not module_name or not class_name:
        console.print(f"[red]Error:[/red] Model must look like 'module:Class', got '{spec}'")
        raise typer.Exit(2)

    try:
        module = importlib.import_module(module_name)
        return getattr(module, class_name)
    except (ImportError, AttributeError) as e:
        console.print(f"[red]Error:[/red] Cannot load model '{spec}': {e}")
        raise typer.Exit(2)


@app.command()
def check(
    payload: Annotated[
        Path,
        typer.Argument(help="JSON file to decode and validate")
    ],
    model: Annotated[
        str,
        typer.Option("--model", "-m", help="Record class as module:Class")
    ],
    config: Annotated[
        Path,
        typer.Option("--config", "-c", help="Configuration file path (default: search for .tagcheck.json)")
    ] = None,
    locale: Annotated[
        Locale,
        typer.Option("--locale", "-l", help="Message language (default: from config)")
    ] = None,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json (default: table)")
    ] = "table",
) -> None:
    """Decode a JSON payload into a record class and validate it."""
    valid_formats = ["table", "json"]
    if format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(2)

    try:
        settings = load_config(config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    if locale is not None:
        settings = settings.model_copy(update={"locale": locale})
    logging.basicConfig(level=_LOG_LEVELS[LogLevel(settings.log_level)])

    if not payload.exists():
        console.print(f"[red]Error:[/red] Payload not found: {payload}")
        raise typer.Exit(2)

    target = _load_model(model)
    validator = Validator(settings)

    try:
        result = validator.bind(payload.read_bytes(), target)
    except (DecodeError, RootTypeError, RuleDefinitionError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    if format == "json":
        console.print(jsonlib.dumps(result.to_dict(), indent=2, ensure_ascii=False), markup=False)
    elif result.valid:
        console.print(f"[green]✓ Valid:[/green] {payload}")
    else:
        table = Table(title="Validation Failure")
        table.add_column("Field", style="cyan")
        table.add_column("Path", style="dim")
        table.add_column("Rule", style="yellow")
        table.add_column("Param")
        table.add_column("Message", style="red")
        table.add_row(*(escape(cell) for cell in (result.field, result.path, result.rule, result.param, result.message)))
        console.print(table)

    if not result.valid:
        raise typer.Exit(1)


@app.command()
def parse(
    tag: Annotated[
        str,
        typer.Argument(help="Rule tag, e.g. 'omitempty,required,min=1'")
    ],
    omit_marker: Annotated[
        str,
        typer.Option("--omit-marker", help="Optional marker key")
    ] = DEFAULT_OMIT_TAG,
) -> None:
    """Show how a rule tag is parsed into slots."""
    slots = parse_tag(tag, omit_marker)
    if not slots:
        console.print("[dim]Empty tag: no rules[/dim]")
        return

    table = Table(title=f"Rule tag: {escape(tag)}")
    table.add_column("Slot", justify="right")
    table.add_column("Rule", style="cyan")
    table.add_column("Param")
    table.add_column("Mode", style="dim")

    for position, slot in enumerate(slots):
        if slot.omit_marker:
            table.add_row(str(position), omit_marker, "", "optional marker")
            continue
        for invocation in slot.alternatives:
            mode = "or" if invocation.alternative else ""
            table.add_row(str(position), escape(invocation.name) or "[red]<empty>[/red]", escape(invocation.param), mode)

    console.print(table)


@app.command()
def rules() -> None:
    """List the built-in rules."""
    table = Table(title="Built-in rules")
    table.add_column("Rule", style="cyan")
    for name in sorted(RuleTable().names()):
        table.add_row(name)
    console.print(table)
