"""
Human-readable output formatting.

Centralizes all CLI output formatting so commands stay thin.
"""
from __future__ import annotations

import json
from typing import Dict, Tuple

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..client_types import PreparedRequest

_console = Console()

def print_operations(operations: Dict[str, Tuple[str, ...]]) -> None:
    """
    Print supported operations and the parameter keys each one submits.

    Args:
        operations: Operation name to parameter keys
    """
    table = Table(title="Easy Ship operations")
    table.add_column("Operation", style="cyan")
    table.add_column("Parameters", style="yellow")

    for name, keys in operations.items():
        table.add_row(name, ", ".join(keys) if keys else "[dim](none)[/]")

    _console.print(table)

def print_prepared_request(request: PreparedRequest, as_json: bool = False) -> None:
    """
    Print a prepared (unsent) request.

    Args:
        request: Request built by a dry run
        as_json: Print only the parameters, as a JSON object
    """
    if as_json:
        typer.echo(json.dumps(request.params, indent=2))
        return

    _console.print(f"[bold]Action:[/] {request.action}")
    _console.print(f"[bold]URL:[/] {request.url}")

    table = Table(title="Parameters")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Value", style="yellow")
    for name, value in request.params.items():
        table.add_row(escape(name), escape(value))

    _console.print(table)
    _console.print("[dim]Dry run: request not sent[/]")
