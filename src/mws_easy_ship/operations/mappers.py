"""
Error mapping and CLI utilities.

Provides centralized exception-to-exit-code mapping and a CLI command wrapper
so every Typer command handles errors the same way.
"""
from __future__ import annotations

import typer
from typing import Callable, TypeVar

T = TypeVar('T')

EXIT_CODES = {
    "ValueError": 2,
    "ValidationError": 2,
    "JSONDecodeError": 2,
    "UnsupportedParameterValue": 2,
    "OperationNotStartedError": 4,
}

def exit_code_for(exc: BaseException) -> int:
    """
    Map exception to standardized exit code.

    Returns:
    - 2: Invalid input (bad JSON, failed model validation, bad settings)
    - 4: Shared client misuse (OperationNotStartedError)
    - 3: Anything else, including transport failures

    Args:
        exc: Exception to map

    Returns:
        Exit code (3 as fallback for unknown exceptions)
    """
    return EXIT_CODES.get(type(exc).__name__, 3)

def run_and_exit(func: Callable[[], T]) -> T:
    """
    Unified error wrapper for CLI commands.

    Executes the given function and maps any exceptions to exit codes
    using typer.Exit, printing the error message to stderr.

    Args:
        func: Function to execute

    Returns:
        Function result if successful

    Raises:
        typer.Exit: With appropriate exit code if function raises exception
    """
    try:
        return func()
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=exit_code_for(e)) from e
