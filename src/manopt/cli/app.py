"""``manopt`` console script — a small greeter built on the framework.

It exists to exercise the whole session from a real entry point:
an application category of its own, the common options, ``--help``,
``--version`` and the hidden roff dump.

This module is the **sole error boundary** for the entire application.
It catches :class:`~manopt.exceptions.ManoptError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass

from manopt.cli import exit_codes
from manopt.cli.command_line import parse_command_line
from manopt.cli.config import ConsoleConfig
from manopt.cli.console import console
from manopt.core.models import CategoryHeading, Options, Switch
from manopt.core.registry import OptionRegistry
from manopt.exceptions import ManoptError

PROGRAM_NAME = "manopt"


@dataclass(eq=False)
class GreetOptions(Options):
    greeting: str = "Hello"
    upper: bool = False


# ---------------------------------------------------------------------------
# Application options
# ---------------------------------------------------------------------------

def _configure(registry: OptionRegistry, options: GreetOptions) -> None:
    def on_greeting(value: str | None) -> None:
        options.greeting = value or options.greeting

    def on_upper(value: str | None) -> None:
        options.upper = True

    registry.append(CategoryHeading("Greeting options"))
    registry.append(
        Switch(
            "-g",
            "--greeting",
            "TEXT",
            ("Word placed before each name.", f"({options.greeting})"),
            handler=on_greeting,
        )
    )
    registry.append(
        Switch("-u", "--upper", description=("Shout the greeting.",), handler=on_upper)
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the manopt demo CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    options, logger = parse_command_line(
        argv,
        _configure,
        config=ConsoleConfig(program_name=PROGRAM_NAME),
        options_type=GreetOptions,
    )

    for name in options.operands or ["world"]:
        message = f"{options.greeting}, {name}!"
        logger.info(message.upper() if options.upper else message)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ManoptError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
