"""Configuration for a command-line session.

Everything that used to be a module-level constant (the locale
directive's spelling, whether the roff flag is documented, what a parse
error does) lives on one frozen :class:`ConsoleConfig` that is passed
explicitly to the prescanner, the bootstrapper and the session.
"""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass, field
from pathlib import Path

from manopt.version import __version__


class ParseErrorPolicy(enum.Enum):
    """What :func:`~manopt.cli.command_line.parse_command_line` does on a bad command line."""

    EXIT = "exit"
    """Log at fatal level, then exit with :data:`exit_codes.USAGE_ERROR`."""

    LOG = "log"
    """Log at fatal level, record the error on the options and carry on."""


def _default_program_name() -> str:
    return Path(sys.argv[0]).stem or "manopt"


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Immutable settings for one program's option handling."""

    program_name: str = field(default_factory=_default_program_name)
    """Shown in the usage banner and used as the man page title."""

    version: str = __version__
    """Printed by ``--version``."""

    text_domain: str = "manopt"
    """gettext domain for translated option descriptions."""

    locale_dir_option: str = "--locale-dir"
    roff_option: str = "--roff"

    show_roff_in_summary: bool = False
    """Document the roff flag in ``--help`` and the man page."""

    on_parse_error: ParseErrorPolicy = ParseErrorPolicy.EXIT
