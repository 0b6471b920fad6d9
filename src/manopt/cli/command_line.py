"""End-to-end option handling for a program built on manopt.

Order of operations
-------------------
1. Bind the translator to its default catalog.
2. Prescan argv for the locale directive and bind it.
3. Build the registry: the application's own entries first, then the
   common options — all with descriptions in the now-correct language.
4. Parse argv; handlers update the shared :class:`Options`.

Only :class:`~manopt.exceptions.OptionParseError` is handled here, and
only as far as :class:`~manopt.cli.config.ParseErrorPolicy` says.
Anything else a handler raises propagates to the caller.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import TypeVar

from manopt.cli import exit_codes
from manopt.cli.bootstrap import Bootstrapper
from manopt.cli.config import ConsoleConfig, ParseErrorPolicy
from manopt.core.matcher import ArgumentMatcher
from manopt.core.models import Options
from manopt.core.prescan import Prescanner
from manopt.core.protocols import AppLogger, LoggerTypeSource, Translator
from manopt.core.registry import OptionRegistry
from manopt.exceptions import OptionParseError
from manopt.infra.catalog import GettextTranslator
from manopt.infra.loggers import BuiltinLoggerTypes, StderrLogger

OptionsT = TypeVar("OptionsT", bound=Options)

Configure = Callable[[OptionRegistry, OptionsT], None]
"""Callback registering application-specific entries."""


def parse_command_line(
    args: Sequence[str] | None = None,
    configure: Configure[OptionsT] | None = None,
    *,
    logger: AppLogger | None = None,
    config: ConsoleConfig | None = None,
    translator: Translator | None = None,
    logger_types: LoggerTypeSource | None = None,
    options_type: type[OptionsT] = Options,  # type: ignore[assignment]
) -> tuple[OptionsT, AppLogger]:
    """Parse *args* against the application's entries plus the common options.

    Parameters
    ----------
    args:
        Argument list.  ``None`` (default) means ``sys.argv[1:]``.
    configure:
        Called with the registry and the options record before the
        common options are added.
    logger:
        Default logger; a fresh :class:`StderrLogger` when ``None``.
    options_type:
        :class:`Options` subclass to instantiate, for applications with
        extra fields.

    Returns
    -------
    tuple
        The populated options and the logger selected for the run.

    Raises
    ------
    SystemExit
        After ``--help``/``--version``/roff output, and on a parse error
        under :attr:`ParseErrorPolicy.EXIT`.
    LocaleBindError
        If the locale directory given on the command line is unusable.
    """
    argv = list(sys.argv[1:] if args is None else args)
    config = config or ConsoleConfig()
    logger_types = logger_types or BuiltinLoggerTypes()
    if translator is None:
        translator = GettextTranslator(config.text_domain)
        translator.bind(None)

    default_logger = logger or StderrLogger()
    options = options_type(logger=default_logger, default_logger=default_logger)

    Prescanner(config.locale_dir_option).apply(argv, translator)

    _ = translator.translate
    registry = OptionRegistry(banner=_("Usage: %s [options]") % config.program_name)
    if configure is not None:
        configure(registry, options)
    Bootstrapper(config, translator, logger_types).install(registry, options)

    try:
        options.operands = ArgumentMatcher(registry).parse(argv)
    except OptionParseError as exc:
        options.logger.fatal(str(exc))
        if config.on_parse_error is ParseErrorPolicy.EXIT:
            raise SystemExit(exit_codes.USAGE_ERROR) from exc
        options.parse_error = exc

    return options, options.logger
