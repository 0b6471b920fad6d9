"""Infrastructure layer — logger back-ends and message catalogs.

This layer wraps all interaction with :mod:`logging`, :mod:`gettext`
and Rich.  Everything here satisfies a protocol from
:mod:`manopt.core.protocols`; the core never imports from this package.

Rules
-----
* No imports from ``cli``.
* No user-facing output except through the logger handlers themselves.
"""

from manopt.infra.catalog import GettextTranslator
from manopt.infra.loggers import (
    LOGGER_TYPES,
    BuiltinLoggerTypes,
    HandlerLogger,
    RichLogger,
    StderrLogger,
    StdoutLogger,
)

__all__: list[str] = [
    "LOGGER_TYPES",
    "BuiltinLoggerTypes",
    "GettextTranslator",
    "HandlerLogger",
    "RichLogger",
    "StderrLogger",
    "StdoutLogger",
]
