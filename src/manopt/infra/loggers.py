"""Logger variants selectable with ``--logger-type``.

Each variant wraps a private :class:`logging.Logger` — deliberately not
registered through :func:`logging.getLogger`, so constructing one per
invocation (or per test) leaves no global state behind.

Rules
-----
* No imports from ``cli``.
* ``rich`` is imported lazily; only :class:`RichLogger` needs it.
"""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from typing import ClassVar, TextIO

from manopt.core.protocols import LoggerVariant
from manopt.exceptions import EnvironmentError

LOG_FORMAT = "%(levelname)s: %(message)s"


class HandlerLogger(ABC):
    """Base class: a named :class:`logging.Logger` with one handler."""

    display_name: ClassVar[str]

    def __init__(self, level: int = logging.INFO) -> None:
        self._logger: logging.Logger = logging.Logger(
            f"manopt.{self.display_name.lower()}",
            level,
        )
        self._logger.addHandler(self._build_handler())

    @abstractmethod
    def _build_handler(self) -> logging.Handler:
        ...

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)

    def fatal(self, message: str) -> None:
        self._logger.critical(message)


def _stream_handler(stream: TextIO) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


class StderrLogger(HandlerLogger):
    """Plain ``LEVEL: message`` lines on standard error.  The default."""

    display_name = "Stderr"

    def _build_handler(self) -> logging.Handler:
        return _stream_handler(sys.stderr)


class StdoutLogger(HandlerLogger):
    """Plain ``LEVEL: message`` lines on standard output."""

    display_name = "Stdout"

    def _build_handler(self) -> logging.Handler:
        return _stream_handler(sys.stdout)


class RichLogger(HandlerLogger):
    """Colourised records on standard error via :class:`rich.logging.RichHandler`."""

    display_name = "Rich"

    def _build_handler(self) -> logging.Handler:
        try:
            from rich.console import Console
            from rich.logging import RichHandler
        except ModuleNotFoundError as exc:
            raise EnvironmentError(
                "rich is not installed. Install with: pip install rich",
            ) from exc

        return RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
        )


LOGGER_TYPES: tuple[type[HandlerLogger], ...] = (StderrLogger, StdoutLogger, RichLogger)


class BuiltinLoggerTypes:
    """:class:`~manopt.core.protocols.LoggerTypeSource` over the shipped variants."""

    def __init__(self, types: tuple[type[HandlerLogger], ...] = LOGGER_TYPES) -> None:
        self._types = types

    def variants(self) -> tuple[LoggerVariant, ...]:
        return self._types  # type: ignore[return-value]
