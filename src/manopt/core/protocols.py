"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so logger back-ends and message catalogs stay
outside the option framework proper.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class AppLogger(Protocol):
    """Contract for the loggers an application routes its output through.

    ``display_name`` is the variant name shown in help text
    (e.g. ``"Stderr"``).
    """

    display_name: str

    def info(self, message: str) -> None:
        ...  # pragma: no cover

    def warning(self, message: str) -> None:
        ...  # pragma: no cover

    def error(self, message: str) -> None:
        ...  # pragma: no cover

    def fatal(self, message: str) -> None:
        """Report an error the application cannot recover from."""
        ...  # pragma: no cover


class LoggerVariant(Protocol):
    """A constructable logger type, e.g. a logger class.

    Logger classes satisfy this protocol structurally through their
    ``display_name`` class attribute and their constructor.
    """

    display_name: str

    def __call__(self) -> AppLogger:
        ...  # pragma: no cover


class LoggerTypeSource(Protocol):
    """Enumerable registry of the logger variants available to users."""

    def variants(self) -> Sequence[LoggerVariant]:
        """Return every selectable variant in presentation order.

        The result is treated as a snapshot: callers read it once and
        do not expect it to change during an invocation.
        """
        ...  # pragma: no cover


class Translator(Protocol):
    """Contract for message-catalog backends.

    Implementations must return *key* unchanged when no translation is
    available, so untranslated builds still produce readable text.
    """

    def translate(self, key: str) -> str:
        ...  # pragma: no cover

    def bind(self, locale_dir: str | None) -> None:
        """Point catalog lookup at *locale_dir* (``None`` for the default).

        Raises
        ------
        LocaleBindError
            When *locale_dir* cannot be used as a catalog directory.
        """
        ...  # pragma: no cover
