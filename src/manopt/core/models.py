"""Domain models for manopt.

Option entries are **frozen** dataclasses: once a :class:`Switch`,
:class:`Separator` or :class:`CategoryHeading` is registered it never
changes.  :class:`Options` is the one deliberately mutable record —
switch handlers write their outcomes into it during a parse.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol, TypeVar, Union

from manopt.core.protocols import AppLogger
from manopt.exceptions import ConfigurationError, OptionParseError

T_co = TypeVar("T_co", covariant=True)

Handler = Callable[[str | None], None]
"""Callback invoked with the raw value (``None`` for plain flags)."""


class EntryVisitor(Protocol[T_co]):
    """Double-dispatch interface walked by :meth:`OptionRegistry.accept`.

    Each ``visit_*`` method receives one entry and returns whatever the
    visitor produces for it (renderers return a list of output lines).
    """

    def visit_switch(self, switch: Switch) -> T_co:
        ...  # pragma: no cover

    def visit_separator(self, separator: Separator) -> T_co:
        ...  # pragma: no cover

    def visit_category(self, heading: CategoryHeading) -> T_co:
        ...  # pragma: no cover


# ---------------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------------

def _ignore(value: str | None) -> None:
    return None


@dataclass(frozen=True, slots=True)
class Switch:
    """A single command-line option definition."""

    short_form: str | None = None
    """Short spelling such as ``-g``, or ``None``."""

    long_form: str | None = None
    """Long spelling such as ``--greeting``, or ``None``."""

    argument: str | None = None
    """Placeholder for the value (``DIR``, ``TYPE``).  ``None`` for flags."""

    description: tuple[str, ...] = ()
    """Help text, one element per output line."""

    handler: Handler = field(default=_ignore, compare=False, repr=False)

    hidden: bool = False
    """Hidden switches still match but are left out of documentation."""

    def __post_init__(self) -> None:
        if not self.short_form and not self.long_form:
            raise ConfigurationError(
                "A switch needs a short form, a long form, or both.",
            )
        if self.short_form and (
            len(self.short_form) != 2
            or self.short_form[0] != "-"
            or self.short_form[1] == "-"
        ):
            raise ConfigurationError(
                f"Invalid short form: {self.short_form!r}",
                hint="Short forms are a dash followed by one character, e.g. -v.",
            )
        if self.long_form and (
            not self.long_form.startswith("--")
            or len(self.long_form) < 3
            or "=" in self.long_form
        ):
            raise ConfigurationError(
                f"Invalid long form: {self.long_form!r}",
                hint="Long forms start with two dashes, e.g. --verbose.",
            )
        # Tuples keep the entry hashable and immutable.
        if not isinstance(self.description, tuple):
            object.__setattr__(self, "description", tuple(self.description))

    @property
    def takes_argument(self) -> bool:
        return self.argument is not None

    @property
    def forms(self) -> tuple[str, ...]:
        """Every spelling of this switch, short form first."""
        return tuple(form for form in (self.short_form, self.long_form) if form)

    def display_forms(self) -> str:
        """Return the ``"-g, --greeting=TEXT"`` summary used in documentation."""
        if self.long_form:
            long_part = self.long_form
            if self.argument is not None:
                long_part = f"{long_part}={self.argument}"
            if self.short_form:
                return f"{self.short_form}, {long_part}"
            return long_part
        assert self.short_form is not None
        if self.argument is not None:
            return f"{self.short_form} {self.argument}"
        return self.short_form

    def accept(self, visitor: EntryVisitor[T_co]) -> T_co:
        return visitor.visit_switch(self)


@dataclass(frozen=True, slots=True)
class Separator:
    """Free text placed between switches (often an empty line)."""

    text: str = ""

    def accept(self, visitor: EntryVisitor[T_co]) -> T_co:
        return visitor.visit_separator(self)


@dataclass(frozen=True, slots=True)
class CategoryHeading:
    """Documentation-only label shown above a group of switches."""

    title: str

    def accept(self, visitor: EntryVisitor[T_co]) -> T_co:
        return visitor.visit_category(self)


Entry = Union[Switch, Separator, CategoryHeading]


# ---------------------------------------------------------------------------
# Parse outcome
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class Options:
    """Results accumulated while parsing one command line.

    Shared by reference between every switch handler.  Applications that
    need extra fields subclass this dataclass and give those fields
    defaults.
    """

    logger: AppLogger
    """The logger selected for this run."""

    default_logger: AppLogger
    """The logger in effect before any ``--logger-type`` switch."""

    locale_dir: str | None = None
    operands: list[str] = field(default_factory=list)
    parse_error: OptionParseError | None = None
    """Set only when the session is configured to log and continue."""

    @property
    def uses_default_logger(self) -> bool:
        return self.logger is self.default_logger

