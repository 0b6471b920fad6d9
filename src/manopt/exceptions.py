"""Custom exception hierarchy for manopt.

All exceptions that cross layer boundaries must inherit from
:class:`ManoptError`.  Parse-time faults are raised as typed
:class:`OptionParseError` subclasses so that the caller (not the
matcher) decides whether a bad command line is fatal.

Hierarchy
---------
ManoptError
├── ConfigurationError
├── OptionParseError
│   ├── UnknownOptionError
│   ├── AmbiguousOptionError
│   ├── MissingArgumentError
│   └── UnexpectedArgumentError
├── InvalidChoiceError
├── LocaleBindError
└── EnvironmentError
"""

from __future__ import annotations


class ManoptError(Exception):
    """Base exception for all manopt errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Option definitions ----------------------------------------------------

class ConfigurationError(ManoptError):
    """Raised when an option entry is defined incorrectly."""


# --- Parsing ---------------------------------------------------------------

class OptionParseError(ManoptError):
    """Base class for errors found while matching argv tokens.

    ``option`` holds the offending token (or the resolved switch form)
    exactly as it should be shown to the user.
    """

    reason: str = "invalid option"

    def __init__(self, option: str, *, hint: str | None = None) -> None:
        super().__init__(f"{self.reason}: {option}", hint=hint)
        self.option: str = option


class UnknownOptionError(OptionParseError):
    """Raised when a token matches no registered switch."""

    reason = "invalid option"


class AmbiguousOptionError(OptionParseError):
    """Raised when an abbreviated long form matches several switches."""

    reason = "ambiguous option"

    def __init__(
        self,
        option: str,
        candidates: tuple[str, ...],
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(option, hint=hint or f"Candidates: {', '.join(candidates)}")
        self.candidates: tuple[str, ...] = candidates


class MissingArgumentError(OptionParseError):
    """Raised when a switch needs a value and none was supplied."""

    reason = "missing argument"


class UnexpectedArgumentError(OptionParseError):
    """Raised when ``--flag=value`` is given for a switch without arguments."""

    reason = "needless argument"


# --- Choice lookup ---------------------------------------------------------

class InvalidChoiceError(ManoptError):
    """Raised when a value is not one of an enumerated set of names."""

    def __init__(self, value: str, choices: tuple[str, ...]) -> None:
        super().__init__(
            f"Unknown choice: {value}",
            hint=f"Select from [{', '.join(choices)}].",
        )
        self.value: str = value
        self.choices: tuple[str, ...] = choices


# --- Locale ----------------------------------------------------------------

class LocaleBindError(ManoptError):
    """Raised when a message catalog directory cannot be bound."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ManoptError):
    """Raised when a required runtime dependency is not available."""
