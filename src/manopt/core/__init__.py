"""Core layer — option entries, registry, matching and rendering.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* Loggers and message catalogs are reached only through
  :mod:`manopt.core.protocols`.
"""

from manopt.core.matcher import ArgumentMatcher
from manopt.core.models import (
    CategoryHeading,
    Entry,
    EntryVisitor,
    Options,
    Separator,
    Switch,
)
from manopt.core.prescan import Prescanner
from manopt.core.protocols import AppLogger, LoggerTypeSource, LoggerVariant, Translator
from manopt.core.registry import OptionRegistry
from manopt.core.renderers import PlainTextRenderer, Renderer, RoffRenderer
from manopt.core.roff import escape

__all__: list[str] = [
    "AppLogger",
    "ArgumentMatcher",
    "CategoryHeading",
    "Entry",
    "EntryVisitor",
    "LoggerTypeSource",
    "LoggerVariant",
    "OptionRegistry",
    "Options",
    "PlainTextRenderer",
    "Prescanner",
    "Renderer",
    "RoffRenderer",
    "Separator",
    "Switch",
    "Translator",
    "escape",
]
