"""Renderers that turn an :class:`OptionRegistry` into output lines.

Both renderers walk the same registry through the
:class:`~manopt.core.models.EntryVisitor` interface, so interactive
``--help`` text and the roff manual page can never drift apart.

Returned lines carry no trailing newline; callers join them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from manopt.core.models import CategoryHeading, Separator, Switch
from manopt.core.registry import OptionRegistry
from manopt.core.roff import escape


class Renderer(ABC):
    """Base class: one ``visit_*`` method per entry kind, each returning lines."""

    def __init__(self, *, show_hidden: bool = False) -> None:
        self._show_hidden: bool = show_hidden

    def render(self, registry: OptionRegistry) -> list[str]:
        lines: list[str] = list(self.preamble(registry))
        for chunk in registry.accept(self):
            lines.extend(chunk)
        return lines

    def preamble(self, registry: OptionRegistry) -> list[str]:
        """Lines emitted before the first entry.  Empty by default."""
        return []

    def _skip(self, switch: Switch) -> bool:
        return switch.hidden and not self._show_hidden

    @abstractmethod
    def visit_switch(self, switch: Switch) -> list[str]:
        ...

    @abstractmethod
    def visit_separator(self, separator: Separator) -> list[str]:
        ...

    @abstractmethod
    def visit_category(self, heading: CategoryHeading) -> list[str]:
        ...


# ---------------------------------------------------------------------------
# Terminal help
# ---------------------------------------------------------------------------

class PlainTextRenderer(Renderer):
    """Aligned option summary for ``--help``.

    Parameters
    ----------
    width:
        Column width reserved for the switch spellings.
    indent:
        Prefix applied to every switch line.
    """

    # Pads long-only switches so they line up after a "-x, " prefix.
    _SHORT_SLOT = " " * len("-x, ")

    def __init__(
        self,
        *,
        width: int = 32,
        indent: str = "    ",
        show_hidden: bool = False,
    ) -> None:
        super().__init__(show_hidden=show_hidden)
        self._width: int = width
        self._indent: str = indent

    def preamble(self, registry: OptionRegistry) -> list[str]:
        return [registry.banner] if registry.banner else []

    def visit_switch(self, switch: Switch) -> list[str]:
        if self._skip(switch):
            return []

        left = switch.display_forms()
        if not switch.short_form:
            left = self._SHORT_SLOT + left

        description = list(switch.description)
        if not description:
            return [self._indent + left]

        continuation = " " * (len(self._indent) + self._width + 1)
        if len(left) > self._width:
            lines = [self._indent + left]
            rest = description
        else:
            lines = [f"{self._indent}{left.ljust(self._width)} {description[0]}"]
            rest = description[1:]
        lines.extend(continuation + text for text in rest)
        return lines

    def visit_separator(self, separator: Separator) -> list[str]:
        return [separator.text]

    def visit_category(self, heading: CategoryHeading) -> list[str]:
        return ["", heading.title]


# ---------------------------------------------------------------------------
# Manual page
# ---------------------------------------------------------------------------

class RoffRenderer(Renderer):
    """man(7) markup for the option set.

    Parameters
    ----------
    title:
        Page title for the ``.TH`` line.  No ``.TH`` is emitted when
        ``None``, which lets the output be spliced into a larger page.
    section:
        Manual section number.
    """

    def __init__(
        self,
        *,
        title: str | None = None,
        section: str = "1",
        show_hidden: bool = False,
    ) -> None:
        super().__init__(show_hidden=show_hidden)
        self._title: str | None = title
        self._section: str = section

    def preamble(self, registry: OptionRegistry) -> list[str]:
        if self._title is None:
            return []
        return [f'.TH "{escape(self._title.upper())}" {self._section}']

    def visit_switch(self, switch: Switch) -> list[str]:
        if self._skip(switch):
            return []
        return [
            ".TP",
            f'.B "{escape(switch.display_forms())}"',
            *(escape(text) for text in switch.description),
        ]

    def visit_separator(self, separator: Separator) -> list[str]:
        # A blank input line is vertical space in roff; only real text is kept.
        if not separator.text.strip():
            return []
        return [".PP", escape(separator.text)]

    def visit_category(self, heading: CategoryHeading) -> list[str]:
        return [f".SH {escape(heading.title)}"]
