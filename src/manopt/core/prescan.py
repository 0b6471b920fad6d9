"""First, partial pass over argv for directives that must act early.

Switch descriptions are translated when the registry is *built*, not
when it is rendered.  The locale directory therefore has to be bound
before any switch exists, which rules out waiting for the real parse:

    prescan → bind locale → build registry → full parse
"""

from __future__ import annotations

from collections.abc import Sequence

from manopt.core.protocols import Translator
from manopt.exceptions import LocaleBindError


class Prescanner:
    """Locate one ``--name VALUE`` / ``--name=VALUE`` directive in argv.

    Unlike the real parse, the scan neither stops at operands nor
    complains about unknown tokens.  It cannot tell a real directive from
    a token that only looks like one (another option's value, or an
    operand after ``--``), so binding here is best-effort.

    Parameters
    ----------
    directive_name:
        Full spelling of the directive, e.g. ``"--locale-dir"``.
    """

    def __init__(self, directive_name: str) -> None:
        self._name: str = directive_name
        self._prefix: str = f"{directive_name}="

    @property
    def directive_name(self) -> str:
        return self._name

    def find_directive(self, args: Sequence[str]) -> str | None:
        """Return the value of the first occurrence, or ``None``.

        A bare directive in last position has no value and is ignored.
        """
        for index, arg in enumerate(args):
            if arg == self._name:
                if index + 1 < len(args):
                    return args[index + 1]
            elif arg.startswith(self._prefix):
                return arg[len(self._prefix):]
        return None

    def apply(self, args: Sequence[str], translator: Translator) -> str | None:
        """Bind *translator* to the directive's directory, if one is given.

        Returns the bound directory, or ``None`` when there was nothing to
        bind or binding failed.  On failure the translator keeps its
        previous catalog; the real parse raises if the switch itself
        matches.
        """
        locale_dir = self.find_directive(args)
        if locale_dir is None:
            return None
        try:
            translator.bind(locale_dir)
        except LocaleBindError:
            return None
        return locale_dir
