"""Match argv tokens against the switches of an :class:`OptionRegistry`.

Matching rules
--------------
* ``--name`` / ``--name=value`` — exact long form, else any unambiguous
  prefix of a registered, non-hidden long form.
* ``-x`` — exact short form only.
* Switch spellings are case-sensitive.
* A value comes from the ``=value`` suffix or else from the next token.
* Tokens not starting with ``-`` (and a lone ``-``) are operands;
  ``--`` ends option processing.

Parsing is one left-to-right pass.  Handlers run synchronously as their
switch is matched; anything a handler raises (including ``SystemExit``)
propagates unchanged.
"""

from __future__ import annotations

from collections.abc import Sequence

from manopt.core.models import Switch
from manopt.core.registry import OptionRegistry
from manopt.exceptions import (
    AmbiguousOptionError,
    MissingArgumentError,
    UnexpectedArgumentError,
    UnknownOptionError,
)

END_OF_OPTIONS = "--"


class ArgumentMatcher:
    """Stateless matcher bound to one registry.

    Parameters
    ----------
    registry:
        Switch definitions; read, never modified.
    """

    def __init__(self, registry: OptionRegistry) -> None:
        self._registry: OptionRegistry = registry

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, args: Sequence[str]) -> list[str]:
        """Run every matched handler and return the operands.

        Raises
        ------
        UnknownOptionError
            If an option token matches no switch.
        AmbiguousOptionError
            If an abbreviated long form matches several switches.
        MissingArgumentError
            If a switch needs a value and the arguments ran out.
        UnexpectedArgumentError
            If ``--flag=value`` is given for a switch without a value.
        """
        operands: list[str] = []
        tokens = list(args)
        index = 0
        while index < len(tokens):
            token = tokens[index]
            index += 1

            if token == END_OF_OPTIONS:
                operands.extend(tokens[index:])
                break
            if not token.startswith("-") or token == "-":
                operands.append(token)
                continue

            if token.startswith("--"):
                name, equals, inline_value = token.partition("=")
                switch = self._match_long(name)
                shown = switch.long_form or name
                has_value = bool(equals)
                value: str | None = inline_value if has_value else None
            else:
                switch = self._match_short(token)
                shown = token
                has_value, value = False, None

            if switch.takes_argument:
                if not has_value:
                    if index >= len(tokens):
                        raise MissingArgumentError(shown)
                    value = tokens[index]
                    index += 1
            elif has_value:
                raise UnexpectedArgumentError(shown)

            switch.handler(value)

        return operands

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _match_short(self, token: str) -> Switch:
        for switch in self._registry.switches():
            if switch.short_form == token:
                return switch
        raise UnknownOptionError(token)

    def _match_long(self, name: str) -> Switch:
        named = [(s.long_form, s) for s in self._registry.switches() if s.long_form]
        for long_form, switch in named:
            if long_form == name:
                return switch

        # Hidden switches answer to their full spelling only.
        candidates = [(f, s) for f, s in named if f.startswith(name) and not s.hidden]
        if name == END_OF_OPTIONS or not candidates:
            raise UnknownOptionError(name)

        # Duplicate spellings are not ambiguous: first registered wins.
        distinct = tuple(dict.fromkeys(f for f, _ in candidates))
        if len(distinct) > 1:
            raise AmbiguousOptionError(name, distinct)
        return candidates[0][1]
