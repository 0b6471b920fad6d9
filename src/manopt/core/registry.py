"""Ordered, append-only container of option entries.

Insertion order is both documentation order and match precedence:
when two switches share a spelling, the one registered first wins.
Duplicates are not rejected.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TypeVar

from manopt.core.models import Entry, EntryVisitor, Switch

T = TypeVar("T")


class OptionRegistry:
    """Holds every switch, separator and category heading of a program.

    Entries appended with ``tail=True`` (``--help``, ``--version``) are
    kept after all regular entries regardless of when they were added.

    Parameters
    ----------
    banner:
        Usage line printed above the option summary.
    """

    def __init__(self, banner: str = "") -> None:
        self.banner: str = banner
        self._head: list[Entry] = []
        self._tail: list[Entry] = []

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def append(self, entry: Entry, *, tail: bool = False) -> Entry:
        """Add *entry* at the end of the regular (or tail) section."""
        (self._tail if tail else self._head).append(entry)
        return entry

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def traverse(self, visitor: Callable[[Entry], None]) -> None:
        """Call *visitor* once per entry, in order."""
        for entry in self:
            visitor(entry)

    def accept(self, visitor: EntryVisitor[T]) -> list[T]:
        """Dispatch every entry to the matching ``visit_*`` method.

        Returns the visitor's results in entry order.
        """
        results: list[T] = []
        self.traverse(lambda entry: results.append(entry.accept(visitor)))
        return results

    def switches(self) -> list[Switch]:
        return [entry for entry in self if isinstance(entry, Switch)]

    def __iter__(self) -> Iterator[Entry]:
        yield from self._head
        yield from self._tail

    def __len__(self) -> int:
        return len(self._head) + len(self._tail)
