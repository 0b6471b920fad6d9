"""Pure text escaping for roff (man page) source.

Every function in this module is a **pure** transformation — no I/O,
no side effects.  :func:`escape` is *not* idempotent: escaping twice
doubles every backslash, so each raw line must be escaped exactly once.
"""

from __future__ import annotations

import re

_SPECIAL_CHARS = re.compile(r"[-\\]")

_CONTROL_CHARS: tuple[str, ...] = (".", "'")
"""Characters that turn a line into a request when they lead it."""

ZERO_WIDTH = "\\&"


def escape(line: str) -> str:
    """Return *line* made safe for inclusion in man page source.

    * ``-`` becomes ``\\-`` (a real minus, not a hyphen) and ``\\``
      becomes ``\\\\``.
    * A leading ``.`` or ``'`` is shielded with the zero-width ``\\&``
      so troff does not read the line as a request.
    """
    escaped = _SPECIAL_CHARS.sub(lambda match: "\\" + match.group(0), line)
    if escaped.startswith(_CONTROL_CHARS):
        escaped = ZERO_WIDTH + escaped
    return escaped
