"""Tests for roff escaping (core/roff.py).

Every test is a pure function call — no I/O, no mocking.
"""

from __future__ import annotations

import re

import pytest

from manopt.core.roff import escape


def _unescaped_specials(text: str) -> list[str]:
    """Return every ``-``/``\\`` not produced by escaping, scanning pairwise."""
    bad: list[str] = []
    index = 0
    while index < len(text):
        char = text[index]
        if char == "\\":
            nxt = text[index + 1] if index + 1 < len(text) else ""
            if nxt in ("-", "\\", "&"):
                index += 2
                continue
            bad.append(char)
        elif char == "-":
            bad.append(char)
        index += 1
    return bad


class TestEscape:
    def test_plain_text_unchanged(self) -> None:
        assert escape("Show this message.") == "Show this message."

    def test_dashes_become_minus(self) -> None:
        assert escape("--locale-dir") == "\\-\\-locale\\-dir"

    def test_backslash_doubled(self) -> None:
        assert escape("C:\\path") == "C:\\\\path"

    def test_leading_period_shielded(self) -> None:
        assert escape(".hidden") == "\\&.hidden"

    def test_leading_quote_shielded(self) -> None:
        assert escape("'quoted'") == "\\&'quoted'"

    def test_inner_period_untouched(self) -> None:
        assert escape("a.b") == "a.b"

    def test_empty_line(self) -> None:
        assert escape("") == ""

    def test_not_idempotent(self) -> None:
        once = escape("-x")
        assert escape(once) != once

    @pytest.mark.parametrize(
        "line",
        [
            "--logger-type=TYPE",
            ".TH looks like a request",
            "'also a request",
            "back\\slash and - dash",
            "Select from [stderr, stdout, rich].",
            "\\-already-looking-escaped",
        ],
    )
    def test_no_unescaped_specials_or_control_prefix(self, line: str) -> None:
        escaped = escape(line)
        assert _unescaped_specials(escaped) == []
        assert not re.match(r"[.']", escaped)
