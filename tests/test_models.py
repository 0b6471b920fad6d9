"""Tests for option entries and the options record (core/models.py).

Entries are frozen dataclasses — these tests verify the switch
invariants, documentation spellings and double dispatch.
"""

from __future__ import annotations

import pytest

from conftest import RecordingLogger
from manopt.core.models import CategoryHeading, Options, Separator, Switch
from manopt.exceptions import ConfigurationError


# ---------------------------------------------------------------------------
# Switch invariants
# ---------------------------------------------------------------------------

class TestSwitchInvariants:
    def test_needs_at_least_one_form(self) -> None:
        with pytest.raises(ConfigurationError):
            Switch(description=("orphan",))

    def test_empty_strings_do_not_count_as_forms(self) -> None:
        with pytest.raises(ConfigurationError):
            Switch(short_form="", long_form="")

    @pytest.mark.parametrize("short", ["x", "--", "-ab", "-"])
    def test_rejects_malformed_short_form(self, short: str) -> None:
        with pytest.raises(ConfigurationError):
            Switch(short_form=short)

    @pytest.mark.parametrize("long", ["-name", "--", "--name=VALUE", "name"])
    def test_rejects_malformed_long_form(self, long: str) -> None:
        with pytest.raises(ConfigurationError):
            Switch(long_form=long)

    def test_short_only_is_valid(self) -> None:
        switch = Switch(short_form="-v")
        assert switch.forms == ("-v",)

    def test_description_list_is_frozen_to_tuple(self) -> None:
        switch = Switch(long_form="--name", description=["a", "b"])  # type: ignore[arg-type]
        assert switch.description == ("a", "b")

    def test_frozen(self) -> None:
        switch = Switch(long_form="--name")
        with pytest.raises(AttributeError):
            switch.long_form = "--other"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Switch spellings
# ---------------------------------------------------------------------------

class TestSwitchDisplayForms:
    def test_short_and_long_with_argument(self) -> None:
        switch = Switch("-g", "--greeting", "TEXT")
        assert switch.display_forms() == "-g, --greeting=TEXT"
        assert switch.takes_argument

    def test_long_only_flag(self) -> None:
        switch = Switch(long_form="--help")
        assert switch.display_forms() == "--help"
        assert not switch.takes_argument

    def test_short_only_with_argument(self) -> None:
        assert Switch("-o", argument="FILE").display_forms() == "-o FILE"

    def test_forms_lists_short_first(self) -> None:
        assert Switch("-u", "--upper").forms == ("-u", "--upper")


# ---------------------------------------------------------------------------
# Double dispatch
# ---------------------------------------------------------------------------

class _NameVisitor:
    def visit_switch(self, switch: Switch) -> str:
        return "switch"

    def visit_separator(self, separator: Separator) -> str:
        return "separator"

    def visit_category(self, heading: CategoryHeading) -> str:
        return "category"


class TestAccept:
    def test_each_entry_calls_its_own_visit_method(self) -> None:
        visitor = _NameVisitor()
        assert Switch(long_form="--x").accept(visitor) == "switch"
        assert Separator("").accept(visitor) == "separator"
        assert CategoryHeading("T").accept(visitor) == "category"


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

class TestOptions:
    def test_starts_on_default_logger(self) -> None:
        logger = RecordingLogger()
        options = Options(logger=logger, default_logger=logger)
        assert options.uses_default_logger
        assert options.operands == []
        assert options.locale_dir is None
        assert options.parse_error is None

    def test_equal_logger_instance_is_not_default(self) -> None:
        options = Options(logger=RecordingLogger(), default_logger=RecordingLogger())
        assert not options.uses_default_logger

    def test_is_mutable(self) -> None:
        logger = RecordingLogger()
        options = Options(logger=logger, default_logger=logger)
        options.locale_dir = "/tmp/locale"
        assert options.locale_dir == "/tmp/locale"
