"""Shared pytest fixtures and configuration for the manopt test suite.

Guidelines
----------
* No real message catalogs unless a test builds one in ``tmp_path``.
* Loggers are replaced by :class:`RecordingLogger` wherever output
  routing is under test.
* Tests must not depend on the user's locale environment.
"""

from __future__ import annotations

import struct
from array import array
from collections.abc import Iterator
from pathlib import Path

import pytest

from manopt.cli.config import ConsoleConfig


class RecordingLogger:
    """In-memory logger satisfying :class:`~manopt.core.protocols.AppLogger`."""

    display_name = "Recording"

    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.records.append(("info", message))

    def warning(self, message: str) -> None:
        self.records.append(("warning", message))

    def error(self, message: str) -> None:
        self.records.append(("error", message))

    def fatal(self, message: str) -> None:
        self.records.append(("fatal", message))

    def messages(self, level: str) -> list[str]:
        return [message for lvl, message in self.records if lvl == level]


class FooLogger(RecordingLogger):
    display_name = "Foo"


class BarLogger(RecordingLogger):
    display_name = "Bar"


class FakeLoggerTypes:
    def variants(self) -> tuple[type[RecordingLogger], ...]:
        return (FooLogger, BarLogger)


class FakeTranslator:
    """Translator with an in-memory catalog and a log of bind calls."""

    def __init__(self, catalog: dict[str, str] | None = None) -> None:
        self.catalog: dict[str, str] = catalog or {}
        self.bound: list[str | None] = []

    def translate(self, key: str) -> str:
        return self.catalog.get(key, key)

    def bind(self, locale_dir: str | None) -> None:
        self.bound.append(locale_dir)


@pytest.fixture()
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture()
def translator() -> FakeTranslator:
    return FakeTranslator()


@pytest.fixture()
def logger_types() -> FakeLoggerTypes:
    return FakeLoggerTypes()


@pytest.fixture()
def config() -> ConsoleConfig:
    return ConsoleConfig(program_name="demo", version="9.8.7")


@pytest.fixture(autouse=True)
def _neutral_locale(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG"):
        monkeypatch.delenv(name, raising=False)
    yield


# ---------------------------------------------------------------------------
# Message catalogs
# ---------------------------------------------------------------------------

GERMAN = {
    "Common options": "Allgemeine Optionen",
    "Show this message.": "Diese Meldung anzeigen.",
    "Usage: %s [options]": "Verwendung: %s [Optionen]",
}


def write_catalog(
    locale_dir: Path,
    language: str,
    messages: dict[str, str],
    domain: str = "manopt",
) -> Path:
    """Compile *messages* into ``<locale_dir>/<language>/LC_MESSAGES/<domain>.mo``."""
    catalog = {"": "Content-Type: text/plain; charset=UTF-8\n", **messages}
    keys = sorted(catalog)
    ids = strs = b""
    entries: list[tuple[int, int, int, int]] = []
    for key in keys:
        key_bytes = key.encode("utf-8")
        value_bytes = catalog[key].encode("utf-8")
        entries.append((len(ids), len(key_bytes), len(strs), len(value_bytes)))
        ids += key_bytes + b"\0"
        strs += value_bytes + b"\0"

    header_size = 7 * 4
    key_start = header_size + 16 * len(keys)
    value_start = key_start + len(ids)
    key_table: list[int] = []
    value_table: list[int] = []
    for key_offset, key_length, value_offset, value_length in entries:
        key_table += [key_length, key_start + key_offset]
        value_table += [value_length, value_start + value_offset]

    output = struct.pack(
        "Iiiiiii",
        0x950412DE,
        0,
        len(keys),
        header_size,
        header_size + 8 * len(keys),
        0,
        0,
    )
    output += array("i", key_table).tobytes()
    output += array("i", value_table).tobytes()
    output += ids + strs

    target = locale_dir / language / "LC_MESSAGES" / f"{domain}.mo"
    target.parent.mkdir(parents=True)
    target.write_bytes(output)
    return target


@pytest.fixture()
def german_locale_dir(tmp_path: Path) -> Path:
    write_catalog(tmp_path, "de", GERMAN)
    return tmp_path
