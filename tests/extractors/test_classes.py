"""Tests for class metadata extraction."""

from __future__ import annotations

from pathlib import Path

from wfcdocs.extractors import ClassMetaExtractor, scan_class_directory
from wfcdocs.models import ClassMetaEntry
from tests._fixtures.sdk_builder import SAMPLE_TEXT_MESSAGE


def test_extends_clause_and_jsdoc_are_captured() -> None:
    entries = ClassMetaExtractor().extract(SAMPLE_TEXT_MESSAGE, "messages/text.js")

    assert entries == [
        ClassMetaEntry(
            file_path="messages/text.js",
            class_name="TextMessageContent",
            base_class="MessageContent",
            jsdoc="/**\n * A plain text message.\n */",
        )
    ]


def test_class_without_base() -> None:
    entries = ClassMetaExtractor().extract("export default class MessageContent {\n}\n", "base.js")

    assert entries == [ClassMetaEntry(file_path="base.js", class_name="MessageContent")]


def test_non_default_exports_are_ignored() -> None:
    source = "class Helper {}\nexport class Other extends Helper {}\n"

    assert ClassMetaExtractor().extract(source, "helper.js") == []


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_directory_scan_filters_suffixes_and_last_file_wins(tmp_path: Path) -> None:
    messages = tmp_path / "messages"
    _write(messages / "a.js", "export default class Shared extends First {\n}\n")
    _write(messages / "b.ts", "export default class Shared extends Second {\n}\n")
    _write(messages / "c.js", "export default class Solo {\n}\n")
    _write(messages / "d.md", "export default class Ignored {\n}\n")
    _write(messages / "empty.js", "")

    classes = scan_class_directory(messages, [".js", ".ts"])

    assert list(classes) == ["Shared", "Solo"]
    assert classes["Shared"].base_class == "Second"
    assert classes["Shared"].file_path == str(messages / "b.ts")
    assert classes["Solo"].base_class is None


def test_missing_directory_yields_empty_map(tmp_path: Path) -> None:
    assert scan_class_directory(tmp_path / "nope", [".js"]) == {}
