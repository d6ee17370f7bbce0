"""Tests for the catalog writer."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from wfcdocs.models import EventEntry, InterfaceEntry, MessageTypeInfo
from wfcdocs.stores import CatalogWriteError, CatalogWriter


def test_write_all_produces_three_artifacts(tmp_path: Path) -> None:
    writer = CatalogWriter(tmp_path / "docs" / "nested")

    written = writer.write_all(
        [
            InterfaceEntry("getUserId", ["userId"], "/** 获取用户ID */"),
            InterfaceEntry("disconnect"),
        ],
        [EventEntry("Connected", "connected")],
        [MessageTypeInfo(name="text", flag="PersistFlag.Persist", type_enum="Text", content_clazz="Text", type_value=1)],
    )

    assert sorted(written) == ["events.json", "interfaces.json", "message-types.json"]
    interfaces_text = written["interfaces.json"].read_text(encoding="utf-8")
    assert "获取用户ID" in interfaces_text
    assert json.loads(interfaces_text) == [
        {"name": "getUserId", "params": ["userId"], "jsdoc": "/** 获取用户ID */"},
        {"name": "disconnect", "params": []},
    ]
    assert json.loads(written["events.json"].read_text(encoding="utf-8")) == [
        {"name": "Connected", "value": "connected"}
    ]
    [message] = json.loads(written["message-types.json"].read_text(encoding="utf-8"))
    assert list(message) == [
        "name",
        "flag",
        "flagValue",
        "flagDescription",
        "typeEnum",
        "typeValue",
        "typeDescription",
        "contentClazz",
        "classFile",
        "extends",
        "jsdoc",
    ]
    assert message["typeValue"] == 1
    assert message["flagValue"] is None


def test_empty_catalog_is_an_empty_array(tmp_path: Path) -> None:
    path = CatalogWriter(tmp_path).write("events.json", [])

    assert path.read_text(encoding="utf-8") == "[]"


def test_unwritable_output_directory_raises(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(CatalogWriteError):
        CatalogWriter(blocker / "docs").write("events.json", [])
