"""CLI parser and command behaviour tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from wfcdocs.cli import _build_parser, main
from tests._fixtures.sdk_builder import SdkBuilder, write_sample_sdk


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "generate"])
    assert args.verbose is True
    assert args.command == "generate"
    assert args.path == "."


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["generate", "--verbose"])
    assert args.verbose is True


def test_cli_call_arguments() -> None:
    parser = _build_parser()
    args = parser.parse_args(["call", "get-interface-docs", "--name", "getUserId", "--docs-dir", "out"])
    assert args.tool == "get-interface-docs"
    assert args.name == "getUserId"
    assert args.docs_dir == Path("out")


def test_generate_then_call(sdk_builder: SdkBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    write_sample_sdk(sdk_builder)

    main(["generate", str(sdk_builder.root)])
    out = capsys.readouterr().out
    assert "interfaces.json updated with 3 entries" in out
    assert "events.json updated with 3 entries" in out
    assert "message-types.json updated with 3 entries" in out

    docs = sdk_builder.root / "docs"
    main(["call", "get-interface-docs", "--name", "connect", "--docs-dir", str(docs)])
    payload = json.loads(capsys.readouterr().out)
    assert payload["params"] == ["userId", "token"]

    main(["tools", "--docs-dir", str(docs)])
    listing = capsys.readouterr().out
    assert "get-message-types" in listing


def test_generate_without_workspace_exits_nonzero(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["generate", str(tmp_path), "--marker", "wfcdocs-absent-marker.yaml"])
    assert excinfo.value.code == 1


def test_call_without_catalogs_exits_nonzero(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["call", "get-event-list", "--docs-dir", str(tmp_path)])
    assert excinfo.value.code == 1


def test_call_unknown_tool_exits_nonzero(sdk_builder: SdkBuilder) -> None:
    main(["generate", str(sdk_builder.root)])

    with pytest.raises(SystemExit) as excinfo:
        main(["call", "get-everything", "--docs-dir", str(sdk_builder.root / "docs")])
    assert excinfo.value.code == 1


def test_log_file_receives_generation_records(sdk_builder: SdkBuilder, tmp_path: Path) -> None:
    write_sample_sdk(sdk_builder)
    log_file = tmp_path / "logs" / "wfcdocs.log"

    main(["--log-file", str(log_file), "generate", str(sdk_builder.root)])

    text = log_file.read_text(encoding="utf-8")
    assert "Wrote 3 interfaces" in text
    assert "wfcdocs.orchestrator" in text


def test_call_ignores_name_for_list_tools(sdk_builder: SdkBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    write_sample_sdk(sdk_builder)
    main(["generate", str(sdk_builder.root)])
    capsys.readouterr()

    main(["call", "get-interface-list", "--name", "x", "--docs-dir", str(sdk_builder.root / "docs")])

    names = [item["name"] for item in json.loads(capsys.readouterr().out)]
    assert "connect" in names
