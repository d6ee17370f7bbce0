"""CLI entrypoints for wfcdocs commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import DEFAULT_OUTPUT_DIR, DEFAULT_WORKSPACE_MARKER, ConfigError
from .logging import configure_logging
from .orchestrator import Orchestrator
from .sources import WorkspaceNotFoundError
from .stores import CatalogLoadError, CatalogStore, CatalogWriteError
from .tools import ToolInputError, build_default_registry


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_docs_dir_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--docs-dir",
        type=Path,
        default=Path(DEFAULT_OUTPUT_DIR),
        help="Directory holding the generated catalogs (defaults to ./docs).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wfcdocs",
        description="Extract interface, event, and message type catalogs from the WFC SDK sources.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Scan the SDK sources and write interfaces/events/message-types JSON.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    generate_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Any directory inside the workspace (defaults to current directory).",
    )
    generate_parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Write catalogs here instead of the configured output directory.",
    )
    generate_parser.add_argument(
        "--marker",
        default=DEFAULT_WORKSPACE_MARKER,
        help="File that identifies the workspace root.",
    )

    tools_parser = subparsers.add_parser(
        "tools",
        help="List the tools exposed over the committed catalogs.",
    )
    _add_verbose_option(tools_parser, suppress_default=True)
    _add_docs_dir_option(tools_parser)

    call_parser = subparsers.add_parser(
        "call",
        help="Run one catalog tool and print its output.",
    )
    _add_verbose_option(call_parser, suppress_default=True)
    _add_docs_dir_option(call_parser)
    call_parser.add_argument("tool", help="Tool name, e.g. get-interface-docs.")
    call_parser.add_argument(
        "--name",
        default=None,
        help="Interface name for get-interface-docs.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for wfcdocs commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "generate":
        orchestrator = Orchestrator(workspace_marker=args.marker)
        try:
            result = orchestrator.run_generate(args.path, output_dir=args.output_dir)
        except (WorkspaceNotFoundError, ConfigError, CatalogWriteError) as exc:
            parser.exit(1, f"wfcdocs generate failed: {exc}\n")
        except Exception as exc:  # pragma: no cover - defensive guard
            parser.exit(1, f"wfcdocs generate failed: {exc}\nRun with --verbose for more details.\n")
        counts = {
            "interfaces.json": len(result.catalogs.interfaces),
            "events.json": len(result.catalogs.events),
            "message-types.json": len(result.catalogs.message_types),
        }
        for filename, path in result.written.items():
            print(f"{_relativize(path)} updated with {counts[filename]} entries")
    elif args.command in {"tools", "call"}:
        try:
            store = CatalogStore(args.docs_dir).load()
        except CatalogLoadError as exc:
            parser.exit(1, f"{exc}\n")
        registry = build_default_registry(store)
        if args.command == "tools":
            for descriptor in registry.descriptors():
                print(f"{descriptor.name}\t{descriptor.description}")
            return
        arguments = {"name": args.name} if args.name is not None else {}
        try:
            print(registry.call(args.tool, arguments))
        except (KeyError, ToolInputError) as exc:
            message = exc.args[0] if exc.args else str(exc)
            parser.exit(1, f"{message}\n")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
