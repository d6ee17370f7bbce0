"""Pipeline orchestration for catalog generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from .config import DEFAULT_WORKSPACE_MARKER, WfcDocsConfig, load_config
from .extractors import EventExtractor, InterfaceExtractor
from .logging import get_logger
from .models import EventEntry, InterfaceEntry, MessageTypeInfo
from .registry import build_message_registry
from .sources import find_workspace_root, read_file_safe
from .stores import CatalogWriter


@dataclass
class Catalogs:
    """The three catalogs produced by one extraction pass."""

    interfaces: List[InterfaceEntry] = field(default_factory=list)
    events: List[EventEntry] = field(default_factory=list)
    message_types: List[MessageTypeInfo] = field(default_factory=list)


@dataclass
class GenerationResult:
    """Outcome of a generate run."""

    root: Path
    catalogs: Catalogs
    written: Dict[str, Path]


class Orchestrator:
    """Locates the workspace, runs every extractor, and writes the catalogs."""

    def __init__(
        self,
        interface_extractor: InterfaceExtractor | None = None,
        event_extractor: EventExtractor | None = None,
        workspace_marker: str = DEFAULT_WORKSPACE_MARKER,
    ) -> None:
        self.interface_extractor = interface_extractor or InterfaceExtractor()
        self.event_extractor = event_extractor or EventExtractor()
        self.workspace_marker = workspace_marker
        self.logger = get_logger("orchestrator")

    def run_generate(
        self, path: str = ".", *, output_dir: Optional[Path] = None
    ) -> GenerationResult:
        """Extract all catalogs for the workspace containing ``path`` and write them."""
        root = find_workspace_root(Path(path), self.workspace_marker)
        self.logger.info("Generating catalogs for workspace %s", root)
        config = load_config(root)

        catalogs = self.extract(config, root)

        target_dir = output_dir if output_dir is not None else config.resolve_output_dir(root)
        writer = CatalogWriter(target_dir)
        written = writer.write_all(catalogs.interfaces, catalogs.events, catalogs.message_types)
        for name, count in (
            ("interfaces", len(catalogs.interfaces)),
            ("events", len(catalogs.events)),
            ("message types", len(catalogs.message_types)),
        ):
            self.logger.info("Wrote %d %s", count, name)
        return GenerationResult(root=root, catalogs=catalogs, written=written)

    def extract(self, config: WfcDocsConfig, root: Path | None = None) -> Catalogs:
        """Run the extractors without touching the output directory."""
        sources = config.resolve_sources(root)
        self.logger.debug("Reading SDK sources under %s", sources.client.parent)

        interfaces = self.interface_extractor.extract(read_file_safe(sources.client))
        events = self.event_extractor.extract(read_file_safe(sources.events))
        message_types = build_message_registry(
            sources,
            class_suffixes=config.extraction.class_suffixes,
            type_namespace=config.extraction.type_namespace,
        )
        return Catalogs(interfaces=interfaces, events=events, message_types=message_types)


__all__ = ["Catalogs", "GenerationResult", "Orchestrator"]
