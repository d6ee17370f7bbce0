"""Configuration loading for wfcdocs (.wfcdocs.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".wfcdocs.yml"

DEFAULT_WORKSPACE_MARKER = "pnpm-workspace.yaml"
DEFAULT_SDK_DIR = "packages/sdk-middleware/wildfirechat/wfc"
DEFAULT_OUTPUT_DIR = "docs"
DEFAULT_CLASS_SUFFIXES = (".js", ".ts")
DEFAULT_TYPE_NAMESPACE = "MessageContentType"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class SourcesConfig:
    """Locations of the SDK source files, relative to ``sdk_dir``."""

    sdk_dir: str = DEFAULT_SDK_DIR
    client: str = "client/wfc.js"
    events: str = "client/wfcEvent.js"
    message_config: str = "client/messageConfig.js"
    messages_dir: str = "messages"
    content_types: str = "messages/messageContentType.js"
    persist_flags: str = "messages/persistFlag.js"


@dataclass
class OutputConfig:
    """Where generated catalogs are written."""

    dir: str = DEFAULT_OUTPUT_DIR


@dataclass
class ExtractionConfig:
    """Tunables for the heuristic extractors."""

    class_suffixes: List[str] = field(default_factory=lambda: list(DEFAULT_CLASS_SUFFIXES))
    type_namespace: str = DEFAULT_TYPE_NAMESPACE


@dataclass
class SourcePaths:
    """Absolute paths to every source the extraction pass reads."""

    client: Path
    events: Path
    message_config: Path
    messages_dir: Path
    content_types: Path
    persist_flags: Path


@dataclass
class WfcDocsConfig:
    """Represents the settings defined in .wfcdocs.yml."""

    root: Path
    sources: SourcesConfig = field(default_factory=SourcesConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)

    def resolve_sources(self, root: Path | None = None) -> SourcePaths:
        base = (root or self.root) / self.sources.sdk_dir
        return SourcePaths(
            client=base / self.sources.client,
            events=base / self.sources.events,
            message_config=base / self.sources.message_config,
            messages_dir=base / self.sources.messages_dir,
            content_types=base / self.sources.content_types,
            persist_flags=base / self.sources.persist_flags,
        )

    def resolve_output_dir(self, root: Path | None = None) -> Path:
        return (root or self.root) / self.output.dir


def load_config(config_path: Path) -> WfcDocsConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return WfcDocsConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = WfcDocsConfig(root=root)

    sources_data = _as_dict(data.get("sources"))
    for key in (
        "sdk_dir",
        "client",
        "events",
        "message_config",
        "messages_dir",
        "content_types",
        "persist_flags",
    ):
        value = _as_str(sources_data.get(key))
        if value:
            setattr(config.sources, key, value)

    output_data = _as_dict(data.get("output"))
    output_dir = _as_str(output_data.get("dir"))
    if output_dir:
        config.output.dir = output_dir

    extraction_data = _as_dict(data.get("extraction"))
    if "class_suffixes" in extraction_data:
        suffixes = _as_str_list(extraction_data.get("class_suffixes"))
        if not suffixes:
            raise ConfigError("extraction.class_suffixes must list at least one suffix")
        config.extraction.class_suffixes = suffixes
    namespace = _as_str(extraction_data.get("type_namespace"))
    if namespace:
        config.extraction.type_namespace = namespace

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, str) and item]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "ExtractionConfig",
    "OutputConfig",
    "SourcePaths",
    "SourcesConfig",
    "WfcDocsConfig",
    "load_config",
]
