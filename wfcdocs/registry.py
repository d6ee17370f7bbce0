"""Join message configuration entries against enums, flags, and class metadata."""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Mapping, Pattern, Sequence, TypeVar

from .config import DEFAULT_CLASS_SUFFIXES, DEFAULT_TYPE_NAMESPACE, SourcePaths
from .extractors.classes import scan_class_directory
from .extractors.constants import extract_enums, extract_flags
from .logging import get_logger
from .models import (
    ClassMetaEntry,
    EnumEntry,
    FlagEntry,
    MessageConfigEntry,
    MessageTypeInfo,
)
from .sources import read_file_safe

logger = get_logger("registry")

T = TypeVar("T")


def _config_pattern(type_namespace: str) -> Pattern[str]:
    return re.compile(
        r"\{\s*name:\s*'([^']+)'\s*,"
        r"\s*flag:\s*([^,]+)\s*,"
        r"\s*type:\s*" + re.escape(type_namespace) + r"\.([A-Za-z0-9_]+)\s*,"
        r"\s*contentClazz:\s*([A-Za-z0-9_]+)\s*\}"
    )


def parse_message_config(
    source: str, *, type_namespace: str = DEFAULT_TYPE_NAMESPACE
) -> List[MessageConfigEntry]:
    """Return registration tuples in the order they appear in ``source``."""
    if not source:
        return []
    return [
        MessageConfigEntry(
            name=match.group(1),
            flag=match.group(2).strip(),
            type_enum=match.group(3),
            content_clazz=match.group(4),
        )
        for match in _config_pattern(type_namespace).finditer(source)
    ]


def build_enum_map(entries: Iterable[EnumEntry]) -> Dict[str, EnumEntry]:
    return {entry.enum_name: entry for entry in entries}


def build_flag_map(entries: Iterable[FlagEntry]) -> Dict[str, FlagEntry]:
    return {entry.name: entry for entry in entries}


def join_message_types(
    configs: Sequence[MessageConfigEntry],
    enum_map: Mapping[str, EnumEntry],
    flag_map: Mapping[str, FlagEntry],
    class_map: Mapping[str, ClassMetaEntry],
) -> List[MessageTypeInfo]:
    """Resolve every config entry; unresolved references leave fields empty."""
    results: List[MessageTypeInfo] = []
    for entry in configs:
        enum_info = enum_map.get(entry.type_enum)
        flag_info = flag_map.get(entry.flag)
        meta = class_map.get(entry.content_clazz)
        results.append(
            MessageTypeInfo(
                name=entry.name,
                flag=entry.flag,
                flag_value=flag_info.value if flag_info else None,
                flag_description=flag_info.jsdoc if flag_info else None,
                type_enum=entry.type_enum,
                type_value=enum_info.value if enum_info else None,
                type_description=enum_info.jsdoc if enum_info else None,
                content_clazz=entry.content_clazz,
                class_file=meta.file_path if meta else None,
                extends=meta.base_class if meta else None,
                jsdoc=meta.jsdoc if meta else None,
            )
        )
    return results


def build_message_registry(
    paths: SourcePaths,
    *,
    class_suffixes: Sequence[str] = DEFAULT_CLASS_SUFFIXES,
    type_namespace: str = DEFAULT_TYPE_NAMESPACE,
) -> List[MessageTypeInfo]:
    """Read the message sources and return the joined message type catalog.

    An empty or missing configuration file yields an empty catalog; the other
    inputs are optional and only affect how much of each record resolves.
    """
    config_source = read_file_safe(paths.message_config)
    if not config_source:
        logger.info("No message configuration at %s; skipping message types", paths.message_config)
        return []

    configs = parse_message_config(config_source, type_namespace=type_namespace)
    enum_map = build_enum_map(extract_enums(read_file_safe(paths.content_types)))
    flag_map = build_flag_map(extract_flags(read_file_safe(paths.persist_flags)))
    class_map = scan_class_directory(paths.messages_dir, class_suffixes)
    logger.debug(
        "Joining %d config entries against %d enums, %d flags, %d classes",
        len(configs),
        len(enum_map),
        len(flag_map),
        len(class_map),
    )
    return join_message_types(configs, enum_map, flag_map, class_map)


def sort_message_types(records: Iterable[T]) -> List[T]:
    """Stable ascending sort by type value, treating a missing value as zero.

    Works on ``MessageTypeInfo`` objects and on the dicts loaded from
    ``message-types.json``.
    """

    def _value(record: T) -> float:
        if isinstance(record, MessageTypeInfo):
            value = record.type_value
        elif isinstance(record, Mapping):
            value = record.get("typeValue")
        else:
            raise TypeError(f"Cannot sort {type(record).__name__} as a message type")
        return value if isinstance(value, (int, float)) and not isinstance(value, bool) else 0

    return sorted(records, key=_value)


__all__ = [
    "build_enum_map",
    "build_flag_map",
    "build_message_registry",
    "join_message_types",
    "parse_message_config",
    "sort_message_types",
]
