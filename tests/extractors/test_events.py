"""Tests for the event extractor."""

from __future__ import annotations

from wfcdocs.extractors import EventExtractor
from wfcdocs.models import EventEntry


def test_single_quoted_event() -> None:
    entries = EventExtractor().extract("static Connected = 'connected';")

    assert entries == [EventEntry(name="Connected", value="connected")]
    assert entries[0].to_dict() == {"name": "Connected", "value": "connected"}


def test_events_follow_match_position_across_lines() -> None:
    source = (
        "class EventType {\n"
        "    static A = 'a'; static B = \"b\";\n"
        "    static C = 'c'\n"
        "}\n"
    )

    names = [entry.name for entry in EventExtractor().extract(source)]

    assert names == ["A", "B", "C"]


def test_duplicate_event_names_are_kept() -> None:
    source = "static Connected = 'connected';\nstatic Connected = 'connected2';\n"

    entries = EventExtractor().extract(source)

    assert entries == [
        EventEntry(name="Connected", value="connected"),
        EventEntry(name="Connected", value="connected2"),
    ]


def test_numeric_statics_are_not_events() -> None:
    assert EventExtractor().extract("static Text = 1;\nstatic Empty = '';\n") == []
