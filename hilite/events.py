from __future__ import annotations

import enum
from typing import NamedTuple

from hilite.color import Color
from hilite.registry import Registry


class Kind(enum.Enum):
    START = enum.auto()
    END = enum.auto()


class Event(NamedTuple):
    pos: int
    kind: Kind
    color: Color
    priority: int


EventIndex = dict[int, list[Event]]


def build_events(registry: Registry, line: str) -> list[Event]:
    events = []
    for entry in registry:
        for match in entry.reg.finditer(line):
            start, end = match.start(), match.end()
            events.append(Event(start, Kind.START, entry.color, entry.priority))
            events.append(Event(end, Kind.END, entry.color, entry.priority))
    return events


def resolve_events(events: list[Event]) -> EventIndex:
    """group events by offset, each group in declaration (priority) order

    the sort is stable: events from the same pattern keep the order they
    were built in so an end always precedes that pattern's next start
    """
    index: EventIndex = {}
    for event in events:
        index.setdefault(event.pos, []).append(event)
    for group in index.values():
        group.sort(key=lambda event: event.priority)
    return index
