from __future__ import annotations

from typing import IO
from typing import Iterable

from hilite.color import RESET
from hilite.color_stack import ColorStack
from hilite.events import build_events
from hilite.events import Event
from hilite.events import Kind
from hilite.events import resolve_events
from hilite.perf import Perf
from hilite.registry import Registry


def _apply(events: list[Event], stack: ColorStack, parts: list[str]) -> None:
    for event in events:
        if event.kind is Kind.START:
            stack.push(event.color)
            parts.append(event.color.fg)
        else:
            stack.pop(event.color)
            # a reset clears every color, re-apply what is left bottom to top
            parts.append(RESET)
            parts.extend(color.fg for color in stack)


def highlight_line(registry: Registry, line: str) -> str:
    index = resolve_events(build_events(registry, line))
    if not index:
        return line

    stack = ColorStack()
    parts: list[str] = []
    for i, c in enumerate(line):
        if i in index:
            _apply(index[i], stack, parts)
        parts.append(c)
    # matches which end at the end of the line
    if len(line) in index:
        _apply(index[len(line)], stack, parts)

    assert not stack, stack
    return ''.join(parts)


def highlight(
        registry: Registry,
        lines: Iterable[str],
        out: IO[str],
        perf: Perf | None = None,
) -> None:
    if perf is None:
        perf = Perf()

    for i, line in enumerate(lines, start=1):
        with perf.record(f'line {i}'):
            s = highlight_line(registry, line)
        out.write(s)
        out.flush()
