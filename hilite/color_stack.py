from __future__ import annotations

from typing import Iterator

from hilite.color import Color


class ColorStack:
    """colors which are currently active, in the order they were pushed

    matches from different patterns are not necessarily nested so `pop`
    removes the most recent occurrence of a color rather than the top
    """

    def __init__(self) -> None:
        self._colors: list[Color] = []

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._colors!r})'

    def __iter__(self) -> Iterator[Color]:
        return iter(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def push(self, color: Color) -> None:
        self._colors.append(color)

    def pop(self, color: Color) -> None:
        for i in reversed(range(len(self._colors))):
            if self._colors[i] == color:
                del self._colors[i]
                return

    def top(self) -> Color | None:
        if self._colors:
            return self._colors[-1]
        else:
            return None
