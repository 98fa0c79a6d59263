from __future__ import annotations

from typing import NamedTuple
from typing import Sequence

from hilite.color import Color
from hilite.reg import _Reg
from hilite.reg import make_reg


class PatternEntry(NamedTuple):
    color: Color
    reg: _Reg
    priority: int


Registry = tuple[PatternEntry, ...]


def make_registry(patterns: Sequence[tuple[Color, str]]) -> Registry:
    """compile `(color, pattern)` pairs, priority is the position in the list

    an invalid pattern raises `onigurumacffi.OnigError` here, before any
    line has been highlighted
    """
    return tuple(
        PatternEntry(color=color, reg=make_reg(pattern), priority=i)
        for i, (color, pattern) in enumerate(patterns)
    )
