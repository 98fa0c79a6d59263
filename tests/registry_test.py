from __future__ import annotations

import onigurumacffi
import pytest

from hilite.color import Color
from hilite.reg import make_reg
from hilite.registry import make_registry
from hilite.registry import PatternEntry

RED = Color.parse('red')
BLUE = Color.parse('blue')


def test_make_registry_assigns_priority_in_order():
    registry = make_registry(((RED, 'foo'), (BLUE, 'bar'), (RED, 'baz')))
    assert registry == (
        PatternEntry(RED, make_reg('foo'), 0),
        PatternEntry(BLUE, make_reg('bar'), 1),
        PatternEntry(RED, make_reg('baz'), 2),
    )


def test_make_registry_empty():
    assert make_registry(()) == ()


def test_make_registry_invalid_pattern():
    with pytest.raises(onigurumacffi.OnigError):
        make_registry(((RED, 'foo'), (BLUE, '(')))
