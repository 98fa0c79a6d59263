from __future__ import annotations

import re
from typing import NamedTuple

NAMED_COLORS = {
    'black': 30,
    'red': 31,
    'green': 32,
    'yellow': 33,
    'blue': 34,
    'magenta': 35,
    'cyan': 36,
    'white': 37,
}
BRIGHT_COLORS = {f'bright-{k}': v + 60 for k, v in NAMED_COLORS.items()}
HEX_RE = re.compile('^#[0-9a-fA-F]{6}$')
SHORT_HEX_RE = re.compile('^#[0-9a-fA-F]{3}$')
INDEX_RE = re.compile('^[0-9]{1,3}$')

RESET = '\x1b[0m'


class Color(NamedTuple):
    sgr: str

    @property
    def fg(self) -> str:
        return f'\x1b[{self.sgr}m'

    @classmethod
    def parse(cls, s: str) -> Color:
        if HEX_RE.match(s):
            r, g, b = int(s[1:3], 16), int(s[3:5], 16), int(s[5:7], 16)
            return cls(f'38;2;{r};{g};{b}')
        elif SHORT_HEX_RE.match(s):
            return cls.parse(f'#{s[1] * 2}{s[2] * 2}{s[3] * 2}')
        elif INDEX_RE.match(s) and int(s) < 256:
            return cls(f'38;5;{int(s)}')
        elif s in BRIGHT_COLORS:
            return cls(str(BRIGHT_COLORS[s]))
        elif s in NAMED_COLORS:
            return cls(str(NAMED_COLORS[s]))
        else:
            raise ValueError(f'invalid color: {s!r}')
