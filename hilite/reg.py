from __future__ import annotations

import functools
from typing import Generator
from typing import Match

import onigurumacffi


class _Reg:
    def __init__(self, s: str) -> None:
        self._pattern = s
        self._reg = onigurumacffi.compile(self._pattern)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._pattern!r})'

    @property
    def pattern(self) -> str:
        return self._pattern

    def search(self, line: str, pos: int) -> Match[str] | None:
        return self._reg.search(line, pos)

    def finditer(self, line: str) -> Generator[Match[str], None, None]:
        """non-overlapping matches of this pattern, left to right

        an empty match which abuts the end of the previous match is skipped
        """
        pos = 0
        last_end = -1
        while pos <= len(line):
            match = self.search(line, pos)
            if match is None:
                return

            start, end = match.start(), match.end()
            if start == end:
                # step past the empty match so the scan always makes progress
                pos = end + 1
                if end == last_end:
                    continue
            else:
                pos = end

            last_end = end
            yield match


make_reg = functools.lru_cache(maxsize=None)(_Reg)
