from __future__ import annotations

import argparse
import sys
from typing import Any
from typing import Generator
from typing import IO
from typing import Sequence

import onigurumacffi

from hilite.color import Color
from hilite.highlight import highlight
from hilite.perf import perf_log
from hilite.reg import make_reg
from hilite.registry import make_registry

COLOR_OPTIONS = ('red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'white')


class _PatternAction(argparse.Action):
    """collect `(color, pattern)` across options in command line order"""

    def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Any,
            option_string: str | None = None,
    ) -> None:
        if self.const is None:
            color_s, pattern = values
        else:
            color_s, pattern = self.const, values

        try:
            color = Color.parse(color_s)
        except ValueError as e:
            parser.error(str(e))

        patterns = list(getattr(namespace, self.dest) or ())
        patterns.append((color, pattern))
        setattr(namespace, self.dest, patterns)


def _lines(f: IO[bytes]) -> Generator[str, None, None]:
    for line in f:
        yield line.decode()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description='highlight patterns.')
    for name in COLOR_OPTIONS:
        parser.add_argument(
            f'-{name[0]}', f'--{name}',
            dest='patterns', action=_PatternAction, const=name,
            metavar='PATTERN', help=f'highlight PATTERN in {name}',
        )
    parser.add_argument(
        '--color', nargs=2, dest='patterns', action=_PatternAction,
        metavar=('COLOR', 'PATTERN'),
        help=(
            'highlight PATTERN in COLOR: a color name, `bright-NAME`, '
            'a 256 color index, or `#rrggbb`'
        ),
    )
    parser.add_argument('--perf-log')
    args = parser.parse_args(argv)

    patterns = args.patterns or []
    for _, pattern in patterns:
        try:
            make_reg(pattern)
        except onigurumacffi.OnigError as e:
            print(f'invalid regex: {pattern!r}: {e}', file=sys.stderr)
            return 1
    registry = make_registry(patterns)

    with perf_log(args.perf_log) as perf:
        try:
            highlight(registry, _lines(sys.stdin.buffer), sys.stdout, perf)
        except UnicodeDecodeError as e:
            print(f'invalid UTF-8 input: {e}', file=sys.stderr)
            return 1
        except OSError as e:
            print(e, file=sys.stderr)
            return e.errno or 1
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
