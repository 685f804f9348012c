from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional, TextIO

from .deal import pairs, seeded_shuffle
from .engine import Engine
from .render import CLEAR_SCREEN, render_frame
from .state import Phase


def _env_flag(name: str) -> bool:
    return os.getenv(name, '0').lower() in ('1', 'true', 'yes', 'on')


def _env_seed() -> Optional[int]:
    raw = os.getenv('CONCENTRATION_SEED')
    if raw is None or raw.strip() == '':
        return None
    try:
        return int(raw)
    except ValueError:
        raise SystemExit(f"error: CONCENTRATION_SEED must be an integer, got {raw!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Concentration: a terminal memory matching game')
    parser.add_argument('--seed', type=int, default=None,
                        help='RNG seed for dealing boards (default: $CONCENTRATION_SEED or random)')
    parser.add_argument('--no-clear', action='store_true',
                        help='Do not clear the screen between frames')
    parser.add_argument('--reveal', action='store_true',
                        help='With CONCENTRATION_DEBUG set, print the pair layout of each new board')
    return parser


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    seed = args.seed if args.seed is not None else _env_seed()
    clear = not (args.no_clear or _env_flag('CONCENTRATION_NO_CLEAR'))
    debug = _env_flag('CONCENTRATION_DEBUG')

    engine = Engine(shuffle=seeded_shuffle(seed), debug=debug)

    def draw() -> None:
        frame = render_frame(engine.view())
        stdout.write((CLEAR_SCREEN if clear else '') + frame)
        stdout.flush()

    draw()
    while engine.is_running():
        try:
            line = stdin.readline()
        except OSError:
            line = ''
        if line == '':
            # End of input is as fatal as a read error: no further answer can arrive
            print("Couldn't get input", file=stdout)
            return 1
        before = engine.phase
        engine.advance(line)
        if args.reveal and debug and before is Phase.SET_DIMENSIONS and engine.phase is Phase.GUESS:
            for card, (a, b) in sorted(pairs(engine.board).items(), key=lambda kv: kv[1]):
                print(f"[cli] {card}: ({a[0] + 1},{a[1] + 1}) ({b[0] + 1},{b[1] + 1})", file=sys.stderr)
        draw()
    return 0
