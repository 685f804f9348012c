from __future__ import annotations

import re
from typing import Tuple

from .board import MAX_CELLS, Coord, Indexer
from .errors import (
    CoordinateUnderflow,
    EmptyInput,
    NotEnoughCardTypes,
    OddBoardCells,
    UnparsableInput,
)

_SEPARATORS = re.compile(r'[,;]')
_INTEGER = re.compile(r'[+-]?0*[0-9]{1,10}')

# Values must fit a signed 32-bit integer
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise UnparsableInput()
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        raise UnparsableInput()
    return value


def parse_pair(text: str) -> Tuple[int, int]:
    """Parses two integers separated by ',' or ';' with any surrounding whitespace."""
    text = text.strip()
    if not text:
        raise EmptyInput()
    parts = [p.strip() for p in _SEPARATORS.split(text)]
    if len(parts) < 2:
        raise UnparsableInput()
    return _parse_int(parts[0]), _parse_int(parts[1])


def parse_dimensions(text: str) -> Tuple[int, int]:
    """Parses a board size as (width, height)."""
    x, y = parse_pair(text)
    if x <= 0:
        raise CoordinateUnderflow('x')
    if y <= 0:
        raise CoordinateUnderflow('y')
    # Cannot show more kinds of cards than CARD_SYMBOLS holds
    if x * y > MAX_CELLS:
        raise NotEnoughCardTypes(MAX_CELLS)
    if (x * y) % 2 != 0:
        raise OddBoardCells()
    return x, y


def parse_coords(text: str, indexer: Indexer) -> Coord:
    """Parses a 1-indexed card position into a validated 0-indexed coordinate."""
    x, y = parse_pair(text)
    coord = (x - 1, y - 1)
    indexer.index(coord)
    return coord


def parse_yes_no(text: str) -> bool:
    """Parses a y/n answer. An empty answer means no."""
    answer = text.strip().lower()
    if answer == 'y':
        return True
    if answer == 'n' or answer == '':
        return False
    raise UnparsableInput()
