from __future__ import annotations

import os
import random
import sys
from typing import Callable, Dict, List, Optional, Tuple

from .board import CARD_SYMBOLS, MAX_CELLS, Board, Card, Coord, Indexer

# Permutes a list of coordinates in place, like random.shuffle.
Shuffle = Callable[[List[Coord]], None]


def seeded_shuffle(seed: Optional[int] = None) -> Shuffle:
    """Returns a shuffle drawn from its own generator; None seeds from OS entropy."""
    return random.Random(seed).shuffle


def fixed_order(coords: List[Coord]) -> None:
    """Identity shuffle: leaves coordinates in row-major order, so the first half
    of the board pairs cell by cell with the second half."""


def deal_board(width: int, height: int, shuffle: Optional[Shuffle] = None,
               debug: Optional[bool] = None) -> Board:
    """
    Creates a board of the given size with every card placed on exactly two cells.

    All coordinates are shuffled and split into two halves; the i-th coordinate of
    each half receives CARD_SYMBOLS[i]. Symbols are taken in alphabet order, so a
    fixed shuffle always yields the same layout.
    """
    # Callers validate dimensions before dealing
    assert width > 0
    assert height > 0
    assert (width * height) % 2 == 0
    assert width * height <= MAX_CELLS

    shuffle = shuffle or seeded_shuffle()
    idx = Indexer(width, height)
    coords: List[Coord] = list(idx.coords())
    shuffle(coords)

    half = len(coords) // 2
    first_half, second_half = coords[:half], coords[half:]
    cards: List[Card] = [''] * idx.size
    for i, (c1, c2) in enumerate(zip(first_half, second_half)):
        card = CARD_SYMBOLS[i]
        cards[idx.unchecked(c1)] = card
        cards[idx.unchecked(c2)] = card

    if debug is None:
        debug = os.getenv('CONCENTRATION_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')
    if debug:
        print(f"[deal] {width}x{height} board with {half} pairs", file=sys.stderr)
    return Board(width=width, height=height, cards=tuple(cards))


def pairs(board: Board) -> Dict[Card, Tuple[Coord, Coord]]:
    """Maps every card on the board to the two coordinates holding it."""
    seen: Dict[Card, List[Coord]] = {}
    for coord in board.indexer.coords():
        seen.setdefault(board.at(coord), []).append(coord)
    out: Dict[Card, Tuple[Coord, Coord]] = {}
    for card, where in seen.items():
        if len(where) != 2:
            raise ValueError(f"Invalid board: card {card!r} appears {len(where)} times")
        out[card] = (where[0], where[1])
    return out
