from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from .errors import CoordinateOverflow, CoordinateUnderflow

Card = str  # one glyph from CARD_SYMBOLS
Coord = Tuple[int, int]  # (x, y), 0-indexed

# Symbols used as card faces, consumed in this order when dealing.
CARD_SYMBOLS: Tuple[Card, ...] = (
    '☀', '☁', '★', '☇', '☈', '☉', '☊', '☋', '☌', '☍', '☎', '☔', '☕', '☗',
    '☘', '☙', '☚', '☛', '☝', '☠', '☡', '☢', '☣', '☤', '☥', '☦', '☧', '☩',
    '☫', '☬', '☭', '☮', '☯', '☼', '☿', '♀', '♁', '♂', '♃', '♄', '♅', '♆',
    '♇', '♈', '♉', '♊', '♋', '♌', '♍', '♎', '♏', '♐', '♑', '♒',
    '♓',
)

# Largest board the alphabet can fill with pairs.
MAX_CELLS = len(CARD_SYMBOLS) * 2


@dataclass(frozen=True)
class Indexer:
    """Converts (x, y) coordinates to and from row-major array indices."""
    width: int
    height: int

    @property
    def size(self) -> int:
        return self.width * self.height

    def index(self, coord: Coord) -> int:
        """Bounds-checked conversion. Raises CoordinateUnderflow/CoordinateOverflow."""
        x, y = coord
        if x < 0:
            raise CoordinateUnderflow('x')
        if y < 0:
            raise CoordinateUnderflow('y')
        if x >= self.width:
            raise CoordinateOverflow('x', self.width)
        if y >= self.height:
            raise CoordinateOverflow('y', self.height)
        return self.unchecked(coord)

    def unchecked(self, coord: Coord) -> int:
        """Conversion without bounds checking; only for coordinates already validated."""
        x, y = coord
        return y * self.width + x

    def unindex(self, i: int) -> Coord:
        return (i % self.width, i // self.width)

    def coords(self) -> Iterator[Coord]:
        """Iterates over all coordinates in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)


@dataclass(frozen=True)
class Board:
    """The static card layout. Every card appears on exactly two cells."""
    width: int
    height: int
    cards: Tuple[Card, ...]  # row-major, length == width * height

    @classmethod
    def empty(cls) -> 'Board':
        """The 0x0 board used before dimensions are chosen."""
        return cls(width=0, height=0, cards=())

    @property
    def indexer(self) -> Indexer:
        return Indexer(self.width, self.height)

    def __len__(self) -> int:
        return len(self.cards)

    def at(self, coord: Coord) -> Card:
        """Unchecked lookup."""
        return self.cards[self.indexer.unchecked(coord)]

    def lookup(self, coord: Coord) -> Card:
        """Bounds-checked lookup."""
        return self.cards[self.indexer.index(coord)]
