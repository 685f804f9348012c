from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Card, Coord


class Phase(enum.Enum):
    """Where the game is in its turn sequence."""
    WELCOME = 'welcome'                    # show the welcome screen
    SET_DIMENSIONS = 'set_dimensions'      # ask for the board size
    GUESS = 'guess'                        # ask for a card to reveal
    CORRECT_GUESS_CONFIRM = 'correct'      # feedback frame after a match
    INCORRECT_GUESS_CONFIRM = 'incorrect'  # feedback frame after a miss
    VICTORY = 'victory'                    # stats and play-again prompt
    EXIT = 'exit'                          # terminal


# Phases that wait for typed input and show a prompt.
PROMPT_PHASES = frozenset({Phase.SET_DIMENSIONS, Phase.GUESS, Phase.VICTORY})

# Phases whose frame includes the board and score.
BOARD_PHASES = frozenset({
    Phase.GUESS,
    Phase.CORRECT_GUESS_CONFIRM,
    Phase.INCORRECT_GUESS_CONFIRM,
    Phase.VICTORY,
})


class CellStatus(enum.Enum):
    HIDDEN = 'hidden'
    REVEALED = 'revealed'
    DISCOVERED = 'discovered'


@dataclass(frozen=True)
class CellView:
    status: CellStatus
    card: Optional[Card] = None  # None while hidden


@dataclass(frozen=True)
class GameView:
    """Immutable snapshot of everything a renderer may show."""
    phase: Phase
    width: int
    height: int
    cells: Tuple[CellView, ...]  # row-major
    guesses: int
    correct_pairs: int
    error: Optional[str]
    prompt: bool
    running: bool

    def cell(self, coord: Coord) -> CellView:
        x, y = coord
        return self.cells[y * self.width + x]

    def rows(self) -> Tuple[Tuple[CellView, ...], ...]:
        return tuple(
            self.cells[y * self.width:(y + 1) * self.width] for y in range(self.height)
        )
