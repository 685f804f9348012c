from __future__ import annotations

import os
import sys
from typing import Callable, Dict, List, Optional, Tuple

from .board import Board, Coord
from .deal import Shuffle, deal_board
from .errors import AlreadyRevealed, GameError
from .parsing import parse_coords, parse_dimensions, parse_yes_no
from .state import BOARD_PHASES, PROMPT_PHASES, CellStatus, CellView, GameView, Phase


def _debug_from_env() -> bool:
    return os.getenv('CONCENTRATION_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')


class Engine:
    """
    The memory game state machine.

    All mutation goes through advance(), one call per input line. Renderers read
    view() and never change the engine.
    """

    def __init__(self, shuffle: Optional[Shuffle] = None, debug: Optional[bool] = None):
        self._shuffle = shuffle
        self._debug = _debug_from_env() if debug is None else debug
        self._phase = Phase.WELCOME
        self._last_input = ''
        self._guesses = 0
        self._board = Board.empty()
        self._discovered: List[bool] = []
        self._first: Optional[Coord] = None
        self._second: Optional[Coord] = None
        self._error: Optional[GameError] = None
        self._handlers: Dict[Phase, Callable[[str], Phase]] = {
            Phase.WELCOME: self._on_welcome,
            Phase.SET_DIMENSIONS: self._on_set_dimensions,
            Phase.GUESS: self._on_guess,
            Phase.CORRECT_GUESS_CONFIRM: self._on_correct_confirm,
            Phase.INCORRECT_GUESS_CONFIRM: self._on_incorrect_confirm,
            Phase.VICTORY: self._on_victory,
            Phase.EXIT: self._on_exit,
        }
        assert set(self._handlers) == set(Phase)

    # ---- read-only accessors ----

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def board(self) -> Board:
        return self._board

    @property
    def guesses(self) -> int:
        return self._guesses

    @property
    def correct_pairs(self) -> int:
        return sum(self._discovered) // 2

    @property
    def revealed(self) -> Tuple[Coord, ...]:
        """Cards revealed this turn, in the order they were picked."""
        return tuple(c for c in (self._first, self._second) if c is not None)

    @property
    def error(self) -> Optional[GameError]:
        return self._error

    @property
    def last_input(self) -> str:
        return self._last_input

    def is_running(self) -> bool:
        return self._phase != Phase.EXIT

    def is_discovered(self, coord: Coord) -> bool:
        return self._discovered[self._board.indexer.unchecked(coord)]

    def is_revealed(self, coord: Coord) -> bool:
        return coord == self._first or coord == self._second

    def all_discovered(self) -> bool:
        return all(self._discovered)

    # ---- transitions ----

    def advance(self, line: str = '') -> Phase:
        """Feeds one input line to the current phase and returns the new phase."""
        self._error = None
        self._last_input = line
        before = self._phase
        self._phase = self._handlers[before](line)
        if self._debug:
            suffix = f" error={self._error!r}" if self._error is not None else ''
            print(f"[engine] {before.value} -> {self._phase.value} input={line.strip()!r}{suffix}",
                  file=sys.stderr)
        return self._phase

    def _on_welcome(self, line: str) -> Phase:
        return Phase.SET_DIMENSIONS

    def _on_set_dimensions(self, line: str) -> Phase:
        try:
            width, height = parse_dimensions(line)
        except GameError as e:
            self._error = e
            return Phase.SET_DIMENSIONS
        self._board = deal_board(width, height, self._shuffle, debug=self._debug)
        self._discovered = [False] * len(self._board)
        self._clear_revealed()
        return Phase.GUESS

    def _on_guess(self, line: str) -> Phase:
        try:
            coord = parse_coords(line, self._board.indexer)
        except GameError as e:
            self._error = e
            return Phase.GUESS
        if self.is_revealed(coord) or self.is_discovered(coord):
            x, y = coord
            self._error = AlreadyRevealed(x + 1, y + 1)
            return Phase.GUESS

        if self._first is None:
            self._first = coord
            return Phase.GUESS
        self._second = coord
        if self._board.at(self._first) == self._board.at(self._second):
            return Phase.CORRECT_GUESS_CONFIRM
        return Phase.INCORRECT_GUESS_CONFIRM

    def _on_correct_confirm(self, line: str) -> Phase:
        assert self._first is not None and self._second is not None
        idx = self._board.indexer
        self._discovered[idx.unchecked(self._first)] = True
        self._discovered[idx.unchecked(self._second)] = True
        self._guesses += 1
        self._clear_revealed()
        return Phase.VICTORY if self.all_discovered() else Phase.GUESS

    def _on_incorrect_confirm(self, line: str) -> Phase:
        self._guesses += 1
        self._clear_revealed()
        return Phase.GUESS

    def _on_victory(self, line: str) -> Phase:
        try:
            again = parse_yes_no(line)
        except GameError as e:
            self._error = e
            return Phase.VICTORY
        return Phase.SET_DIMENSIONS if again else Phase.EXIT

    def _on_exit(self, line: str) -> Phase:
        return Phase.EXIT

    def _clear_revealed(self) -> None:
        self._first = None
        self._second = None

    # ---- rendering snapshot ----

    def _cell_view(self, coord: Coord) -> CellView:
        if self.is_discovered(coord):
            return CellView(CellStatus.DISCOVERED, self._board.at(coord))
        if self.is_revealed(coord):
            return CellView(CellStatus.REVEALED, self._board.at(coord))
        return CellView(CellStatus.HIDDEN)

    def view(self) -> GameView:
        """Builds an immutable snapshot for renderers."""
        if self._phase in BOARD_PHASES:
            width, height = self._board.width, self._board.height
            cells = tuple(self._cell_view(c) for c in self._board.indexer.coords())
        else:
            width, height, cells = 0, 0, ()
        return GameView(
            phase=self._phase,
            width=width,
            height=height,
            cells=cells,
            guesses=self._guesses,
            correct_pairs=self.correct_pairs,
            error=self._error.message if self._error is not None else None,
            prompt=self._phase in PROMPT_PHASES,
            running=self.is_running(),
        )
