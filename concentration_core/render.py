from __future__ import annotations

from typing import List

from .state import BOARD_PHASES, CellStatus, GameView, Phase

CLEAR_SCREEN = '\x1b[2J\x1b[1;1H'
HIDDEN_GLYPH = '█'
PROMPT = '> '

_MESSAGES = {
    Phase.WELCOME: 'Welcome! Press <Enter> to begin.',
    Phase.SET_DIMENSIONS: 'Set board dimensions (x, y)',
    Phase.GUESS: 'Pick a card (x, y)',
    Phase.CORRECT_GUESS_CONFIRM: 'A match!',
    Phase.INCORRECT_GUESS_CONFIRM: 'Try again',
    Phase.VICTORY: 'Congratulations! Play again? (y / N)',
}


def render_board(view: GameView) -> str:
    """Draws the cards: matched ones face up, this turn's picks marked with '<'."""
    lines: List[str] = []
    for row in view.rows():
        cells: List[str] = []
        for cell in row:
            if cell.status is CellStatus.DISCOVERED:
                cells.append(f"{cell.card}  ")
            elif cell.status is CellStatus.REVEALED:
                cells.append(f"{cell.card} <")
            else:
                cells.append(f"{HIDDEN_GLYPH}  ")
        lines.append(''.join(cells))
        lines.append('')
    return '\n'.join(lines)


def render_score(view: GameView) -> str:
    return f"Guesses: {view.guesses} | Correct guesses: {view.correct_pairs}"


def render_error(view: GameView) -> str:
    return f"(!) {view.error}" if view.error else ''


def render_frame(view: GameView) -> str:
    """Builds the full text of one frame. Ends with the prompt marker when input is expected."""
    if view.phase is Phase.EXIT:
        return ''
    parts: List[str] = []
    if view.phase in BOARD_PHASES:
        parts.append(render_score(view) + '\n')
        parts.append(render_board(view))
    error = render_error(view)
    if error:
        parts.append(error)
    parts.append(_MESSAGES[view.phase])
    text = '\n'.join(parts) + '\n'
    if view.prompt:
        text += PROMPT
    return text
