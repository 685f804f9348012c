from __future__ import annotations

# Facade module that re-exports the Concentration core API.
# Single-responsibility modules live under concentration_core/*.

from concentration_core.board import (  # noqa: F401
    CARD_SYMBOLS,
    MAX_CELLS,
    Board,
    Card,
    Coord,
    Indexer,
)
from concentration_core.deal import Shuffle, deal_board, fixed_order, pairs, seeded_shuffle  # noqa: F401
from concentration_core.errors import (  # noqa: F401
    AlreadyRevealed,
    CoordinateOverflow,
    CoordinateUnderflow,
    EmptyInput,
    GameError,
    NotEnoughCardTypes,
    OddBoardCells,
    UnparsableInput,
)
from concentration_core.parsing import (  # noqa: F401
    parse_coords,
    parse_dimensions,
    parse_pair,
    parse_yes_no,
)
from concentration_core.state import CellStatus, CellView, GameView, Phase  # noqa: F401
from concentration_core.engine import Engine  # noqa: F401
from concentration_core.render import (  # noqa: F401
    CLEAR_SCREEN,
    render_board,
    render_error,
    render_frame,
    render_score,
)


def main() -> None:
    # CLI driver delegated to concentration_core.cli
    from concentration_core.cli import main as _main
    raise SystemExit(_main())


if __name__ == '__main__':
    main()
