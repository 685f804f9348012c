"""
Concentration core Python package.

Pure game logic for the terminal memory matching game, split by concern so each
piece can be tested on its own.
Modules:
- board.py: Card, Coord, Indexer, Board and the card alphabet
- deal.py: random pairing of cards onto a board
- errors.py: recoverable input errors shown to the player
- parsing.py: text input parsers (pairs, dimensions, coordinates, yes/no)
- state.py: Phase, the render snapshot GameView
- engine.py: Engine, the turn state machine
- render.py: text frames for a terminal
- cli.py: argparse driver and input loop
"""
