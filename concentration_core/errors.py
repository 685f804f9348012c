from __future__ import annotations

from typing import Any, Tuple


class GameError(ValueError):
    """Base class for recoverable input errors.

    The engine stores the most recent one so the renderer can show it for a
    single frame; none of them end the game.
    """

    def _fields(self) -> Tuple[Any, ...]:
        return ()

    @property
    def message(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self._fields() == other._fields()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self._fields())

    def __repr__(self) -> str:
        args = ', '.join(repr(f) for f in self._fields())
        return f"{type(self).__name__}({args})"


class AlreadyRevealed(GameError):
    """Tried to reveal a card that was already revealed or matched."""

    def __init__(self, x: int, y: int):
        super().__init__(x, y)
        self.x = x
        self.y = y

    def _fields(self) -> Tuple[Any, ...]:
        return (self.x, self.y)

    @property
    def message(self) -> str:
        return f"Card at position ({self.x},{self.y}) is already revealed."


class EmptyInput(GameError):
    @property
    def message(self) -> str:
        return "User input is required"


class CoordinateOverflow(GameError):
    """A coordinate or dimension beyond the upper bound of an axis."""

    def __init__(self, axis: str, max: int):
        super().__init__(axis, max)
        self.axis = axis
        self.max = max

    def _fields(self) -> Tuple[Any, ...]:
        return (self.axis, self.max)

    @property
    def message(self) -> str:
        return f"{self.axis} coordinate too large. Maximum possible value is {self.max}."


class CoordinateUnderflow(GameError):
    """A coordinate or dimension below the lower bound of an axis."""

    def __init__(self, axis: str):
        super().__init__(axis)
        self.axis = axis

    def _fields(self) -> Tuple[Any, ...]:
        return (self.axis,)

    @property
    def message(self) -> str:
        # Users always type 1-indexed values
        return f"{self.axis} coordinate too small. Minimum possible value is 1."


class NotEnoughCardTypes(GameError):
    """Requested more cells than the symbol alphabet can pair up."""

    def __init__(self, max: int):
        super().__init__(max)
        self.max = max

    def _fields(self) -> Tuple[Any, ...]:
        return (self.max,)

    @property
    def message(self) -> str:
        return f"Cannot create board with more than {self.max} cells"


class OddBoardCells(GameError):
    @property
    def message(self) -> str:
        return "Number of board cells (horizontal size * vertical size) must be even"


class UnparsableInput(GameError):
    @property
    def message(self) -> str:
        return "User input could not be parsed"
