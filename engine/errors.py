"""
Errors raised by the TicTacToe engine and console.
None of them are fatal: the game loop reports them and asks again.
"""


class GameError(Exception):
    """Base class for all game errors."""
    pass


class OutOfRangeError(GameError):
    """Raised when a coordinate is outside the board."""

    def __init__(self, row, col, size: int = 3):
        self.row = row
        self.col = col
        super().__init__(f"Invalid position ({row}, {col}). Must be 0-{size - 1}.")


class OccupiedCellError(GameError):
    """Raised when a move targets a cell that already holds a mark."""

    def __init__(self, row: int, col: int, symbol: str):
        self.row = row
        self.col = col
        super().__init__(f"Cell ({row}, {col}) is already occupied by {symbol}")


class MalformedInputError(GameError):
    """Raised when a line of input is not two integers."""
    pass
