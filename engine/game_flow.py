"""
Game flow for TicTacToe.

A session moves through three kinds of state:
    AwaitingMove(turn) -> Won(mark) | Draw
Won and Draw are final. The caller drives the session by calling
apply_move() and reading back the Outcome.
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass

from .game_state import GameState, Mark
from .errors import OccupiedCellError
from .move_validator import MoveValidator
from .win_checker import WinChecker


class GameStatus(Enum):
    """Where the session stands."""
    AWAITING_MOVE = "awaiting_move"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Session status plus the mark it refers to.

    AWAITING_MOVE carries the mark to move, WON the winning mark,
    DRAW carries None.
    """
    status: GameStatus
    mark: Optional[Mark] = None

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.AWAITING_MOVE

    def announcement(self) -> str:
        """Text shown once at the end of a session."""
        if self.status is GameStatus.WON:
            return f"Player {self.mark.symbol} wins!"
        if self.status is GameStatus.DRAW:
            return "The game is a draw!"
        return f"Player {self.mark.symbol} to move."


_win_checker = WinChecker()
_validator = MoveValidator()


def check_outcome(game_state: GameState) -> Outcome:
    """
    Evaluate the board.

    A completed line wins even on a full board.
    """
    winner = _win_checker.check_winner(game_state)
    if winner is not None:
        return Outcome(GameStatus.WON, winner)
    if game_state.is_draw():
        return Outcome(GameStatus.DRAW)
    return Outcome(GameStatus.AWAITING_MOVE, game_state.current_turn)


def apply_move(game_state: GameState, row: int, col: int) -> Outcome:
    """
    Play the current turn's mark at (row, col).

    Args:
        game_state: The session's state, changed in place.
        row: Row index (0-2).
        col: Column index (0-2).

    Returns:
        The Outcome after the move.

    Raises:
        GameError: If the game is already over.
        OutOfRangeError: If the position is not on the board.
        OccupiedCellError: If the cell already holds a mark.
    """
    _validator.raise_for_move(game_state, row, col)

    if not game_state.place_mark(row, col):
        raise OccupiedCellError(row, col, game_state.board[row][col].symbol)

    return check_outcome(game_state)
