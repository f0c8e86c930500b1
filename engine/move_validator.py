"""
Move validator for TicTacToe.
Validates that moves follow the rules before they are applied.
"""

from typing import Optional, Tuple, List, Type
from dataclasses import dataclass

from .game_state import GameState, Mark
from .errors import GameError, OutOfRangeError, OccupiedCellError
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    error_type: Optional[Type[GameError]] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Position must be on the board
    3. Can only place on empty cells
    """

    def __init__(self):
        self.win_checker = WinChecker()

    def is_game_over(self, game_state: GameState) -> bool:
        """True once someone has won or the board is full."""
        return (
            self.win_checker.check_winner(game_state) is not None
            or game_state.is_draw()
        )

    def validate_move(
        self,
        game_state: GameState,
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if self.is_game_over(game_state):
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!",
                error_type=GameError,
            )

        # Check if row/col are in valid range
        if not game_state.in_bounds(row, col):
            return ValidationResult(
                is_valid=False,
                error_message=str(OutOfRangeError(row, col)),
                error_type=OutOfRangeError,
            )

        # Check if cell is empty
        cell = game_state.board[row][col]
        if cell is not Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=str(OccupiedCellError(row, col, cell.symbol)),
                error_type=OccupiedCellError,
            )

        return ValidationResult(is_valid=True)

    def raise_for_move(self, game_state: GameState, row: int, col: int):
        """Validate a move and raise the matching GameError if it is invalid."""
        result = self.validate_move(game_state, row, col)
        if result.is_valid:
            return
        if result.error_type is OutOfRangeError:
            raise OutOfRangeError(row, col)
        if result.error_type is OccupiedCellError:
            raise OccupiedCellError(row, col, game_state.board[row][col].symbol)
        raise GameError(result.error_message)

    def get_valid_moves(self, game_state: GameState) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Args:
            game_state: Current game state.

        Returns:
            List of (row, col) valid move positions.
        """
        if self.is_game_over(game_state):
            return []
        return game_state.get_empty_cells()
