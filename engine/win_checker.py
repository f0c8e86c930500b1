"""
Win checker for TicTacToe.
Checks if a mark has won or if the game is a draw.
"""

from typing import Optional, List, Tuple
from .game_state import GameState, Mark


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def check_winner(self, game_state: GameState) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            game_state: The current game state.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        for mark in (Mark.FIRST, Mark.SECOND):
            if game_state.is_winner(mark):
                return mark
        return None

    def check_draw(self, game_state: GameState) -> bool:
        """
        Check if the game is a draw.

        A draw is a full board with no winner. A win on the last
        move is reported as a win, not a draw.
        """
        if self.check_winner(game_state) is not None:
            return False
        return game_state.is_draw()

    def get_winning_line(self, game_state: GameState) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Args:
            game_state: The game state.

        Returns:
            The winning line as list of (row, col), or None.
        """
        board = game_state.board
        for line in self.WINNING_LINES:
            marks = {board[row][col] for row, col in line}
            if len(marks) == 1 and Mark.EMPTY not in marks:
                return line
        return None
