"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, and which mark each side plays.
"""

from enum import Enum
from typing import List, Tuple
from dataclasses import dataclass, field

from .config import GameConfig
from .errors import OutOfRangeError


class Mark(Enum):
    """What a cell can hold: one of the two players' marks, or nothing."""
    FIRST = GameConfig.FIRST_SYMBOL
    SECOND = GameConfig.SECOND_SYMBOL
    EMPTY = GameConfig.EMPTY_SYMBOL

    def opponent(self) -> "Mark":
        """Get the opposing mark (EMPTY has no opponent and maps to itself)."""
        if self is Mark.FIRST:
            return Mark.SECOND
        if self is Mark.SECOND:
            return Mark.FIRST
        return Mark.EMPTY

    @property
    def symbol(self) -> str:
        return self.value


Board = List[List[Mark]]


def new_board() -> Board:
    """Create an empty board. Every row is its own list."""
    size = GameConfig.BOARD_SIZE
    return [[Mark.EMPTY for _ in range(size)] for _ in range(size)]


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The 3x3 board (which mark is in each cell)
    - Whose turn it is (FIRST always opens)
    - Which mark the human plays and which the agent plays

    The board and turn change in place on every move. The human/agent
    marks are chosen once before the first move and never change.
    """

    board: Board = field(default_factory=new_board)

    # Mark whose move is next
    current_turn: Mark = Mark.FIRST

    # Fixed for the whole game, always complementary
    human_mark: Mark = Mark.FIRST
    agent_mark: Mark = Mark.SECOND

    @classmethod
    def for_human(cls, human_mark: Mark) -> "GameState":
        """
        Start a new game with the human playing the given mark.

        Args:
            human_mark: Mark.FIRST or Mark.SECOND.

        Returns:
            A fresh GameState with the agent on the other mark.
        """
        if human_mark is Mark.EMPTY:
            raise ValueError("The human must play FIRST or SECOND, not EMPTY")
        return cls(human_mark=human_mark, agent_mark=human_mark.opponent())

    @staticmethod
    def in_bounds(row, col) -> bool:
        """Check that (row, col) are integer indices on the board."""
        size = GameConfig.BOARD_SIZE
        for index in (row, col):
            if isinstance(index, bool) or not isinstance(index, int):
                return False
            if not 0 <= index < size:
                return False
        return True

    def place_mark(self, row: int, col: int) -> bool:
        """
        Place the current player's mark at the given position.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            True if the mark was placed, False if the cell is occupied.

        Raises:
            OutOfRangeError: If row or col is not on the board.
        """
        if not self.in_bounds(row, col):
            raise OutOfRangeError(row, col, GameConfig.BOARD_SIZE)

        if self.board[row][col] is not Mark.EMPTY:
            return False

        self.board[row][col] = self.current_turn
        self.current_turn = self.current_turn.opponent()
        return True

    def is_winner(self, mark: Mark) -> bool:
        """
        Check whether a mark fills a whole row, column, or diagonal.

        Args:
            mark: The mark to test (not necessarily the one that just moved).

        Returns:
            True if the mark has three in a line.
        """
        if mark is Mark.EMPTY:
            return False

        size = GameConfig.BOARD_SIZE
        board = self.board

        if any(all(cell is mark for cell in row) for row in board):
            return True
        if any(all(board[r][c] is mark for r in range(size)) for c in range(size)):
            return True
        if all(board[i][i] is mark for i in range(size)):
            return True
        return all(board[i][size - 1 - i] is mark for i in range(size))

    def is_draw(self) -> bool:
        """True when every cell is filled. Check for a winner first!"""
        return all(cell is not Mark.EMPTY for row in self.board for cell in row)

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples in row-major order.
        """
        empty = []
        for row in range(GameConfig.BOARD_SIZE):
            for col in range(GameConfig.BOARD_SIZE):
                if self.board[row][col] is Mark.EMPTY:
                    empty.append((row, col))
        return empty

    def render(self) -> List[List[str]]:
        """Snapshot of the board as cell symbols, for display only."""
        return [[cell.symbol for cell in row] for row in self.board]

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=[list(row) for row in self.board],
            current_turn=self.current_turn,
            human_mark=self.human_mark,
            agent_mark=self.agent_mark,
        )

    def format_board(self) -> str:
        """Board as text, one `|X|O| |` line per row."""
        sep = GameConfig.CELL_SEPARATOR
        lines = []
        for row in self.render():
            lines.append(sep + sep.join(row) + sep)
        return "\n".join(lines)

    def print_board(self):
        """Print the board to console."""
        print(self.format_board())
