"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

from typing import Optional, Tuple

from .config import GameConfig
from .game_state import GameState, Mark

Move = Tuple[int, int]


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI always plays optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).

    The search walks the whole remaining game tree on the real board:
    each hypothetical mark is written, searched, and cleared again
    before the next one is tried. No pruning, no caching.
    """

    def __init__(self, mark: Mark = Mark.SECOND, verbose: bool = GameConfig.DEBUG_MODE):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI plays (default: SECOND)
            verbose: Print a summary after every search.
        """
        self.mark = mark
        self.verbose = verbose

        # How many positions the last search visited (for debugging)
        self.positions_evaluated = 0

    def get_best_move(self, game_state: GameState) -> Optional[Move]:
        """
        Get the best move for the current position.

        Args:
            game_state: Current game state. Left unchanged.

        Returns:
            (row, col) of best move, or None if no move is possible.
        """
        if game_state.current_turn is not self.mark:
            if self.verbose:
                print(f"Warning: It's not {self.mark.symbol}'s turn!")
            return None

        if not game_state.get_empty_cells():
            return None

        score, move = self.search(game_state, maximizing=True)

        if self.verbose:
            print(
                f"AI evaluated {self.positions_evaluated} positions. "
                f"Best move: {move} (score: {score})"
            )

        return move

    def search(self, game_state: GameState, maximizing: bool) -> Tuple[int, Optional[Move]]:
        """Run a fresh minimax search and reset the position counter."""
        self.positions_evaluated = 0
        return self._minimax(game_state, maximizing)

    def _minimax(self, game_state: GameState, maximizing: bool) -> Tuple[int, Optional[Move]]:
        """
        Plain minimax over the real board.

        Scores are from the agent's side: +1 agent win, -1 human win,
        0 draw. Terminal positions are checked before recursing, using
        the state's fixed agent/human marks whatever side is simulated.

        Args:
            game_state: State to search. Restored before returning.
            maximizing: True to simulate the agent, False the human.

        Returns:
            (score, move). move is the first cell (row-major) reaching
            the best score when maximizing, and None otherwise.
        """
        self.positions_evaluated += 1

        if game_state.is_winner(game_state.agent_mark):
            return GameConfig.WIN_SCORE, None
        if game_state.is_winner(game_state.human_mark):
            return GameConfig.LOSS_SCORE, None
        if game_state.is_draw():
            return GameConfig.DRAW_SCORE, None

        board = game_state.board
        best_move = None

        if maximizing:
            best_score = -GameConfig.SEARCH_SENTINEL
            for row, col in game_state.get_empty_cells():
                board[row][col] = game_state.agent_mark
                try:
                    score, _ = self._minimax(game_state, False)
                finally:
                    board[row][col] = Mark.EMPTY
                # Strict > keeps the earliest cell on ties
                if score > best_score:
                    best_score = score
                    best_move = (row, col)
        else:
            best_score = GameConfig.SEARCH_SENTINEL
            for row, col in game_state.get_empty_cells():
                board[row][col] = game_state.human_mark
                try:
                    score, _ = self._minimax(game_state, True)
                finally:
                    board[row][col] = Mark.EMPTY
                best_score = min(best_score, score)

        return best_score, best_move


def minimax(game_state: GameState, maximizing: bool) -> Tuple[int, Optional[Move]]:
    """
    Score the position and pick the agent's move.

    Args:
        game_state: Current state; every hypothetical mark is undone.
        maximizing: True when the agent is to move.

    Returns:
        (score, move) as described in AIPlayer._minimax.
    """
    return AIPlayer(game_state.agent_mark, verbose=False).search(game_state, maximizing)
