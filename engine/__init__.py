"""
TicTacToe engine.
Handles game state, rules, outcomes, and the minimax opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .errors import GameError, OutOfRangeError, OccupiedCellError, MalformedInputError
from .game_state import GameState, Mark, new_board
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .game_flow import GameStatus, Outcome, check_outcome, apply_move
from .ai_player import AIPlayer, minimax
