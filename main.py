"""
Console TicTacToe against the minimax AI.

This script ties together:
- Input parsing (symbol choice, "row col" moves)
- Engine (game state, outcome checks, AI)
- Board output and the final announcement

Run this script to play TicTacToe against the computer!
"""

from typing import Callable, Optional, Tuple

from engine.config import GameConfig
from engine.errors import GameError, MalformedInputError
from engine.game_state import GameState, Mark
from engine.game_flow import Outcome, apply_move, check_outcome
from engine.win_checker import WinChecker
from engine.ai_player import AIPlayer


WELCOME_LINES = [
    "Welcome to Tic Tac Toe! The board is numbered like this:",
    "  0 1 2",
    "0| | | |",
    "1| | | |",
    "2| | | |",
    "You will enter your moves in the form `row col`.",
]


def parse_symbol_choice(text: str) -> Mark:
    """
    Turn the start-of-game answer into the human's mark.

    Only an exact "O" picks the second mark; anything else gives X.
    """
    if text.strip() == GameConfig.SECOND_MARK_TOKEN:
        return Mark.SECOND
    return Mark.FIRST


def parse_move(text: str) -> Tuple[int, int]:
    """
    Parse a "row col" line.

    Args:
        text: Raw input line.

    Returns:
        (row, col) as integers. Range is checked by the engine.

    Raises:
        MalformedInputError: If the line is not exactly two integers.
    """
    parts = text.split()
    if len(parts) != 2:
        raise MalformedInputError(f"Expected `row col`, got {text.strip()!r}")
    try:
        row, col = int(parts[0]), int(parts[1])
    except ValueError:
        raise MalformedInputError(f"Expected two integers, got {text.strip()!r}")
    return row, col


class TicTacToeConsole:
    """
    Console controller for a single game.

    Game flow:
    1. Human picks X or O (X always moves first)
    2. On the human's turn, the board is shown and a move is read
    3. On the AI's turn, minimax picks the move
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        input_func: Callable[[], str] = input,
        output_func: Callable[[str], None] = print,
        verbose: bool = GameConfig.DEBUG_MODE,
    ):
        """
        Initialize the console game.

        Args:
            input_func: Reads one line of input (without prompt).
            output_func: Writes one line of output.
            verbose: Print search diagnostics.
        """
        self.input_func = input_func
        self.output_func = output_func
        self.verbose = verbose

        self.win_checker = WinChecker()
        self.game_state: Optional[GameState] = None
        self.ai: Optional[AIPlayer] = None

    def start(self, human_mark: Optional[Mark] = None) -> Optional[Outcome]:
        """
        Play one game.

        Args:
            human_mark: Skip the symbol prompt and use this mark.

        Returns:
            The final Outcome, or None if input ran out first.
        """
        for line in WELCOME_LINES:
            self.output_func(line)

        if human_mark is None:
            self.output_func("Please choose your symbol: X or O.")
            answer = self._read_line()
            if answer is None:
                return None
            human_mark = parse_symbol_choice(answer)

        self.game_state = GameState.for_human(human_mark)
        self.ai = AIPlayer(self.game_state.agent_mark, verbose=self.verbose)

        outcome = self._game_loop()
        if outcome is not None:
            self._show_game_result(outcome)
        return outcome

    def _game_loop(self) -> Optional[Outcome]:
        """Main game loop."""
        outcome = check_outcome(self.game_state)

        while not outcome.is_over:
            if self.game_state.current_turn is self.game_state.agent_mark:
                move = self.ai.get_best_move(self.game_state)
                if move is None:
                    raise GameError("AI could not find a move!")
            else:
                move = self._ask_human_move()
                if move is None:
                    self.output_func("No more input, leaving the game.")
                    return None

            try:
                outcome = apply_move(self.game_state, *move)
            except GameError as e:
                self.output_func(f"Invalid move, please try again. ({e})")

        return outcome

    def _ask_human_move(self) -> Optional[Tuple[int, int]]:
        """Show the board and read moves until one parses."""
        while True:
            self.output_func(self.game_state.format_board())
            self.output_func(
                f"Player {self.game_state.current_turn.symbol}, "
                "please enter your move in the form `row col`."
            )
            line = self._read_line()
            if line is None:
                return None
            try:
                return parse_move(line)
            except MalformedInputError as e:
                self.output_func(f"Invalid move, please try again. ({e})")

    def _read_line(self) -> Optional[str]:
        try:
            return self.input_func()
        except EOFError:
            return None

    def _show_game_result(self, outcome: Outcome):
        """Show the final board and result."""
        self.output_func(self.game_state.format_board())
        if self.verbose:
            line = self.win_checker.get_winning_line(self.game_state)
            if line is not None:
                self.output_func(f"Winning line: {line}")
        self.output_func(outcome.announcement())


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against a minimax AI")
    parser.add_argument(
        "--symbol",
        choices=[GameConfig.FIRST_SYMBOL, GameConfig.SECOND_SYMBOL],
        help="Your symbol (skips the prompt). X always moves first."
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print search statistics"
    )

    args = parser.parse_args()

    human_mark = None
    if args.symbol is not None:
        human_mark = parse_symbol_choice(args.symbol)

    game = TicTacToeConsole(verbose=args.verbose or GameConfig.DEBUG_MODE)

    try:
        game.start(human_mark)
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
