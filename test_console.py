"""
Test script for the console game.
Feeds scripted input to TicTacToeConsole and checks what it prints.
"""

import sys

from engine.errors import MalformedInputError
from engine.game_state import Mark
from engine.game_flow import GameStatus
from main import TicTacToeConsole, parse_move, parse_symbol_choice


def scripted_console(lines, verbose=False):
    """Console wired to a list of input lines; returns (console, output)."""
    remaining = iter(lines)
    output = []

    def read_line():
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError

    console = TicTacToeConsole(
        input_func=read_line,
        output_func=output.append,
        verbose=verbose,
    )
    return console, output


def test_parse_symbol_choice():
    print("\n=== Testing Symbol Choice ===")
    assert parse_symbol_choice("O") is Mark.SECOND
    assert parse_symbol_choice("  O\n") is Mark.SECOND
    assert parse_symbol_choice("X") is Mark.FIRST
    # Case-sensitive, anything else is X
    assert parse_symbol_choice("o") is Mark.FIRST
    assert parse_symbol_choice("") is Mark.FIRST
    assert parse_symbol_choice("zero") is Mark.FIRST


def test_parse_move():
    print("\n=== Testing Move Parsing ===")
    assert parse_move("1 2") == (1, 2)
    assert parse_move("  0\t2 \n") == (0, 2)
    # Range is the engine's job
    assert parse_move("-1 7") == (-1, 7)

    for bad in ["", "1", "1 2 3", "a b", "1 b", "1.5 2"]:
        try:
            parse_move(bad)
        except MalformedInputError:
            continue
        raise AssertionError(f"{bad!r} should be rejected")


def test_full_game_ends_in_draw():
    print("\n=== Testing Console Game ===")
    # AI answers: (0,0), (2,0), (1,2), (2,1)
    console, output = scripted_console(
        ["X", "1 1", "abc", "0 0", "5 5", "0 2", "1 0", "0 1", "2 2"]
    )

    outcome = console.start()

    assert outcome is not None
    assert outcome.status is GameStatus.DRAW
    assert output[-1] == "The game is a draw!"
    assert output[-2] == "|O|X|X|\n|X|X|O|\n|O|O|X|"

    invalid = [line for line in output if line.startswith("Invalid move, please try again.")]
    assert len(invalid) == 3

    prompts = [line for line in output if line.startswith("Player X, please enter")]
    assert len(prompts) == 8


def test_welcome_and_symbol_prompt():
    console, output = scripted_console(["X"])
    console.start()
    assert output[0] == "Welcome to Tic Tac Toe! The board is numbered like this:"
    assert "Please choose your symbol: X or O." in output


def test_symbol_argument_skips_prompt():
    console, output = scripted_console([])
    console.start(human_mark=Mark.FIRST)
    assert "Please choose your symbol: X or O." not in output
    assert console.game_state.human_mark is Mark.FIRST
    assert console.game_state.agent_mark is Mark.SECOND


def test_end_of_input_stops_game():
    console, output = scripted_console(["X", "1 1"])
    outcome = console.start()
    assert outcome is None
    assert output[-1] == "No more input, leaving the game."
    # The AI answered the one move it saw
    assert console.game_state.board[1][1] is Mark.FIRST
    assert console.game_state.board[0][0] is Mark.SECOND


def test_ai_wins_when_human_blunders():
    # AI answers (0,0), (1,1), then forks with (0,2) and wins at (2,2)
    console, output = scripted_console(
        ["X", "0 1", "2 1", "1 0", "2 0"], verbose=True
    )
    outcome = console.start()

    assert outcome is not None
    assert outcome.status is GameStatus.WON
    assert outcome.mark is Mark.SECOND
    assert output[-1] == "Player O wins!"
    assert any(line.startswith("Winning line:") for line in output)


def run_all_tests():
    """Run all tests."""
    print("=" * 60)
    print("   TicTacToe Console - Tests")
    print("=" * 60)

    tests = [
        (name, func) for name, func in sorted(globals().items())
        if name.startswith("test_") and callable(func)
    ]

    all_passed = True
    for name, func in tests:
        try:
            func()
            print(f"  {name}: ✓ PASS")
        except AssertionError as e:
            print(f"  {name}: ✗ FAIL ({e})")
            all_passed = False

    print("=" * 60)
    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
