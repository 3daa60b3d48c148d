# Command-line interface (text-based play against the oracle)
import argparse
import sys

from game.board import Board
from game.oracle import Oracle
from game.ruleset import DEFAULT_RULES, make_rules
from loader.code_list import CodeListError, load_code_list


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play Mastermind against a codemaker oracle."
    )
    parser.add_argument(
        "--codes",
        type=str,
        default=None,
        help="Code-list file; its codes are played first, then random ones.",
    )
    parser.add_argument(
        "--pegs",
        type=int,
        default=DEFAULT_RULES["code_length"],
        help="Number of pegs per code (ignored with --codes).",
    )
    parser.add_argument(
        "--colors",
        type=int,
        default=DEFAULT_RULES["num_colors"],
        help="Number of peg colors (ignored with --codes).",
    )
    parser.add_argument(
        "--attempts",
        type=int,
        default=DEFAULT_RULES["max_attempts"],
        help="Guesses allowed per round.",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=None,
        help="Rounds to play. Defaults to the number of codes in the file, or 1.",
    )
    return parser


def create_board(args) -> Board:
    """
    Build the oracle and board described by the parsed arguments.
    Raises:
        CodeListError: If the code list cannot be loaded.
        ValueError: If a count is invalid."""
    if args.attempts <= 0:
        raise ValueError(f"Attempts must be positive, but got {args.attempts}.")
    if args.rounds is not None and args.rounds <= 0:
        raise ValueError(f"Rounds must be positive, but got {args.rounds}.")

    if args.codes:
        code_list = load_code_list(args.codes)
        oracle = Oracle.from_codes(
            code_list.codes, code_list.peg_count, code_list.color_count
        )
    else:
        oracle = Oracle(args.pegs, args.colors)

    rules = make_rules(
        code_length=oracle.get_num_pegs(),
        num_colors=oracle.get_num_peg_colors(),
        max_attempts=args.attempts,
    )
    return Board(oracle=oracle, rules=rules)


def keep_playing(board: Board, rounds) -> bool:
    """Decide whether another round follows the one just finished."""
    if rounds is not None:
        return board.round < rounds
    # Without --rounds a file-driven session lasts as long as the file's codes
    return board.oracle.is_file_driven()


def gameloop(board: Board, rounds=None, read=input, out=print) -> int:
    """
    Play rounds until the session ends or the player types 'exit'.

    Returns:
        int: Number of rounds won.
    """
    out("=== Mastermind CLI ===")
    out(
        f"Type {board.rules['code_length']} numbers between 0 and "
        f"{board.rules['num_colors'] - 1} (e.g. 0 1 2 3). Type 'exit' to quit.\n"
    )

    won = 0
    while True:
        while not board.is_over:
            out(f"\nRound {board.round}, attempts left: {board.remaining_attempts()}")
            try:
                user_input = read("Enter your guess: ").strip()
            except EOFError:
                user_input = "exit"

            # handle special commands
            if user_input.lower() == "exit":
                out("Exiting game.")
                return won

            # Make the guess
            try:
                board.make_guess(user_input)
            except ValueError as e:
                out(f"Invalid input: {e}")
                continue

            # Render current board
            out(board.render())

        if board.is_won:
            won += 1
            out("\nCongratulations, you cracked the code!")
        else:
            out("\nNo more attempts left.")
        out(f"The secret code was: {board.reveal_code()}")

        if not keep_playing(board, rounds):
            break
        board.next_round()

    out(f"\n=== Game Over: {won} of {board.round} rounds won ===")
    return won


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        board = create_board(args)
    except (CodeListError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    gameloop(board, rounds=args.rounds)
    return 0
