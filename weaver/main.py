"""
Command-line entry point for playing Weaver.

Usage:
    python -m weaver.main
    python -m weaver.main --config config.yaml --random --show-errors
"""

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO

import yaml

from .environment import GameConfig, WeaverGame
from .utils.ladder_view import render_board, render_path
from .verifiers import InvalidWordError, WeaverError, WordGenerationError, score_path


COMMANDS = "'quit', 'reset', 'new game', 'show path', 'set errors [on|off]', 'set random [on|off]', 'set path [on|off]'"


def load_config(config_path: str) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def show_board(engine: WeaverGame, out: TextIO) -> None:
    """Print the current session, plus the solution when show-path is on."""
    print(file=out)
    print(render_board(engine.start_word, engine.target_word, engine.path, engine.results), file=out)
    if engine.show_path:
        show_solution(engine, out)


def show_solution(engine: WeaverGame, out: TextIO) -> None:
    """Print the shortest ladder with feedback for every step."""
    print("--- Full Solution Path ---", file=out)
    solution = engine.get_full_solution_path()
    if not solution:
        print("No path available.", file=out)
    else:
        results = score_path(engine.target_word, solution, engine.dictionary)
        print(render_path(solution, results), file=out)
    print("-" * 26, file=out)


def start_game(engine: WeaverGame, out: TextIO) -> bool:
    """Initialize a session; returns False if no words could be generated."""
    try:
        engine.initialize()
    except WordGenerationError as e:
        print(f"Failed to initialize game: {e}", file=sys.stderr)
        return False

    print("\n--- New Game Started ---", file=out)
    show_board(engine, out)
    print("Game started. Enter your first word.", file=out)
    return True


def _set_flag(engine: WeaverGame, line: str, out: TextIO) -> None:
    parts = line.split()
    if len(parts) != 3 or parts[2].lower() not in ("on", "off"):
        print(f"Invalid input or command: '{line}'.", file=out)
        return

    name, value = parts[1].lower(), parts[2].lower() == "on"
    if name == "errors":
        engine.set_show_errors_flag(value)
        print(f"Show errors {'enabled' if value else 'disabled'}.", file=out)
    elif name == "random":
        engine.set_random_word_flag(value)
        kind = "Random" if value else "Fixed"
        print(f"{kind} words enabled. Start a new game for changes to take effect.", file=out)
    elif name == "path":
        engine.set_show_path_flag(value)
        print(f"Show path {'enabled' if value else 'disabled'}.", file=out)
    else:
        print(f"Invalid input or command: '{line}'.", file=out)
        return
    show_board(engine, out)


def play_guess(engine: WeaverGame, guess: str, out: TextIO) -> None:
    """Submit one guess and print the outcome."""
    try:
        result = engine.tick(guess)
    except InvalidWordError as e:
        show_board(engine, out)
        print(f"Error: {e}" if engine.show_errors else "Invalid input.", file=out)
        return

    show_board(engine, out)
    if result is None:
        warning = engine.last_notification.warning if engine.last_notification else None
        if warning:
            print(warning, file=sys.stderr)
    elif engine.show_errors and result.message:
        print(f"Message: {result.message}", file=out)
    elif engine.won:
        print("Congratulations! You won the game!", file=out)


def handle_command(engine: WeaverGame, line: str, out: TextIO) -> bool:
    """
    Process one line of input.

    Returns:
        False when the loop should stop
    """
    command = line.strip()
    lowered = command.lower()

    if lowered == "quit":
        print("Quitting game. Goodbye!", file=out)
        return False

    if lowered == "new game":
        start_game(engine, out)
    elif not engine.is_started:
        print("No game in progress. Enter 'new game' or 'quit'.", file=out)
    elif lowered == "reset":
        engine.reset_game()
        show_board(engine, out)
        print("Game reset. Enter your first word.", file=out)
    elif lowered == "show path":
        show_solution(engine, out)
    elif lowered.startswith("set "):
        _set_flag(engine, command, out)
    elif len(command) == len(engine.target_word):
        play_guess(engine, command, out)
    else:
        show_board(engine, out)
        print(f"Invalid input: Please enter a {len(engine.target_word)}-letter word or a valid command.", file=out)

    return True


def _prompt(engine: WeaverGame, out: TextIO) -> None:
    if engine.won:
        prompt = "Game won. Enter 'new game', 'reset' or 'quit'"
    else:
        prompt = f"Enter your next word or command ({COMMANDS})"
    print(f"{prompt}: ", end="", file=out, flush=True)


def run(engine: WeaverGame, lines: Iterable[str], out: TextIO = sys.stdout, interactive: bool = False) -> int:
    """Drive a game from an iterable of input lines until 'quit' or end of input."""
    print("Welcome to Weaver!", file=out)
    start_game(engine, out)

    if interactive:
        _prompt(engine, out)
    for line in lines:
        if not handle_command(engine, line, out):
            break
        if interactive:
            _prompt(engine, out)

    return 0


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Play Weaver, the word-ladder game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  word_length: 4
  start_word: PORE
  target_word: RUDE
  random_words: false
  show_errors: true
  show_path: false
  max_attempts: 20
  seed: 42
        """
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--dictionary", "-d",
        help="Path to a newline-delimited word list (default: bundled list)"
    )
    parser.add_argument(
        "--random",
        action="store_true",
        help="Pick random start and target words"
    )
    parser.add_argument(
        "--show-errors",
        action="store_true",
        help="Show hints and rejection messages"
    )
    parser.add_argument(
        "--show-path",
        action="store_true",
        help="Show the solution path below the board"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible word selection"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print unexpected errors to stderr"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else GameConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    overrides = {}
    if args.dictionary:
        overrides["dictionary_path"] = args.dictionary
    if args.random:
        overrides["random_words"] = True
    if args.show_errors:
        overrides["show_errors"] = True
    if args.show_path:
        overrides["show_path"] = True
    if args.seed is not None:
        overrides["seed"] = args.seed
    if overrides:
        config = config.model_copy(update=overrides)

    try:
        engine = WeaverGame.create(config=config, verbose=args.verbose)
    except (OSError, WeaverError) as e:
        print(f"Error loading dictionary: {e}", file=sys.stderr)
        return 1

    try:
        return run(engine, sys.stdin, interactive=True)
    except KeyboardInterrupt:
        print("\nQuitting game. Goodbye!")
        return 0


if __name__ == "__main__":
    sys.exit(main())
