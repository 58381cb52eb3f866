"""
Command-line entry point for playing the tile word game.

Usage:
    python -m src.main show
    python -m src.main --config game.yaml hint
    python -m src.main --state state.json play quiz 8 8 --vertical
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import yaml

from .game import GameConfig, GameSession, Position
from .words import is_valid


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """Load game configuration from a YAML file, or the defaults if no path is given."""
    if config_path is None:
        return GameConfig()

    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def print_state(session: GameSession) -> None:
    state = session.get_state()
    print(state["board"])
    print()
    rack = " ".join(tile for tile, count in state["rack"].items() for _ in range(count))
    print(f"Rack: {rack}")
    print(f"Tiles in bag: {state['tiles_remaining']}")


async def run(args: argparse.Namespace, session: GameSession) -> int:
    if args.command == "show":
        print_state(session)
        return 0

    if args.command == "reset":
        session.reset()
        print_state(session)
        return 0

    if args.command == "hint":
        result = await session.hint()
        if result.error:
            print(f"Error loading dictionary: {result.error}", file=sys.stderr)
            return 1
        if result.hint is None:
            print("No word can be made from the rack.")
            return 0
        print(f"Hint: {result.hint}")
        if args.verbose:
            print(f"Best words: {', '.join(result.candidates)}")
        return 0

    if args.command == "check":
        result = await session.loader.load()
        if not result.ok:
            print(f"Error loading dictionary: {result.error}", file=sys.stderr)
            return 1
        valid = is_valid(args.word.lower(), result.data)
        print(f"'{args.word}' is {'a valid' if valid else 'not a valid'} word.")
        return 0 if valid else 1

    if args.command == "play":
        result = await session.play(args.word, Position(args.x, args.y), not args.vertical)
        print(result.message)
        if result.success:
            print()
            print_state(session)
        return 0 if result.success else 1

    return 1


def main():
    parser = argparse.ArgumentParser(
        description="Play the tile word game from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example game.yaml:
  dictionary: https://example.com/dictionary.json
  state_file: state/game.json
  seed: 42
        """
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--state",
        help="Path to the JSON state file (overrides state_file from the config)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log progress to stderr"
    )

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("show", help="Show the board and rack")
    commands.add_parser("reset", help="Start a new game")
    commands.add_parser("hint", help="Suggest a best-scoring word for the rack")

    check = commands.add_parser("check", help="Check whether a word is in the dictionary")
    check.add_argument("word", help="Word to check; '*' matches any letter")

    play = commands.add_parser("play", help="Play a word from the rack")
    play.add_argument("word")
    play.add_argument("x", type=int, help="Column of the first letter (1-based)")
    play.add_argument("y", type=int, help="Row of the first letter (1-based)")
    play.add_argument("--vertical", action="store_true", help="Place the word downwards")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.state:
        config.state_file = args.state

    try:
        session = GameSession.create(config=config)
    except (OSError, ValueError) as e:
        print(f"Error loading game state: {e}", file=sys.stderr)
        return 1

    return asyncio.run(run(args, session))


if __name__ == "__main__":
    sys.exit(main())
