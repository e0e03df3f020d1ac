"""Main entry point for the Set table simulator."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

import yaml
from pydantic import ValidationError

from set_table.config import GameLogConfig, load_config
from set_table.game.engine import GameEngine
from set_table.logging import GameLogger
from set_table.utils.logger import TableDisplay, setup_logging

logger = logging.getLogger(__name__)


def generate_log_filename(log_dir: str, seed: int | None) -> str:
    """Generate log filename with timestamp and seed.

    Format: {timestamp}_seed{seed}.jsonl, or {timestamp}_random.jsonl if unseeded.

    Args:
        log_dir: Directory for log files.
        seed: Base shuffle seed.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    suffix = f"seed{seed}" if seed is not None else "random"
    return str(Path(log_dir) / f"{timestamp}_{suffix}.jsonl")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Set card table simulator"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-n",
        "--num-games",
        type=int,
        help="Number of games to play (overrides config)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Deck shuffle seed (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-table",
        action="store_true",
        help="Show the final table of each game",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (ValidationError, yaml.YAMLError) as e:
        print(f"Invalid config: {e}", file=sys.stderr)
        return 1

    # Apply command-line overrides
    if args.num_games:
        config.game.num_games = args.num_games
    if args.seed is not None:
        config.table.seed = args.seed
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_table:
        config.logging.show_table = True

    # --game-log names a directory; the config file names the log file itself
    if args.game_log is not None:
        log_path = generate_log_filename(str(args.game_log), config.table.seed)
        game_log_config = GameLogConfig(enabled=True, output_path=log_path)
    else:
        game_log_config = config.game_log

    setup_logging(config.logging.level)
    display = TableDisplay(show_table=config.logging.show_table)

    print(f"Games: {config.game.num_games}")
    print(f"Slots: {config.table.capacity} (primary {config.table.default_open})")
    if game_log_config.enabled:
        print(f"Game log: {game_log_config.output_path}")
    print()

    try:
        with GameLogger(game_log_config) as game_logger:
            engine = GameEngine(config, game_logger)
            verbose = config.logging.level.upper() == "DEBUG"
            engine.set_callbacks(
                on_triple=display.print_triple if verbose else None,
                on_game_end=display.print_game_end,
            )

            display.print_separator()
            results = engine.run_games()
            display.print_final_results(results)

        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Simulation error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
