"""Logging utilities and table display."""

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from set_table.game.engine import GameResult
    from set_table.game.table import Table
    from set_table.models.card import Card


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class TableDisplay:
    """Display game progress to stdout."""

    def __init__(self, show_table: bool = False):
        """Initialize display.

        Args:
            show_table: Whether to print the final table of each game
        """
        self.show_table = show_table

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_triple(self, game_number: int, cards: tuple["Card", ...]) -> None:
        """Print a Set taken from the table."""
        print(f"  Game {game_number}: SET {' | '.join(str(c) for c in cards)}")

    def print_table(self, table: "Table") -> None:
        """Print every slot and the deck count (if show_table is enabled)."""
        if not self.show_table:
            return

        # str(table) is one line per slot followed by the deck count
        *slot_lines, deck_line = str(table).split("\n")
        print("\nTable:")
        for i, line in enumerate(slot_lines):
            print(f"  [{i:2d}] {line}")
        print(f"  Deck: {deck_line}")

    def print_game_end(self, result: "GameResult", table: "Table") -> None:
        """Print game end results."""
        self.print_table(table)
        status = "cleared" if result.cleared else f"{result.cards_left_open} cards left"
        if result.table_full:
            status += ", table full"
        print(
            f"\nGame {result.game_number} finished: "
            f"{result.triples_found} sets in {result.steps} steps ({status})"
        )

    def print_final_results(self, results: list["GameResult"]) -> None:
        """Print session summary."""
        self.print_separator()
        print("FINAL RESULTS")
        self.print_separator()

        for result in results:
            print(
                f"  Game {result.game_number}: {result.triples_found} sets, "
                f"{result.cards_left_open} left open"
            )

        if results:
            average = sum(r.triples_found for r in results) / len(results)
            cleared = sum(1 for r in results if r.cleared)
            print(f"  Average sets: {average:.2f}, cleared: {cleared}/{len(results)}")
