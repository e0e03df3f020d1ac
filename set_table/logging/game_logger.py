"""Game logger for detailed game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Sequence, TextIO

from set_table.config import GameLogConfig
from set_table.models.card import Card

from .formatters import format_cards, format_slots


class GameLogger:
    """Logger for table events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    Slot lists keep their positions, so gaps show up as "-".
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_session_start(self, num_games: int, seed: int | None) -> None:
        """Log session start.

        Args:
            num_games: Number of games to be played.
            seed: Base shuffle seed, or None if unseeded.
        """
        self._write({
            "type": "session_start",
            "timestamp": datetime.now().isoformat(),
            "num_games": num_games,
            "seed": seed,
        })

    def log_game_start(
        self,
        game_num: int,
        slots: Sequence[Card | None],
        cards_in_deck: int,
    ) -> None:
        """Log game start with the initially open cards."""
        self._write({
            "type": "game_start",
            "game": game_num,
            "slots": format_slots(slots),
            "deck": cards_in_deck,
        })

    def log_triple(
        self,
        game_num: int,
        step: int,
        indices: Sequence[int],
        cards: Sequence[Card],
    ) -> None:
        """Log a Set taken from the table.

        Args:
            game_num: Game number.
            step: Step number within the game.
            indices: Slot indices of the Set.
            cards: Cards of the Set, in index order.
        """
        self._write({
            "type": "triple",
            "game": game_num,
            "step": step,
            "indices": list(indices),
            "cards": format_cards(cards),
        })

    def log_open(
        self,
        game_num: int,
        step: int,
        indices: Sequence[int],
        slots: Sequence[Card | None],
        cards_in_deck: int,
    ) -> None:
        """Log three cards dealt onto the table.

        Args:
            game_num: Game number.
            step: Step number within the game.
            indices: Slots that received the new cards.
            slots: All slots after dealing.
            cards_in_deck: Cards left in the deck.
        """
        self._write({
            "type": "open",
            "game": game_num,
            "step": step,
            "indices": list(indices),
            "slots": format_slots(slots),
            "deck": cards_in_deck,
        })

    def log_compact(
        self,
        game_num: int,
        step: int,
        moves: Sequence[tuple[int, int]],
    ) -> None:
        """Log cards moved into the primary window."""
        self._write({
            "type": "compact",
            "game": game_num,
            "step": step,
            "moves": [{"from": src, "to": dst} for src, dst in moves],
        })

    def log_game_end(
        self,
        game_num: int,
        triples_found: int,
        slots: Sequence[Card | None],
        cards_in_deck: int,
    ) -> None:
        """Log game end with the cards left over."""
        self._write({
            "type": "game_end",
            "game": game_num,
            "triples_found": triples_found,
            "slots": format_slots(slots),
            "deck": cards_in_deck,
        })

    def log_session_end(self, total_games: int, triples_per_game: list[int]) -> None:
        """Log session end.

        Args:
            total_games: Total number of games played.
            triples_per_game: Sets found in each game, in order.
        """
        self._write({
            "type": "session_end",
            "total_games": total_games,
            "triples_per_game": triples_per_game,
        })
