"""Game engine that auto-plays solitaire Set on a Table."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from set_table.config import Config, TableConfig
from set_table.exceptions import TableFullError
from set_table.logging import GameLogger
from set_table.models.card import Card

from .finder import TripleFinder
from .table import Table

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Outcome of a single game."""

    game_number: int
    steps: int = 0
    triples: list[tuple[Card, Card, Card]] = field(default_factory=list)
    cards_left_open: int = 0
    cards_in_deck: int = 0
    table_full: bool = False  # Ended because no slots were free for a deal

    @property
    def triples_found(self) -> int:
        """Get number of Sets taken."""
        return len(self.triples)

    @property
    def cleared(self) -> bool:
        """Check if every card was taken."""
        return self.cards_left_open == 0 and self.cards_in_deck == 0


class GameEngine:
    """Plays games by repeatedly taking the first Set found.

    Each step either removes a Set (then compacts and tops the primary
    window back up) or, when no Set is open, deals three more cards. The
    game ends when no Set is open and three more cards cannot be dealt,
    either because the deck is short or because the table is full.
    """

    def __init__(
        self,
        config: Config | None = None,
        game_logger: GameLogger | None = None,
        finder: TripleFinder | None = None,
    ):
        """Initialize game engine.

        Args:
            config: Configuration (uses defaults if not provided)
            game_logger: GameLogger instance for detailed logging
            finder: Triple finder passed to each Table
        """
        self.config = config or Config()
        self.game_logger = game_logger
        self.finder = finder

        self._on_triple: Callable[[int, tuple[Card, Card, Card]], None] | None = None
        self._on_game_end: Callable[[GameResult, Table], None] | None = None

    def set_callbacks(
        self,
        on_triple: Callable[[int, tuple[Card, Card, Card]], None] | None = None,
        on_game_end: Callable[[GameResult, Table], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_triple: Called when a Set is taken (game_number, cards)
            on_game_end: Called when a game ends (result, final table)
        """
        self._on_triple = on_triple
        self._on_game_end = on_game_end

    def run_games(self, num_games: int | None = None) -> list[GameResult]:
        """Run multiple games.

        Args:
            num_games: Number of games (uses config if not specified)

        Returns:
            Results in game order
        """
        if num_games is None:
            num_games = self.config.game.num_games

        if self.game_logger:
            self.game_logger.log_session_start(num_games, self.config.table.seed)

        results = []
        for game_num in range(1, num_games + 1):
            logger.info(f"Starting game {game_num}/{num_games}")
            results.append(self.run_game(game_num))

        if self.game_logger:
            self.game_logger.log_session_end(
                num_games, [r.triples_found for r in results]
            )

        return results

    def run_game(self, game_number: int = 1) -> GameResult:
        """Run a single game.

        Args:
            game_number: Game number. With a configured seed, game N shuffles
                with seed + N - 1.

        Returns:
            GameResult for this game
        """
        table = Table(self._table_config(game_number), finder=self.finder)
        result = GameResult(game_number=game_number)

        if self.game_logger:
            self.game_logger.log_game_start(
                game_number, table.slots, table.cards_in_deck()
            )

        while True:
            result.steps += 1
            indices = table.find_triple()

            if indices is None:
                if not self._open_three(table, result):
                    break
                continue

            cards = tuple(table.get_open_card(i) for i in indices)
            table.remove_three_cards(indices)
            result.triples.append(cards)
            result.table_full = False
            logger.debug(f"Game {game_number}: took {cards} from {indices}")

            if self.game_logger:
                self.game_logger.log_triple(game_number, result.steps, indices, cards)
            if self._on_triple:
                self._on_triple(game_number, cards)

            moves = table.compact_open_cards()
            if moves and self.game_logger:
                self.game_logger.log_compact(game_number, result.steps, moves)

            while table.open_count() < table.default_open:
                if not self._open_three(table, result):
                    break

        result.cards_left_open = table.open_count()
        result.cards_in_deck = table.cards_in_deck()
        logger.info(
            f"Game {game_number} finished: {result.triples_found} sets, "
            f"{result.cards_left_open} cards left open"
        )

        if self.game_logger:
            self.game_logger.log_game_end(
                game_number, result.triples_found, table.slots, table.cards_in_deck()
            )
        if self._on_game_end:
            self._on_game_end(result, table)

        return result

    def _table_config(self, game_number: int) -> TableConfig:
        table_config = self.config.table
        if table_config.seed is None:
            return table_config
        return table_config.model_copy(update={"seed": table_config.seed + game_number - 1})

    def _open_three(self, table: Table, result: GameResult) -> bool:
        """Deal three cards and log which slots were filled.

        Returns:
            False if the deck is short or the table has no room
        """
        gaps = [i for i, card in enumerate(table.slots) if card is None]
        try:
            if not table.open_three_cards():
                return False
        except TableFullError as e:
            logger.warning(f"Game {result.game_number}: {e}")
            result.table_full = True
            return False

        filled = [i for i in gaps if table.get_open_card(i) is not None]
        if self.game_logger:
            self.game_logger.log_open(
                result.game_number,
                result.steps,
                filled,
                table.slots,
                table.cards_in_deck(),
            )
        return True
