"""Card table: the deck plus the window of open cards.

Open cards live in a fixed-length list of slots. A slot holds a Card or
None (a gap). Slot indices are positions, so removing a card only clears
its slot; cards move only during compaction.
"""

import logging
from typing import Iterable

from set_table.config import TableConfig
from set_table.exceptions import InvalidSlotStateError, TableFullError
from set_table.models.card import Card, create_full_deck
from set_table.models.deck import AbstractDeck, Deck

from .finder import SimpleTripleFinder, Triple, TripleFinder

logger = logging.getLogger(__name__)

CARDS_PER_DEAL = 3
EMPTY_SLOT = "empty"


class Table:
    """Set table with a deck and open card slots."""

    def __init__(
        self,
        config: TableConfig | None = None,
        deck: AbstractDeck | None = None,
        finder: TripleFinder | None = None,
    ):
        """Initialize table and open the first ``default_open`` cards.

        Args:
            config: Table configuration (uses defaults if not provided)
            deck: Card source. If not provided, a full deck is created and
                shuffled. A provided deck is used in its current order.
            finder: Triple finder (SimpleTripleFinder if not provided)
        """
        self.config = config or TableConfig()
        self.finder = finder or SimpleTripleFinder()

        if deck is None:
            deck = Deck(create_full_deck(), seed=self.config.seed)
            deck.shuffle()
        self.deck = deck

        self._slots: list[Card | None] = [None] * self.config.capacity
        for i in range(min(self.default_open, self.deck.remaining_count())):
            self._slots[i] = self.deck.take_top()

        logger.debug(
            f"Opened {self.open_count()} cards, {self.cards_in_deck()} left in deck"
        )

    @property
    def capacity(self) -> int:
        """Get total number of slots."""
        return len(self._slots)

    @property
    def default_open(self) -> int:
        """Get size of the primary window."""
        return self.config.default_open

    @property
    def slots(self) -> tuple[Card | None, ...]:
        """Get a read-only snapshot of all slots."""
        return tuple(self._slots)

    def cards_in_deck(self) -> int:
        """Get number of cards left in the deck."""
        return self.deck.remaining_count()

    def open_count(self) -> int:
        """Get number of occupied slots."""
        return sum(1 for card in self._slots if card is not None)

    def get_open_card(self, index: int) -> Card | None:
        """Get the card in a slot.

        Args:
            index: Slot index. Any integer is accepted.

        Returns:
            The card, or None if the slot is empty or the index is out of range.
        """
        if index < 0 or index >= len(self._slots):
            return None
        return self._slots[index]

    def enough_open(self) -> bool:
        """Check that the table has at least ``default_open`` slots.

        This compares slot capacity, not occupancy; use open_count() for
        the number of cards actually open.
        """
        return len(self._slots) >= self.default_open

    def find_triple(self) -> Triple | None:
        """Find a Set among the open cards.

        Returns:
            Three slot indices from the finder, or None if no Set is open.
        """
        return self.finder.find(self.slots)

    def open_three_cards(self) -> bool:
        """Deal three cards from the deck into the first empty slots.

        Returns:
            True if the cards were dealt, False if the deck has fewer than three.

        Raises:
            TableFullError: If fewer than three slots are empty.
        """
        if self.deck.remaining_count() < CARDS_PER_DEAL:
            return False

        gaps = [i for i, card in enumerate(self._slots) if card is None]
        if len(gaps) < CARDS_PER_DEAL:
            raise TableFullError(
                f"Need {CARDS_PER_DEAL} empty slots, only {len(gaps)} of "
                f"{self.capacity} are free"
            )

        for i in gaps[:CARDS_PER_DEAL]:
            self._slots[i] = self.deck.take_top()

        logger.debug(
            f"Opened slots {gaps[:CARDS_PER_DEAL]}, {self.cards_in_deck()} left in deck"
        )
        return True

    def remove_three_cards(self, indices: Iterable[int]) -> None:
        """Clear three occupied slots.

        Other slots are left untouched; gaps are not compacted.

        Args:
            indices: Three distinct indices of occupied slots.

        Raises:
            InvalidSlotStateError: If the indices are not three distinct
                occupied slots. The table is left unchanged.
        """
        indices = list(indices)
        if len(indices) != CARDS_PER_DEAL:
            raise InvalidSlotStateError(
                f"Expected {CARDS_PER_DEAL} indices, got {len(indices)}"
            )
        if len(set(indices)) != len(indices):
            raise InvalidSlotStateError(f"Duplicate slot indices: {indices}")
        for i in indices:
            if self.get_open_card(i) is None:
                raise InvalidSlotStateError(f"Slot {i} has no open card")

        for i in indices:
            self._slots[i] = None

        logger.debug(f"Removed cards from slots {indices}")

    def compact_open_cards(self) -> list[tuple[int, int]]:
        """Move cards from beyond the primary window into its gaps.

        Scans from both ends: the left index looks for gaps below
        ``default_open``, the right index for cards at or above it.

        Returns:
            (from, to) slot pairs for each card moved.
        """
        moves: list[tuple[int, int]] = []
        left = 0
        right = len(self._slots) - 1

        while left < self.default_open and right >= self.default_open:
            if self._slots[left] is not None:
                left += 1
            elif self._slots[right] is None:
                right -= 1
            else:
                self._slots[left] = self._slots[right]
                self._slots[right] = None
                moves.append((right, left))
                left += 1
                right -= 1

        if moves:
            logger.debug(f"Compacted open cards: {moves}")
        return moves

    def __str__(self) -> str:
        lines = [str(card) if card is not None else EMPTY_SLOT for card in self._slots]
        lines.append(str(self.cards_in_deck()))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"Table(open={self.open_count()}, capacity={self.capacity}, "
            f"deck={self.cards_in_deck()})"
        )
