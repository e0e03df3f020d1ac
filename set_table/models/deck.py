"""Deck of undealt cards."""

import random
from abc import ABC, abstractmethod
from typing import Iterable

from set_table.exceptions import DuplicateCardError, EmptyDeckError

from .card import Card


class AbstractDeck(ABC):
    """Interface the table needs from its card source.

    A deck is consumed from the top only; its size never grows.
    """

    @abstractmethod
    def shuffle(self) -> None:
        """Randomize the order of the remaining cards."""
        pass

    @abstractmethod
    def take_top(self) -> Card:
        """Remove and return the top card.

        Raises:
            EmptyDeckError: If no cards remain.
        """
        pass

    @abstractmethod
    def remaining_count(self) -> int:
        """Get number of cards left."""
        pass

    def __len__(self) -> int:
        return self.remaining_count()


class Deck(AbstractDeck):
    """List-backed deck. Index 0 is the top."""

    def __init__(self, cards: Iterable[Card], seed: int | None = None):
        """Initialize deck.

        Args:
            cards: Cards in top-to-bottom order.
            seed: Seed for shuffling. If None, shuffles are not reproducible.

        Raises:
            DuplicateCardError: If the same card appears twice.
        """
        self._cards: list[Card] = list(cards)
        if len(set(self._cards)) != len(self._cards):
            raise DuplicateCardError("Deck contains duplicate cards")
        self._rng = random.Random(seed)

    def shuffle(self) -> None:
        self._rng.shuffle(self._cards)

    def take_top(self) -> Card:
        if not self._cards:
            raise EmptyDeckError("Cannot take a card from an empty deck")
        return self._cards.pop(0)

    def remaining_count(self) -> int:
        return len(self._cards)

    def __contains__(self, card: Card) -> bool:
        return card in self._cards

    def __str__(self) -> str:
        return f"Deck({len(self._cards)} cards)"
