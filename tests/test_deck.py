"""Tests for deck model."""

import pytest

from set_table.exceptions import DuplicateCardError, EmptyDeckError
from set_table.models.card import Card, create_full_deck
from set_table.models.deck import AbstractDeck, Deck


@pytest.fixture
def full_deck():
    return Deck(create_full_deck())


class TestDeck:
    """Tests for Deck class."""

    def test_remaining_count(self, full_deck):
        """Test count of a full deck."""
        assert full_deck.remaining_count() == 81
        assert len(full_deck) == 81

    def test_take_top_order(self, full_deck):
        """Test that cards come off the top in order."""
        expected = create_full_deck()
        assert full_deck.take_top() == expected[0]
        assert full_deck.take_top() == expected[1]
        assert full_deck.remaining_count() == 79

    def test_take_top_removes_card(self, full_deck):
        """Test that a dealt card is no longer in the deck."""
        top = full_deck.take_top()
        assert top not in full_deck

    def test_take_top_empty(self):
        """Test taking from an empty deck."""
        deck = Deck([])
        with pytest.raises(EmptyDeckError):
            deck.take_top()

    def test_duplicate_cards_rejected(self):
        """Test that duplicate cards are rejected at construction."""
        c = Card.from_code("1RSD")
        with pytest.raises(DuplicateCardError):
            Deck([c, Card.from_code("2RSD"), c])

    def test_shuffle_keeps_cards(self, full_deck):
        """Test that shuffling neither adds nor loses cards."""
        full_deck.shuffle()
        dealt = [full_deck.take_top() for _ in range(81)]
        assert set(dealt) == set(create_full_deck())

    def test_shuffle_seeded(self):
        """Test that the same seed gives the same order."""
        deck1 = Deck(create_full_deck(), seed=42)
        deck2 = Deck(create_full_deck(), seed=42)
        deck1.shuffle()
        deck2.shuffle()

        assert [deck1.take_top() for _ in range(10)] == [deck2.take_top() for _ in range(10)]

    def test_shuffle_changes_order(self):
        """Test that a shuffle moves cards around."""
        deck = Deck(create_full_deck(), seed=7)
        deck.shuffle()
        assert [deck.take_top() for _ in range(81)] != create_full_deck()

    def test_is_abstract_deck(self, full_deck):
        """Test that Deck implements the deck interface."""
        assert isinstance(full_deck, AbstractDeck)

    def test_abstract_deck_not_instantiable(self):
        """Test that the interface cannot be used directly."""
        with pytest.raises(TypeError):
            AbstractDeck()
