"""Card and deck models."""

from .card import Card, Color, Number, Shading, Shape, create_full_deck, is_triple
from .deck import AbstractDeck, Deck

__all__ = [
    "AbstractDeck",
    "Card",
    "Color",
    "Deck",
    "Number",
    "Shading",
    "Shape",
    "create_full_deck",
    "is_triple",
]
