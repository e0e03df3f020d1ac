"""Game logging module."""

from .formatters import format_card, format_cards, format_slots
from .game_logger import GameLogger

__all__ = [
    "GameLogger",
    "format_card",
    "format_cards",
    "format_slots",
]
