"""Formatters for game log output."""

from typing import Sequence

from set_table.models.card import Card


def format_card(card: Card | None) -> str:
    """Format a single slot to string.

    Args:
        card: Card to format, or None for a gap.

    Returns:
        Card short code (e.g., "2GTD"), or "-" for a gap.
    """
    if card is None:
        return "-"
    return card.code


def format_cards(cards: Sequence[Card]) -> str:
    """Format cards to comma-separated string.

    Args:
        cards: Cards to format.

    Returns:
        Comma-separated card codes (e.g., "1RSD,2GTS,3POO").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def format_slots(slots: Sequence[Card | None]) -> list[str]:
    """Format all table slots, keeping gap positions."""
    return [format_card(c) for c in slots]
