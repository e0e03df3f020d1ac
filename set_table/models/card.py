"""Card model and the Set matching rule."""

from enum import IntEnum
from typing import TypeVar

from pydantic import BaseModel

from set_table.exceptions import InvalidCardError


class Number(IntEnum):
    """Number of symbols on the card."""

    ONE = 1
    TWO = 2
    THREE = 3


class Color(IntEnum):
    """Symbol color."""

    RED = 0
    GREEN = 1
    PURPLE = 2


class Shading(IntEnum):
    """Symbol fill."""

    SOLID = 0
    STRIPED = 1
    OPEN = 2


class Shape(IntEnum):
    """Symbol shape."""

    DIAMOND = 0
    SQUIGGLE = 1
    OVAL = 2


# Single-letter codes used by Card.code / Card.from_code
NUMBER_CODES = {Number.ONE: "1", Number.TWO: "2", Number.THREE: "3"}
COLOR_CODES = {Color.RED: "R", Color.GREEN: "G", Color.PURPLE: "P"}
SHADING_CODES = {Shading.SOLID: "S", Shading.STRIPED: "T", Shading.OPEN: "O"}
SHAPE_CODES = {Shape.DIAMOND: "D", Shape.SQUIGGLE: "S", Shape.OVAL: "O"}

FULL_DECK_SIZE = 81

_E = TypeVar("_E", bound=IntEnum)


def _completes(a: IntEnum, b: IntEnum, c: IntEnum) -> bool:
    """All same or all different, which for three ternary values means sum % 3 == 0."""
    return (a + b + c) % 3 == 0


def _third_value(enum_cls: type[_E], a: _E, b: _E) -> _E:
    for member in enum_cls:
        if _completes(a, b, member):
            return member
    raise ValueError(f"No {enum_cls.__name__} completes {a!r} and {b!r}")


class Card(BaseModel, frozen=True):
    """Single Set card with four ternary attributes."""

    number: Number
    color: Color
    shading: Shading
    shape: Shape

    @property
    def code(self) -> str:
        """Four-character short code (e.g. "2GTD" for two green striped diamonds)."""
        return (
            f"{NUMBER_CODES[self.number]}{COLOR_CODES[self.color]}"
            f"{SHADING_CODES[self.shading]}{SHAPE_CODES[self.shape]}"
        )

    @classmethod
    def from_code(cls, code: str) -> "Card":
        """Build a card from its short code.

        Args:
            code: Four characters: number, color, shading, shape.

        Returns:
            Card matching the code.

        Raises:
            InvalidCardError: If the code is malformed.
        """
        if len(code) != 4:
            raise InvalidCardError(f"Card code must have 4 characters: {code!r}")
        try:
            return cls(
                number=_lookup(NUMBER_CODES, code[0]),
                color=_lookup(COLOR_CODES, code[1].upper()),
                shading=_lookup(SHADING_CODES, code[2].upper()),
                shape=_lookup(SHAPE_CODES, code[3].upper()),
            )
        except KeyError as e:
            raise InvalidCardError(f"Unknown card code {code!r}") from e

    def third(self, other: "Card") -> "Card":
        """Get the unique card that forms a Set with this card and ``other``."""
        return Card(
            number=_third_value(Number, self.number, other.number),
            color=_third_value(Color, self.color, other.color),
            shading=_third_value(Shading, self.shading, other.shading),
            shape=_third_value(Shape, self.shape, other.shape),
        )

    def __str__(self) -> str:
        plural = "s" if self.number > Number.ONE else ""
        return (
            f"{int(self.number)} {self.color.name.lower()} "
            f"{self.shading.name.lower()} {self.shape.name.lower()}{plural}"
        )

    def __repr__(self) -> str:
        return f"Card({self.code})"


def _lookup(codes: dict[_E, str], char: str) -> _E:
    for member, code in codes.items():
        if code == char:
            return member
    raise KeyError(char)


def is_triple(a: Card, b: Card, c: Card) -> bool:
    """Check whether three cards form a Set.

    For each attribute the three values must be either all the same or all
    different. Identical cards never form a Set.
    """
    if a == b or b == c or a == c:
        return False
    return (
        _completes(a.number, b.number, c.number)
        and _completes(a.color, b.color, c.color)
        and _completes(a.shading, b.shading, c.shading)
        and _completes(a.shape, b.shape, c.shape)
    )


def create_full_deck() -> list[Card]:
    """Create the full 81-card deck in canonical (unshuffled) order."""
    cards: list[Card] = []

    for number in Number:
        for color in Color:
            for shading in Shading:
                for shape in Shape:
                    cards.append(
                        Card(number=number, color=color, shading=shading, shape=shape)
                    )

    return cards
