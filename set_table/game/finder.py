"""Triple finders.

A finder receives the table's open slots (gaps included, as None) and
returns the indices of three cards that form a Set.
"""

from abc import ABC, abstractmethod
from itertools import combinations
from typing import Iterator, Sequence

from set_table.models.card import Card, is_triple

Triple = tuple[int, int, int]
Slots = Sequence[Card | None]


def _open_triples(slots: Slots) -> Iterator[Triple]:
    """Yield every Set among occupied slots in lexicographic index order."""
    occupied = [i for i, card in enumerate(slots) if card is not None]
    for i, j, k in combinations(occupied, 3):
        if is_triple(slots[i], slots[j], slots[k]):
            yield (i, j, k)


class TripleFinder(ABC):
    """Abstract base class for triple search.

    Implementations must be pure: same slots in, same result out, and the
    slots are never modified.
    """

    @abstractmethod
    def find(self, slots: Slots) -> Triple | None:
        """Find one Set among the open cards.

        Args:
            slots: Open slots, None for a gap.

        Returns:
            Three ascending slot indices, or None if no Set is open.
        """
        pass

    def find_all(self, slots: Slots) -> list[Triple]:
        """Find every Set among the open cards."""
        return list(_open_triples(slots))


class SimpleTripleFinder(TripleFinder):
    """Returns the lexicographically first Set.

    For each pair of open cards the completing card is computed and looked
    up, so the search is quadratic in the number of open cards.
    """

    def find(self, slots: Slots) -> Triple | None:
        positions: dict[Card, int] = {
            card: i for i, card in enumerate(slots) if card is not None
        }
        occupied = sorted(positions.values())

        for a, i in enumerate(occupied):
            for j in occupied[a + 1:]:
                k = positions.get(slots[i].third(slots[j]))
                if k is not None and k > j:
                    return (i, j, k)
        return None


class BruteForceTripleFinder(TripleFinder):
    """Checks every combination of three open cards."""

    def find(self, slots: Slots) -> Triple | None:
        return next(_open_triples(slots), None)
