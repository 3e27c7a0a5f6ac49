"""
Relationship colour scale.

Ordinal mapping from relationship type to colour, with the same behaviour
as `d3.scaleOrdinal().domain(types).range(colours)`: known types take the
colour at their position, and a type seen for the first time is appended
to the domain and gets the next colour, cycling through the range.
"""

from typing import Dict, Iterable, List, Sequence


class RelationshipPalette:
    def __init__(self, domain: Iterable[str], colors: Sequence[str]):
        if not colors:
            raise ValueError("RelationshipPalette needs at least one colour")
        self._colors = list(colors)
        self._index: Dict[str, int] = {}
        for value in domain:
            self._register(value)

    def _register(self, value: str) -> int:
        if value not in self._index:
            self._index[value] = len(self._index)
        return self._index[value]

    def color(self, relationship_type: str) -> str:
        index = self._register(relationship_type)
        return self._colors[index % len(self._colors)]

    @property
    def domain(self) -> List[str]:
        return list(self._index)

    def legend(self, types: Iterable[str]) -> List[tuple]:
        """(type, colour) pairs for the given types."""
        return [(t, self.color(t)) for t in types]
