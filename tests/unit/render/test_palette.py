"""Unit tests for the relationship colour scale."""

import pytest

from edgebundle.config import CATEGORY10
from edgebundle.core.types import RelationshipType
from edgebundle.render.palette import RelationshipPalette


@pytest.fixture
def palette():
    return RelationshipPalette([t.value for t in RelationshipType], CATEGORY10)


class TestRelationshipPalette:
    def test_vocabulary_colours(self, palette):
        assert palette.color("Member Of") == "#1f77b4"
        assert palette.color("Contributes To") == "#ff7f0e"
        assert palette.color("Depends On") == "#2ca02c"
        assert palette.color("Reviews") == "#d62728"

    def test_unknown_type_gets_next_colour(self, palette):
        assert palette.color("Mentors") == "#9467bd"
        assert palette.domain[-1] == "Mentors"
        # Stable on repeat lookups
        assert palette.color("Mentors") == "#9467bd"
        assert len(palette.domain) == 5

    def test_colours_cycle(self):
        palette = RelationshipPalette(["a", "b"], ["red", "blue"])
        assert palette.color("c") == "red"
        assert palette.color("d") == "blue"

    def test_requires_colours(self):
        with pytest.raises(ValueError):
            RelationshipPalette(["a"], [])
