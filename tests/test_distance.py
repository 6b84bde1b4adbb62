"""
Tests for painter/distance.py
"""

import itertools

import pytest

from freeman import Neighborhood
from localtypes import Rgb
from painter import FrontierInvariantError, color_dist, neighborhood_score
from palette import generate_palette
from utils.grid import Image


class TestColorDist:
    def test_known_value(self):
        assert color_dist(Rgb(1, 2, 3), Rgb(4, 6, 3)) == 25

    def test_identity(self):
        for color in generate_palette(3):
            assert color_dist(color, color) == 0

    def test_symmetry(self):
        for a, b in itertools.product(generate_palette(3), repeat=2):
            assert color_dist(a, b) == color_dist(b, a)

    def test_maximum_does_not_overflow(self):
        """uint8 channels must not wrap around."""
        assert color_dist((0, 0, 0), (255, 255, 255)) == 3 * 255 * 255
        assert color_dist((255, 0, 0), (0, 0, 0)) == 65025

    def test_accepts_plain_tuples(self):
        assert color_dist((0, 0, 0), Rgb(0, 3, 4)) == 25


class TestNeighborhoodScore:
    @pytest.fixture
    def grids(self):
        image = Image.new(Rgb(0, 0, 0), 3, 3, Neighborhood.KING)
        seen = Image.new(False, 3, 3, Neighborhood.KING)
        image.set(0, 0, Rgb(10, 0, 0))
        seen.set(0, 0, True)
        image.set(1, 0, Rgb(0, 0, 0))
        seen.set(1, 0, True)
        return image, seen

    def test_average_of_seen_neighbors(self, grids):
        image, seen = grids
        assert neighborhood_score(Rgb(0, 0, 0), 1, 1, image, seen) == 50

    def test_floor_division(self, grids):
        """(49 + 9) // 2"""
        image, seen = grids
        assert neighborhood_score(Rgb(3, 0, 0), 1, 1, image, seen) == 29

    def test_unseen_neighbors_are_ignored(self, grids):
        """(2, 0) borders (1, 0) only; the unseen black cells do not count."""
        image, seen = grids
        assert neighborhood_score(Rgb(0, 0, 4), 2, 0, image, seen) == 16

    def test_tower_ignores_diagonals(self, grids):
        image, seen = grids
        tower_image = Image.new(Rgb(0, 0, 0), 3, 3, Neighborhood.TOWER)
        tower_seen = Image.new(False, 3, 3, Neighborhood.TOWER)
        tower_image.array[...] = image.array
        tower_seen.array[...] = seen.array
        # Only (1, 0) is orthogonally adjacent to (1, 1)
        assert neighborhood_score(Rgb(3, 0, 0), 1, 1, tower_image, tower_seen) == 9

    def test_no_seen_neighbor(self, grids):
        image, seen = grids
        with pytest.raises(FrontierInvariantError, match="no seen neighbor"):
            neighborhood_score(Rgb(0, 0, 0), 2, 2, image, seen)
