"""
Tests for painter/seeds.py
"""

import pytest

from localtypes import Coord, Proportions
from painter import center_seed, corner_seeds, parse_seed, random_seeds


class TestSeeds:
    def test_center(self):
        assert center_seed(Proportions(64, 64)) == {Coord(32, 32)}
        assert center_seed(Proportions(1, 1)) == {Coord(0, 0)}

    def test_corners(self):
        assert corner_seeds(Proportions(4, 3)) == {
            Coord(0, 0),
            Coord(3, 0),
            Coord(0, 2),
            Coord(3, 2),
        }

    def test_corners_degenerate(self):
        assert corner_seeds(Proportions(5, 1)) == {Coord(0, 0), Coord(4, 0)}

    def test_random_in_bounds_and_distinct(self):
        seeds = random_seeds(20, Proportions(6, 5), rng_seed=0)
        assert len(seeds) == 20
        assert all(0 <= col < 6 and 0 <= row < 5 for col, row in seeds)

    def test_random_reproducible(self):
        proportions = Proportions(10, 10)
        assert random_seeds(3, proportions, 4) == random_seeds(3, proportions, 4)

    def test_random_fills_grid(self):
        seeds = random_seeds(6, Proportions(3, 2), rng_seed=1)
        assert seeds == {Coord(col, row) for col in range(3) for row in range(2)}

    @pytest.mark.parametrize("count", [0, -1, 7])
    def test_random_invalid_count(self, count):
        with pytest.raises(ValueError, match="distinct seeds"):
            random_seeds(count, Proportions(3, 2))


class TestParseSeed:
    def test_valid(self):
        assert parse_seed("3,4") == Coord(3, 4)
        assert parse_seed(" 0, 12") == Coord(0, 12)

    @pytest.mark.parametrize("text", ["3", "a,b", "1,2,3", ""])
    def test_invalid(self, text):
        with pytest.raises(ValueError, match="col,row"):
            parse_seed(text)
