"""
Tests for the Table.
"""

import dataclasses

import pytest
from src.simulation.table import (
    Table,
    InvalidPositionError,
    InvalidPositionShapeError,
    RobotError,
)


class TestTable:
    """Tests for Table."""

    @pytest.fixture
    def table(self):
        return Table()

    def test_default_dimensions(self, table):
        assert table.dimensions() == (5, 5)

    def test_custom_dimensions(self):
        table = Table(width=3, height=7)
        assert table.dimensions() == (3, 7)

    def test_in_bounds(self, table):
        assert table.is_in_bounds((0, 0))
        assert table.is_in_bounds((0, 4))
        assert table.is_in_bounds((4, 4))
        assert table.is_in_bounds([2, 3])

    def test_out_of_bounds(self, table):
        assert not table.is_in_bounds((5, 5))
        assert not table.is_in_bounds((-1, -1))
        assert not table.is_in_bounds((5, 0))
        assert not table.is_in_bounds((0, 5))

    def test_bounds_follow_dimensions(self):
        table = Table(width=2, height=8)
        assert table.is_in_bounds((1, 7))
        assert not table.is_in_bounds((2, 7))

    def test_malformed_position(self, table):
        with pytest.raises(InvalidPositionError, match="Invalid position"):
            table.is_in_bounds((0, 0, 0))

        with pytest.raises(InvalidPositionError):
            table.is_in_bounds((0,))

        with pytest.raises(InvalidPositionError):
            table.is_in_bounds(3)

    @pytest.mark.parametrize("position", [
        (0.5, 1),
        (1, 2.0),
        (True, 1),
        (0, False),
        ("a", 1),
        (1, None),
    ])
    def test_non_integer_components(self, table, position):
        with pytest.raises(InvalidPositionError, match="Invalid position"):
            table.is_in_bounds(position)

    def test_shape_error_alias(self, table):
        assert InvalidPositionShapeError is InvalidPositionError
        with pytest.raises(RobotError):
            table.is_in_bounds("00")

    def test_immutable(self, table):
        with pytest.raises(dataclasses.FrozenInstanceError):
            table.width = 10

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 5), (5, "5")])
    def test_invalid_dimensions(self, width, height):
        with pytest.raises(ValueError):
            Table(width=width, height=height)

    def test_cells_top_row_first(self):
        table = Table(width=2, height=2)
        assert list(table.cells()) == [(0, 1), (1, 1), (0, 0), (1, 0)]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
