import logging
import pytest
from border_blaster.world import SENTINEL_CODE, WorldGrid

def test_dimensions(grid):
    assert grid.width == 10
    assert grid.height == 10

def test_region_at_reads_stored_code(grid):
    assert grid.region_at(0, 0) == "MA"
    assert grid.region_at(9, 0) == "EG"
    assert grid.region_at(9, 9) == "ZA"
    assert grid.region_at(0, 9) == "XX"
    # x is the column, y the row
    assert grid.region_at(6, 2) == "KE"

@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (10, 0), (0, 10), (-5, 42), (10, 10)])
def test_out_of_bounds_returns_sentinel(grid, x, y):
    assert grid.region_at(x, y) == SENTINEL_CODE

def test_empty_cells_read_as_sentinel():
    grid = WorldGrid([["MA", None], ["", "EG"]])
    assert grid.region_at(1, 0) == SENTINEL_CODE
    assert grid.region_at(0, 1) == SENTINEL_CODE
    assert grid.region_at(1, 1) == "EG"

def test_unknown_code_is_kept_and_logged(registry, caplog):
    with caplog.at_level(logging.WARNING, logger="border_blaster.world.grid"):
        grid = WorldGrid([["MA", "QQ"]], registry)

    assert grid.region_at(1, 0) == "QQ"
    assert "QQ" in caplog.text

def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        WorldGrid([["MA", "MA"], ["MA"]])

def test_empty_grid_rejected():
    with pytest.raises(ValueError):
        WorldGrid([])

def test_source_rows_are_copied():
    rows = [["MA", "EG"]]
    grid = WorldGrid(rows)
    rows[0][0] = "KE"
    assert grid.region_at(0, 0) == "MA"

def test_grid_is_read_only(grid):
    with pytest.raises(ValueError):
        grid._cells[0, 0] = "EG"

def test_fractional_coordinates_address_containing_tile(grid):
    assert grid.region_at(2.5, 0.9) == grid.region_at(2, 0)
    assert grid.region_at(9.5, 9.5) == "ZA"

@pytest.mark.parametrize("x,y", [(-0.5, 0), (0, -0.1), (10.0, 0), (3, 10.5)])
def test_fractional_off_map_returns_sentinel(grid, x, y):
    assert grid.region_at(x, y) == SENTINEL_CODE
