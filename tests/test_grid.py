"""Unit tests for grid construction and editing."""

from math import inf

import pytest

from gridpath.core.bfs import bfs
from gridpath.core.grid import (
    clear_walls,
    make_grid,
    random_walls,
    rebuild_grid,
    reset_search,
    toggle_wall,
    wall_coords,
)
from gridpath.core.types import GridConfigError


class TestMakeGrid:
    """Test fresh grid construction."""

    def test_dimensions_and_identity(self):
        """Cells are laid out [row][col] and know their own coordinates."""
        grid = make_grid(3, 4, (0, 0), (2, 3))
        assert len(grid.cells) == 3
        assert all(len(row) == 4 for row in grid.cells)
        assert grid.cell_at((2, 1)).coord == (2, 1)

    def test_endpoint_flags(self):
        """Exactly one start and one finish cell are flagged."""
        grid = make_grid(3, 4, (1, 0), (2, 3))
        starts = [c.coord for c in grid.iter_cells() if c.is_start]
        finishes = [c.coord for c in grid.iter_cells() if c.is_finish]
        assert starts == [(1, 0)]
        assert finishes == [(2, 3)]

    def test_scratch_fields_initialised(self):
        """Every cell starts with pristine search state."""
        grid = make_grid(2, 2, (0, 0), (1, 1))
        for cell in grid.iter_cells():
            assert cell.distance == inf
            assert (cell.g, cell.h, cell.f) == (0, 0, 0)
            assert cell.previous is None
            assert cell.is_visited is False

    def test_walls_applied(self):
        """Requested wall coordinates are walled, nothing else."""
        grid = make_grid(3, 3, (0, 0), (2, 2), walls=[(1, 1), (0, 2)])
        assert wall_coords(grid) == [(0, 2), (1, 1)]

    def test_single_cell_start_is_finish(self, single_cell):
        """A 1x1 grid may use the same coordinate for both endpoints."""
        cell = single_cell.cell_at((0, 0))
        assert cell.is_start and cell.is_finish

    @pytest.mark.parametrize("rows,cols", [(0, 3), (3, 0), (-1, 2)])
    def test_empty_grid_rejected(self, rows, cols):
        """Grids need at least one cell."""
        with pytest.raises(GridConfigError):
            make_grid(rows, cols, (0, 0), (0, 0))

    def test_endpoint_out_of_bounds_rejected(self):
        """Start/finish must lie on the grid."""
        with pytest.raises(GridConfigError):
            make_grid(3, 3, (0, 0), (3, 0))
        with pytest.raises(GridConfigError):
            make_grid(3, 3, (-1, 0), (2, 2))

    def test_wall_on_endpoint_rejected(self):
        """Start/finish can never be walls."""
        with pytest.raises(GridConfigError):
            make_grid(3, 3, (0, 0), (2, 2), walls=[(0, 0)])
        with pytest.raises(GridConfigError):
            make_grid(3, 3, (0, 0), (2, 2), walls=[(2, 2)])

    def test_wall_out_of_bounds_rejected(self):
        """Wall layouts must fit the grid."""
        with pytest.raises(GridConfigError):
            make_grid(3, 3, (0, 0), (2, 2), walls=[(5, 5)])

    def test_config_error_is_value_error(self):
        """Callers can catch configuration problems as ValueError."""
        assert issubclass(GridConfigError, ValueError)


class TestNeighbors:
    """Test the fixed neighbor enumeration."""

    def test_order_up_left_down_right(self, center_3x3):
        """Interior cells enumerate up, left, down, right."""
        cell = center_3x3.cell_at((1, 1))
        assert [n.coord for n in center_3x3.neighbors(cell)] == [(0, 1), (1, 0), (2, 1), (1, 2)]

    def test_corner_stays_in_bounds(self, open_5x5):
        """Off-grid positions are never produced."""
        cell = open_5x5.cell_at((0, 0))
        assert [n.coord for n in open_5x5.neighbors(cell)] == [(1, 0), (0, 1)]

    def test_walls_and_visited_filtered(self):
        """Walls and visited cells are skipped."""
        grid = make_grid(3, 3, (1, 1), (2, 2), walls=[(0, 1)])
        grid.cell_at((1, 0)).is_visited = True
        cell = grid.cell_at((1, 1))
        assert [n.coord for n in grid.neighbors(cell)] == [(2, 1), (1, 2)]


class TestToggleWall:
    """Test wall editing."""

    def test_toggle_flips_and_returns_grid(self):
        """Toggling twice restores the cell and returns the same grid."""
        grid = make_grid(3, 3, (0, 0), (2, 2))
        assert toggle_wall(grid, 1, 1) is grid
        assert grid.cell_at((1, 1)).is_wall
        toggle_wall(grid, 1, 1)
        assert not grid.cell_at((1, 1)).is_wall

    def test_start_and_finish_are_noops(self):
        """Endpoints can never become walls."""
        grid = make_grid(3, 3, (0, 0), (2, 2))
        toggle_wall(grid, 0, 0)
        toggle_wall(grid, 2, 2)
        assert wall_coords(grid) == []

    def test_out_of_range_is_ignored(self):
        """No error is raised for coordinates off the grid."""
        grid = make_grid(3, 3, (0, 0), (2, 2))
        toggle_wall(grid, 9, 9)
        toggle_wall(grid, -1, 0)
        assert wall_coords(grid) == []


class TestRebuild:
    """Test rebuilding a grid while keeping the wall layout."""

    def test_walls_preserved(self):
        """A plain rebuild keeps walls and endpoints."""
        grid = make_grid(4, 4, (0, 0), (3, 3), walls=[(1, 1), (2, 2)])
        new = rebuild_grid(grid)
        assert new is not grid
        assert wall_coords(new) == [(1, 1), (2, 2)]
        assert (new.start, new.finish) == ((0, 0), (3, 3))

    def test_moved_endpoint_clears_wall_under_it(self):
        """Moving the start onto a wall removes that wall."""
        grid = make_grid(4, 4, (0, 0), (3, 3), walls=[(1, 1), (2, 2)])
        new = rebuild_grid(grid, start=(1, 1))
        assert new.start == (1, 1)
        assert new.cell_at((1, 1)).is_start
        assert not new.cell_at((0, 0)).is_start
        assert wall_coords(new) == [(2, 2)]

    def test_move_finish(self):
        """The finish can move independently of the start."""
        grid = make_grid(4, 4, (0, 0), (3, 3))
        new = rebuild_grid(grid, finish=(0, 3))
        assert new.finish_cell.coord == (0, 3)
        assert new.start == (0, 0)

    def test_rebuild_drops_search_state(self):
        """A rebuilt grid has fresh scratch fields."""
        grid = make_grid(3, 3, (0, 0), (2, 2))
        bfs(grid, grid.start_cell, grid.finish_cell)
        new = rebuild_grid(grid)
        assert all(not c.is_visited and c.previous is None for c in new.iter_cells())

    def test_clear_walls(self):
        """clear_walls keeps the endpoints and drops every wall."""
        grid = make_grid(3, 3, (0, 1), (2, 1), walls=[(1, 0), (1, 1)])
        new = clear_walls(grid)
        assert wall_coords(new) == []
        assert (new.start, new.finish) == ((0, 1), (2, 1))


class TestResetSearch:
    """Test the scratch reset required before each run."""

    def test_reset_after_run(self, open_5x5):
        """All scratch fields return to their initial values; walls stay."""
        toggle_wall(open_5x5, 2, 2)
        bfs(open_5x5, open_5x5.start_cell, open_5x5.finish_cell)
        reset_search(open_5x5)
        for cell in open_5x5.iter_cells():
            assert cell.distance == inf
            assert cell.previous is None
            assert not cell.is_visited
        assert wall_coords(open_5x5) == [(2, 2)]


class TestRandomWalls:
    """Test maze randomization."""

    def test_same_seed_same_layout(self):
        """The layout depends only on the seed."""
        a = random_walls(10, 12, (0, 0), (9, 11), seed=7)
        b = random_walls(10, 12, (0, 0), (9, 11), seed=7)
        assert wall_coords(a) == wall_coords(b)

    @pytest.mark.parametrize("seed", range(5))
    def test_endpoints_never_walled(self, seed):
        """Start and finish stay open whatever the draw."""
        grid = random_walls(6, 6, (2, 3), (5, 0), seed=seed)
        assert not grid.start_cell.is_wall
        assert not grid.finish_cell.is_wall

    def test_some_but_not_all_cells_walled(self):
        """Roughly 30% of a large grid ends up walled."""
        grid = random_walls(30, 40, (15, 2), (15, 37), seed=1)
        share = len(wall_coords(grid)) / (30 * 40)
        assert 0.15 < share < 0.45
