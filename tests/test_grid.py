import pytest

from dijkstra_viz.core.grid import Grid
from dijkstra_viz.core.types import INFINITY


def test_default_markers_wide_grid():
    g = Grid(20, 30)
    assert g.start.pos == (10, 5)
    assert g.end.pos == (10, 25)
    assert g.start.is_start and g.end.is_end


def test_default_markers_narrow_grid():
    g = Grid(1, 3)
    assert g.start.pos == (0, 0)
    assert g.end.pos == (0, 2)

    g = Grid(4, 1)
    assert g.start.pos == (0, 0)
    assert g.end.pos == (3, 0)


@pytest.mark.parametrize("rows, cols", [(0, 5), (5, 0), (1, 1)])
def test_rejects_degenerate_dimensions(rows, cols):
    with pytest.raises(ValueError):
        Grid(rows, cols)


def test_rejects_bad_markers():
    with pytest.raises(ValueError):
        Grid(3, 3, start=(0, 0), end=(0, 0))
    with pytest.raises(ValueError):
        Grid(3, 3, start=(3, 0), end=(0, 0))


def test_neighbors_order_and_bounds():
    g = Grid(3, 3, start=(0, 0), end=(2, 2))
    mid = g.cells[1][1]
    assert [c.pos for c in g.neighbors(mid)] == [(0, 1), (2, 1), (1, 0), (1, 2)]

    corner = g.cells[0][0]
    assert [c.pos for c in g.neighbors(corner)] == [(1, 0), (0, 1)]


def test_toggle_wall_flips():
    g = Grid(3, 3, start=(0, 0), end=(2, 2))
    cell = g.cells[1][1]
    assert g.toggle_wall(cell)
    assert cell.is_wall
    assert g.toggle_wall(cell)
    assert not cell.is_wall


def test_toggle_wall_on_markers_is_noop():
    g = Grid(3, 3, start=(0, 0), end=(2, 2))
    assert not g.toggle_wall(g.start)
    assert not g.toggle_wall(g.end)
    assert not g.start.is_wall and g.start.is_start
    assert not g.end.is_wall and g.end.is_end


def test_relocate_start_and_end():
    g = Grid(3, 3, start=(0, 0), end=(2, 2))
    old = g.start
    assert g.on_move_start(1, 1)
    assert g.start.pos == (1, 1) and g.start.is_start
    assert not old.is_start

    assert g.on_move_end(0, 2)
    assert g.end.pos == (0, 2)
    assert sum(c.is_start for c in g.iter_cells()) == 1
    assert sum(c.is_end for c in g.iter_cells()) == 1


def test_relocate_refuses_walls_and_other_marker():
    g = Grid(3, 3, start=(0, 0), end=(2, 2))
    g.on_cell_toggle_wall(1, 1)
    assert not g.on_move_start(1, 1)
    assert not g.on_move_start(2, 2)
    assert not g.on_move_end(0, 0)
    assert g.start.pos == (0, 0)
    assert g.end.pos == (2, 2)


def test_out_of_bounds_events_are_ignored():
    g = Grid(3, 3, start=(0, 0), end=(2, 2))
    assert not g.on_cell_toggle_wall(-1, 0)
    assert not g.on_cell_toggle_wall(3, 3)
    assert not g.on_move_start(0, 9)
    assert not g.on_move_end(9, 0)
    assert g.wall_count() == 0
    assert g.start.pos == (0, 0) and g.end.pos == (2, 2)


def test_reset_search_state_keeps_walls():
    g = Grid(3, 3, start=(0, 0), end=(2, 2))
    g.on_cell_toggle_wall(1, 1)
    cell = g.cells[0][1]
    cell.distance = 4
    cell.previous = g.start
    cell.visited = cell.current = cell.is_path = True

    g.reset_search_state()

    assert cell.distance == INFINITY
    assert cell.previous is None
    assert not (cell.visited or cell.current or cell.is_path)
    assert g.cells[1][1].is_wall


def test_reset_all_clears_walls_keeps_markers():
    g = Grid(3, 3, start=(0, 0), end=(2, 2))
    g.on_cell_toggle_wall(1, 1)
    g.on_cell_toggle_wall(0, 1)
    g.reset_all()
    assert g.wall_count() == 0
    assert g.start.pos == (0, 0) and g.end.pos == (2, 2)


def test_locked_grid_ignores_mutations():
    g = Grid(3, 3, start=(0, 0), end=(2, 2))
    g.on_cell_toggle_wall(0, 1)
    g.cells[1][0].visited = True
    g.locked = True

    assert not g.on_cell_toggle_wall(1, 1)
    assert not g.on_move_start(1, 1)
    assert not g.on_move_end(1, 1)
    g.reset_all()
    g.reset_search_state()

    assert g.cells[0][1].is_wall
    assert g.cells[1][0].visited
    assert not g.cells[1][1].is_wall
    assert g.start.pos == (0, 0) and g.end.pos == (2, 2)
