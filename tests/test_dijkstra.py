import itertools

import pytest

from dijkstra_viz.core.dijkstra import DijkstraAlgo, reconstruct_path
from dijkstra_viz.core.grid import Grid
from dijkstra_viz.core.types import FOUND, NOT_FOUND, RUNNING


def _walls(grid, *positions):
    for r, c in positions:
        assert grid.on_cell_toggle_wall(r, c)


def _run(grid):
    algo = DijkstraAlgo()
    algo.init(grid)
    return algo, algo.run()


def test_corridor_example():
    g = Grid(1, 3)
    algo, res = _run(g)
    assert res.status == FOUND
    assert res.metrics["path_len"] == 2
    assert res.metrics["popped"] == 3
    assert [c.pos for c in res.path] == [(0, 0), (0, 1), (0, 2)]


@pytest.mark.parametrize("start, end", [
    ((0, 0), (4, 5)),
    ((2, 3), (2, 0)),
    ((4, 0), (0, 5)),
    ((1, 1), (1, 2)),
])
def test_open_grid_matches_manhattan(start, end):
    g = Grid(5, 6, start=start, end=end)
    _, res = _run(g)
    manhattan = abs(start[0] - end[0]) + abs(start[1] - end[1])
    assert res.status == FOUND
    assert res.metrics["path_len"] == manhattan
    assert g.end.distance == manhattan
    assert len(res.path) == manhattan + 1


def test_every_pair_on_small_open_grid():
    positions = [(r, c) for r in range(3) for c in range(3)]
    for start, end in itertools.permutations(positions, 2):
        g = Grid(3, 3, start=start, end=end)
        _, res = _run(g)
        assert res.metrics["path_len"] == abs(start[0] - end[0]) + abs(start[1] - end[1])


def test_path_is_connected_and_matches_distance():
    # wall with one gap forces a detour
    g = Grid(5, 5, start=(0, 0), end=(4, 0))
    _walls(g, (2, 0), (2, 1), (2, 2), (2, 3))
    _, res = _run(g)

    assert res.status == FOUND
    path = res.path
    assert path[0] == g.start and path[-1] == g.end
    assert len(path) - 1 == g.end.distance == res.metrics["path_len"] == 12
    for a, b in zip(path, path[1:]):
        assert abs(a.row - b.row) + abs(a.col - b.col) == 1
        assert not b.is_wall


def test_path_flags_exclude_start():
    g = Grid(1, 4)
    _run(g)
    flagged = [c.pos for c in g.iter_cells() if c.is_path]
    assert flagged == [(0, 1), (0, 2), (0, 3)]
    assert not g.start.is_path


def test_enclosed_end_is_not_found():
    g = Grid(5, 5, start=(0, 0), end=(2, 2))
    _walls(g, (1, 2), (3, 2), (2, 1), (2, 3))
    _, res = _run(g)
    assert res.status == NOT_FOUND
    assert res.path is None
    assert not any(c.is_path for c in g.iter_cells())
    # everything reachable got closed
    assert sum(c.visited for c in g.iter_cells()) == 25 - 4 - 1


def test_end_in_corner_cut_off_by_border():
    g = Grid(3, 3, start=(2, 2), end=(0, 0))
    _walls(g, (0, 1), (1, 0))
    _, res = _run(g)
    assert res.status == NOT_FOUND


def test_repeated_runs_are_stable():
    g = Grid(6, 6, start=(0, 0), end=(5, 5))
    _walls(g, (1, 1), (2, 2), (3, 3), (1, 4), (4, 1))
    lengths = set()
    for _ in range(3):
        g.reset_search_state()
        _, res = _run(g)
        lengths.add(res.metrics["path_len"])
    assert lengths == {10}


def test_rerun_without_reset_clears_stale_state():
    g = Grid(1, 5)
    _run(g)
    g.on_move_end(0, 2)
    _, res = _run(g)
    assert res.metrics["path_len"] == 2
    assert not g.cells[0][3].is_path
    assert not g.cells[0][4].is_path


def test_steps_are_lazy_and_mark_current():
    g = Grid(1, 4)
    algo = DijkstraAlgo()
    algo.init(g)
    gen = algo.steps()

    first = next(gen)
    assert first.status == RUNNING
    assert first.current == g.start
    assert g.start.visited and g.start.current
    assert [c.pos for c in first.opened] == [(0, 1)]
    assert not g.cells[0][1].visited

    second = next(gen)
    assert not g.start.current
    assert second.current.pos == (0, 1)

    statuses = [r.status for r in gen]
    assert statuses[-1] == FOUND
    assert not any(c.current for c in g.iter_cells())


def test_visit_distances_never_decrease():
    g = Grid(6, 7, start=(3, 0), end=(0, 6))
    _walls(g, (1, 2), (2, 2), (3, 2), (4, 2), (2, 4), (3, 4), (4, 4), (5, 4))
    algo = DijkstraAlgo()
    algo.init(g)
    dists = [r.current.distance for r in algo.steps() if r.current is not None]
    assert dists == sorted(dists)


def test_step_keeps_returning_terminal_result():
    g = Grid(1, 2)
    algo = DijkstraAlgo()
    algo.init(g)
    res = algo.step()
    while not res.finished:
        res = algo.step()
    assert algo.step() is res
    assert algo.step().status == FOUND


def test_steps_require_grid():
    with pytest.raises(ValueError):
        next(DijkstraAlgo().steps())


def test_reconstruct_path_stops_on_broken_chain():
    g = Grid(1, 3)
    g.end.previous = g.cells[0][1]
    assert reconstruct_path(g) == []
    assert g.end.is_path and g.cells[0][1].is_path
    assert not g.start.is_path
