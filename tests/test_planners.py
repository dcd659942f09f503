import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np
import pytest

from mazepaths import get_planner
from mazepaths.envs import Grid, generate_maze, load_scenario, neighbors4
from mazepaths.planners import (
    PLANNERS,
    DistanceField,
    InconsistentFieldError,
    TooManyPathsError,
    compute_distance_field,
    count_shortest_paths,
    enumerate_shortest_paths,
    is_shortest_path,
    multi_source_distance_field,
)


def make_maze(seed, H=12, W=12, density=0.3):
    rng = np.random.default_rng(seed)
    return generate_maze(H, W, density=density, ensure_status="any", rng=rng)

# --- Distance field -----------------------------------------------------------
def test_open_2x2_field_and_paths():
    g = Grid.from_rows([[2, 0], [0, 3]])
    field = compute_distance_field(g, (0, 0))
    assert field.as_array().tolist() == [[0, 1], [1, 2]]
    paths = enumerate_shortest_paths(field, (1, 1))
    assert paths == [((0, 0), (0, 1), (1, 1)), ((0, 0), (1, 0), (1, 1))]
    assert all(len(p) == 3 for p in paths)

def test_wall_makes_destination_unreached():
    g = Grid.from_rows([[2, 1, 0],
                        [0, 1, 0],
                        [0, 1, 3]])
    field = compute_distance_field(g, (0, 0))
    assert field[(2, 2)] is None
    assert field.raw((2, 2)) == -1
    assert enumerate_shortest_paths(field, (2, 2)) == []
    assert count_shortest_paths(field, (2, 2)) == 0

def test_origin_equals_destination():
    g = Grid.from_rows([[2, 0], [0, 0]])
    field = compute_distance_field(g, (0, 0))
    assert field[(0, 0)] == 0
    assert enumerate_shortest_paths(field, (0, 0)) == [((0, 0),)]

def test_two_detours_around_central_obstacle():
    g = Grid.from_rows([[0, 0, 0],
                        [2, 1, 3],
                        [0, 0, 0]])
    field = compute_distance_field(g, g.origin)
    paths = enumerate_shortest_paths(field, g.destination)
    assert paths == [
        ((1, 0), (0, 0), (0, 1), (0, 2), (1, 2)),
        ((1, 0), (2, 0), (2, 1), (2, 2), (1, 2)),
    ]
    assert len(paths[0]) == len(paths[1]) == field[g.destination] + 1

def test_blocked_cells_read_as_unreached():
    g = Grid.from_rows([[2, 1], [0, 3]])
    field = compute_distance_field(g, (0, 0))
    assert g.is_blocked((0, 1))
    assert field[(0, 1)] is None

def test_blocked_origin_is_still_seeded():
    g = Grid.from_rows([[1, 0], [0, 0]])
    field = compute_distance_field(g, (0, 0))
    assert field[(0, 0)] == 0
    assert field[(1, 1)] == 2

def test_degenerate_inputs_give_empty_field():
    assert compute_distance_field(Grid(0, 0, []), (0, 0)).empty
    g = Grid.from_rows([[2, 0]])
    field = compute_distance_field(g, (3, 3))
    assert field.empty
    assert enumerate_shortest_paths(field, (0, 1)) == []
    assert count_shortest_paths(field, (0, 1)) == 0

def test_multi_source_takes_nearest_source():
    g = Grid(1, 5, [0] * 5)
    field = multi_source_distance_field(g, [(0, 0), (0, 4), (9, 9)])
    assert field.as_array().tolist() == [[0, 1, 2, 1, 0]]
    assert field.origins == ((0, 0), (0, 4))
    assert multi_source_distance_field(g, [(-1, 0)]).empty

def test_field_is_read_only():
    field = compute_distance_field(Grid.from_rows([[2, 3]]), (0, 0))
    with pytest.raises(ValueError):
        field.as_array()[0, 1] = 5

def test_detour_scenario_values():
    g = load_scenario("detour")
    field = compute_distance_field(g, g.origin)
    assert field[g.destination] == 13
    assert field[(0, 0)] == 10 and field[(6, 0)] == 10
    assert field.max_distance == 13
    assert count_shortest_paths(field, g.destination) == 20

@pytest.mark.parametrize("seed", range(8))
def test_bfs_labels_are_minimal_hop_counts(seed):
    g = make_maze(seed)
    field = compute_distance_field(g, g.origin)
    assert field[g.origin] == 0
    H, W = g.shape
    for r in range(H):
        for c in range(W):
            v = field[(r, c)]
            if g.is_blocked((r, c)) and (r, c) != g.origin:
                assert v is None
                continue
            near = [field[n] for n in neighbors4((r, c))
                    if g.valid(n) and not g.is_blocked(n) and field[n] is not None]
            if v is None:
                assert not near  # an unreached free cell has no reached neighbor
            elif (r, c) != g.origin:
                assert v == 1 + min(near)

@pytest.mark.parametrize("seed", range(3))
def test_field_computation_is_idempotent(seed):
    g = make_maze(seed)
    assert compute_distance_field(g, g.origin) == compute_distance_field(g, g.origin)

# --- Path enumeration ---------------------------------------------------------
@pytest.mark.parametrize("seed", range(8))
def test_every_enumerated_path_is_shortest(seed):
    g = make_maze(seed, H=10, W=10)
    field = compute_distance_field(g, g.origin)
    n = count_shortest_paths(field, g.destination)
    if n > 5000:
        pytest.skip("too many paths to enumerate in a unit test")
    paths = enumerate_shortest_paths(field, g.destination)
    assert len(paths) == n
    assert len(set(paths)) == len(paths)
    for p in paths:
        assert p[0] == g.origin and p[-1] == g.destination
        assert len(p) == field[g.destination] + 1
        assert is_shortest_path(field, p)
        assert not any(g.is_blocked(c) for c in p[1:-1])

def test_enumeration_is_deterministic_and_primary_first():
    g = Grid(3, 3, [0] * 9)
    field = compute_distance_field(g, (0, 0))
    first = enumerate_shortest_paths(field, (2, 2))
    again = enumerate_shortest_paths(field, (2, 2))
    assert first == again
    assert len(first) == 6
    # the walk back prefers "up" at every tie
    assert first[0] == ((0, 0), (0, 1), (0, 2), (1, 2), (2, 2))

def test_reversed_paths_climb_from_zero():
    g = load_scenario("islands")
    field = compute_distance_field(g, g.origin)
    for p in enumerate_shortest_paths(field, g.destination):
        assert [field[c] for c in p] == list(range(field[g.destination] + 1))

def test_out_of_bounds_destination_gives_no_paths():
    field = compute_distance_field(Grid.from_rows([[2, 3]]), (0, 0))
    assert enumerate_shortest_paths(field, (4, 4)) == []

def test_missing_predecessor_raises():
    field = DistanceField(np.array([[0, -1, 2]]))
    with pytest.raises(InconsistentFieldError):
        enumerate_shortest_paths(field, (0, 2))

def test_max_paths_guard():
    g = Grid(3, 3, [0] * 9)
    field = compute_distance_field(g, (0, 0))
    with pytest.raises(TooManyPathsError) as exc:
        enumerate_shortest_paths(field, (2, 2), max_paths=5)
    assert exc.value.limit == 5
    assert len(enumerate_shortest_paths(field, (2, 2), max_paths=6)) == 6

def test_count_matches_binomial_on_open_grid():
    g = Grid(5, 7, [0] * 35)
    field = compute_distance_field(g, (0, 0))
    assert count_shortest_paths(field, (4, 6)) == 210  # C(10, 4)

def test_is_shortest_path_rejects_bad_paths():
    g = Grid(2, 2, [0] * 4)
    field = compute_distance_field(g, (0, 0))
    assert is_shortest_path(field, [(0, 0), (0, 1), (1, 1)])
    assert not is_shortest_path(field, [(0, 1), (1, 1)])           # does not start at 0
    assert not is_shortest_path(field, [(0, 0), (1, 1)])           # diagonal jump
    assert not is_shortest_path(field, [(0, 0), (0, 1), (0, 0)])   # goes back down
    assert not is_shortest_path(field, [])

# --- Planner API --------------------------------------------------------------
def test_planner_registry_and_plan_dict():
    assert "all_shortest" in PLANNERS
    planner = get_planner("all_shortest")
    res = planner.plan(np.zeros((2, 2), dtype=bool), (0, 0), (1, 1))
    assert res["success"] and res["distance"] == 2
    assert res["path"] == [(0, 0), (0, 1), (1, 1)]
    assert len(res["paths"]) == 2

def test_planner_reports_failure():
    grid = np.array([[False, True], [True, False]])
    res = get_planner("all_shortest").plan(grid, (0, 0), (1, 1))
    assert res == {"success": False, "path": None, "paths": [], "distance": None}

def test_planner_accepts_label_arrays():
    labels = np.array([[2, 0], [0, 3]])
    res = get_planner("all_shortest").plan(labels, (0, 0), (1, 1))
    assert res["success"] and res["distance"] == 2
    assert len(res["paths"]) == 2

def test_planner_rejects_float_grids():
    with pytest.raises(ValueError):
        get_planner("all_shortest").plan(np.zeros((2, 2)), (0, 0), (1, 1))

def test_unknown_planner():
    with pytest.raises(ValueError):
        get_planner("dfs")
