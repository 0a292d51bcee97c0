import pytest

from marvin.grid import parse_grid
from marvin.search import find_path, path_to_moves, solve

MAZE = "M1119\n91911\n11191\n9111G\n"


def _replay(grid, moves):
    steps = {"U": -grid.columns, "D": grid.columns, "L": -1, "R": 1}
    cell = grid.start
    for move in moves:
        cell += steps[move]
        assert 0 <= cell < grid.size
    return cell


def test_low_weight_takes_detour():
    grid = parse_grid("M9G\n111")
    assert solve(grid, 1) == "DRRU"


def test_high_weight_goes_straight():
    grid = parse_grid("M9G\n111")
    assert solve(grid, 5) == "RR"


@pytest.mark.parametrize("weight", [1, 2, 3, 4, 5])
def test_path_runs_from_start_to_goal(weight):
    grid = parse_grid(MAZE)
    path = find_path(grid, weight)
    assert path[0] == grid.start
    assert path[-1] == grid.goal
    for before, after in zip(path, path[1:]):
        assert abs(after - before) in (1, grid.columns)
        if abs(after - before) == 1:
            assert before // grid.columns == after // grid.columns


@pytest.mark.parametrize("weight", [1, 3, 5])
def test_moves_replay_to_goal(weight):
    grid = parse_grid(MAZE)
    moves = solve(grid, weight)
    assert len(moves) == len(find_path(grid, weight)) - 1
    assert _replay(grid, moves) == grid.goal


@pytest.mark.parametrize("weight", [1, 5])
def test_uniform_grid_path_is_shortest(weight):
    grid = parse_grid("M111\n1111\n111G")
    path = find_path(grid, weight)
    start_row, start_col = divmod(grid.start, grid.columns)
    goal_row, goal_col = divmod(grid.goal, grid.columns)
    manhattan = abs(start_row - goal_row) + abs(start_col - goal_col)
    assert len(path) == manhattan + 1


def test_start_equals_goal_gives_empty_moves():
    grid = parse_grid("11\n11")
    assert find_path(grid, 3) == [grid.start]
    assert solve(grid, 3) == ""


def test_path_to_moves():
    assert path_to_moves([0, 1, 4], 3) == "RD"


def test_path_to_moves_single_cell():
    assert path_to_moves([5], 3) == ""


def test_path_to_moves_all_directions_round_trip():
    grid = parse_grid("111\n1M1\n111")
    path = [4, 1, 0, 3, 4, 5]
    moves = path_to_moves(path, grid.columns)
    assert set(moves) == {"U", "L", "D", "R"}
    assert len(moves) == len(path) - 1
    assert _replay(grid, moves) == path[-1]