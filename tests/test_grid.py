import pytest

from algodrills.grid import escape_route, ripening_days

_DELTAS = {"d": (1, 0), "u": (-1, 0), "l": (0, -1), "r": (0, 1)}


def _walk(route, row, col, rows, cols):
    for move in route:
        drow, dcol = _DELTAS[move]
        row, col = row + drow, col + dcol
        assert 1 <= row <= rows and 1 <= col <= cols
    return row, col


def test_ripening_worked_example():
    grid = [
        [0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 1],
    ]
    assert ripening_days(grid) == 8


def test_ripening_all_ripe_takes_no_days():
    assert ripening_days([[1, 1], [1, 1]]) == 0


def test_ripening_blocked_cell_never_ripens():
    grid = [[1, -1, 0]]
    assert ripening_days(grid) == -1


def test_ripening_single_row_spreads_one_per_day():
    width = 6
    grid = [[1] + [0] * (width - 1)]
    assert ripening_days(grid) == width - 1


def test_ripening_two_sources_meet_in_the_middle():
    line = [[1, 0, 0, 0, 1]]
    single = [[1, 0, 0]]
    assert ripening_days(line) == ripening_days(single)


def test_ripening_no_unripe_and_only_empty_cells():
    assert ripening_days([[-1, -1]]) == 0


def test_ripening_empty_grid():
    assert ripening_days([]) == -1


def test_ripening_ragged_grid_rejected():
    with pytest.raises(ValueError):
        ripening_days([[1, 0], [0]])


def test_escape_first_example():
    assert escape_route(3, 4, 2, 3, 3, 1, 5) == "dllrl"


def test_escape_second_example():
    assert escape_route(2, 2, 1, 1, 2, 2, 2) == "dr"


def test_escape_third_example_is_impossible():
    assert escape_route(3, 3, 1, 2, 3, 3, 4) == "impossible"


def test_escape_parity_mismatch_is_impossible():
    assert escape_route(3, 3, 1, 1, 1, 2, 2) == "impossible"


def test_escape_zero_moves():
    assert escape_route(3, 3, 2, 2, 2, 2, 0) == ""


@pytest.mark.parametrize(
    "n, m, y, x, c, r, k",
    [
        (4, 4, 2, 2, 3, 3, 6),
        (5, 5, 1, 1, 5, 5, 10),
        (3, 4, 2, 3, 3, 1, 5),
        (6, 3, 6, 3, 1, 1, 9),
    ],
)
def test_escape_route_reaches_exit_in_k_moves(n, m, y, x, c, r, k):
    route = escape_route(n, m, y, x, c, r, k)
    assert len(route) == k
    assert _walk(route, y, x, n, m) == (c, r)