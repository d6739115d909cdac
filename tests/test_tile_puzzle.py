import pytest

from statespace.domains.tile_puzzle import TilePuzzleProblem, flip_parity
from statespace.errors import InvalidStateError

GOAL3 = (1, 2, 3, 4, 5, 6, 7, 8, 0)


def _swapped_with_blank(parent, child, n):
    """True when child is parent with the blank swapped with one orthogonal neighbour."""
    diff = [i for i in range(len(parent)) if parent[i] != child[i]]
    if len(diff) != 2:
        return False
    a, b = diff
    if 0 not in (parent[a], parent[b]) or sorted(parent) != sorted(child):
        return False
    (ra, ca), (rb, cb) = divmod(a, n), divmod(b, n)
    return abs(ra - rb) + abs(ca - cb) == 1


def test_bottom_middle_blank_has_three_successors():
    p = TilePuzzleProblem([1, 2, 3, 4, 5, 6, 7, 0, 8])
    succ = p.successors(p.initial_state())
    assert sorted(succ) == sorted([
        (1, 2, 3, 4, 0, 6, 7, 5, 8),
        (1, 2, 3, 4, 5, 6, 0, 7, 8),
        (1, 2, 3, 4, 5, 6, 7, 8, 0),
    ])
    assert sum(p.is_goal(s) for s in succ) == 1


def test_interior_blank_has_four_successors():
    p = TilePuzzleProblem([1, 2, 3, 4, 0, 6, 7, 5, 8])
    succ = p.successors(p.initial_state())
    assert sorted(succ) == sorted([
        (1, 0, 3, 4, 2, 6, 7, 5, 8),
        (1, 2, 3, 4, 5, 6, 7, 0, 8),
        (1, 2, 3, 0, 4, 6, 7, 5, 8),
        (1, 2, 3, 4, 6, 0, 7, 5, 8),
    ])


@pytest.mark.parametrize("n", [2, 3, 4, 5])
def test_successor_count_by_blank_position(n):
    p = TilePuzzleProblem(range(n * n))
    for z in range(n * n):
        state = list(range(1, n * n))
        state.insert(z, 0)
        state = tuple(state)
        r, c = divmod(z, n)
        edges = (r in (0, n - 1)) + (c in (0, n - 1))
        expected = {2: 2, 1: 3, 0: 4}[edges]
        succ = p.successors(state)
        assert len(succ) == expected
        assert all(_swapped_with_blank(state, s, n) for s in succ)


def test_successors_do_not_mutate_input():
    start = [3, 1, 2, 0, 4, 5, 6, 7, 8]
    p = TilePuzzleProblem(start)
    s = p.initial_state()
    p.successors(s)
    assert s == tuple(start)


def test_move_then_inverse_restores_state():
    p = TilePuzzleProblem([1, 2, 3, 4, 0, 6, 7, 5, 8])
    s = p.initial_state()
    z = s.index(0)
    for target in p.blank_moves(z):
        moved = p.move(s, target)
        assert moved in p.successors(s)
        assert p.move(moved, z) == s


def test_move_rejects_non_adjacent_target():
    p = TilePuzzleProblem(GOAL3)
    with pytest.raises(ValueError):
        p.move(GOAL3, 0)


def test_goal_is_exact_sequence():
    p = TilePuzzleProblem(GOAL3)
    assert p.is_goal(GOAL3)
    assert p.is_goal(list(GOAL3))
    assert not p.is_goal((0, 1, 2, 3, 4, 5, 6, 7, 8))
    assert not p.is_goal((1, 2, 3, 4, 5, 6, 8, 7, 0))


@pytest.mark.parametrize("values", [
    [1, 2, 3, 4, 5, 6, 7, 8],            # not a square
    [1, 2, 3, 4, 5, 6, 7, 8, 8],         # duplicate, missing 0
    [1, 2, 3, 4, 5, 6, 7, 8, 9],         # out of range
    [0],                                 # 1x1 board
    [],
    [None, 1, 2, 3],                     # not integers
])
def test_invalid_starting_values_raise_eagerly(values):
    with pytest.raises(InvalidStateError):
        TilePuzzleProblem(values)


def test_invalid_state_error_is_value_error():
    with pytest.raises(ValueError):
        TilePuzzleProblem([0, 0, 1, 2])


def test_board_size_inferred():
    p = TilePuzzleProblem(list(range(1, 16)) + [0])
    assert p.N == 4
    assert p.is_goal(p.initial_state())


def test_solvability_parity():
    p = TilePuzzleProblem(GOAL3)
    assert p.is_solvable(GOAL3)
    assert not p.is_solvable(flip_parity(GOAL3))
    p4 = TilePuzzleProblem(list(range(1, 16)) + [0])
    assert p4.is_solvable(p4.GOAL)
    assert not p4.is_solvable(flip_parity(p4.GOAL))


def test_scramble_is_deterministic_and_solvable():
    a = TilePuzzleProblem.scramble(12, seed=7)
    b = TilePuzzleProblem.scramble(12, seed=7)
    assert a.initial_state() == b.initial_state()
    assert a.is_solvable(a.initial_state())
    assert TilePuzzleProblem.scramble(0, seed=1).initial_state() == GOAL3


@pytest.mark.parametrize("n", [0, 1])
def test_scramble_rejects_tiny_boards(n):
    with pytest.raises(InvalidStateError):
        TilePuzzleProblem.scramble(3, seed=0, n=n)
