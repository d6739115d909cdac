from __future__ import annotations
from math import isqrt
from typing import Dict, Iterable, List, Tuple
import random

from statespace.errors import InvalidStateError
from statespace.search.problem import StateProblem

State = Tuple[int, ...]


def _blank_moves(n: int) -> Dict[int, Tuple[int, ...]]:
    """Legal blank targets per board index, in up/down/left/right order."""
    nei: Dict[int, Tuple[int, ...]] = {}
    for i in range(n * n):
        r, c = divmod(i, n)
        moves = []
        if r > 0:       moves.append(i - n)
        if r < n - 1:   moves.append(i + n)
        if c > 0:       moves.append(i - 1)
        if c < n - 1:   moves.append(i + 1)
        nei[i] = tuple(moves)
    return nei


class TilePuzzleProblem(StateProblem[State]):
    """
    N×N sliding-tile puzzle (0 is the blank).

    Board indices run row by row, so for the 3×3 board::

        0 | 1 | 2
        3 | 4 | 5
        6 | 7 | 8

    The goal is 1..N²-1 in order with the blank in the last slot. A move
    swaps the blank with an orthogonally adjacent tile, without wrapping.
    """

    def __init__(self, starting_values: Iterable[int]):
        values = tuple(starting_values)
        n = isqrt(len(values))
        if n < 2 or n * n != len(values):
            raise InvalidStateError(
                f"expected N*N values for a square board (N >= 2), got {len(values)}")
        if set(values) != set(range(n * n)):
            raise InvalidStateError(
                f"values must be each of 0..{n * n - 1} exactly once, got {list(values)}")
        self.N = n
        self.size = n * n
        self.start: State = values
        self.GOAL: State = tuple(list(range(1, self.size)) + [0])
        self._nei = _blank_moves(n)

    # ---------- StateProblem ----------
    def initial_state(self) -> State:
        return self.start

    def successors(self, state: State) -> List[State]:
        z = state.index(0)
        out: List[State] = []
        for j in self._nei[z]:
            lst = list(state)
            lst[z], lst[j] = lst[j], lst[z]
            out.append(tuple(lst))
        return out

    def is_goal(self, state: State) -> bool:
        return tuple(state) == self.GOAL

    # ---------- single moves ----------
    def blank_moves(self, index: int) -> Tuple[int, ...]:
        return self._nei[index]

    def move(self, state: State, target: int) -> State:
        """Slide the tile at ``target`` into the blank."""
        z = state.index(0)
        if target not in self._nei[z]:
            raise ValueError(f"index {target} is not adjacent to the blank at {z}")
        lst = list(state)
        lst[z], lst[target] = lst[target], lst[z]
        return tuple(lst)

    # ---------- instance generation ----------
    def is_solvable(self, s: State) -> bool:
        """Solvability rules:
           - N odd: inversions must be even
           - N even: (inversions + blank_row_from_bottom) must be ODD
             (row count is 1-based from the bottom)
        """
        arr = [x for x in s if x != 0]
        inv = 0
        for i in range(len(arr)):
            for j in range(i + 1, len(arr)):
                if arr[i] > arr[j]:
                    inv += 1
        if self.N % 2 == 1:
            return (inv % 2) == 0
        blank_row_from_bottom = self.N - s.index(0) // self.N
        return ((inv + blank_row_from_bottom) % 2) == 1

    @classmethod
    def scramble(cls, depth: int, seed: int, n: int = 3) -> "TilePuzzleProblem":
        """Puzzle whose start is a depth-limited random walk from the goal, with no immediate backtrack."""
        if n < 2:
            raise InvalidStateError(f"board size must be at least 2, got {n}")
        rng = random.Random(seed)
        nei = _blank_moves(n)
        s: State = tuple(list(range(1, n * n)) + [0])
        last_blank = None
        for _ in range(depth):
            z = s.index(0)
            cand = list(nei[z])
            if last_blank in cand and len(cand) > 1:
                cand.remove(last_blank)
            j = rng.choice(cand)
            lst = list(s)
            lst[z], lst[j] = lst[j], lst[z]
            last_blank = z
            s = tuple(lst)
        return cls(s)


def flip_parity(s: State) -> State:
    """Swap the first two non-blank tiles; the result is unsolvable iff ``s`` is solvable."""
    lst = list(s)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)
