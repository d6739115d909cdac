from __future__ import annotations
from dataclasses import dataclass, field
from time import perf_counter
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from statespace.search.frontier import FifoFrontier, Frontier, LifoFrontier
from statespace.search.problem import StateProblem

T = TypeVar("T")


def reconstruct_path(parent: Dict[T, Optional[T]], goal: T) -> List[T]:
    """Walk the predecessor map back from ``goal`` to the start and reverse."""
    path: List[T] = []
    s: Optional[T] = goal
    while s is not None:
        path.append(s)
        s = parent[s]
    path.reverse()
    return path


@dataclass
class SearchResult(Generic[T]):
    path: List[T] = field(default_factory=list)
    found: bool = False
    expanded: int = 0
    generated: int = 0
    peak_frontier: int = 0
    time: float = 0.0
    algorithm: str = ""
    termination: str = "exhausted"

    @property
    def moves(self) -> Optional[int]:
        return len(self.path) - 1 if self.found else None

    def as_row(self) -> dict:
        """Flat dict with the keys the experiment runner writes."""
        return {
            "algorithm": self.algorithm,
            "expanded": self.expanded,
            "generated": self.generated,
            "peak_frontier": self.peak_frontier,
            "moves": "" if self.moves is None else self.moves,
            "time": self.time,
            "termination": self.termination,
        }


class Searcher(Generic[T]):
    """
    Frontier-driven graph search over a StateProblem.

    The frontier decides the order: FIFO gives breadth-first search (paths
    with the fewest moves), LIFO gives depth-first search (some valid path).
    Each state is recorded the first time it is discovered; the goal test is
    applied when a state is removed from the frontier, after its successors
    have been recorded.

    The searcher keeps only a reference to the problem; all traversal state is
    local to one call.
    """

    def __init__(self, problem: StateProblem[T],
                 frontier_factory: Callable[[], Frontier[T]] = FifoFrontier):
        self.problem = problem
        self.frontier_factory = frontier_factory

    def solve(self) -> SearchResult[T]:
        t0 = perf_counter()
        start = self.problem.initial_state()
        frontier = self.frontier_factory()
        frontier.insert(start)
        parent: Dict[T, Optional[T]] = {start: None}
        res: SearchResult[T] = SearchResult(algorithm=frontier.name, peak_frontier=1)

        while frontier:
            res.peak_frontier = max(res.peak_frontier, len(frontier))
            current = frontier.remove_next()
            res.expanded += 1
            for nxt in self.problem.successors(current):
                res.generated += 1
                if nxt in parent:
                    continue
                parent[nxt] = current
                frontier.insert(nxt)
            if self.problem.is_goal(current):
                res.path = reconstruct_path(parent, current)
                res.found = True
                res.termination = "ok"
                break

        res.time = perf_counter() - t0
        return res

    def find_solution(self) -> List[T]:
        """Path from the initial state to a goal, or [] when none is reachable."""
        return self.solve().path


# ---------- convenience constructors ----------

def breadth_first_searcher(problem: StateProblem[T]) -> Searcher[T]:
    return Searcher(problem, FifoFrontier)


def depth_first_searcher(problem: StateProblem[T]) -> Searcher[T]:
    return Searcher(problem, LifoFrontier)


def breadth_first_search(problem: StateProblem[T]) -> SearchResult[T]:
    return breadth_first_searcher(problem).solve()


def depth_first_search(problem: StateProblem[T]) -> SearchResult[T]:
    return depth_first_searcher(problem).solve()


SEARCHERS: Dict[str, Callable[[StateProblem], Searcher]] = {
    "bfs": breadth_first_searcher,
    "dfs": depth_first_searcher,
}
