from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from statespace.errors import DimensionMismatchError


@dataclass(frozen=True)
class Vertex:
    index: int
    payload: Any = None

    def __str__(self) -> str:
        return str(self.payload)


class ExplicitGraph:
    """
    Directed, unweighted graph stored as a boolean adjacency matrix.

    ``matrix[i, j]`` is True when there is an edge i -> j. Vertices are
    addressed by index; their payloads are opaque.

    Traversals keep their visited flags and discovered-from links in lists
    local to the call, so they never write to the graph and may run
    concurrently or re-entrantly. ``make_complete`` rewrites the matrix in
    place and must not overlap any other call on the same instance.
    """

    def __init__(self, payloads: Iterable[Any], matrix: Any):
        payloads = list(payloads)
        try:
            mat = np.asarray(matrix, dtype=bool)
        except ValueError as e:
            raise DimensionMismatchError(f"adjacency matrix rows differ in length: {e}") from e
        n = len(payloads)
        if n == 0 and mat.size == 0:
            mat = mat.reshape(0, 0)
        if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
            raise DimensionMismatchError(f"adjacency matrix must be square, got shape {mat.shape}")
        if mat.shape[0] != n:
            raise DimensionMismatchError(
                f"adjacency matrix is {mat.shape[0]}x{mat.shape[1]} but there are {n} vertices")
        self.vertices: Tuple[Vertex, ...] = tuple(Vertex(i, p) for i, p in enumerate(payloads))
        self.matrix = mat.copy()

    @classmethod
    def from_edges(cls, payloads: Iterable[Any], edges: Iterable[Tuple[int, int]]) -> "ExplicitGraph":
        payloads = list(payloads)
        n = len(payloads)
        mat = np.zeros((n, n), dtype=bool)
        for i, j in edges:
            if not (0 <= i < n and 0 <= j < n):
                raise IndexError(f"edge ({i}, {j}) out of range for {n} vertices")
            mat[i, j] = True
        return cls(payloads, mat)

    # ---------- queries ----------
    def vertex_count(self) -> int:
        return len(self.vertices)

    def _check(self, v: int) -> None:
        if not 0 <= v < self.vertex_count():
            raise IndexError(f"vertex {v} out of range for {self.vertex_count()} vertices")

    def has_edge(self, i: int, j: int) -> bool:
        self._check(i); self._check(j)
        return bool(self.matrix[i, j])

    def degree(self, v: int) -> int:
        """Out-degree (valence) of ``v``."""
        self._check(v)
        return int(np.count_nonzero(self.matrix[v]))

    def edge_count(self) -> int:
        return int(np.count_nonzero(self.matrix))

    def next_unvisited_neighbor(self, v: int, visited: Optional[Sequence[bool]] = None) -> Optional[int]:
        """Lowest-indexed j with an edge v -> j and not ``visited[j]``; None if there is none."""
        self._check(v)
        for j in np.flatnonzero(self.matrix[v]):
            if visited is None or not visited[j]:
                return int(j)
        return None

    # ---------- traversals ----------
    def depth_first_visit(self, start: int) -> List[int]:
        """Vertex indices in the order an iterative DFS from ``start`` discovers them."""
        self._check(start)
        visited = [False] * self.vertex_count()
        order = [start]
        visited[start] = True
        stack = [start]
        while stack:
            nxt = self.next_unvisited_neighbor(stack[-1], visited)
            if nxt is None:
                stack.pop()
                continue
            visited[nxt] = True
            order.append(nxt)
            stack.append(nxt)
        return order

    def depth_first_payloads(self, start: int) -> List[Any]:
        return [self.vertices[i].payload for i in self.depth_first_visit(start)]

    def shortest_path_by_hops(self, start: int, end: int) -> Optional[List[int]]:
        """
        Fewest-edges path from ``start`` to ``end`` as a list of indices
        (first is ``start``, last is ``end``), or None when ``end`` is not
        reachable.
        """
        self._check(start); self._check(end)
        n = self.vertex_count()
        visited = [False] * n
        came_from: List[Optional[int]] = [None] * n
        q = deque([start])
        visited[start] = True
        while q:
            cur = q.popleft()
            while (nxt := self.next_unvisited_neighbor(cur, visited)) is not None:
                visited[nxt] = True
                came_from[nxt] = cur
                q.append(nxt)
            if cur == end:
                path = [end]
                while path[-1] != start:
                    path.append(came_from[path[-1]])
                path.reverse()
                return path
        return None

    # ---------- mutation ----------
    def make_complete(self) -> None:
        """Edge between every ordered pair of distinct vertices, no self-loops."""
        n = self.vertex_count()
        self.matrix = ~np.eye(n, dtype=bool)

    # ---------- display ----------
    def to_frame(self) -> pd.DataFrame:
        """Adjacency matrix as 0/1 DataFrame labelled by payload, with a valence column."""
        labels = [str(v) for v in self.vertices]
        df = pd.DataFrame(self.matrix.astype(int), index=labels, columns=labels)
        df["valence"] = [self.degree(v.index) for v in self.vertices]
        return df
