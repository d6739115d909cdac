from __future__ import annotations
from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Generic, List, TypeVar

T = TypeVar("T")


class Frontier(ABC, Generic[T]):
    """Discovered-but-unprocessed items. The removal order defines the traversal."""

    name = "frontier"

    @abstractmethod
    def insert(self, item: T) -> None: ...

    @abstractmethod
    def remove_next(self) -> T: ...

    @abstractmethod
    def __len__(self) -> int: ...

    def __bool__(self) -> bool:
        return len(self) > 0


class FifoFrontier(Frontier[T]):
    """Queue: items come out in insertion order (breadth-first)."""

    name = "BFS"

    def __init__(self) -> None:
        self._q: Deque[T] = deque()

    def insert(self, item: T) -> None:
        self._q.append(item)

    def remove_next(self) -> T:
        return self._q.popleft()

    def __len__(self) -> int:
        return len(self._q)


class LifoFrontier(Frontier[T]):
    """Stack: the most recently inserted item comes out first (depth-first)."""

    name = "DFS"

    def __init__(self) -> None:
        self._stack: List[T] = []

    def insert(self, item: T) -> None:
        self._stack.append(item)

    def remove_next(self) -> T:
        return self._stack.pop()

    def __len__(self) -> int:
        return len(self._stack)
