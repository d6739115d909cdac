from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Generic, Hashable, List, TypeVar

T = TypeVar("T", bound=Hashable)


class StateProblem(ABC, Generic[T]):
    """
    A state space: a fixed start, a successor rule and a goal test.

    States are used as dict keys by the search engines, so they must be
    immutable values with structural equality and a stable hash
    (tuples, frozensets, frozen dataclasses...).
    """

    @abstractmethod
    def initial_state(self) -> T:
        ...

    @abstractmethod
    def successors(self, state: T) -> List[T]:
        """All states one legal move away. Must not mutate ``state``."""

    @abstractmethod
    def is_goal(self, state: T) -> bool:
        ...
