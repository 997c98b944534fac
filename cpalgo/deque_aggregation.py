"""A deque that keeps the fold of its contents under an associative operation."""

from __future__ import annotations

import operator
from typing import Callable, Generic, TypeVar

V = TypeVar("V")


class DequeAggregation(Generic[V]):
    """Deque with amortised O(1) push, pop and fold of all elements front to back."""

    def __init__(self, identity: V, op: Callable[[V, V], V] = operator.add):
        self._identity = identity
        self._op = op
        self._front: list[V] = []
        self._back: list[V] = []
        self._front_prod: list[V] = [identity]
        self._back_prod: list[V] = [identity]

    def _rebuild(self) -> None:
        op = self._op
        self._front_prod = [self._identity]
        for v in self._front:
            self._front_prod.append(op(v, self._front_prod[-1]))
        self._back_prod = [self._identity]
        for v in self._back:
            self._back_prod.append(op(self._back_prod[-1], v))

    def push_front(self, value: V) -> None:
        self._front.append(value)
        self._front_prod.append(self._op(value, self._front_prod[-1]))

    def push_back(self, value: V) -> None:
        self._back.append(value)
        self._back_prod.append(self._op(self._back_prod[-1], value))

    def pop_front(self) -> V:
        """Remove and return the front element."""
        if not self._front:
            if not self._back:
                raise IndexError("pop from an empty deque")
            keep = len(self._back) // 2
            moved = self._back[:len(self._back) - keep]
            self._front = moved[::-1]
            self._back = self._back[len(self._back) - keep:]
            self._rebuild()
        self._front_prod.pop()
        return self._front.pop()

    def pop_back(self) -> V:
        """Remove and return the back element."""
        if not self._back:
            if not self._front:
                raise IndexError("pop from an empty deque")
            keep = len(self._front) // 2
            moved = self._front[:len(self._front) - keep]
            self._back = moved[::-1]
            self._front = self._front[len(self._front) - keep:]
            self._rebuild()
        self._back_prod.pop()
        return self._back.pop()

    def fold(self) -> V:
        """Fold of all elements from front to back."""
        return self._op(self._front_prod[-1], self._back_prod[-1])

    def __len__(self) -> int:
        return len(self._front) + len(self._back)