"""Cartesian tree of a sequence."""

from __future__ import annotations

from typing import Sequence


def cartesian_tree(values: Sequence) -> list[tuple[int, int]]:
    """Edges ``(parent, child)`` of the min-Cartesian tree of ``values``.

    Among equal minima the rightmost one is the ancestor.
    """
    n = len(values)
    if n == 0:
        return []
    stack: list[int] = []
    edges: list[tuple[int, int]] = []
    for i in range(n - 1, -1, -1):
        c = -1
        while stack and values[i] < values[stack[-1]]:
            t = stack.pop()
            if c >= 0:
                edges.append((t, c))
            c = t
        if c >= 0:
            edges.append((i, c))
        stack.append(i)
    for upper, lower in zip(reversed(stack[:-1]), reversed(stack[1:])):
        edges.append((upper, lower))
    edges.reverse()
    return edges