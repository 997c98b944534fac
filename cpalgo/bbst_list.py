"""A balanced search tree of (key, value) pairs with range folds of the values."""

from __future__ import annotations

import operator
from itertools import pairwise
from typing import Any, Callable, Iterable, Iterator

_MISSING = object()


class _Node:
    __slots__ = ("key", "value", "total", "size", "height", "left", "right", "parent", "owner")

    def __init__(self, key, value, owner):
        self.key = key
        self.value = value
        self.total = value
        self.size = 1
        self.height = 1
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.parent: _Node | None = None
        self.owner = owner


def _height(n: _Node | None) -> int:
    return n.height if n is not None else 0


def _size(n: _Node | None) -> int:
    return n.size if n is not None else 0


def _leftmost(n: _Node) -> _Node:
    while n.left is not None:
        n = n.left
    return n


def _rightmost(n: _Node) -> _Node:
    while n.right is not None:
        n = n.right
    return n


class BbstCursor:
    """Position in a :class:`BbstList`; the end position holds no element."""

    __slots__ = ("_owner", "_node")

    def __init__(self, owner: "BbstList", node: _Node | None):
        self._owner = owner
        self._node = node

    def _live(self) -> _Node:
        node = self._node
        if node is None:
            raise IndexError("the end cursor holds no element")
        if node.owner is not self._owner:
            raise ValueError("cursor refers to an erased element")
        return node

    def index(self) -> int:
        """Position of the element; the end cursor reports the length."""
        if self._node is None:
            return len(self._owner)
        node = self._live()
        res = _size(node.left)
        while node.parent is not None:
            if node.parent.right is node:
                res += _size(node.parent.left) + 1
            node = node.parent
        return res

    def key(self) -> Any:
        return self._live().key

    def value(self) -> Any:
        return self._live().value

    def is_end(self) -> bool:
        return self._node is None

    def next(self) -> "BbstCursor":
        """Cursor to the following element, or the end cursor."""
        node = self._live()
        if node.right is not None:
            return BbstCursor(self._owner, _leftmost(node.right))
        while node.parent is not None and node.parent.right is node:
            node = node.parent
        return BbstCursor(self._owner, node.parent)

    def prev(self) -> "BbstCursor":
        """Cursor to the preceding element."""
        if self._node is None:
            root = self._owner._root
            if root is None:
                raise IndexError("no element before the end of an empty list")
            return BbstCursor(self._owner, _rightmost(root))
        node = self._live()
        if node.left is not None:
            return BbstCursor(self._owner, _rightmost(node.left))
        while node.parent is not None and node.parent.left is node:
            node = node.parent
        if node.parent is None:
            raise IndexError("no element before the first one")
        return BbstCursor(self._owner, node.parent)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BbstCursor):
            return NotImplemented
        return self._owner is other._owner and self._node is other._node

    def __hash__(self) -> int:
        return hash((id(self._owner), id(self._node)))

    def __repr__(self) -> str:
        if self._node is None:
            return "BbstCursor(end)"
        return f"BbstCursor(key={self._node.key!r}, value={self._node.value!r})"


class BbstList:
    """Sorted sequence of (key, value) pairs; equal keys keep insertion-before order.

    Values are folded with ``op`` whose identity is ``identity``.
    """

    def __init__(
        self,
        items: Iterable[tuple[Any, Any]] = (),
        op: Callable[[Any, Any], Any] = operator.add,
        identity: Any = 0,
    ):
        self._op = op
        self._identity = identity
        pairs = list(items)
        for (a, _), (b, _) in pairwise(pairs):
            if b < a:
                raise ValueError("initial items must be sorted by key")
        self._root = self._build(pairs, 0, len(pairs), None)

    def _build(self, pairs, lo: int, hi: int, parent: _Node | None) -> _Node | None:
        if lo == hi:
            return None
        mid = (lo + hi) // 2
        key, value = pairs[mid]
        node = _Node(key, value, self)
        node.parent = parent
        node.left = self._build(pairs, lo, mid, node)
        node.right = self._build(pairs, mid + 1, hi, node)
        self._pull(node)
        return node

    def _pull(self, n: _Node) -> None:
        op = self._op
        total, size, height = n.value, 1, 1
        if n.left is not None:
            total = op(n.left.total, total)
            size += n.left.size
            height = n.left.height + 1
        if n.right is not None:
            total = op(total, n.right.total)
            size += n.right.size
            height = max(height, n.right.height + 1)
        n.total, n.size, n.height = total, size, height

    def _replace(self, parent: _Node | None, old: _Node, new: _Node | None) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, x: _Node) -> _Node:
        y = x.right
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        y.parent = x.parent
        self._replace(x.parent, x, y)
        y.left = x
        x.parent = y
        self._pull(x)
        self._pull(y)
        return y

    def _rotate_right(self, x: _Node) -> _Node:
        y = x.left
        x.left = y.right
        if y.right is not None:
            y.right.parent = x
        y.parent = x.parent
        self._replace(x.parent, x, y)
        y.right = x
        x.parent = y
        self._pull(x)
        self._pull(y)
        return y

    def _rebalance_up(self, n: _Node | None) -> None:
        while n is not None:
            self._pull(n)
            balance = _height(n.left) - _height(n.right)
            if balance > 1:
                if _height(n.left.left) < _height(n.left.right):
                    self._rotate_left(n.left)
                n = self._rotate_right(n)
            elif balance < -1:
                if _height(n.right.right) < _height(n.right.left):
                    self._rotate_right(n.right)
                n = self._rotate_left(n)
            n = n.parent

    def _attach(self, node: _Node) -> None:
        if self._root is None:
            self._root = node
            return
        c = self._root
        while True:
            if c.key < node.key:
                if c.right is None:
                    c.right = node
                    break
                c = c.right
            else:
                if c.left is None:
                    c.left = node
                    break
                c = c.left
        node.parent = c
        self._rebalance_up(c)

    def _unlink(self, node: _Node) -> None:
        if node.left is not None and node.right is not None:
            succ = _leftmost(node.right)
            if succ.parent is not node:
                start = succ.parent
                start.left = succ.right
                if succ.right is not None:
                    succ.right.parent = start
                succ.right = node.right
                node.right.parent = succ
            else:
                start = succ
            succ.left = node.left
            node.left.parent = succ
            succ.parent = node.parent
            self._replace(node.parent, node, succ)
        else:
            child = node.left if node.left is not None else node.right
            if child is not None:
                child.parent = node.parent
            self._replace(node.parent, node, child)
            start = node.parent
        node.left = node.right = node.parent = None
        self._pull(node)
        self._rebalance_up(start)

    def _node_of(self, pos: BbstCursor) -> _Node:
        if pos._owner is not self:
            raise ValueError("cursor belongs to another list")
        return pos._live()

    def __len__(self) -> int:
        return _size(self._root)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        stack: list[_Node] = []
        n = self._root
        while stack or n is not None:
            while n is not None:
                stack.append(n)
                n = n.left
            n = stack.pop()
            yield n.key, n.value
            n = n.right

    def begin(self) -> BbstCursor:
        return BbstCursor(self, _leftmost(self._root) if self._root is not None else None)

    def end(self) -> BbstCursor:
        return BbstCursor(self, None)

    def kth(self, idx: int) -> BbstCursor:
        """Cursor to the element at position ``idx``, or the end cursor."""
        if not 0 <= idx < len(self):
            return self.end()
        c = self._root
        while True:
            ls = _size(c.left)
            if idx < ls:
                c = c.left
            elif idx == ls:
                return BbstCursor(self, c)
            else:
                idx -= ls + 1
                c = c.right

    def _bounds(self, key, strict: bool) -> tuple[_Node | None, _Node | None]:
        below = above = None
        c = self._root
        while c is not None:
            goes_right = not (key < c.key) if strict else c.key < key
            if goes_right:
                below, c = c, c.right
            else:
                above, c = c, c.left
        return below, above

    def lower_bound(self, key) -> BbstCursor:
        """First element whose key is not less than ``key``."""
        return BbstCursor(self, self._bounds(key, False)[1])

    def upper_bound(self, key) -> BbstCursor:
        """First element whose key is greater than ``key``."""
        return BbstCursor(self, self._bounds(key, True)[1])

    def lower_bound_left(self, key) -> BbstCursor:
        """Last element whose key is less than ``key``, or the end cursor."""
        return BbstCursor(self, self._bounds(key, False)[0])

    def upper_bound_left(self, key) -> BbstCursor:
        """Last element whose key is not greater than ``key``, or the end cursor."""
        return BbstCursor(self, self._bounds(key, True)[0])

    def find(self, key) -> BbstCursor:
        pos = self.lower_bound(key)
        if pos.is_end() or key < pos.key():
            return self.end()
        return pos

    def insert(self, key, value) -> BbstCursor:
        """Insert before any elements with an equal key."""
        node = _Node(key, value, self)
        self._attach(node)
        return BbstCursor(self, node)

    def erase(self, pos: BbstCursor) -> BbstCursor:
        """Remove the element at ``pos`` and return a cursor to its successor."""
        if pos.is_end():
            return pos
        node = self._node_of(pos)
        following = pos.next()
        self._unlink(node)
        node.owner = None
        return following

    def change_key(self, pos: BbstCursor, key) -> BbstCursor:
        """Give the element at ``pos`` a new key, moving it into order."""
        if pos.is_end():
            return pos
        node = self._node_of(pos)
        self._unlink(node)
        node.key = key
        self._attach(node)
        return pos

    def set(self, pos: BbstCursor, value) -> None:
        node = self._node_of(pos)
        node.value = value
        while node is not None:
            self._pull(node)
            node = node.parent

    def _fold(self, n: _Node | None, lo: int, hi: int):
        if n is None or lo >= hi:
            return self._identity
        if lo <= 0 and n.size <= hi:
            return n.total
        ls = _size(n.left)
        res = self._fold(n.left, lo, hi)
        if lo <= ls < hi:
            res = self._op(res, n.value)
        return self._op(res, self._fold(n.right, lo - ls - 1, hi - ls - 1))

    def sum(self, first: BbstCursor, last: BbstCursor, default: Any = _MISSING):
        """Fold of the values from ``first`` up to but not including ``last``."""
        if first._owner is not self or last._owner is not self:
            raise ValueError("cursor belongs to another list")
        if first == last:
            return self._identity if default is _MISSING else default
        i, j = first.index(), last.index()
        if i > j:
            raise ValueError("first must not come after last")
        return self._fold(self._root, i, j)

    def clear(self) -> None:
        stack = [self._root] if self._root is not None else []
        while stack:
            n = stack.pop()
            n.owner = None
            stack.extend(c for c in (n.left, n.right) if c is not None)
        self._root = None