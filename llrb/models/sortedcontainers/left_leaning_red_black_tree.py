"""
Left-leaning red-black tree implementation of an ordered symbol table.

Every tree is the binary encoding of a 2-3 tree: a RED link joins two keys
of one 3-node, BLACK links are the 2-3 tree's edges. Keeping red links on
the left and never stacking two of them gives a 1-1 correspondence, so the
2-3 tree's perfect balance bounds the height by 2 * log2(N + 1) and every
keyed operation costs O(log N) in the worst case.
"""

import logging
import math
from collections.abc import AsyncIterator, Iterator
from typing import Any

from llrb.interfaces.ordered_symbol_table import OrderedSymbolTable
from llrb.models.exceptions import (
    EmptyTreeError,
    InvalidArgumentError,
    InvariantViolationError,
)
from llrb.models.sortedcontainers.node import (
    Color,
    Node,
    balance,
    is_red,
    max_node,
    min_node,
    move_red_left,
    move_red_right,
    node_size,
    rotate_right,
)

logger = logging.getLogger(__name__)


class LeftLeaningRedBlackTree(OrderedSymbolTable):
    """
    Left-leaning red-black BST implementation of OrderedSymbolTable.

    Properties maintained after every public call:
    1. In-order traversal yields keys in strictly ascending order
    2. Red links lean left and no node is reached by two red links in a row
    3. Every path from the root to an empty subtree has the same number of
       black links
    4. node.size == 1 + size(node.left) + size(node.right) for every node
    5. The root is black

    Insertion and the three deletions descend recursively and rebuild the
    path on the way back up: each call returns the node that now roots its
    subtree and the caller stores it back into the slot it came from.

    Not thread safe: one caller at a time, readers included.
    """

    # Height (in nodes) never exceeds this many times log2(N + 1)
    MAX_HEIGHT_FACTOR = 2

    def __init__(self, validate_writes: bool = False) -> None:
        """
        Initialize an empty tree.

        Args:
            validate_writes: Re-check every invariant after each mutation and
                raise InvariantViolationError on failure. O(N) per write, meant
                for tests and debugging.
        """
        if not isinstance(validate_writes, bool):
            raise ValueError(f"validate_writes must be a bool, got {validate_writes!r}")

        self._root: Node | None = None
        self._validate_writes = validate_writes

    @property
    def validate_writes(self) -> bool:
        return self._validate_writes

    def put(self, key: Any, value: Any) -> None:
        """Insert or update a key-value pair. O(log N)"""
        _require_key(key)
        if value is None:
            self.delete(key)
            return

        self._root = self._put(self._root, key, value)
        self._root.color = Color.BLACK
        self._after_write("put")

    def get(self, key: Any) -> Any | None:
        """Retrieve value by key. O(log N)"""
        node = self._find_node(key)
        return node.value if node is not None else None

    def has(self, key: Any) -> bool:
        return self._find_node(key) is not None

    def delete(self, key: Any) -> bool:
        """Remove a key-value pair. O(log N)"""
        if not self.has(key):
            return False

        self._prepare_root()
        self._root = self._delete(self._root, key)
        self._restore_root()
        self._after_write("delete")
        return True

    def delete_min(self) -> tuple[Any, Any]:
        """Remove the smallest key and return its (key, value) pair. O(log N)"""
        if self._root is None:
            logger.debug("delete_min() on empty tree")
            raise EmptyTreeError("delete_min")

        smallest = min_node(self._root)
        removed = (smallest.key, smallest.value)

        self._prepare_root()
        self._root = self._delete_min(self._root)
        self._restore_root()
        self._after_write("delete_min")
        return removed

    def delete_max(self) -> tuple[Any, Any]:
        """Remove the largest key and return its (key, value) pair. O(log N)"""
        if self._root is None:
            logger.debug("delete_max() on empty tree")
            raise EmptyTreeError("delete_max")

        largest = max_node(self._root)
        removed = (largest.key, largest.value)

        self._prepare_root()
        self._root = self._delete_max(self._root)
        self._restore_root()
        self._after_write("delete_max")
        return removed

    def is_empty(self) -> bool:
        return self._root is None

    def size(self, lo: Any | None = None, hi: Any | None = None) -> int:
        if lo is None and hi is None:
            return node_size(self._root)
        if lo is not None and hi is not None and lo > hi:
            return 0

        upper = self.size() if hi is None else self.rank(hi) + int(self.has(hi))
        lower = 0 if lo is None else self.rank(lo)
        return upper - lower

    def keys(self, lo: Any | None = None, hi: Any | None = None) -> list[Any]:
        result: list[Any] = []
        self._collect_keys(self._root, lo, hi, result)
        return result

    def min(self) -> Any:
        if self._root is None:
            logger.debug("min() on empty tree")
            raise EmptyTreeError("min")
        return min_node(self._root).key

    def max(self) -> Any:
        if self._root is None:
            logger.debug("max() on empty tree")
            raise EmptyTreeError("max")
        return max_node(self._root).key

    def floor(self, key: Any) -> Any | None:
        _require_key(key)
        best = None
        current = self._root
        while current is not None:
            if key < current.key:
                current = current.left
            elif key > current.key:
                best = current
                current = current.right
            else:
                return current.key
        return best.key if best is not None else None

    def ceiling(self, key: Any) -> Any | None:
        _require_key(key)
        best = None
        current = self._root
        while current is not None:
            if key < current.key:
                best = current
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                return current.key
        return best.key if best is not None else None

    def rank(self, key: Any) -> int:
        """
        Count keys strictly less than key. O(log N)

        Every time the descent moves right, the node and its whole left
        subtree are smaller than key.
        """
        _require_key(key)
        rank = 0
        current = self._root
        while current is not None:
            if key < current.key:
                current = current.left
            elif key > current.key:
                rank += 1 + node_size(current.left)
                current = current.right
            else:
                return rank + node_size(current.left)
        return rank

    def select(self, k: int) -> Any:
        """Return the key of rank k. O(log N)"""
        if isinstance(k, bool) or not isinstance(k, int):
            raise InvalidArgumentError("k", k, "rank must be an int")
        if not 0 <= k < self.size():
            raise InvalidArgumentError("k", k, f"rank must be in [0, {self.size()})")

        current = self._root
        while True:
            left_size = node_size(current.left)
            if k < left_size:
                current = current.left
            elif k > left_size:
                k -= left_size + 1
                current = current.right
            else:
                return current.key

    def height(self) -> int:
        """Number of links on the longest root-to-leaf path, -1 when empty."""
        return _height(self._root)

    def level_order(self) -> list[list[Any]]:
        """Keys grouped by depth, root level first."""
        levels = []
        current = [self._root] if self._root is not None else []
        while current:
            levels.append([node.key for node in current])
            current = [
                child
                for node in current
                for child in (node.left, node.right)
                if child is not None
            ]
        return levels

    def check(self) -> bool:
        """
        Verify every structural invariant, logging a warning for each one
        that does not hold. O(N log N)
        """
        violations = self._violations()
        for violation in violations:
            logger.warning("Invariant violated: %s", violation)
        return not violations

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self.iterator()

    def iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> Iterator[tuple[Any, Any]]:
        return _RangeIterator(self._root, start, end)

    def __aiter__(self) -> AsyncIterator[tuple[Any, Any]]:
        return self.async_iterator()

    def async_iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> AsyncIterator[tuple[Any, Any]]:
        return _AsyncRangeIterator(self._root, start, end)

    def __str__(self) -> str:
        return "\n".join(
            f"level {depth}: " + " ".join(str(key) for key in keys)
            for depth, keys in enumerate(self.level_order())
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size()}, height={self.height()})"

    def _find_node(self, key: Any) -> Node | None:
        """Find node by key."""
        _require_key(key)
        current = self._root
        while current is not None:
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                return current
        return None

    def _put(self, node: Node | None, key: Any, value: Any) -> Node:
        # New keys always join their parent through a RED link
        if node is None:
            return Node(key=key, value=value)

        if key < node.key:
            node.left = self._put(node.left, key, value)
        elif key > node.key:
            node.right = self._put(node.right, key, value)
        else:
            node.value = value

        return balance(node)

    def _prepare_root(self) -> None:
        """
        Color the root RED when it is a 2-node, so the deletion descent
        starts from a node that has a key to spare.
        """
        root = self._root
        if not is_red(root.left) and not is_red(root.right):
            root.color = Color.RED

    def _restore_root(self) -> None:
        if self._root is not None:
            self._root.color = Color.BLACK

    def _delete_min(self, node: Node) -> Node | None:
        if node.left is None:
            return None

        if not is_red(node.left) and not is_red(node.left.left):
            node = move_red_left(node)

        node.left = self._delete_min(node.left)
        return balance(node)

    def _delete_max(self, node: Node) -> Node | None:
        if is_red(node.left):
            node = rotate_right(node)

        if node.right is None:
            return node.left

        if not is_red(node.right) and not is_red(node.right.left):
            node = move_red_right(node)

        node.right = self._delete_max(node.right)
        return balance(node)

    def _delete(self, node: Node, key: Any) -> Node | None:
        """Delete key from the subtree rooted at node. key must be present."""
        if key < node.key:
            if not is_red(node.left) and not is_red(node.left.left):
                node = move_red_left(node)
            node.left = self._delete(node.left, key)
        else:
            if is_red(node.left):
                node = rotate_right(node)

            if key == node.key and node.right is None:
                return None

            if not is_red(node.right) and not is_red(node.right.left):
                node = move_red_right(node)

            if key == node.key:
                # Replace with the successor, then remove the successor
                successor = min_node(node.right)
                node.key = successor.key
                node.value = successor.value
                node.right = self._delete_min(node.right)
            else:
                node.right = self._delete(node.right, key)

        return balance(node)

    def _collect_keys(
        self, node: Node | None, lo: Any | None, hi: Any | None, result: list[Any]
    ) -> None:
        if node is None:
            return

        if lo is None or lo < node.key:
            self._collect_keys(node.left, lo, hi, result)
        if (lo is None or lo <= node.key) and (hi is None or node.key <= hi):
            result.append(node.key)
        if hi is None or node.key < hi:
            self._collect_keys(node.right, lo, hi, result)

    def _after_write(self, operation: str) -> None:
        if not self._validate_writes:
            return

        violations = self._violations()
        if violations:
            logger.error(
                "Tree invariants broken after %s(): %s", operation, ", ".join(violations)
            )
            raise InvariantViolationError(operation, violations)

    def _violations(self) -> list[str]:
        sizes_ok = _is_size_consistent(self._root)
        checks = {
            "symmetric order": _is_ordered(self._root, None, None),
            "subtree sizes": sizes_ok,
            # select() walks the size fields and cannot be trusted without them
            "rank/select consistency": sizes_ok and self._is_rank_consistent(),
            "black root": not is_red(self._root),
            "left-leaning single red links": _is_23(self._root, is_root=True),
            "black balance": _is_black_balanced(self._root),
            "height bound": self._is_height_bounded(),
        }
        return [name for name, ok in checks.items() if not ok]

    def _is_rank_consistent(self) -> bool:
        for i in range(self.size()):
            if self.rank(self.select(i)) != i:
                return False
        for key in self.keys():
            if self.select(self.rank(key)) != key:
                return False
        return True

    def _is_height_bounded(self) -> bool:
        nodes_on_longest_path = self.height() + 1
        return nodes_on_longest_path <= self.MAX_HEIGHT_FACTOR * math.log2(self.size() + 1)


def _require_key(key: Any) -> None:
    if key is None:
        raise InvalidArgumentError("key", key, "keys must not be None")


def _height(node: Node | None) -> int:
    if node is None:
        return -1
    return 1 + max(_height(node.left), _height(node.right))


def _is_ordered(node: Node | None, lo: Any | None, hi: Any | None) -> bool:
    """Every key lies strictly between lo and hi (None is unbounded)."""
    if node is None:
        return True
    if lo is not None and not lo < node.key:
        return False
    if hi is not None and not node.key < hi:
        return False
    return _is_ordered(node.left, lo, node.key) and _is_ordered(node.right, node.key, hi)


def _is_size_consistent(node: Node | None) -> bool:
    if node is None:
        return True
    if node.size != 1 + node_size(node.left) + node_size(node.right):
        return False
    return _is_size_consistent(node.left) and _is_size_consistent(node.right)


def _is_23(node: Node | None, is_root: bool = False) -> bool:
    """No right-leaning red link and no node reached by two reds in a row."""
    if node is None:
        return True
    if is_red(node.right):
        return False
    if not is_root and is_red(node) and is_red(node.left):
        return False
    return _is_23(node.left) and _is_23(node.right)


def _is_black_balanced(root: Node | None) -> bool:
    black = 0
    current = root
    while current is not None:
        if not is_red(current):
            black += 1
        current = current.left
    return _has_black_height(root, black)


def _has_black_height(node: Node | None, black: int) -> bool:
    if node is None:
        return black == 0
    if not is_red(node):
        black -= 1
    return _has_black_height(node.left, black) and _has_black_height(node.right, black)


class _RangeIterator(Iterator[tuple[Any, Any]]):
    """Iterator for range queries on the tree."""

    def __init__(self, root: Node | None, start: Any | None, end: Any | None) -> None:
        self._stack: list[Node] = []
        self._end = end

        # Initialize stack with nodes >= start
        self._push_left_path(root, start)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self

    def __next__(self) -> tuple[Any, Any]:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()

        if self._end is not None and node.key >= self._end:
            self._stack.clear()
            raise StopIteration

        # Push right subtree's left path
        self._push_left_path(node.right, None)

        return node.key, node.value

    def _push_left_path(self, node: Node | None, start: Any | None) -> None:
        """Push leftmost path to stack, skipping keys below start."""
        while node is not None:
            if start is not None and node.key < start:
                node = node.right
            else:
                self._stack.append(node)
                node = node.left


class _AsyncRangeIterator(AsyncIterator[tuple[Any, Any]]):
    """Async iterator for range queries on the tree (in-memory, no I/O)."""

    def __init__(self, root: Node | None, start: Any | None, end: Any | None) -> None:
        self._pairs = _RangeIterator(root, start, end)

    def __aiter__(self) -> "_AsyncRangeIterator":
        return self

    async def __anext__(self) -> tuple[Any, Any]:
        try:
            return next(self._pairs)
        except StopIteration:
            raise StopAsyncIteration from None
