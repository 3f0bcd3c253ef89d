"""
Tests for data models: Color, Node, balancing primitives and exceptions.
"""

import pytest

from llrb.models.exceptions import (
    EmptyTreeError,
    InvalidArgumentError,
    InvariantViolationError,
    OrderedTableError,
)
from llrb.models.sortedcontainers.node import (
    Color,
    Node,
    balance,
    flip_colors,
    is_red,
    max_node,
    min_node,
    move_red_left,
    move_red_right,
    node_size,
    rotate_left,
    rotate_right,
)

RED = Color.RED
BLACK = Color.BLACK


class TestColor:
    """Tests for Color."""

    def test_flipped(self):
        assert RED.flipped() is BLACK
        assert BLACK.flipped() is RED

    def test_empty_subtree_is_black(self):
        """Test that a missing child counts as a BLACK link."""
        assert not is_red(None)
        assert is_red(Node("a", 1))
        assert not is_red(Node("a", 1, BLACK))


class TestNode:
    """Tests for Node defaults and helpers."""

    def test_new_node_defaults(self):
        """Test that fresh nodes are RED leaves of size 1."""
        node = Node(key="k", value="v")
        assert node.color is RED
        assert node.size == 1
        assert node.left is None
        assert node.right is None

    def test_node_size(self):
        assert node_size(None) == 0
        assert node_size(Node("a", 1, size=5)) == 5

    def test_min_and_max_node(self):
        left = Node("a", 1, BLACK)
        right = Node("c", 3, BLACK)
        root = Node("b", 2, BLACK, size=3, left=left, right=right)

        assert min_node(root) is left
        assert max_node(root) is right


class TestRotations:
    """Tests for rotate_left and rotate_right."""

    def test_rotate_left(self):
        """Test that a right-leaning red link becomes left-leaning."""
        x = Node("x", 0, BLACK)
        b = Node("b", 2, RED, size=2, left=x)
        a = Node("a", 1, BLACK, size=3, right=b)

        top = rotate_left(a)

        assert top is b
        assert top.color is BLACK
        assert top.left is a
        assert a.color is RED
        assert a.right is x
        assert top.size == 3
        assert a.size == 2

    def test_rotate_right(self):
        """Test that a left-leaning red link becomes right-leaning."""
        x = Node("x", 0, BLACK)
        a = Node("a", 1, RED, size=2, right=x)
        b = Node("b", 2, BLACK, size=3, left=a)

        top = rotate_right(b)

        assert top is a
        assert top.color is BLACK
        assert top.right is b
        assert b.color is RED
        assert b.left is x
        assert top.size == 3
        assert b.size == 2

    def test_rotate_left_requires_red_link(self):
        """Test that rotating a BLACK link is an internal fault."""
        node = Node("a", 1, BLACK, size=2, right=Node("b", 2, BLACK))
        with pytest.raises(AssertionError):
            rotate_left(node)

    def test_rotate_right_requires_red_link(self):
        node = Node("b", 2, BLACK, size=2, left=Node("a", 1, BLACK))
        with pytest.raises(AssertionError):
            rotate_right(node)


class TestFlipColors:
    """Tests for flip_colors."""

    def test_split_temporary_four_node(self):
        """Test that two RED children push the middle key up."""
        node = Node("b", 2, BLACK, size=3, left=Node("a", 1, RED), right=Node("c", 3, RED))

        flip_colors(node)

        assert node.color is RED
        assert node.left.color is BLACK
        assert node.right.color is BLACK

    def test_combine_into_four_node(self):
        """Test the inverse flip used on the way down a deletion."""
        node = Node("b", 2, RED, size=3, left=Node("a", 1, BLACK), right=Node("c", 3, BLACK))

        flip_colors(node)

        assert node.color is BLACK
        assert node.left.color is RED
        assert node.right.color is RED


class TestBalance:
    """Tests for the bottom-up fixup sequence."""

    def test_right_leaning_red_is_rotated(self):
        node = Node("a", 1, BLACK, size=1, right=Node("b", 2, RED))

        top = balance(node)

        assert top.key == "b"
        assert top.color is BLACK
        assert top.left.key == "a"
        assert top.left.color is RED
        assert top.size == 2

    def test_two_reds_in_a_row_are_split(self):
        """Test that a left-left red chain ends up as a flipped 3-node."""
        a = Node("a", 1, RED)
        b = Node("b", 2, RED, size=2, left=a)
        c = Node("c", 3, BLACK, size=3, left=b)

        top = balance(c)

        assert top is b
        assert top.color is RED
        assert top.left is a and a.color is BLACK
        assert top.right is c and c.color is BLACK
        assert top.size == 3
        assert c.size == 1

    def test_recomputes_size(self):
        node = Node("b", 2, BLACK, size=99, left=Node("a", 1, RED))

        top = balance(node)

        assert top is node
        assert top.size == 2


class TestMoveRed:
    """Tests for move_red_left and move_red_right."""

    def test_move_red_left_combines_with_two_node_sibling(self):
        node = Node("b", 2, RED, size=3, left=Node("a", 1, BLACK), right=Node("c", 3, BLACK))

        top = move_red_left(node)

        assert top is node
        assert top.color is BLACK
        assert top.left.color is RED
        assert top.right.color is RED
        assert top.size == 3

    def test_move_red_left_borrows_from_three_node_sibling(self):
        """Test that a key moves over from a right sibling that is a 3-node."""
        a = Node("a", 1, BLACK)
        c = Node("c", 3, RED)
        d = Node("d", 4, BLACK, size=2, left=c)
        b = Node("b", 2, RED, size=4, left=a, right=d)

        top = move_red_left(b)

        assert top is c
        assert top.color is RED
        assert top.left is b and b.color is BLACK
        assert b.left is a and a.color is RED
        assert top.right is d and d.color is BLACK
        assert d.left is None
        assert (top.size, b.size, d.size) == (4, 2, 1)

    def test_move_red_right_combines_with_two_node_sibling(self):
        node = Node("b", 2, RED, size=3, left=Node("a", 1, BLACK), right=Node("c", 3, BLACK))

        top = move_red_right(node)

        assert top is node
        assert top.color is BLACK
        assert top.left.color is RED
        assert top.right.color is RED

    def test_move_red_right_borrows_from_three_node_sibling(self):
        """Test that a key moves over from a left sibling that is a 3-node."""
        a = Node("a", 1, RED)
        b = Node("b", 2, BLACK, size=2, left=a)
        d = Node("d", 4, BLACK)
        c = Node("c", 3, RED, size=4, left=b, right=d)

        top = move_red_right(c)

        assert top is b
        assert top.color is RED
        assert top.left is a and a.color is BLACK
        assert top.right is c and c.color is BLACK
        assert c.right is d and d.color is RED
        assert (top.size, c.size) == (4, 2)


class TestExceptions:
    """Tests for the error taxonomy."""

    def test_empty_tree_error(self):
        error = EmptyTreeError("min")
        assert error.operation == "min"
        assert "min()" in str(error)
        assert isinstance(error, OrderedTableError)
        assert isinstance(error, LookupError)

    def test_invalid_argument_error(self):
        error = InvalidArgumentError("k", 10, "rank must be in [0, 10)")
        assert error.argument == "k"
        assert error.value == 10
        assert "k=10" in str(error)
        assert isinstance(error, ValueError)

    def test_invariant_violation_error(self):
        error = InvariantViolationError("put", ["black balance", "subtree sizes"])
        assert error.violations == ["black balance", "subtree sizes"]
        assert "black balance, subtree sizes" in str(error)
        assert isinstance(error, AssertionError)
