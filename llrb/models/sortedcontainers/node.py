"""
Nodes and balancing primitives for the left-leaning red-black tree.

A node's color is the color of the link from its parent down to it. A RED
link glues a node to its parent into a single 3-node of the corresponding
2-3 tree; BLACK links are ordinary tree edges.

Every primitive takes the root of a subtree and returns the node that now
roots it. Callers must store the returned node back in the slot they read
the argument from.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class Color(IntEnum):
    """Color of the link pointing to a node."""

    RED = 0
    BLACK = 1

    def flipped(self) -> "Color":
        return Color.BLACK if self is Color.RED else Color.RED


@dataclass
class Node:
    """
    Node in the left-leaning red-black tree.

    Attributes:
        key: The search key.
        value: The value stored under key.
        color: Color of the incoming link.
        size: Number of nodes in the subtree rooted here.
        left: Subtree of smaller keys.
        right: Subtree of larger keys.
    """

    key: Any
    value: Any
    color: Color = Color.RED
    size: int = 1
    left: "Node | None" = None
    right: "Node | None" = None


def is_red(node: Node | None) -> bool:
    """Empty subtrees hang off BLACK links."""
    return node is not None and node.color is Color.RED


def node_size(node: Node | None) -> int:
    return node.size if node is not None else 0


def update_size(node: Node) -> None:
    node.size = 1 + node_size(node.left) + node_size(node.right)


def rotate_left(node: Node) -> Node:
    """
    Turn a right-leaning red link into a left-leaning one.

    Args:
        node: Subtree root whose right link is RED.

    Returns:
        The former right child, now the subtree root.
    """
    assert is_red(node.right), "rotate_left needs a RED right link"

    child = node.right
    node.right = child.left
    child.left = node
    child.color = node.color
    node.color = Color.RED
    child.size = node.size
    update_size(node)
    return child


def rotate_right(node: Node) -> Node:
    """
    Turn a left-leaning red link into a right-leaning one.

    Args:
        node: Subtree root whose left link is RED.

    Returns:
        The former left child, now the subtree root.
    """
    assert is_red(node.left), "rotate_right needs a RED left link"

    child = node.left
    node.left = child.right
    child.right = node
    child.color = node.color
    node.color = Color.RED
    child.size = node.size
    update_size(node)
    return child


def flip_colors(node: Node) -> None:
    """
    Invert the colors of a node and both of its children.

    On insertion this splits a temporary 4-node: both children turn BLACK and
    the middle key moves up into the parent through a RED incoming link.
    Deletion uses the inverse to merge a node with its two children.
    """
    assert node.left is not None and node.right is not None

    node.color = node.color.flipped()
    node.left.color = node.left.color.flipped()
    node.right.color = node.right.color.flipped()


def balance(node: Node) -> Node:
    """
    Restore the local invariants at node on the way back up a descent.

    The order of the three steps matters: each one assumes the previous ones
    already ran.
    """
    if is_red(node.right) and not is_red(node.left):
        node = rotate_left(node)
    if is_red(node.left) and is_red(node.left.left):
        node = rotate_right(node)
    if is_red(node.left) and is_red(node.right):
        flip_colors(node)

    update_size(node)
    return node


def move_red_left(node: Node) -> Node:
    """
    Make sure node.left or one of its children is RED before descending left.

    Requires node to be RED with node.left and node.left.left both BLACK. If
    the right sibling is a 3-node a key is borrowed from it, otherwise node
    and both children are combined into a temporary 4-node that balance()
    splits again on the way up.
    """
    flip_colors(node)
    if is_red(node.right.left):
        node.right = rotate_right(node.right)
        node = rotate_left(node)
        flip_colors(node)
    return node


def move_red_right(node: Node) -> Node:
    """
    Make sure node.right or one of its children is RED before descending right.

    Mirror image of move_red_left(): borrows from a left sibling that is a
    3-node, otherwise combines into a temporary 4-node.
    """
    flip_colors(node)
    if is_red(node.left.left):
        node = rotate_right(node)
        flip_colors(node)
    return node


def min_node(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def max_node(node: Node) -> Node:
    while node.right is not None:
        node = node.right
    return node
