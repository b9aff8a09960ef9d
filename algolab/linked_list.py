"""Singly linked list nodes and the basic operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list; nodes compare by identity."""

    value: int
    next: Node | None = None


def from_values(values: Iterable[int]) -> Node | None:
    """Return the head of a new list holding values in order, or None when empty."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def iter_nodes(head: Node | None) -> Iterator[Node]:
    """Yield each node from head to the end of the list."""
    node = head
    while node is not None:
        yield node
        node = node.next


def to_list(head: Node | None) -> list[int]:
    """Return the values of the list in order."""
    return [node.value for node in iter_nodes(head)]


def format_list(head: Node | None) -> str:
    """Return the values separated and followed by a space each."""
    return "".join(f"{node.value} " for node in iter_nodes(head))


def prepend(head: Node | None, value: int) -> Node:
    """Return a new head holding value in front of the given list."""
    return Node(value, head)


def length(head: Node | None) -> int:
    """Return the number of nodes in the list."""
    return sum(1 for _ in iter_nodes(head))


def contains(head: Node | None, value: int) -> bool:
    """Return True when some node of the list holds value."""
    return any(node.value == value for node in iter_nodes(head))


def delete_node(node: Node) -> None:
    """Remove node from its list, given only the node itself.

    The following node's value is copied in and that node is unlinked, so the
    last node of a list cannot be deleted this way.
    """
    following = node.next
    if following is None:
        raise ValueError("cannot delete the last node without its predecessor")
    node.value = following.value
    node.next = following.next