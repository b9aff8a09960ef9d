"""Doubly linked list nodes with positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import islice


@dataclass(eq=False)
class DoublyNode:
    """One cell of a doubly linked list; nodes compare by identity."""

    value: int
    next: DoublyNode | None = field(default=None, repr=False)
    prev: DoublyNode | None = field(default=None, repr=False)


def _iter_nodes(head: DoublyNode | None) -> Iterator[DoublyNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _node_at(head: DoublyNode | None, index: int) -> DoublyNode:
    node = next(islice(_iter_nodes(head), index, None), None) if index >= 0 else None
    if node is None:
        raise IndexError("position out of range")
    return node


def from_values(values: Iterable[int]) -> DoublyNode | None:
    """Return the head of a new doubly linked list holding values, or None when empty."""
    head: DoublyNode | None = None
    tail: DoublyNode | None = None
    for value in values:
        node = DoublyNode(value, prev=tail)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: DoublyNode | None) -> list[int]:
    """Return the values of the list from head onwards."""
    return [node.value for node in _iter_nodes(head)]


def format_list(head: DoublyNode | None) -> str:
    """Return the values each followed by a space."""
    return "".join(f"{node.value} " for node in _iter_nodes(head))


def delete_at(head: DoublyNode | None, position: int) -> DoublyNode | None:
    """Unlink the node at 1-based position and return the head of what remains."""
    target = _node_at(head, position - 1)
    before, after = target.prev, target.next
    target.prev = target.next = None
    if after is not None:
        after.prev = before
    if before is None:
        return after
    before.next = after
    return head


def insert_after(head: DoublyNode | None, position: int, value: int) -> DoublyNode:
    """Insert value after the node at 0-based position and return the head."""
    anchor = _node_at(head, position)
    node = DoublyNode(value, next=anchor.next, prev=anchor)
    if anchor.next is not None:
        anchor.next.prev = node
    anchor.next = node
    assert head is not None
    return head