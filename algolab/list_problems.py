"""Classic singly linked list problems: removal, cycles, intersection and reversal."""

from __future__ import annotations

from algolab.linked_list import Node, length


def remove_nth_from_end(head: Node | None, n: int) -> Node | None:
    """Unlink the n-th node counted from the end and return the head of the list."""
    size = length(head)
    if not 1 <= n <= size:
        raise ValueError(f"n must lie in 1..{size}")
    assert head is not None
    lead: Node | None = head
    for _ in range(n):
        assert lead is not None
        lead = lead.next
    if lead is None:
        return head.next
    trail = head
    while lead.next is not None:
        lead = lead.next
        assert trail.next is not None
        trail = trail.next
    assert trail.next is not None
    trail.next = trail.next.next
    return head


def _meeting_point(head: Node | None) -> Node | None:
    fast = slow = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        assert slow is not None
        slow = slow.next
        if fast is slow:
            return fast
    return None


def has_cycle(head: Node | None) -> bool:
    """Return True when following next links from head never reaches the end."""
    return _meeting_point(head) is not None


def detect_cycle(head: Node | None) -> Node | None:
    """Return the node where the cycle begins, or None when the list ends."""
    fast = _meeting_point(head)
    if fast is None:
        return None
    slow = head
    while slow is not fast:
        assert slow is not None and fast is not None
        slow = slow.next
        fast = fast.next
    return slow


def _tail(head: Node) -> Node:
    node = head
    while node.next is not None:
        node = node.next
    return node


def intersection_node(head_a: Node | None, head_b: Node | None) -> Node | None:
    """Return the first node shared by two acyclic lists, or None when they do not join."""
    if head_a is None or head_b is None:
        return None
    if _tail(head_a) is not _tail(head_b):
        return None
    a: Node = head_a
    b: Node = head_b
    while a is not b:
        a = a.next if a.next is not None else head_b
        b = b.next if b.next is not None else head_a
    return a


def reverse_list(head: Node | None) -> Node | None:
    """Reverse the list in place by relinking and return its new head."""
    previous: Node | None = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def reverse_list_recursive(head: Node | None) -> Node | None:
    """Reverse the list in place recursively and return its new head."""
    if head is None or head.next is None:
        return head
    new_head = reverse_list_recursive(head.next)
    head.next.next = head
    head.next = None
    return new_head