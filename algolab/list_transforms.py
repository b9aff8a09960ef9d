"""Singly linked list rearrangements: middles, palindromes, group reversal and rotation."""

from __future__ import annotations

from itertools import islice

from algolab.linked_list import Node, iter_nodes
from algolab.list_problems import reverse_list


def middle_node(head: Node | None) -> Node | None:
    """Return the middle node; of two middles, the second one."""
    fast = slow = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        assert slow is not None
        slow = slow.next
    return slow


def delete_middle(head: Node | None) -> Node | None:
    """Unlink the middle node (index n // 2) and return the head; a lone node leaves None."""
    if head is None or head.next is None:
        return None
    slow = head
    fast = head.next.next
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        assert slow.next is not None
        slow = slow.next
    assert slow.next is not None
    slow.next = slow.next.next
    return head


def is_palindrome(head: Node | None) -> bool:
    """Return True when the values read the same both ways; the list is left as it was."""
    fast = slow = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        assert slow is not None
        slow = slow.next
    if slow is None:
        return True
    second = reverse_list(slow)
    try:
        return all(
            front.value == back.value
            for back, front in zip(iter_nodes(second), iter_nodes(head))
        )
    finally:
        reverse_list(second)


def _kth_node(start: Node, k: int) -> Node | None:
    return next(islice(iter_nodes(start), k - 1, k), None)


def reverse_k_group(head: Node | None, k: int) -> Node | None:
    """Reverse each full run of k nodes in place; a short final run keeps its order."""
    if k < 1:
        raise ValueError("group size must be at least 1")
    new_head: Node | None = None
    previous_tail: Node | None = None
    start = head
    while start is not None:
        kth = _kth_node(start, k)
        if kth is None:
            if previous_tail is not None:
                previous_tail.next = start
            break
        following = kth.next
        kth.next = None
        group_head = reverse_list(start)
        if previous_tail is None:
            new_head = group_head
        else:
            previous_tail.next = group_head
        previous_tail = start
        start = following
    return new_head if new_head is not None else head


def odd_even_list(head: Node | None) -> Node | None:
    """Relink so nodes at even indices come first, then those at odd indices, in order."""
    if head is None or head.next is None:
        return head
    odd = head
    even = even_head = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head


def rotate_right(head: Node | None, k: int) -> Node | None:
    """Rotate the list right by k places and return its new head."""
    if k < 0:
        raise ValueError("k must be non-negative")
    if head is None or head.next is None or k == 0:
        return head
    nodes = list(iter_nodes(head))
    count = len(nodes)
    nodes[-1].next = head
    k %= count
    new_tail = nodes[count - k - 1]
    new_head = new_tail.next
    new_tail.next = None
    return new_head