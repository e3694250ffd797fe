"""Exercises on singly linked lists of integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[ListNode]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    return iter(head) if head is not None else iter(())


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [node.val for node in _nodes(head)]


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if fast is slow:
            return True
    return False


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None if they never meet."""
    if head_a is None or head_b is None:
        return None
    nodes_a = list(head_a)
    nodes_b = list(head_b)
    if nodes_a[-1] is not nodes_b[-1]:
        return None
    skip = len(nodes_a) - len(nodes_b)
    if skip > 0:
        nodes_a = nodes_a[skip:]
    else:
        nodes_b = nodes_b[-skip:]
    return next(a for a, b in zip(nodes_a, nodes_b) if a is b)


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node counted from the end and return the new head."""
    nodes = list(_nodes(head))
    if not 1 <= n <= len(nodes):
        raise ValueError(f"n must be between 1 and {len(nodes)}, got {n}")
    target = len(nodes) - n
    if target == 0:
        return nodes[0].next
    previous = nodes[target - 1]
    previous.next = previous.next.next
    return head


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as lists of digits, least significant first."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def remove_elements(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Unlink every node whose value equals ``val`` and return the new head."""
    dummy = ListNode(0, head)
    previous = dummy
    while previous.next is not None:
        if previous.next.val == val:
            previous.next = previous.next.next
        else:
            previous = previous.next
    return dummy.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous: Optional[ListNode] = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one; on equal values nodes of ``list2`` go first."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list2 if list1 is None else list1
    return dummy.next


def pair_sum(head: Optional[ListNode]) -> int:
    """Return the largest sum of a node and its twin from the other end, at least 0."""
    values = list_values(head)
    sums = (values[i] + values[-1 - i] for i in range(len(values) // 2))
    return max(0, max(sums, default=0))


def merge_k_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Return a new sorted list holding every value of the given lists."""
    values = sorted(value for head in lists for value in list_values(head))
    return build_list(values)


def is_palindrome_list(head: Optional[ListNode]) -> bool:
    """Tell whether the list reads the same in both directions."""
    values = list_values(head)
    return values == values[::-1]


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list to the right by ``k`` places and return the new head."""
    if head is None:
        return None
    nodes = list(head)
    shift = k % len(nodes)
    if shift == 0:
        return head
    new_tail = nodes[-shift - 1]
    new_head = new_tail.next
    new_tail.next = None
    nodes[-1].next = head
    return new_head


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop repeated values from a sorted list in place and return its head."""
    if head is None:
        return None
    keeper = head
    for node in head:
        if node.val != keeper.val:
            keeper.next = node
            keeper = node
    keeper.next = None
    return head