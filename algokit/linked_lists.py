"""Operations on singly linked lists."""

from __future__ import annotations

from typing import Optional

from algokit.nodes import ListNode, list_from_values


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as little-endian digit lists; return a new digit list."""
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


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the n-th node from the end of the list and return the new head."""
    if n < 1:
        raise ValueError("n must be at least 1")
    dummy = ListNode(0, head)
    fast: Optional[ListNode] = dummy
    for _ in range(n + 1):
        if fast is None:
            raise ValueError("n is larger than the list length")
        fast = fast.next
    slow = dummy
    while fast is not None:
        fast = fast.next
        slow = slow.next
    slow.next = slow.next.next
    return dummy.next


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list, reusing their nodes."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next = list1
            list1 = list1.next
        else:
            tail.next = list2
            list2 = list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def merge_k_lists(lists: list[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge any number of sorted lists into a new sorted list."""
    values = sorted(value for head in lists if head is not None for value in head)
    return list_from_values(values)


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes in place and return the new head."""
    dummy = ListNode(0, head)
    prev = dummy
    while prev.next is not None and prev.next.next is not None:
        first = prev.next
        second = first.next
        first.next = second.next
        second.next = first
        prev.next = second
        prev = first
    return dummy.next


def _reverse_segment(head: ListNode, stop: Optional[ListNode]) -> ListNode:
    prev: Optional[ListNode] = None
    node: Optional[ListNode] = head
    while node is not stop:
        following = node.next
        node.next = prev
        prev = node
        node = following
    return prev


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse the list k nodes at a time in place; a short tail is left as is."""
    if k < 1:
        raise ValueError("k must be at least 1")
    dummy = ListNode(0, head)
    before = dummy
    while head is not None:
        tail = before
        for _ in range(k):
            tail = tail.next
            if tail is None:
                return dummy.next
        next_group = tail.next
        before.next = _reverse_segment(head, next_group)
        head.next = next_group
        before = head
        head = next_group
    return dummy.next