"""Singly linked list nodes: appending, reversing and cycle detection."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """A singly linked list node."""

    value: int = 0
    next: Node | None = field(default=None, repr=False)


def has_cycle(head: Node | None) -> bool:
    """Return True if following ``next`` from ``head`` loops forever."""
    tortoise = hare = head
    while hare is not None and hare.next is not None and hare.next.next is not None:
        hare = hare.next.next
        tortoise = tortoise.next
        if hare is tortoise:
            return True
    return False


def append_node(head: Node | None, value: int) -> Node:
    """Append a node holding ``value`` and return the head of the list."""
    new_node = Node(value)
    if head is None:
        return new_node
    current = head
    while current.next is not None:
        current = current.next
    current.next = new_node
    return head


def reverse_list(head: Node | None) -> Node | None:
    """Reverse the list in place and return its new head."""
    previous: Node | None = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def list_size(head: Node | None) -> int:
    """Return the number of nodes in an acyclic list."""
    size = 0
    current = head
    while current is not None:
        size += 1
        current = current.next
    return size