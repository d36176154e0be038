#!/usr/bin/env python3
"""
Ordered sequence module for plasmid manager.

A doubly-linked sequence with 1-based positional addressing. Nodes are kept
in an arena and refer to their neighbours by integer handle, so a removed
node can never be reached through a stale link.
"""

from dataclasses import dataclass
from typing import Any, Dict, Generic, Iterator, List, Optional, TypeVar

from ..exceptions import NotFoundError, SequenceIntegrityError


T = TypeVar("T")


@dataclass
class SequenceNode(Generic[T]):
    """One slot of an ordered sequence."""

    payload: T
    prev: Optional[int] = None
    next: Optional[int] = None


class OrderedSequence(Generic[T]):
    """Doubly-linked ordered container of opaque payloads."""

    def __init__(self):
        """Initialize an empty sequence."""
        self._nodes: Dict[int, SequenceNode[T]] = {}
        self._head: Optional[int] = None
        self._tail: Optional[int] = None
        self._next_handle = 1

    @property
    def head(self) -> Optional[int]:
        """Handle of the first node, or None when empty."""
        return self._head

    @property
    def tail(self) -> Optional[int]:
        """Handle of the last node, or None when empty."""
        return self._tail

    def __len__(self) -> int:
        return len(self._nodes)

    def __bool__(self) -> bool:
        return self._head is not None

    def __iter__(self) -> Iterator[T]:
        for handle in self.handles():
            yield self._nodes[handle].payload

    def __contains__(self, handle: Any) -> bool:
        return handle in self._nodes

    def node(self, handle: int) -> SequenceNode[T]:
        """
        Get the node behind a handle.

        Raises:
            NotFoundError: if the handle does not belong to this sequence
        """
        try:
            return self._nodes[handle]
        except (KeyError, TypeError):
            raise NotFoundError(f"Invalid node handle {handle!r}") from None

    def payload(self, handle: int) -> T:
        """Get the payload stored under a handle."""
        return self.node(handle).payload

    def append(self, payload: T) -> int:
        """
        Add a payload at the tail.

        Args:
            payload: Value to store

        Returns:
            Handle of the new node
        """
        handle = self._allocate(payload)
        node = self._nodes[handle]
        node.prev = self._tail

        if self._tail is not None:
            self._nodes[self._tail].next = handle
        else:
            self._head = handle
        self._tail = handle
        return handle

    def insert_at(self, payload: T, position: int) -> int:
        """
        Insert a payload so that it lands at a 1-based position.

        Positions below 2, or any position on an empty sequence, insert at the
        head. Positions beyond the current length are clamped: the payload is
        appended after the tail instead of being rejected.

        Args:
            payload: Value to store
            position: Requested 1-based position

        Returns:
            Handle of the new node
        """
        if position <= 1 or self._head is None:
            handle = self._allocate(payload)
            node = self._nodes[handle]
            node.next = self._head

            if self._head is not None:
                self._nodes[self._head].prev = handle
            else:
                self._tail = handle
            self._head = handle
            return handle

        # Walk to the node at position - 1, stopping at the tail.
        current = self._head
        index = 1
        while self._nodes[current].next is not None and index < position - 1:
            current = self._nodes[current].next
            index += 1

        handle = self._allocate(payload)
        node = self._nodes[handle]
        before = self._nodes[current]
        node.prev = current
        node.next = before.next

        if before.next is not None:
            self._nodes[before.next].prev = handle
        else:
            self._tail = handle
        before.next = handle
        return handle

    def remove(self, handle: int) -> T:
        """
        Unlink a node and return its payload.

        Raises:
            NotFoundError: if the handle is not part of this sequence; the
                sequence is left unchanged
        """
        node = self.node(handle)

        if node.prev is not None:
            self._nodes[node.prev].next = node.next
        else:
            self._head = node.next

        if node.next is not None:
            self._nodes[node.next].prev = node.prev
        else:
            self._tail = node.prev

        del self._nodes[handle]
        node.prev = node.next = None
        return node.payload

    def walk_to(self, position: int) -> Optional[int]:
        """
        Walk forward from the head to a 1-based position.

        Returns:
            Handle of the node at ``position``, or None when out of range
        """
        if position < 1:
            return None

        current = self._head
        index = 1
        while current is not None and index < position:
            current = self._nodes[current].next
            index += 1
        return current

    def handles(self) -> Iterator[int]:
        """Iterate over node handles from head to tail."""
        current = self._head
        while current is not None:
            yield current
            current = self._nodes[current].next

    def reversed_handles(self) -> Iterator[int]:
        """Iterate over node handles from tail to head."""
        current = self._tail
        while current is not None:
            yield current
            current = self._nodes[current].prev

    def clear(self) -> None:
        """Release every node and reset to the empty state.

        Payloads are not touched; disposing of them is up to the caller.
        """
        for handle in list(self.reversed_handles()):
            node = self._nodes.pop(handle)
            node.prev = node.next = None
        self._nodes.clear()
        self._head = None
        self._tail = None

    def check_invariants(self) -> None:
        """
        Verify the linked structure.

        Raises:
            SequenceIntegrityError: if any link is inconsistent
        """
        if (self._head is None) != (self._tail is None):
            raise SequenceIntegrityError("Head and tail disagree about emptiness")
        if self._head is None:
            if self._nodes:
                raise SequenceIntegrityError(f"{len(self._nodes)} nodes unreachable from empty head")
            return

        if self._nodes[self._head].prev is not None:
            raise SequenceIntegrityError("Head node has a previous link")
        if self._nodes[self._tail].next is not None:
            raise SequenceIntegrityError("Tail node has a next link")

        forward: List[int] = []
        seen = set()
        for handle in self.handles():
            if handle in seen:
                raise SequenceIntegrityError(f"Cycle detected at node {handle}")
            seen.add(handle)
            forward.append(handle)
            nxt = self._nodes[handle].next
            if nxt is not None and nxt not in self._nodes:
                raise SequenceIntegrityError(f"Node {handle} links to missing node {nxt}")
            if nxt is not None and self._nodes[nxt].prev != handle:
                raise SequenceIntegrityError(f"Links of nodes {handle} and {nxt} are not inverse")

        backward: List[int] = []
        for handle in self.reversed_handles():
            backward.append(handle)
            if len(backward) > len(self._nodes):
                raise SequenceIntegrityError("Cycle detected in backward traversal")
        if backward != forward[::-1]:
            raise SequenceIntegrityError("Backward traversal does not mirror forward traversal")
        if len(forward) != len(self._nodes):
            raise SequenceIntegrityError(
                f"Traversal visited {len(forward)} of {len(self._nodes)} nodes"
            )

    def _allocate(self, payload: T) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._nodes[handle] = SequenceNode(payload=payload)
        return handle
