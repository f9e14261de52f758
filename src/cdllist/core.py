"""Main CdlList implementation."""

import logging
from collections.abc import Iterable, Iterator
from typing import Generic

from cdllist.borrow import Ref
from cdllist.errors import InvariantViolationError
from cdllist.linkedlist import Link, Node
from cdllist.types import T

logger = logging.getLogger(__name__)


def _owned(link: "Link[Node[T]] | None") -> Node[T]:
    """Return the target of a link that must be owning."""
    if link is None or not link.is_owning:
        raise InvariantViolationError(f"Expected an owning link, found {link!r}")
    node = link.resolve()
    if node is None:
        raise InvariantViolationError("Owning link has no target")
    return node


def _observed(link: "Link[Node[T]] | None") -> Node[T]:
    """Return the target of a link that must be observing and still alive."""
    if link is None or not link.is_observing:
        raise InvariantViolationError(f"Expected an observing link, found {link!r}")
    node = link.resolve()
    if node is None:
        raise InvariantViolationError("Observing link outlived its target")
    return node


class CdlList(Generic[T]):
    """
    Circular doubly-linked list with O(1) operations at both ends.

    Every node's ``next`` link owns its successor except the tail's, which
    observes the head. Every ``prev`` link observes. The handle owns the head
    and, additionally, the tail. Since no ownership cycle exists, a node is
    freed as soon as its last owning holder lets go of it.

    Not thread-safe. A single caller owns the list at a time.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        """
        Initialize the list.

        Args:
            values: Optional initial payloads, pushed to the back in order.
        """
        self._head: Node[T] | None = None
        self._tail: Node[T] | None = None
        self._size = 0
        self._generation = 0
        for value in values:
            self.push_back(value)

    def __del__(self) -> None:
        # Release nodes one at a time from the head.
        if getattr(self, "_size", 0):
            self._unwind()

    @property
    def generation(self) -> int:
        """Counter bumped by every mutating call."""
        return self._generation

    def is_empty(self) -> bool:
        """Return True if the list holds no elements."""
        return self._size == 0

    def size(self) -> int:
        """Return the number of elements in the list."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def push_front(self, value: T) -> None:
        """Add ``value`` at the head of the list. O(1)."""
        self._push(value, front=True)

    def push_back(self, value: T) -> None:
        """Add ``value`` at the tail of the list. O(1)."""
        self._push(value, front=False)

    def _push(self, value: T, *, front: bool) -> None:
        node = Node(value)

        if self._size == 0:
            node.next = Link.observing(node)
            node.prev = Link.observing(node)
            self._head = node
            self._tail = node
        else:
            head, tail = self._ends()
            node.prev = Link.observing(tail)

            if front:
                node.next = Link.owning(head)
                head.prev = Link.observing(node)
                if self._size == 1:
                    # The lone node's next pointed at itself
                    head.next = Link.observing(node)
                else:
                    tail.next = Link.observing(node)
                self._head = node
            else:
                node.next = Link.observing(head)
                tail.next = Link.owning(node)
                if self._size == 1:
                    # The lone node's prev pointed at itself
                    tail.prev = Link.observing(node)
                else:
                    head.prev = Link.observing(node)
                self._tail = node

        self._size += 1
        self._generation += 1

    def pop_front(self) -> T | None:
        """
        Remove and return the value at the head of the list. O(1).

        Returns:
            The removed value, or None if the list is empty
        """
        return self._pop(front=True)

    def pop_back(self) -> T | None:
        """
        Remove and return the value at the tail of the list. O(1).

        Returns:
            The removed value, or None if the list is empty
        """
        return self._pop(front=False)

    def _pop(self, *, front: bool) -> T | None:
        if self._size == 0:
            return None

        self._size -= 1
        self._generation += 1

        if self._size == 0:
            self._head = None
            node = self._tail
            self._tail = None
            if node is None:
                raise InvariantViolationError("Non-empty list has no tail")
            value = node.data
            node.detach()
            return value

        head, tail = self._ends()
        if front:
            node = head
            successor = _owned(node.next)
            tail.next = Link.observing(successor)
            successor.prev = Link.observing(tail)
            self._head = successor
        else:
            node = tail
            # The tail has two owners: the handle and its predecessor's next.
            # Turning the predecessor's next into the wrap edge drops the
            # second one.
            predecessor = _observed(node.prev)
            predecessor.next = Link.observing(head)
            head.prev = Link.observing(predecessor)
            self._tail = predecessor

        value = node.data
        node.detach()
        return value

    def peek_front(self) -> Ref[T] | None:
        """
        Return a read-only view of the value at the head, or None if empty.

        The view is valid until the next mutating call on this list.
        """
        if self._head is None:
            return None
        return Ref(self, self._head)

    def peek_back(self) -> Ref[T] | None:
        """
        Return a read-only view of the value at the tail, or None if empty.

        The view is valid until the next mutating call on this list.
        """
        if self._tail is None:
            return None
        return Ref(self, self._tail)

    def insert_at(self, index: int, value: T) -> bool:
        """
        Insert ``value`` so that it ends up at position ``index``. O(index).

        Args:
            index: Target position, from 0 up to and including size()
            value: Value to insert

        Returns:
            True if the value was inserted, False if ``index`` was out of
            range (the list is left unchanged)
        """
        if index < 0 or index > self._size:
            logger.debug("insert_at(%d) ignored on list of size %d", index, self._size)
            return False
        if index == 0:
            self.push_front(value)
            return True
        if index == self._size:
            self.push_back(value)
            return True

        predecessor = self._walk(index - 1)
        successor = _owned(predecessor.next)

        node = Node(value)
        node.next = Link.owning(successor)
        node.prev = Link.observing(predecessor)
        predecessor.next = Link.owning(node)
        successor.prev = Link.observing(node)

        self._size += 1
        self._generation += 1
        return True

    def remove_at(self, index: int) -> T | None:
        """
        Remove and return the value at position ``index``. O(index).

        Args:
            index: Position of the value, from 0 up to size() - 1

        Returns:
            The removed value, or None if ``index`` is out of range
        """
        if index < 0 or index >= self._size:
            logger.debug("remove_at(%d) ignored on list of size %d", index, self._size)
            return None
        if index == 0:
            return self.pop_front()
        if index == self._size - 1:
            return self.pop_back()

        predecessor = self._walk(index - 1)
        node = _owned(predecessor.next)
        successor = _owned(node.next)

        predecessor.next = Link.owning(successor)
        successor.prev = Link.observing(predecessor)

        self._size -= 1
        self._generation += 1

        value = node.data
        node.detach()
        return value

    def clear(self) -> None:
        """Remove every element, releasing nodes one at a time from the head."""
        if self._size:
            logger.debug("Clearing list of size %d", self._size)
        self._unwind()

    def _unwind(self) -> None:
        while self._size:
            self._pop(front=True)

    def to_list(self) -> list[T]:
        """Return a snapshot of the values from head to tail."""
        return list(self._values())

    def check_invariants(self) -> None:
        """
        Audit the link structure.

        Raises:
            InvariantViolationError: If any ownership or linkage rule is broken
        """
        if self._size == 0:
            if self._head is not None or self._tail is not None:
                raise InvariantViolationError("Empty list still references nodes")
            return

        head, tail = self._ends()
        holders: dict[int, int] = {id(head): 1}
        holders[id(tail)] = holders.get(id(tail), 0) + 1

        seen: set[int] = set()
        expected_prev = tail
        node = head
        for position in range(self._size):
            if id(node) in seen:
                raise InvariantViolationError(f"Node at position {position} visited twice")
            seen.add(id(node))

            if _observed(node.prev) is not expected_prev:
                raise InvariantViolationError(f"prev of position {position} is misdirected")

            if position == self._size - 1:
                if node is not tail:
                    raise InvariantViolationError("Owning chain does not end at the tail")
                if _observed(node.next) is not head:
                    raise InvariantViolationError("Tail's next does not observe the head")
            else:
                successor = _owned(node.next)
                holders[id(successor)] = holders.get(id(successor), 0) + 1
                expected_prev = node
                node = successor

        for position, current in enumerate(self._nodes()):
            wanted = 2 if current is tail else 1
            if holders.get(id(current), 0) != wanted:
                raise InvariantViolationError(
                    f"Node at position {position} has {holders.get(id(current), 0)} "
                    f"owners, expected {wanted}"
                )

    def _ends(self) -> tuple[Node[T], Node[T]]:
        if self._head is None or self._tail is None:
            raise InvariantViolationError("Non-empty list is missing its head or tail")
        return self._head, self._tail

    def _walk(self, steps: int) -> Node[T]:
        node, _ = self._ends()
        for _ in range(steps):
            node = _owned(node.next)
        return node

    def _nodes(self) -> Iterator[Node[T]]:
        # Exactly size steps; the tail's observing wrap edge is never followed.
        if self._size == 0:
            return
        node, _ = self._ends()
        for position in range(self._size):
            yield node
            if position < self._size - 1:
                node = _owned(node.next)

    def _values(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.data

    def __repr__(self) -> str:
        return f"CdlList({self.to_list()!r})"

    def __str__(self) -> str:
        return "[" + " <=> ".join(repr(value) for value in self._values()) + "]"
