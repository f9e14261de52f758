"""Nodes and owning/observing links for the circular doubly-linked list."""

import weakref
from typing import Any, Generic

from cdllist.types import LinkKind, N, T


class Link(Generic[N]):
    """
    Tagged reference from one node to another.

    An owning link holds a strong reference and keeps its target alive. An
    observing link holds a weak reference: it contributes nothing to the
    target's lifetime and resolves to None once the target has been freed.

    Links are immutable. Rewriting an edge means storing a new Link in the
    node's ``next`` or ``prev`` slot.
    """

    __slots__ = ("_kind", "_target")

    def __init__(self, kind: LinkKind, target: Any) -> None:
        self._kind = kind
        self._target = target

    @classmethod
    def owning(cls, node: N) -> "Link[N]":
        """Create a link that keeps ``node`` alive."""
        return cls("owning", node)

    @classmethod
    def observing(cls, node: N) -> "Link[N]":
        """Create a link that observes ``node`` without keeping it alive."""
        return cls("observing", weakref.ref(node))

    @property
    def kind(self) -> LinkKind:
        return self._kind

    @property
    def is_owning(self) -> bool:
        return self._kind == "owning"

    @property
    def is_observing(self) -> bool:
        return self._kind == "observing"

    def resolve(self) -> N | None:
        """Return the target node, or None if an observed target is gone."""
        if self._kind == "owning":
            return self._target  # type: ignore[no-any-return]
        return self._target()  # type: ignore[no-any-return]

    def __repr__(self) -> str:
        target = self.resolve()
        where = hex(id(target)) if target is not None else "dead"
        return f"Link({self._kind}, {where})"


class Node(Generic[T]):
    """A node in the circular list: a payload plus its next/prev links."""

    __slots__ = ("data", "next", "prev", "__weakref__")

    def __init__(self, data: T) -> None:
        self.data = data
        self.next: Link[Node[T]] | None = None
        self.prev: Link[Node[T]] | None = None

    def detach(self) -> None:
        """Drop both links so the node holds nothing once it leaves the list."""
        self.next = None
        self.prev = None

    def __repr__(self) -> str:
        return "Node(data={!r}, addr={}, next={}, prev={})".format(
            self.data, hex(id(self)), self.next, self.prev
        )
