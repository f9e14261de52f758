"""Scoped read-only views into list payloads."""

import weakref
from typing import TYPE_CHECKING, Generic

from cdllist.errors import StaleReferenceError
from cdllist.linkedlist import Node
from cdllist.types import T

if TYPE_CHECKING:
    from cdllist.core import CdlList


class Ref(Generic[T]):
    """
    Read-only view of the payload at one end of a CdlList.

    A Ref is valid until the next mutating call on the list it came from.
    It observes both the list and the node weakly, so holding a Ref never
    keeps either alive.
    """

    __slots__ = ("_owner", "_node", "_generation")

    def __init__(self, owner: "CdlList[T]", node: Node[T]) -> None:
        self._owner = weakref.ref(owner)
        self._node = weakref.ref(node)
        self._generation = owner.generation

    @property
    def is_valid(self) -> bool:
        """Return True while the list is unmodified and the node is alive."""
        owner = self._owner()
        if owner is None or owner.generation != self._generation:
            return False
        return self._node() is not None

    @property
    def value(self) -> T:
        """
        Return the viewed payload.

        Raises:
            StaleReferenceError: If the list was mutated since this Ref was
                created, or the list or node has been released
        """
        node = self._node()
        if node is None or not self.is_valid:
            raise StaleReferenceError("Ref used after its list was modified")
        return node.data

    def __repr__(self) -> str:
        if not self.is_valid:
            return "Ref(<stale>)"
        return f"Ref({self.value!r})"
