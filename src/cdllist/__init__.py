"""cdllist - Circular doubly-linked list with owning and observing links."""

from cdllist.borrow import Ref
from cdllist.core import CdlList
from cdllist.errors import (
    CdlListError,
    InvariantViolationError,
    StaleReferenceError,
)
from cdllist.linkedlist import Link, Node
from cdllist.types import LinkKind

__version__ = "0.0.1"

__all__ = [
    "CdlList",
    "Ref",
    "Link",
    "Node",
    "LinkKind",
    "CdlListError",
    "InvariantViolationError",
    "StaleReferenceError",
]
