"""Type definitions for cdllist."""

from typing import Literal, TypeAlias, TypeVar

# Payload type held by list nodes
T = TypeVar("T")

# Target type of a link (always a Node in practice)
N = TypeVar("N")

# Whether a link keeps its target alive
LinkKind: TypeAlias = Literal["owning", "observing"]
