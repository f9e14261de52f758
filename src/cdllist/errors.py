"""Exception classes for cdllist."""


class CdlListError(Exception):
    """Base exception for all cdllist errors."""


class InvariantViolationError(CdlListError):
    """Raised when a link is found in a state the ownership invariant rules out."""


class StaleReferenceError(CdlListError):
    """Raised when a Ref is read after its list was mutated or its node released."""
