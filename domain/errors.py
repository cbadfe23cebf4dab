from __future__ import annotations


class LotIntakeError(RuntimeError):
    """Base class for errors raised by the lot intake pipeline."""
    pass


class InvalidGridError(LotIntakeError):
    """Raised when the decoded grid is not a sequence of rows or exceeds the size limits."""
    pass


class MaterializationError(LotIntakeError):
    """Raised by a lot materializer when one lot cannot be persisted."""
    pass
