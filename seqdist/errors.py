"""
seqdist.errors — Exception hierarchy.

    SeqDistError
    ├── CostOverflowError   (also an OverflowError)
    └── InvalidCostError    (also a ValueError)
"""

from typing import Any, Optional


class SeqDistError(Exception):
    """Base class for every error raised by seqdist."""


class CostOverflowError(SeqDistError, OverflowError):
    """
    The accumulated distance cannot be represented.

    Raised when the result exceeds the configured accumulator width, or
    when float accumulation ran off to infinity.
    """

    def __init__(self, value: Any, limit: Optional[int] = None):
        self.value = value
        self.limit = limit
        if limit is None:
            msg = f"accumulated cost {value!r} is not finite"
        else:
            msg = f"accumulated cost {value!r} exceeds accumulator limit {limit}"
        super().__init__(msg)


class InvalidCostError(SeqDistError, ValueError):
    """A cost is negative or NaN."""
