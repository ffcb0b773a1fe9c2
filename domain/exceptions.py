"""Domain Exceptions"""
from typing import Optional


class PricingError(ValueError):
    """Base class for pricing and reporting rule violations"""


class InvalidRangeError(PricingError):
    """Raised when a date range does not end strictly after it starts"""

    def __init__(self, start, end, message: Optional[str] = None):
        self.start = start
        self.end = end
        super().__init__(message or f"End date {end} must be after start date {start}")


class OverlapError(PricingError):
    """Raised when two seasonal pricing periods overlap"""

    def __init__(self, first, second):
        self.first = first
        self.second = second
        super().__init__(
            f"Seasonal pricing periods overlap: {first.start_date} to {first.end_date} "
            f"and {second.start_date} to {second.end_date}"
        )
