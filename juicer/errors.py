# juicer/errors.py
"""
Juicer domain errors.

Every error carries a human-readable message and a stable code so callers
can branch on the kind without parsing text.
"""

from __future__ import annotations


class JuicerError(Exception):
    """Base exception for juicer operations."""

    def __init__(self, message: str, code: str):
        self.message = message
        self.code = code
        super().__init__(message)


class CapacityError(JuicerError):
    """Raised when a fruit does not fit in the remaining container capacity."""

    def __init__(self, volume: float, remaining: float):
        self.volume = volume
        self.remaining = remaining
        super().__init__(
            message="Not enough capacity to add the fruit.",
            code="CAPACITY_EXCEEDED",
        )


class RottenFruitError(JuicerError):
    """Raised when the strainer is handed a rotten fruit."""

    def __init__(self):
        super().__init__(
            message="Cannot juice a rotten fruit.",
            code="ROTTEN_FRUIT",
        )


class InvalidFruitError(JuicerError, ValueError):
    """Raised when a fruit is constructed with an unusable volume."""

    def __init__(self, volume: object):
        self.volume = volume
        super().__init__(
            message=f"Fruit volume must be a positive finite number, got {volume!r}",
            code="INVALID_FRUIT",
        )
