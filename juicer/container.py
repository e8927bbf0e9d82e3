# juicer/container.py
"""
Fruit container.

Holds fruit in insertion order up to a capacity measured by summed volume.
The held volume never exceeds the capacity.
"""

from __future__ import annotations

import logging
from collections import deque
from decimal import Decimal
from typing import Optional

from juicer.errors import CapacityError
from juicer.models import Fruit
from juicer.quantities import to_decimal


_logger = logging.getLogger(__name__)


class FruitContainer:
    """
    FIFO fruit storage with a volume capacity.

    Remaining capacity is recomputed from the held fruit on every call.
    """

    def __init__(self, capacity: float):
        """
        Initialize container.

        Args:
            capacity: Maximum total fruit volume (liters), must be positive
        """
        if capacity <= 0:
            raise ValueError(f"Container capacity must be positive, got {capacity}")
        self._capacity = float(capacity)
        self._fruits: deque[Fruit] = deque()

    @property
    def capacity(self) -> float:
        return self._capacity

    def add_fruit(self, fruit: Fruit) -> None:
        """
        Append a fruit to the end of the queue.

        Raises:
            CapacityError: If the fruit's volume exceeds the remaining capacity
        """
        remaining = self._remaining()
        # Exact fit is accepted
        if remaining < to_decimal(fruit.get_volume()):
            raise CapacityError(volume=fruit.get_volume(), remaining=float(remaining))

        self._fruits.append(fruit)
        _logger.info(f"Added fruit: {fruit}")

    def get_remaining_capacity(self) -> float:
        return float(self._remaining())

    def _remaining(self) -> Decimal:
        # Decimal sums keep 3.3 - 1.1 equal to 2.2
        total_volume = sum((to_decimal(fruit.get_volume()) for fruit in self._fruits), Decimal(0))
        return to_decimal(self._capacity) - total_volume

    def remove_fruit(self) -> Optional[Fruit]:
        """Remove and return the earliest-added fruit, or None when empty."""
        if not self._fruits:
            return None
        return self._fruits.popleft()

    def get_fruit_count(self) -> int:
        return len(self._fruits)

    def get_fruits(self) -> list[Fruit]:
        """Snapshot of held fruit, oldest first."""
        return list(self._fruits)
