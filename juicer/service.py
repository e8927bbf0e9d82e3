# juicer/service.py
"""
Juicer service - main entry point for juicing operations.

Coordinates:
- Fruit container (capacity-checked FIFO)
- Strainer (juice production)

The juicer owns exactly one container and one strainer for its lifetime.
"""

from __future__ import annotations

import logging
from typing import Optional

from juicer.container import FruitContainer
from juicer.models import Fruit
from juicer.strainer import Strainer


_logger = logging.getLogger(__name__)


class Juicer:
    """The juicer consists of two parts: a fruit container and a strainer."""

    def __init__(self, capacity: float):
        """
        Initialize juicer.

        Args:
            capacity: Container capacity in liters
        """
        self._container = FruitContainer(capacity)
        self._strainer = Strainer()

    @property
    def capacity(self) -> float:
        return self._container.capacity

    def add_fruit(self, fruit: Fruit) -> None:
        """
        Put a fruit into the container.

        Raises:
            CapacityError: Propagated from the container
        """
        self._container.add_fruit(fruit)

    def squeeze(self) -> Optional[float]:
        """
        Squeeze the oldest fruit in the container.

        Returns:
            Juice obtained, or None when there was no fruit

        Raises:
            RottenFruitError: Propagated from the strainer. The fruit has
                already left the container and is discarded.
        """
        fruit = self._container.remove_fruit()
        if fruit is None:
            _logger.info("No fruits to squeeze.")
            return None
        return self._strainer.squeeze(fruit)

    def get_total_juice(self) -> float:
        return self._strainer.get_total_juice()

    def get_remaining_capacity(self) -> float:
        return self._container.get_remaining_capacity()

    def get_fruit_count(self) -> int:
        return self._container.get_fruit_count()

    def get_squeezed_count(self) -> int:
        return self._strainer.get_squeezed_count()
