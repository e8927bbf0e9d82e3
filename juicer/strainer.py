# juicer/strainer.py
"""
Strainer - the only place juice is produced.

Each squeeze yields juice equal to half of the fruit's volume.
"""

from __future__ import annotations

import logging

from juicer.errors import RottenFruitError
from juicer.models import Fruit, is_rotten
from juicer.quantities import format_liters


_logger = logging.getLogger(__name__)

JUICE_YIELD_RATIO = 0.5


class Strainer:
    """Squeezes one fruit at a time and accumulates the juice produced."""

    def __init__(self):
        self._total_juice = 0.0
        self._squeezed_count = 0

    def squeeze(self, fruit: Fruit) -> float:
        """
        Turn a fruit into juice.

        Args:
            fruit: Fruit to squeeze

        Returns:
            Juice obtained from this fruit (liters)

        Raises:
            RottenFruitError: If the fruit is rotten; nothing is accumulated
        """
        if is_rotten(fruit):
            raise RottenFruitError()

        juice = fruit.get_volume() * JUICE_YIELD_RATIO
        self._total_juice += juice
        self._squeezed_count += 1
        _logger.info(f"Juiced fruit: {fruit}. Juice obtained: {format_liters(juice)} liters.")
        return juice

    def get_total_juice(self) -> float:
        return self._total_juice

    def get_squeezed_count(self) -> int:
        return self._squeezed_count
