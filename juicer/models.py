# juicer/models.py
"""
Fruit data models.

Fruit is a passive, immutable value holder. Rottenness is a capability:
only fruit implementing Perishable can be rotten, plain Fruit never is.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from juicer.errors import InvalidFruitError
from juicer.quantities import format_liters


class Perishable(ABC):
    """Capability for fruit that can spoil."""

    @abstractmethod
    def is_rotten(self) -> bool:
        """True if the fruit has spoiled and must not be juiced."""
        ...


@dataclass(frozen=True)
class Fruit:
    """A fruit, determined by its color and volume (liters)."""

    color: str
    volume: float

    def __post_init__(self):
        if isinstance(self.volume, bool) or not isinstance(self.volume, (int, float)):
            raise InvalidFruitError(self.volume)
        if not math.isfinite(self.volume) or self.volume <= 0:
            raise InvalidFruitError(self.volume)
        object.__setattr__(self, "volume", float(self.volume))

    @property
    def kind(self) -> str:
        return type(self).__name__.lower()

    def get_volume(self) -> float:
        return self.volume

    def describe(self) -> str:
        return f"{self.color} {self.kind} ({format_liters(self.volume)} L)"

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for reports."""
        return {
            "kind": self.kind,
            "color": self.color,
            "volume": self.volume,
        }

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class Apple(Fruit, Perishable):
    """An apple is a fruit that can be rotten."""

    rotten: bool = False

    def is_rotten(self) -> bool:
        return self.rotten

    def describe(self) -> str:
        if self.rotten:
            return f"{self.color} {self.kind} ({format_liters(self.volume)} L, rotten)"
        return super().describe()

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["is_rotten"] = self.rotten
        return data


def is_rotten(fruit: Fruit) -> bool:
    """Check rottenness through the Perishable capability."""
    return isinstance(fruit, Perishable) and fruit.is_rotten()
