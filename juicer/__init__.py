# juicer/__init__.py
"""
Fruit juicer simulation.

A juicer holds fruit in a capacity-limited container and squeezes it
through a strainer, accumulating juice. Rotten apples are rejected.
"""

from juicer.errors import JuicerError, CapacityError, RottenFruitError, InvalidFruitError
from juicer.models import Fruit, Apple, Perishable
from juicer.service import Juicer
from juicer.scenario import run_scenario

__all__ = [
    "JuicerError",
    "CapacityError",
    "RottenFruitError",
    "InvalidFruitError",
    "Fruit",
    "Apple",
    "Perishable",
    "Juicer",
    "run_scenario",
]
