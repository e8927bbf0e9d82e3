# juicer/scenario.py
"""
Scenario driver.

Runs the juicer through a fixed number of actions. Every add_interval-th
action an apple is offered; every action squeezes once. Capacity and rotten
fruit errors are reported and the run continues, so a scenario always
completes regardless of random outcomes.

Randomness is injected: pass a seeded random.Random for reproducible runs.
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Optional

from juicer.config import (
    MAX_HUNDREDTHS,
    MAX_WHOLE_LITERS,
    MIN_WHOLE_LITERS,
    ScenarioConfig,
    load_config,
)
from juicer.errors import CapacityError, RottenFruitError
from juicer.models import Apple
from juicer.quantities import format_liters
from juicer.schemas import ActionRecord, ScenarioReport
from juicer.service import Juicer


_logger = logging.getLogger(__name__)


class AddOutcome(str, Enum):
    """Result of offering a fruit to the juicer."""
    ADDED = "added"
    REJECTED = "rejected"


class SqueezeOutcome(str, Enum):
    """Result of one squeeze attempt."""
    JUICED = "juiced"
    EMPTY = "empty"
    ROTTEN = "rotten"


class AppleFactory:
    """Builds random apples from an injected random source."""

    def __init__(self, rng: random.Random, config: Optional[ScenarioConfig] = None):
        self._rng = rng
        self._config = config or load_config()

    def next_volume(self) -> float:
        whole = self._rng.randint(MIN_WHOLE_LITERS, MAX_WHOLE_LITERS)
        return whole + self._rng.randint(0, MAX_HUNDREDTHS) / 100

    def next_is_rotten(self) -> bool:
        return self._rng.randint(1, 100) <= self._config.rotten_probability_percent

    def next_apple(self) -> Apple:
        """Draw a volume, then a rottenness flag, and build the apple."""
        volume = self.next_volume()
        rotten = self.next_is_rotten()
        return Apple(color=self._config.fruit_color, volume=volume, rotten=rotten)


def _offer_fruit(juicer: Juicer, apple: Apple) -> AddOutcome:
    try:
        juicer.add_fruit(apple)
    except CapacityError as e:
        _logger.info(f"Error: {e.message}")
        return AddOutcome.REJECTED
    return AddOutcome.ADDED


def _squeeze_once(juicer: Juicer) -> tuple[SqueezeOutcome, float]:
    try:
        juice = juicer.squeeze()
    except RottenFruitError as e:
        _logger.info(f"Error: {e.message}")
        return SqueezeOutcome.ROTTEN, 0.0
    if juice is None:
        return SqueezeOutcome.EMPTY, 0.0
    return SqueezeOutcome.JUICED, juice


def run_action(
    juicer: Juicer,
    action: int,
    factory: AppleFactory,
    add_interval: int,
) -> ActionRecord:
    """
    Perform one scenario action.

    Args:
        juicer: Juicer under simulation
        action: 1-based action number
        factory: Source of apples
        add_interval: An apple is offered when action is a multiple of this

    Returns:
        Record of what happened
    """
    _logger.info(f"Action {action}:")

    added = None
    add_outcome = None
    errors = []

    if action % add_interval == 0:
        apple = factory.next_apple()
        added = apple.to_dict()
        add_outcome = _offer_fruit(juicer, apple)
        if add_outcome is AddOutcome.REJECTED:
            errors.append("CAPACITY_EXCEEDED")

    squeeze_outcome, juice = _squeeze_once(juicer)
    if squeeze_outcome is SqueezeOutcome.ROTTEN:
        errors.append("ROTTEN_FRUIT")

    return ActionRecord(
        action=action,
        added=added,
        add_outcome=add_outcome.value if add_outcome else None,
        squeeze_outcome=squeeze_outcome.value,
        juice=juice,
        errors=errors,
    )


def run_scenario(
    juicer: Optional[Juicer] = None,
    rng: Optional[random.Random] = None,
    config: Optional[ScenarioConfig] = None,
) -> ScenarioReport:
    """
    Run the full simulation.

    Args:
        juicer: Juicer to drive (a new one sized from config if not provided)
        rng: Random source (an unseeded random.Random if not provided)
        config: Scenario settings (defaults if not provided)

    Returns:
        ScenarioReport with per-action records and totals
    """
    config = config or load_config()
    juicer = juicer or Juicer(config.capacity)
    factory = AppleFactory(rng or random.Random(), config)

    records = []
    for action in range(1, config.action_count + 1):
        records.append(run_action(juicer, action, factory, config.add_interval))

    total_juice = juicer.get_total_juice()
    _logger.info(f"Total juice obtained: {format_liters(total_juice)} liters.")

    return ScenarioReport(
        actions=records,
        total_juice=total_juice,
        fruit_added=sum(1 for r in records if r.add_outcome == AddOutcome.ADDED.value),
        fruit_rejected=sum(1 for r in records if r.add_outcome == AddOutcome.REJECTED.value),
        rotten_discarded=sum(1 for r in records if r.squeeze_outcome == SqueezeOutcome.ROTTEN.value),
        juiced_count=sum(1 for r in records if r.squeeze_outcome == SqueezeOutcome.JUICED.value),
        empty_squeezes=sum(1 for r in records if r.squeeze_outcome == SqueezeOutcome.EMPTY.value),
        remaining_fruit=juicer.get_fruit_count(),
        remaining_capacity=juicer.get_remaining_capacity(),
    )
