# juicer/config.py
"""
Scenario configuration with validation.

The simulation runs with fixed constants. load_config() accepts overrides
for programmatic use (tests); nothing is read from the environment or the
command line.
"""
import logging
from dataclasses import dataclass, fields

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

SERVICE_NAME = "juicer-sim"
SERVICE_VERSION = "0.1.0"

DEFAULT_CAPACITY = 20.0
DEFAULT_ACTION_COUNT = 100
DEFAULT_ADD_INTERVAL = 9  # An apple is added every 9th action
DEFAULT_ROTTEN_PROBABILITY_PERCENT = 20
DEFAULT_FRUIT_COLOR = "Red"

# Apple volume draw: whole liters plus hundredths, i.e. [1.00, 5.99]
MIN_WHOLE_LITERS = 1
MAX_WHOLE_LITERS = 5
MAX_HUNDREDTHS = 99


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(Exception):
    """Raised when a scenario setting is invalid."""

    pass


# =============================================================================
# Configuration Dataclass
# =============================================================================


@dataclass(frozen=True)
class ScenarioConfig:
    """Settings for one simulation run."""

    service_name: str = SERVICE_NAME
    service_version: str = SERVICE_VERSION

    capacity: float = DEFAULT_CAPACITY
    action_count: int = DEFAULT_ACTION_COUNT
    add_interval: int = DEFAULT_ADD_INTERVAL
    rotten_probability_percent: int = DEFAULT_ROTTEN_PROBABILITY_PERCENT
    fruit_color: str = DEFAULT_FRUIT_COLOR


# =============================================================================
# Configuration Loading
# =============================================================================


def _validate(config: ScenarioConfig) -> list[str]:
    """Return a list of problems with the config (empty when valid)."""
    problems = []
    if config.capacity <= 0:
        problems.append(f"capacity={config.capacity} must be positive")
    if config.action_count < 0:
        problems.append(f"action_count={config.action_count} must not be negative")
    if config.add_interval < 1:
        problems.append(f"add_interval={config.add_interval} must be at least 1")
    if not 0 <= config.rotten_probability_percent <= 100:
        problems.append(
            f"rotten_probability_percent={config.rotten_probability_percent} "
            "must be between 0 and 100"
        )
    if not config.fruit_color.strip():
        problems.append("fruit_color must not be empty")
    return problems


def load_config(**overrides) -> ScenarioConfig:
    """
    Build and validate a scenario configuration.

    Args:
        **overrides: Field values replacing the defaults

    Returns:
        ScenarioConfig instance with validated settings.

    Raises:
        ConfigurationError: On unknown fields or invalid values.
    """
    known = {f.name for f in fields(ScenarioConfig)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ConfigurationError(f"Unknown scenario settings: {', '.join(unknown)}")

    config = ScenarioConfig(**overrides)
    problems = _validate(config)
    if problems:
        raise ConfigurationError("; ".join(problems))
    return config


def log_config_snapshot(config: ScenarioConfig) -> str:
    """
    Generate and log a one-line configuration snapshot.

    Returns the snapshot string for testing purposes.
    """
    snapshot = (
        f"[STARTUP] service={config.service_name} "
        f"version={config.service_version} "
        f"capacity={config.capacity} "
        f"action_count={config.action_count} "
        f"add_interval={config.add_interval} "
        f"rotten_probability_percent={config.rotten_probability_percent} "
        f"fruit_color={config.fruit_color}"
    )
    logger.debug(snapshot)
    return snapshot
