"""Juicer simulation - process entrypoint."""
import logging
import random
import sys

from juicer.config import load_config, log_config_snapshot
from juicer.scenario import run_scenario

logger = logging.getLogger(__name__)


def main() -> int:
    # Console output is the simulation log, one line per message
    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
        stream=sys.stdout,
    )

    config = load_config()
    log_config_snapshot(config)

    run_scenario(rng=random.Random(), config=config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
