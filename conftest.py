"""Configure pytest for the juicer project."""
import sys
from pathlib import Path

import pytest

# Make the juicer package importable without an install
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


class ScriptedRandom:
    """
    Stand-in for random.Random that replays fixed randint results.

    Values are returned in order regardless of the requested bounds, so a
    test can spell out exactly which apples the scenario produces.
    """

    def __init__(self, values):
        self._values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        if not self._values:
            raise AssertionError("ScriptedRandom ran out of values")
        return self._values.pop(0)


@pytest.fixture
def scripted_random():
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom
