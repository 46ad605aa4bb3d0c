import os
import random
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from cryptgen.dungeon import Dungeon, Map  # noqa: E402
from tests.dungeon_test_utils import CROSSROADS  # noqa: E402


@pytest.fixture
def rng():
    return random.Random(12345)


@pytest.fixture(scope="session")
def dungeon_42():
    return Dungeon(seed=42)


@pytest.fixture
def crossroads():
    """Two side rooms joined by a corridor with a T branch down to a bottom room."""
    return Map.from_lines(CROSSROADS)


@pytest.fixture(autouse=True)
def _quiet_logs(monkeypatch):
    monkeypatch.setenv("CRYPTGEN_LOG_LEVEL", "error")
