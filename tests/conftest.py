"""
Shared fixtures for the engine tests.
Pytest auto-discovers this file.
"""

from typing import List

import pytest

from fourinarow.debug import DebugLevel, debug
from fourinarow.game.rules import GameEngine

# Fills the 6x7 board without ever lining up four tokens, starting with YELLOW.
# Bottom cells per column: Y Y R R Y Y R, each column alternating upwards.
DRAW_SEQUENCE = [0] * 6 + [1] * 6 + [4] + [2] * 6 + [3] * 6 + [6] * 6 + [4] * 5 + [5] * 6


@pytest.fixture(autouse=True)
def debug_level():
    """Log everything during tests so logging paths are exercised, restore afterwards."""
    previous = debug.level
    debug.configure(level=DebugLevel.TRACE)
    yield
    debug.configure(level=previous, components=[])


@pytest.fixture
def engine() -> GameEngine:
    return GameEngine()


@pytest.fixture
def draw_sequence() -> List[int]:
    return list(DRAW_SEQUENCE)


