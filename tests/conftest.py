import os
import sys
from datetime import datetime, timedelta

import pytest

# Ensure project root is on the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class FakeClock:
    """Deterministic clock: each call advances one second."""

    def __init__(self, start=datetime(2024, 4, 12, 19, 5, 0)):
        self.now = start

    def __call__(self):
        t = self.now
        self.now = t + timedelta(seconds=1)
        return t


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scenario_a():
    return {"pitcher_time": 1.8, "runner_speed": 27.5, "jump_quality": 75}


@pytest.fixture
def scenario_b(scenario_a):
    return dict(scenario_a, pop_time=1.9, throw_velo=82)
