import numpy as np
import pytest

WHITE = (255, 255, 255, 255)
CLEAR = (0, 0, 0, 0)


def make_grid(*rows):
    """Build an RGBA grid from rows of (r, g, b, a) tuples."""
    return np.array(rows, dtype=np.uint8).reshape(len(rows), len(rows[0]), 4)


class FakeClock:
    """Clock that only moves when something sleeps or advances it."""

    def __init__(self):
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()
