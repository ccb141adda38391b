import pytest

from world import Grid


class FixedCoin:
    """Stands in for random.Random; always returns the same draw."""

    def __init__(self, value: float) -> None:
        self.value = value

    def random(self) -> float:
        return self.value


# < 0.5 keeps the table order, >= 0.5 swaps it
KEEP_ORDER = FixedCoin(0.0)
SWAP_ORDER = FixedCoin(0.9)


@pytest.fixture
def grid() -> Grid:
    return Grid(100)
