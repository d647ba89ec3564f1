import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class ScriptedRandom:
    """Random source that replays fixed indices and directions."""

    def __init__(self, indices, directions):
        self.indices = list(indices)
        self.directions = list(directions)

    def uniform_index(self, n):
        return self.indices.pop(0) % n

    def uniform_direction(self):
        return self.directions.pop(0)


@pytest.fixture
def scripted_random():
    return ScriptedRandom
