import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest


@pytest.fixture
def rng():
    return np.random.default_rng(0)


@pytest.fixture
def step_image():
    """16x16 vertical step 0 -> 1 with a single 0.5 column at the boundary."""
    img = np.zeros((16, 16), dtype=np.float64)
    img[:, 8] = 0.5
    img[:, 9:] = 1.0
    return img
