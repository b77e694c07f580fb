import matplotlib

matplotlib.use("Agg")

import pytest

from ffnet import backend


@pytest.fixture
def seeded():
    backend.seed(0)
    return backend
