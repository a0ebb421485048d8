import numpy as np
import pytest

from rotkit.formatting import NumberFormat
from rotkit.quaternion import Quaternion

# Number of random samples for property style tests
SAMPLE_COUNT = 1000


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20241019)


@pytest.fixture
def invariant() -> NumberFormat:
    return NumberFormat.invariant()


@pytest.fixture
def german() -> NumberFormat:
    """Separators of a de_DE style locale."""
    return NumberFormat(group_separator='.', decimal_separator=',')


@pytest.fixture
def random_quaternions(rng: np.random.Generator) -> list[Quaternion]:
    """Random finite quaternions, including exact zeros and negative components."""
    values = rng.uniform(-1000.0, 1000.0, size=(SAMPLE_COUNT, 4))
    # zero out ~10% of the components
    values[rng.random(size=values.shape) < 0.1] = 0.0  # noqa: PLR2004
    return [Quaternion(*row) for row in values]


@pytest.fixture
def random_unit_quaternions(rng: np.random.Generator) -> list[Quaternion]:
    values = rng.normal(size=(SAMPLE_COUNT, 4))
    values /= np.linalg.norm(values, axis=1, keepdims=True)
    return [Quaternion(*row) for row in values]


@pytest.fixture
def random_vectors(rng: np.random.Generator) -> np.ndarray:
    return rng.uniform(-10.0, 10.0, size=(SAMPLE_COUNT, 3))
