"""Global test configuration and lightweight fixtures.

Seeds RNGs for more deterministic behavior, restores the global numeric
configuration after every test, and auto-marks property tests.
"""

import os
import random
from pathlib import Path

import numpy as np
import pytest

from ontonum.core import NumericConfig


def pytest_sessionstart(session: pytest.Session) -> None:
    """Seed common RNGs to improve test determinism."""
    seed = int(os.environ.get("ONTONUM_TEST_SEED", "12345"))
    random.seed(seed)
    np.random.seed(seed)


@pytest.fixture(autouse=True)
def _restore_numeric_config():
    """Undo any NumericConfig change a test makes."""
    saved = NumericConfig.snapshot()
    yield
    NumericConfig.restore(saved)


@pytest.fixture
def small_pow_ceiling():
    """A power ceiling small enough that chunked exponentiation is cheap to exercise."""
    NumericConfig.set_pow_ceiling(64)
    return 64


def pytest_collection_modifyitems(session: pytest.Session, config: pytest.Config, items: list) -> None:
    """Auto-mark tests under tests/property with the 'property' marker.

    Select property tests with `-m property`.
    """
    for item in items:
        p = Path(str(item.fspath))
        if "property" in p.parts and "tests" in p.parts:
            item.add_marker(pytest.mark.property)
