import sys
import os

import numpy as np
import pytest

# Add the project root to sys.path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)


@pytest.fixture
def rng():
    """Seeded generator so random-color tests are reproducible."""
    return np.random.default_rng(1234)
