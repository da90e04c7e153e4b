import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from kp_solvers.items import make_items


@pytest.fixture
def classic_items():
    """The textbook instance: capacity 50 gives 220 for 0/1 and 240 for fractional."""
    return make_items([(60, 10), (100, 20), (120, 30)])
