import os
import sys
import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from engine.fts import partition_universe


@pytest.fixture
def reference_intervals():
    """Seven sets of width 10 over [30, 100], mids 35, 45, ..., 95."""
    return partition_universe(30.0, 100.0, 7)


@pytest.fixture
def reference_series():
    return [47.12, 33.62, 41.6]
