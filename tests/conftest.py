import os
import sys
import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from config import settings


@pytest.fixture
def linear_series():
    return [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


@pytest.fixture
def period_four_series():
    return [1.0, 3.0, 2.0, 6.0] * 12


@pytest.fixture
def default_settings(monkeypatch):
    """Pin the analysis defaults so tests do not depend on the environment."""
    monkeypatch.setattr(settings, "default_window_size", 10)
    monkeypatch.setattr(settings, "default_anomaly_threshold", 2.0)
    monkeypatch.setattr(settings, "seasonality_max_lag", 20)
    monkeypatch.setattr(settings, "seasonality_min_length", 4)
    monkeypatch.setattr(settings, "trend_min_length", 2)
    monkeypatch.setattr(settings, "max_sequence_length", 100_000)
    return settings


# Prevent pytest from attempting to collect any modules inside the engine
# package itself.  Keeps collection focused on the tests directory.

def pytest_ignore_collect(collection_path, config):
    text = str(collection_path)
    if os.path.sep + 'engine' + os.path.sep in text:
        return True
