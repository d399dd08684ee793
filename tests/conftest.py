"""
Pytest configuration and shared fixtures for aviator predictor tests.
"""

import pytest
import pandas as pd

from aviator.config import Config
from aviator.ops.metrics import get_metrics_recorder


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep AVIATOR_* settings from the host out of tests."""
    for key in (
        "AVIATOR_HISTORY_LENGTH",
        "AVIATOR_ALLOWED_LENGTHS",
        "AVIATOR_ANALYSIS_DELAY",
        "AVIATOR_LOG_LEVEL",
        "AVIATOR_OUTPUT_DIR",
    ):
        monkeypatch.delenv(key, raising=False)
    get_metrics_recorder().reset()
    yield
    get_metrics_recorder().reset()


@pytest.fixture
def default_config():
    return Config()


@pytest.fixture
def five_round_config():
    """Config allowing length-5 histories, used for breakout cases."""
    return Config(history_length=5, allowed_history_lengths=[2, 3, 5, 6])


@pytest.fixture
def sample_histories():
    """Six-round histories covering every category plus bad rows."""
    return pd.DataFrame({
        'round_id': ['r1', 'r2', 'r3', 'r4', 'r5', 'r6'],
        'history': [
            '1.00, 1.10, 1.15, 1.18, 1.50, 6.20',   # cooldown
            '1.00, 1.10, 1.15, 1.18, 1.50, 1.90',   # breakout
            '5.00, 1.30, 2.50, 2.50, 3.00, 3.50',   # stable
            '1.03, 1.45, 1.00, 2.10, 4.56, 1.24',   # low
            '1.03, 1.45',                           # wrong count
            '1.03, abc, 1.00, 2.10, 4.56, 1.24',    # not a number
        ],
    })
