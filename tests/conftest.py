import pytest

from nba_winpct.estimator import WinPctEstimator


@pytest.fixture(scope="session")
def trained_estimator():
    est = WinPctEstimator(random_seed=42)
    est.train()
    return est


@pytest.fixture
def untrained_estimator():
    return WinPctEstimator(random_seed=42)
