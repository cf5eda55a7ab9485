import pytest
import sincdelay as sd
from sincdelay import config


@pytest.fixture(autouse=True)
def _restore_default_sample_rate():
    config.set_default_sample_rate(44100.0)
    yield
    config.set_default_sample_rate(44100.0)


@pytest.fixture
def demo_delay():
    """The demonstration configuration: 4096 slots, K=2, 100.5 -> 500.7."""
    delay = sd.MultiTapSincDelay(4096, initial_k=2)
    delay.set_tau1(100.5)
    delay.set_tau2(500.7)
    return delay


@pytest.fixture(autouse=True)
def _reset_package_logging():
    yield
    sd.reset_logging()
