import pytest

from relcalc.algebra.engine.config import config


@pytest.fixture(autouse=True)
def default_config():
    config.reset()
    yield config
    config.reset()
