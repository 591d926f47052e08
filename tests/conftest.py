import logging

import pytest

from rational import make


@pytest.fixture
def half():
    """Provide 1/2."""
    return make(1, 2)


@pytest.fixture
def two_thirds():
    """Provide 2/3."""
    return make(2, 3)


@pytest.fixture
def zero():
    return make(0, 1)


@pytest.fixture
def debug_log(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture DEBUG records from the rational module."""
    caplog.set_level(logging.DEBUG, logger="rational")
    return caplog
