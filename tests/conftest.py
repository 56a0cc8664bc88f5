import logging

import pytest

from py_vecmath.logger import logger
from py_vecmath.unit import PreferredUnits

logger.setLevel(logging.DEBUG)


@pytest.fixture
def restore_preferred_units():
    """Reset PreferredUnits after a test changes them."""
    yield PreferredUnits
    PreferredUnits.restore_defaults()
