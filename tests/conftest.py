import pytest

from activityrings.config import DEFAULT_LAYOUT
from activityrings.rings.model import build_rings


@pytest.fixture
def rings():
    return build_rings()


@pytest.fixture
def center():
    return DEFAULT_LAYOUT.center
