import pytest

from chromacontrast import Color


@pytest.fixture
def white():
    return Color((255, 255, 255))


@pytest.fixture
def black():
    return Color((0, 0, 0))


@pytest.fixture
def translucent_blue():
    return Color((53, 66, 240, 0.2))
