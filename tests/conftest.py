import pytest

from connect4.debug import debug, DebugLevel
from connect4.game.rules import GameEngine


@pytest.fixture
def engine():
    return GameEngine()


@pytest.fixture(autouse=True)
def restore_debug():
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[])
