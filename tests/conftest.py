import pytest

from lang1.interpreter import Interpreter
from lang1.types.environment import Environment


@pytest.fixture
def env():
    """Fresh global environment."""
    return Environment()


@pytest.fixture
def interp():
    """Interpreter whose global environment persists across eval calls."""
    return Interpreter()
