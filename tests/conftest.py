import pytest

from sable.interpreter import Interpreter
from sable.types.environment import Environment
from sable.builtin import primitives, io_builtin


@pytest.fixture
def env():
    """Fresh environment with primitives and IO primitives loaded."""
    e = Environment()
    primitives.register(e)
    io_builtin.register(e)
    return e


@pytest.fixture
def interp():
    """Fresh session without the standard library."""
    with Interpreter() as itp:
        yield itp


@pytest.fixture
def std_interp():
    """Fresh session with the standard library loaded."""
    with Interpreter(prelude=True) as itp:
        yield itp
