import os

import pytest

from lispir.interpreter import Interpreter
from lispir.types.environment import Environment

CONFIG_VARS = ("LISPIR_MAX_DEPTH", "LISPIR_SCOPING", "LISPIR_PROMPT", "LOGLEVEL")


@pytest.fixture
def env():
    """Fresh, empty root environment."""
    return Environment()


@pytest.fixture
def interp():
    """Interpreter session with builtins loaded."""
    return Interpreter()


@pytest.fixture(autouse=True, scope="session")
def _clean_config_env():
    # Tests must not depend on the developer's shell settings
    saved = {var: os.environ.pop(var) for var in CONFIG_VARS if var in os.environ}
    yield
    os.environ.update(saved)
