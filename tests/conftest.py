"""
- Provide engines with a known secret (no randomness, no network)
- Provide a client fixture (TestClient(app)) whose routes use a fresh session per test
"""
import os
import pytest

from fastapi.testclient import TestClient

# Never reach out to random.org from the tests
os.environ["CODE_SOURCE"] = "local"

from mastermind.engine import GameEngine
from mastermind.main import GameSession, app, get_session


def fixed_source(*secrets):
    """
    Returns a code source that hands out the given secrets in order,
    repeating the last one once they run out.
    """
    queue = [list(secret) for secret in secrets]

    def source(length: int):
        if len(queue) > 1:
            return queue.pop(0)
        return list(queue[0])
    return source


@pytest.fixture
def secret_engine():
    """Factory: secret_engine([3, 3, 3, 3], [5, 5, 6, 6]) -> engine drawing those secrets in order."""
    def make(*secrets) -> GameEngine:
        return GameEngine(code_source=fixed_source(*secrets))
    return make


@pytest.fixture
def engine() -> GameEngine:
    """Secret is [1, 2, 3, 4] so every outcome is predictable."""
    return GameEngine(code_source=fixed_source([1, 2, 3, 4]))


@pytest.fixture
def session() -> GameSession:
    return GameSession(GameEngine(code_source=fixed_source([1, 2, 3, 4])))


@pytest.fixture
def client(session):
    """Force every request onto this test's session."""
    app.dependency_overrides[get_session] = lambda: session
    yield TestClient(app)
    app.dependency_overrides.clear()
