"""
Shared fixtures: a scripted stand-in for the PostgreSQL connector.
"""
import pytest

from pgcheck.db.postgres import DriverError


class StubHandle:
    def __init__(self, open_=True, close_error=None):
        self._open = open_
        self.close_error = close_error
        self.close_calls = 0

    def is_open(self):
        return self._open

    def close(self):
        self.close_calls += 1
        self._open = False
        if self.close_error is not None:
            raise self.close_error


class StubConnector:
    """
    Maps database name -> outcome. An outcome is a StubHandle, None, or a
    DriverError to raise. Every call is recorded.
    """

    def __init__(self, outcomes):
        self.outcomes = outcomes
        self.calls = []

    def connect(self, url, username, password):
        self.calls.append((url, username, password))
        database = url.rsplit("/", 1)[-1]
        outcome = self.outcomes[database]
        if isinstance(outcome, DriverError):
            raise outcome
        return outcome


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("POSTGRES_HOST", "POSTGRES_PORT", "PGCHECK_CONFIG", "PGCHECK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_connector():
    return StubConnector
