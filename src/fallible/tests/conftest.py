"""Shared fixtures for the fallible test suite."""

import pytest

from fallible.config import clear_settings_cache
from fallible.observability import reset_logging


@pytest.fixture(autouse=True)
def clean_state() -> object:
    """Reset cached settings and global logging before and after each test."""
    clear_settings_cache()
    reset_logging()
    yield
    clear_settings_cache()
    reset_logging()


@pytest.fixture
def strict_payloads(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable strict payload mode via the environment."""
    monkeypatch.setenv("FALLIBLE_STRICT_PAYLOADS", "true")
    clear_settings_cache()


class Counter:
    """Callable recording how often it was invoked."""

    def __init__(self, returns: object = None) -> None:
        self.calls: list[object] = []
        self.returns = returns

    def __call__(self, *args: object) -> object:
        self.calls.append(args[0] if len(args) == 1 else args)
        return self.returns


@pytest.fixture
def counter() -> Counter:
    return Counter()


@pytest.fixture
def make_counter() -> type[Counter]:
    return Counter
