"""
Pytest configuration and shared fixtures for shapematch tests.
"""

from dataclasses import dataclass
from typing import NamedTuple

import pytest

from shapematch.constants import ENV_DEBUG, ENV_MAX_DEPTH, ENV_STRICT_PREDICATES


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep developer shell settings out of the tests."""
    for name in (ENV_DEBUG, ENV_MAX_DEPTH, ENV_STRICT_PREDICATES):
        monkeypatch.delenv(name, raising=False)


@dataclass
class User:
    """Composite value with attribute access."""

    name: str
    age: int
    email: str = "user@example.com"


class Point(NamedTuple):
    x: int
    y: int


@pytest.fixture
def user() -> User:
    return User(name="Ada", age=36)


@pytest.fixture
def point() -> Point:
    return Point(3, 4)
