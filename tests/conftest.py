import io
from typing import List

import pytest

from core.models import ChoicePoint


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, now_ms: float = 0.0):
        self.now_ms = now_ms

    def __call__(self) -> float:
        return self.now_ms

    def advance(self, ms: float) -> None:
        self.now_ms += ms


class StubSearch:
    """Hand-driven stand-in for a search engine."""

    def __init__(self):
        self.state_id = 0
        self.path: List[ChoicePoint] = []
        self.end = False
        self.error = False
        self.visited = False

    def current_path(self):
        return tuple(self.path)

    def is_end_state(self):
        return self.end

    def is_error_state(self):
        return self.error

    def is_visited_state(self):
        return self.visited


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def stub_search():
    return StubSearch()
