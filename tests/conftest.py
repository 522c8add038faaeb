import sys, os

# Ensure src (and the repo root, for tests.helpers) are on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
for path in (SRC, ROOT):
    if path not in sys.path:
        sys.path.insert(0, path)

import pytest

from match3.events.bus import EventBus
from tests.helpers import make_board, record_events

__all__ = [
    "make_board",
    "record_events",
]


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def recorded():
    """List plus listener appending every board event to it."""
    events = []
    return events, events.append
