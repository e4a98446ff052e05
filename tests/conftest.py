"""
Shared pytest fixtures for wibar tests.
"""

import pytest
from pubsub import pub

from wibar import Area, Screen, WibarConfig, WibarManager

FONT_HEIGHT = 16
# ceil(16 * 1.5)
THICKNESS = 24


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without a compositor")


class RecordingPlacement:
    """Placement collaborator recording every place and detach call."""

    def __init__(self):
        self.events = []  # ("place" | "detach", bar)
        self.calls = []  # (bar, options)
        self.fired = {}  # handle id -> number of times it ran
        self.aligned = []

    def place(self, bar, options):
        self.events.append(("place", bar))
        self.calls.append((bar, options))
        handle_id = len(self.calls)
        self.fired[handle_id] = 0

        def detach():
            self.fired[handle_id] += 1
            self.events.append(("detach", bar))

        return detach

    def align(self, bar, alignment):
        self.aligned.append((bar, alignment))
        return alignment

    def last(self, bar):
        """Options of the most recent placement of bar."""
        for placed, options in reversed(self.calls):
            if placed is bar:
                return options
        raise AssertionError(f"{bar!r} was never placed")

    def placements_of(self, bar):
        return [options for placed, options in self.calls if placed is bar]

    def reset(self):
        self.events.clear()
        self.calls.clear()

    @property
    def double_detaches(self):
        return sum(1 for count in self.fired.values() if count > 1)


class NullPlacement:
    """Placement collaborator that keeps no reference to bars."""

    def place(self, bar, options):
        return None


@pytest.fixture(autouse=True)
def clean_bus():
    """Drop bus subscriptions made during a test."""
    yield
    pub.unsubAll()


@pytest.fixture
def placement():
    return RecordingPlacement()


@pytest.fixture
def screen():
    """Standard 1920x1080 screen."""
    return Screen("DP-1", Area(0, 0, 1920, 1080))


@pytest.fixture
def other_screen():
    """Portrait 1080x1920 screen to the right of the standard one."""
    return Screen("DP-2", Area(1920, 0, 1080, 1920))


@pytest.fixture
def make_manager(screen):
    """Factory fixture for managers with fixed font metrics."""

    def factory(placement, **kwargs):
        kwargs.setdefault("config", WibarConfig(debug_events=False))
        kwargs.setdefault("primary_screen", screen)
        kwargs.setdefault("font_height_fn", lambda font: FONT_HEIGHT)
        return WibarManager(placement, **kwargs)

    return factory


@pytest.fixture
def manager(make_manager, placement):
    return make_manager(placement)


@pytest.fixture
def null_placement():
    return NullPlacement()
