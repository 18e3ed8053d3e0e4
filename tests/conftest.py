"""
conftest.py
-----------
Shared pytest configuration and fixtures for viewstack tests.

Contains:
- Headless SDL setup so pygame runs without a window or audio device
- Fakes for pointer lock and the millisecond clock
- Recording views that log every lifecycle hook they receive
- Pytest configuration and hooks
"""

import os
import sys

# SDL must be told to run headless before pygame is imported anywhere
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Add src directory to Python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest
from unittest.mock import MagicMock

from viewstack.core.runtime.settings import Input, Layers, Transition
from viewstack.input.event_hooks import EventHooks
from viewstack.input.input_manager import InputManager
from viewstack.views.popup_view import PopupView
from viewstack.views.view import View
from viewstack.views.view_manager import ViewManager


# ===========================================================
# Fakes
# ===========================================================

class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, now=10_000):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


class FakePointerLock:
    """PointerLock stand-in that never touches the window grab."""

    def __init__(self):
        self.is_locked = False
        self.requests = 0
        self._callbacks = []

    def on_change(self, callback):
        self._callbacks.append(callback)

    def request(self):
        self.requests += 1

    def release(self):
        if self.is_locked:
            self.set_locked(False)

    def set_locked(self, locked):
        """Simulate the platform granting or revoking the lock."""
        self.is_locked = locked
        for callback in list(self._callbacks):
            callback(locked)


class RecordingView(View):
    """View that records lifecycle hooks and input it receives."""

    def __init__(self, label="view", calls=None, **kwargs):
        kwargs.setdefault("enter_time", 0.25)
        kwargs.setdefault("exit_time", 0.25)
        super().__init__(**kwargs)
        self.label = label
        self.calls = calls if calls is not None else []
        self.updates = []
        self.received = []

    def _record(self, hook):
        self.calls.append((self.label, hook))

    def init(self):
        self._record("init")

    def on_dispose(self):
        self._record("dispose")

    def on_enable(self):
        self._record("enable")

    def on_disable(self):
        self._record("disable")

    def on_focus(self):
        self._record("focus")

    def on_blur(self):
        self._record("blur")

    def update(self, dt):
        self.updates.append(dt)

    def draw(self, draw_manager):
        draw_manager.queue_shape("rect", None, (255, 255, 255))

    def key_pressed(self, event):
        self.received.append(("key_pressed", event))

    def hooks(self):
        """Hook names recorded for this view only."""
        return [hook for label, hook in self.calls if label == self.label]


class RecordingPopup(RecordingView, PopupView):
    """Popup variant of RecordingView."""


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def pointer_lock():
    return FakePointerLock()


@pytest.fixture
def event_hooks():
    return EventHooks()


@pytest.fixture
def input_manager(event_hooks, pointer_lock, clock):
    """InputManager wired to fakes."""
    return InputManager(event_hooks=event_hooks, pointer_lock=pointer_lock, time_source=clock)


@pytest.fixture
def view_manager(input_manager):
    return ViewManager(input_manager)


@pytest.fixture
def calls():
    """Shared call log for views created by make_view."""
    return []


@pytest.fixture
def make_view(calls):
    """Factory for RecordingViews sharing one call log."""
    def _make(label="view", **kwargs):
        return RecordingView(label, calls, **kwargs)
    return _make


@pytest.fixture
def make_popup(calls):
    def _make(label="popup", **kwargs):
        return RecordingPopup(label, calls, **kwargs)
    return _make


@pytest.fixture
def mock_draw_manager():
    """Mock for DrawManager; layer_scope works as a context manager."""
    draw_manager = MagicMock()
    draw_manager.width = 1280
    draw_manager.height = 720
    return draw_manager


@pytest.fixture(autouse=True)
def restore_settings():
    """Undo settings overrides made by a test."""
    saved = {
        Transition: dict(vars(Transition)),
        Input: dict(vars(Input)),
        Layers: dict(vars(Layers)),
    }
    yield
    for cls, values in saved.items():
        for key, value in values.items():
            if key.isupper():
                setattr(cls, key, value)


# Test utilities
def run_frames(view_manager, dt, count):
    """Advance a ViewManager by count frames of dt seconds."""
    for _ in range(count):
        view_manager.update(dt)


def activate(view_manager, view, layer=0, dt=0.125):
    """Transition to a view and update until it is ACTIVE."""
    view_manager.transition_to(view, layer)
    for _ in range(100):
        if not view_manager.is_in_transition:
            return view
        view_manager.update(dt)
    raise AssertionError(f"{view!r} never became active")


# Pytest configuration
def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Mark everything outside integration tests as a unit test."""
    for item in items:
        if "integration" not in item.nodeid:
            item.add_marker(pytest.mark.unit)
