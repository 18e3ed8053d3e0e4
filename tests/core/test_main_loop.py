"""
test_main_loop.py
-----------------
Tests for ViewLoop event routing and the frame step.

The window is never opened; events are built with pygame.event.Event and fed
to handle_event()/step() directly.
"""

from unittest.mock import MagicMock

import pygame
import pytest

from viewstack.core.runtime.settings import Input
from viewstack.core.runtime.main_loop import ViewLoop
from viewstack.input.event_translator import EventTranslator
from viewstack.views.view_state import ViewState

from conftest import RecordingView, activate


class ClickView(RecordingView):
    def mouse_pressed(self, event):
        self.received.append(("mouse_pressed", event.button))


@pytest.fixture
def loop(view_manager, mock_draw_manager, clock):
    return ViewLoop(
        view_manager=view_manager,
        draw_manager=mock_draw_manager,
        translator=EventTranslator(time_source=clock),
    )


def key_down(key=pygame.K_SPACE):
    return pygame.event.Event(pygame.KEYDOWN, key=key, mod=0, unicode="")


# ===========================================================
# Window Events
# ===========================================================

def test_quit_stops_loop(loop):
    loop.running = True
    loop.handle_event(pygame.event.Event(pygame.QUIT))
    assert not loop.running


def test_focus_events_reach_view_manager(loop, view_manager):
    loop.handle_event(pygame.event.Event(pygame.WINDOWFOCUSLOST))
    assert not view_manager.has_focus

    loop.handle_event(pygame.event.Event(pygame.WINDOWFOCUSGAINED))
    assert view_manager.has_focus


def test_focus_loss_releases_pointer_lock(loop, pointer_lock):
    pointer_lock.set_locked(True)

    loop.handle_event(pygame.event.Event(pygame.WINDOWFOCUSLOST))

    assert not pointer_lock.is_locked


def test_minimize_and_restore_clamp_next_frame(loop, view_manager):
    loop.handle_event(pygame.event.Event(pygame.WINDOWMINIMIZED))
    assert not view_manager.is_visible

    loop.handle_event(pygame.event.Event(pygame.WINDOWRESTORED))
    assert view_manager.is_visible
    assert view_manager._visibility_recovered


# ===========================================================
# Input Events
# ===========================================================

def test_key_event_reaches_enabled_view(loop, view_manager, make_view):
    view = activate(view_manager, make_view("a"))
    event = key_down()

    loop.handle_event(event)

    assert view.received == [("key_pressed", event)]


def test_pointer_down_requests_lock(loop, view_manager, input_manager, pointer_lock, calls):
    view = activate(view_manager, ClickView("a", calls))
    input_manager.require_pointer_lock()

    loop.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(5, 5)))

    assert pointer_lock.requests == 1
    # Input is gated until the lock is granted
    assert view.received == []

    pointer_lock.set_locked(True)
    loop.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(5, 5)))
    assert view.received == [("mouse_pressed", 1)]


def test_escape_releases_pointer_lock(loop, pointer_lock):
    pointer_lock.set_locked(True)

    loop.handle_event(key_down(pygame.K_ESCAPE))

    assert not pointer_lock.is_locked


def test_release_lock_key_is_configurable(loop, pointer_lock):
    Input.RELEASE_LOCK_KEY = pygame.K_q
    pointer_lock.set_locked(True)

    loop.handle_event(key_down(pygame.K_ESCAPE))
    assert pointer_lock.is_locked

    loop.handle_event(key_down(pygame.K_q))
    assert not pointer_lock.is_locked


def test_release_lock_key_disabled(loop, pointer_lock):
    Input.RELEASE_LOCK_KEY = None
    pointer_lock.set_locked(True)

    loop.handle_event(key_down(pygame.K_ESCAPE))

    assert pointer_lock.is_locked


# ===========================================================
# Frame Step
# ===========================================================

def test_step_updates_and_draws(loop, view_manager, make_view, mock_draw_manager):
    view = make_view("a", enter_time=0.125)
    view_manager.transition_to(view)
    loop.running = True

    loop.step(0.125)

    assert view.state is ViewState.ACTIVE
    mock_draw_manager.clear.assert_called_once()
    mock_draw_manager.layer_scope.assert_called_once_with(0)
    mock_draw_manager.render.assert_not_called()


def test_step_stops_at_quit(loop, view_manager, make_view, mock_draw_manager):
    view = make_view("a", enter_time=0.125)
    view_manager.transition_to(view)
    loop.running = True

    loop.step(0.125, [pygame.event.Event(pygame.QUIT), key_down()])

    assert view.state is ViewState.ENTERING
    mock_draw_manager.clear.assert_not_called()


def test_default_collaborators_are_created():
    loop = ViewLoop(draw_manager=MagicMock())

    assert loop.input_manager is loop.views.input_manager
    assert loop.window is None
