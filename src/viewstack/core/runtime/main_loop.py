"""
main_loop.py
------------
Defines the ViewLoop class that runs a view stack inside a pygame window.

Responsibilities
----------------
- Initialize pygame, the window and the frame clock
- Route window focus/visibility events to the ViewManager
- Translate input events and fire them through the EventHooks table
- Acquire and release pointer lock on behalf of the InputManager
- Maintain the frame cycle (events -> update -> draw -> present)
"""

import pygame

from viewstack.core.debug.debug_logger import DebugLogger
from viewstack.core.runtime.settings import Display, Input
from viewstack.core.services.config_manager import configure
from viewstack.graphics.draw_manager import DrawManager
from viewstack.input.event_translator import EventTranslator
from viewstack.input.input_event_type import InputEventType
from viewstack.input.input_manager import InputManager
from viewstack.views.view_manager import ViewManager


FOCUS_GAINED_EVENTS = ("WINDOWFOCUSGAINED",)
FOCUS_LOST_EVENTS = ("WINDOWFOCUSLOST",)
SHOWN_EVENTS = ("WINDOWSHOWN", "WINDOWRESTORED")
HIDDEN_EVENTS = ("WINDOWHIDDEN", "WINDOWMINIMIZED")


def _event_types(names):
    """Resolve pygame event constants by name, skipping ones this pygame lacks."""
    return frozenset(getattr(pygame, name) for name in names if hasattr(pygame, name))


class ViewLoop:
    """Runtime controller that owns the window and drives a ViewManager."""

    def __init__(self, view_manager=None, draw_manager=None, translator=None, config_file=None):
        """
        Args:
            view_manager: ViewManager to drive (new one with its own InputManager if None)
            draw_manager: DrawManager to render with (new one if None)
            translator: EventTranslator (new one if None)
            config_file: Optional config file applied before anything is created
        """
        DebugLogger.section("Initializing ViewLoop")

        if config_file is not None:
            configure(config_file)

        self.views = view_manager if view_manager is not None else ViewManager(InputManager())
        self.draw_manager = draw_manager if draw_manager is not None else DrawManager()
        self.translator = translator if translator is not None else EventTranslator()

        self.window = None
        self.clock = None
        self.running = False

        self._focus_gained = _event_types(FOCUS_GAINED_EVENTS)
        self._focus_lost = _event_types(FOCUS_LOST_EVENTS)
        self._shown = _event_types(SHOWN_EVENTS)
        self._hidden = _event_types(HIDDEN_EVENTS)

    @property
    def input_manager(self):
        return self.views.input_manager

    # ===========================================================
    # Window Setup
    # ===========================================================

    def open_window(self):
        """Initialize pygame and create the window."""
        pygame.init()
        pygame.font.init()

        self.window = pygame.display.set_mode((self.draw_manager.width, self.draw_manager.height))
        pygame.display.set_caption(Display.CAPTION)
        self.clock = pygame.time.Clock()

        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {self.draw_manager.width}x{self.draw_manager.height} @ {Display.FPS} FPS")

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================

    def run(self, first_view=None, layer=0):
        """
        Run until the window is closed.

        Args:
            first_view: Optional view to transition to once the window is open
            layer: Layer for first_view
        """
        if self.window is None:
            self.open_window()

        if first_view is not None:
            self.views.transition_to(first_view, layer)

        DebugLogger.section("View Loop")
        self.running = True

        try:
            while self.running:
                dt = self.clock.tick(Display.FPS) / 1000.0
                self.step(dt, pygame.event.get())
        finally:
            self.views.shutdown()
            pygame.quit()
            DebugLogger.system("Pygame terminated")

    def step(self, dt, events=()):
        """Process one frame: events, update, draw and present."""
        for event in events:
            self.handle_event(event)
            if not self.running:
                return

        self.views.update(dt)
        self._draw()

    def stop(self):
        self.running = False

    # ===========================================================
    # Event Handling
    # ===========================================================

    def handle_event(self, event):
        """
        Route one pygame event.

        Responsibilities:
            - Quit requests stop the loop.
            - Window focus and visibility changes go to the ViewManager.
            - Input events are fired through the EventHooks table.
        """
        if event.type == pygame.QUIT:
            self.running = False
            DebugLogger.action("Quit signal received")
            return

        if event.type in self._focus_gained:
            self.views.set_focus(True)
            return

        if event.type in self._focus_lost:
            # The platform drops pointer lock along with focus
            self.input_manager.pointer_lock.release()
            self.views.set_focus(False)
            return

        if event.type in self._shown:
            self.views.set_visibility(True)
            return

        if event.type in self._hidden:
            self.views.set_visibility(False)
            return

        for event_type in self.translator.translate(event):
            self.input_manager.event_hooks.fire(event_type, event)

            if event_type is InputEventType.MOUSE_PRESSED:
                self.input_manager.handle_pointer_down(event)
            elif event_type is InputEventType.KEY_PRESSED and self._is_release_lock_key(event):
                self.input_manager.pointer_lock.release()

    @staticmethod
    def _is_release_lock_key(event) -> bool:
        return Input.RELEASE_LOCK_KEY is not None and getattr(event, "key", None) == Input.RELEASE_LOCK_KEY

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        self.draw_manager.clear()
        self.views.draw(self.draw_manager)

        if self.window is not None:
            self.draw_manager.render(self.window)
            pygame.display.flip()
