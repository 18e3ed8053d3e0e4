"""
view.py
-------
Abstract base class for all views.

Provides:
- Lifecycle state and transition timing (enter/exit fades)
- Lifecycle hooks (init, dispose, enable/disable, focus/blur)
- Optional asset loading and custom loading indicator
- Abstract draw method

Input handlers are plain methods named after InputEventType values
(mouse_clicked, key_pressed, ...); a view receives those events only while
it is enabled.
"""

from abc import ABC, abstractmethod

from viewstack.core.debug.debug_logger import DebugLogger
from viewstack.core.runtime.settings import Transition
from viewstack.views.view_state import ViewState


class View(ABC):
    """
    Base class for all views.

    Attributes:
        state: Current lifecycle state
        is_enabled: Receiving input and enable callbacks (only while ACTIVE)
        enter_time: Seconds spent fading in (0 = instant)
        exit_time: Seconds spent fading out (0 = instant)
        do_enter_fade: Draw a darkening overlay while entering
        do_exit_fade: Draw a darkening overlay while exiting
        transition_pos: 0 = hidden, 1 = fully visible
        manager: Owning ViewManager, set when the view is submitted
    """

    # Optional hooks. Override with a method to opt in.
    #   load_assets(self): load resources; may be a generator that yields
    #       between steps (optionally yielding a progress fraction)
    #   draw_loading_indicator(self, draw_manager, progress): custom indicator
    load_assets = None
    draw_loading_indicator = None

    def __init__(self, enter_time=None, exit_time=None, do_enter_fade=None, do_exit_fade=None):
        self.state = ViewState.PENDING
        self.is_enabled = False
        self.is_disposed = False

        self.enter_time = Transition.ENTER_TIME if enter_time is None else enter_time
        self.exit_time = Transition.EXIT_TIME if exit_time is None else exit_time
        self.do_enter_fade = Transition.ENTER_FADE if do_enter_fade is None else do_enter_fade
        self.do_exit_fade = Transition.EXIT_FADE if do_exit_fade is None else do_exit_fade
        self.transition_pos = 0.0

        self.manager = None

        if self.enter_time < 0 or self.exit_time < 0:
            raise ValueError(f"{type(self).__name__}: enter/exit times must be non-negative")

    @property
    def name(self) -> str:
        return type(self).__name__

    # ===========================================================
    # Lifecycle Hooks (Override in subclasses)
    # ===========================================================

    def init(self):
        """Called once after assets are loaded, before the view starts entering."""
        pass

    def on_dispose(self):
        """Called once after the view has finished exiting."""
        pass

    def on_enable(self):
        """Called when the view starts receiving input."""
        pass

    def on_disable(self):
        """Called when the view stops receiving input."""
        pass

    def on_focus(self):
        """Called when the application window gains focus."""
        pass

    def on_blur(self):
        """Called when the application window loses focus."""
        pass

    def update(self, dt: float):
        """Update view logic. Only called while ACTIVE."""
        pass

    @abstractmethod
    def draw(self, draw_manager):
        """
        Render the view.

        Args:
            draw_manager: DrawManager instance for queuing draws
        """
        pass

    # ===========================================================
    # Managed Lifecycle (called by ViewLayer)
    # ===========================================================

    def enable(self, input_manager):
        """Start receiving input. No-op when already enabled."""
        if self.is_enabled:
            return
        self.is_enabled = True
        input_manager.add_listener(self)
        DebugLogger.state(f"{self.name} enabled", category="focus")
        self.on_enable()

    def disable(self, input_manager):
        """Stop receiving input. No-op when already disabled."""
        if not self.is_enabled:
            return
        self.is_enabled = False
        input_manager.remove_listener(self)
        DebugLogger.state(f"{self.name} disabled", category="focus")
        self.on_disable()

    def dispose(self, input_manager):
        """Release input and run on_dispose. The view cannot be reused afterwards."""
        if self.is_disposed:
            return
        self.disable(input_manager)
        self.is_disposed = True
        DebugLogger.state(f"{self.name} disposed")
        self.on_dispose()

    def __repr__(self):
        return f"<{self.name} state={self.state.value} enabled={self.is_enabled}>"
