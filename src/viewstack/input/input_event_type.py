"""
input_event_type.py
-------------------
The input events a listener can subscribe to.

Each value is the name of the handler method a listener defines to receive
that event, e.g. a view with a ``key_pressed(self, event)`` method receives
KEY_PRESSED events while it is enabled.
"""

from enum import Enum


class InputEventType(Enum):
    """Input events routed by InputManager, valued by handler name."""
    MOUSE_CLICKED = "mouse_clicked"
    MOUSE_PRESSED = "mouse_pressed"
    MOUSE_RELEASED = "mouse_released"
    DOUBLE_CLICKED = "double_clicked"
    MOUSE_MOVED = "mouse_moved"
    MOUSE_DRAGGED = "mouse_dragged"
    MOUSE_WHEEL = "mouse_wheel"
    KEY_PRESSED = "key_pressed"
    KEY_RELEASED = "key_released"
    KEY_TYPED = "key_typed"

    @property
    def handler_name(self) -> str:
        return self.value

    def handler_for(self, listener):
        """Return the listener's bound handler for this event, or None."""
        handler = getattr(listener, self.value, None)
        return handler if callable(handler) else None
