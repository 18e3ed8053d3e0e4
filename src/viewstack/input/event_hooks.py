"""
event_hooks.py
--------------
Table of global entry points, one per input event type.

The frame loop fires the hook installed for an event type whenever the
platform reports that kind of input. Application code may install its own
hook before InputManager takes over a type; InputManager chains in front of
it and restores it when the type is no longer wrapped.
"""

from typing import Callable, Dict, Optional

from viewstack.core.debug.debug_logger import DebugLogger
from viewstack.input.input_event_type import InputEventType


EventHook = Callable[[object], None]


class EventHooks:
    """Owning table of event type -> installed hook."""

    def __init__(self):
        self._hooks: Dict[InputEventType, EventHook] = {}

    def get(self, event_type: InputEventType) -> Optional[EventHook]:
        return self._hooks.get(event_type)

    def has(self, event_type: InputEventType) -> bool:
        return event_type in self._hooks

    def install(self, event_type: InputEventType, hook: EventHook) -> None:
        """Install a hook, replacing whatever occupied the slot."""
        self._hooks[event_type] = hook
        DebugLogger.trace(f"Installed hook for {event_type.value}", category="input")

    def remove(self, event_type: InputEventType) -> None:
        """Remove the hook for a type. Removing an empty slot is a no-op."""
        if self._hooks.pop(event_type, None) is not None:
            DebugLogger.trace(f"Removed hook for {event_type.value}", category="input")

    def fire(self, event_type: InputEventType, event=None) -> bool:
        """
        Invoke the hook installed for an event type.

        Returns:
            bool: True if a hook was installed and called
        """
        hook = self._hooks.get(event_type)
        if hook is None:
            return False
        hook(event)
        return True

    def __len__(self):
        return len(self._hooks)
