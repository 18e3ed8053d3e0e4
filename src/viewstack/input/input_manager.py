"""
input_manager.py
----------------
Routes input events to interested listeners.

Provides:
- Automatic subscription from a listener's handler methods (mouse_clicked,
  key_pressed, ...)
- Wrapping of the global entry point per event type on the EventHooks table,
  chaining any hook that was installed before
- Pointer-lock gating of dispatch with throttled re-acquisition
"""

import math
from typing import Dict, List

import pygame

from viewstack.core.debug.debug_logger import DebugLogger
from viewstack.core.runtime.settings import Input
from viewstack.input.event_hooks import EventHooks
from viewstack.input.input_event_type import InputEventType
from viewstack.input.pointer_lock import PointerLock


class InputManager:
    """
    Registry of input listeners keyed by event type.

    Usage:
        input_manager.add_listener(view)      # view.key_pressed(event) now receives KEY_PRESSED
        event_hooks.fire(InputEventType.KEY_PRESSED, event)
        input_manager.remove_listener(view)
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, event_hooks=None, pointer_lock=None, time_source=None):
        """
        Args:
            event_hooks: Global entry point table (new EventHooks if None)
            pointer_lock: PointerLock implementation (pygame grab if None)
            time_source: Callable returning milliseconds (pygame ticks if None)
        """
        self.event_hooks = event_hooks if event_hooks is not None else EventHooks()
        self.pointer_lock = pointer_lock if pointer_lock is not None else PointerLock()
        self._time_source = time_source or pygame.time.get_ticks

        # All listeners currently registered, in registration order
        self._listeners: List[object] = []
        # Event type -> listeners that handle it
        self._listener_map: Dict[InputEventType, List[object]] = {}
        # Hooks that occupied a slot before it was wrapped, restored on unwrap
        self._prev_hooks: Dict[InputEventType, object] = {}

        self._pointer_lock_required = False
        self._last_pointer_lock_change = -math.inf

        DebugLogger.init_entry("InputManager")

    # ===========================================================
    # Properties
    # ===========================================================

    @property
    def has_pointer_lock(self) -> bool:
        return self.pointer_lock.is_locked

    @property
    def pointer_lock_required(self) -> bool:
        return self._pointer_lock_required

    @property
    def listeners(self) -> list:
        return list(self._listeners)

    def listener_count(self, event_type: InputEventType) -> int:
        return len(self._listener_map.get(event_type, ()))

    def is_wrapped(self, event_type: InputEventType) -> bool:
        return event_type in self._listener_map

    def has_listener(self, listener) -> bool:
        return any(existing is listener for existing in self._listeners)

    # ===========================================================
    # Listener Registration
    # ===========================================================

    def add_listener(self, listener) -> None:
        """
        Subscribe a listener to every input event it defines a handler for.

        Adding a listener that is already registered is a no-op.
        """
        if self.has_listener(listener):
            return
        self._listeners.append(listener)

        handled = [t for t in InputEventType if t.handler_for(listener) is not None]
        for event_type in handled:
            if event_type not in self._listener_map:
                self._wrap_event(event_type)
                self._listener_map[event_type] = []
            self._listener_map[event_type].append(listener)

        DebugLogger.trace(
            f"Added {type(listener).__name__} for {[t.value for t in handled]}",
            category="input"
        )

    def remove_listener(self, listener) -> None:
        """Unsubscribe a listener everywhere. Removing an unknown listener is a no-op."""
        if not self.has_listener(listener):
            return
        self._listeners = [existing for existing in self._listeners if existing is not listener]

        for event_type, listener_list in list(self._listener_map.items()):
            remaining = [existing for existing in listener_list if existing is not listener]
            if len(remaining) == len(listener_list):
                continue

            if remaining:
                self._listener_map[event_type] = remaining
            else:
                del self._listener_map[event_type]
                self._unwrap_event(event_type)

        DebugLogger.trace(f"Removed {type(listener).__name__}", category="input")

    def clear(self) -> None:
        """Remove every listener, restoring all wrapped hooks."""
        for listener in list(self._listeners):
            self.remove_listener(listener)

    # ===========================================================
    # Pointer Lock
    # ===========================================================

    def require_pointer_lock(self) -> None:
        """
        Ignore input unless the pointer is locked, and lock it on pointer-down.

        Call once during setup.
        """
        if self._pointer_lock_required:
            return
        self._pointer_lock_required = True
        self.pointer_lock.on_change(self._on_pointer_lock_changed)
        DebugLogger.system("Pointer lock required for input", category="pointer_lock")

    def handle_pointer_down(self, event=None) -> bool:
        """
        Try to (re-)acquire pointer lock after a pointer-down.

        Requests are throttled to one per Input.POINTER_LOCK_COOLDOWN_MS after
        the last lock change.

        Returns:
            bool: True if a lock request was made
        """
        if not self._pointer_lock_required or self.has_pointer_lock:
            return False

        elapsed = self._time_source() - self._last_pointer_lock_change
        if elapsed <= Input.POINTER_LOCK_COOLDOWN_MS:
            DebugLogger.trace(f"Pointer lock request throttled ({elapsed} ms)", category="pointer_lock")
            return False

        self.pointer_lock.request()
        return True

    def _on_pointer_lock_changed(self, locked: bool) -> None:
        self._last_pointer_lock_change = self._time_source()

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event_type: InputEventType, event=None) -> int:
        """
        Deliver an event to every listener registered for its type.

        Listeners run in registration order. A listener removed while the
        event is being delivered (including by itself) is skipped for the
        rest of that delivery without disturbing the others.

        Returns:
            int: Number of handlers invoked
        """
        if self._pointer_lock_required and not self.has_pointer_lock:
            return 0

        invoked = 0
        for listener in list(self._listener_map.get(event_type, ())):
            if not self._is_subscribed(listener, event_type):
                continue
            event_type.handler_for(listener)(event)
            invoked += 1
        return invoked

    def _is_subscribed(self, listener, event_type: InputEventType) -> bool:
        return any(existing is listener for existing in self._listener_map.get(event_type, ()))

    # ===========================================================
    # Hook Wrapping
    # ===========================================================

    def _wrap_event(self, event_type: InputEventType) -> None:
        """Install the dispatcher for a type, chaining any hook already installed."""
        def dispatch_hook(event=None):
            self.dispatch(event_type, event)

        prev_hook = self.event_hooks.get(event_type)
        if prev_hook is None:
            self.event_hooks.install(event_type, dispatch_hook)
            return

        def chained_hook(event=None):
            dispatch_hook(event)
            prev_hook(event)

        self._prev_hooks[event_type] = prev_hook
        self.event_hooks.install(event_type, chained_hook)

    def _unwrap_event(self, event_type: InputEventType) -> None:
        """Remove the dispatcher for a type, restoring the hook it wrapped."""
        if event_type in self._prev_hooks:
            self.event_hooks.install(event_type, self._prev_hooks.pop(event_type))
        else:
            self.event_hooks.remove(event_type)
