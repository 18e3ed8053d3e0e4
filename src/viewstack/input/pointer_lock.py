"""
pointer_lock.py
---------------
Pointer lock on top of pygame's input grab.

While locked the window grabs the mouse and hides the cursor, so mouse
motion is reported as relative movement. Every lock state change is reported
to the registered change callbacks.
"""

import pygame

from viewstack.core.debug.debug_logger import DebugLogger


class PointerLock:
    """Requests and releases pointer lock for the pygame window."""

    def __init__(self):
        self._locked = False
        self._change_callbacks = []

    @property
    def is_locked(self) -> bool:
        return self._locked

    def on_change(self, callback):
        """Register a callback invoked with the new lock state on every change."""
        if callback not in self._change_callbacks:
            self._change_callbacks.append(callback)

    def request(self):
        """Acquire the lock. No-op when already held."""
        if self._locked:
            return
        pygame.event.set_grab(True)
        pygame.mouse.set_visible(False)
        self._set_locked(True)

    def release(self):
        """Release the lock. No-op when not held."""
        if not self._locked:
            return
        pygame.event.set_grab(False)
        pygame.mouse.set_visible(True)
        self._set_locked(False)

    def _set_locked(self, locked: bool):
        self._locked = locked
        DebugLogger.state(f"Pointer lock {'acquired' if locked else 'released'}", category="pointer_lock")
        for callback in list(self._change_callbacks):
            callback(locked)
