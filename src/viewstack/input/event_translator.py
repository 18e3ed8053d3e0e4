"""
event_translator.py
-------------------
Maps raw pygame events to the input event types listeners subscribe to.

Clicks and double clicks are synthesized from button releases, since pygame
only reports presses and releases.
"""

import math

import pygame

from viewstack.core.runtime.settings import Input
from viewstack.input.input_event_type import InputEventType


# Left, middle, right. Higher buttons are legacy wheel steps or side buttons
POINTER_BUTTONS = (1, 2, 3)


class EventTranslator:
    """Stateful pygame event -> [InputEventType] translation."""

    def __init__(self, time_source=None):
        self._time_source = time_source or pygame.time.get_ticks
        self._last_click_time = None
        self._last_click_pos = None
        self._last_click_button = None

    def translate(self, event) -> list:
        """
        Translate a pygame event.

        Returns:
            list: InputEventTypes to fire, in order (empty for non-input events)
        """
        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button not in POINTER_BUTTONS:
                return []
            return [InputEventType.MOUSE_PRESSED]

        if event.type == pygame.MOUSEBUTTONUP:
            if event.button not in POINTER_BUTTONS:
                return []
            types = [InputEventType.MOUSE_RELEASED, InputEventType.MOUSE_CLICKED]
            if self._register_click(event):
                types.append(InputEventType.DOUBLE_CLICKED)
            return types

        if event.type == pygame.MOUSEMOTION:
            if any(event.buttons):
                return [InputEventType.MOUSE_DRAGGED]
            return [InputEventType.MOUSE_MOVED]

        if event.type == pygame.MOUSEWHEEL:
            return [InputEventType.MOUSE_WHEEL]

        if event.type == pygame.KEYDOWN:
            return [InputEventType.KEY_PRESSED]

        if event.type == pygame.KEYUP:
            return [InputEventType.KEY_RELEASED]

        if event.type == pygame.TEXTINPUT:
            return [InputEventType.KEY_TYPED]

        return []

    def _register_click(self, event) -> bool:
        """Record a click. Returns True when it completes a double click."""
        now = self._time_source()
        is_double = (
            self._last_click_time is not None
            and event.button == self._last_click_button
            and now - self._last_click_time <= Input.DOUBLE_CLICK_MS
            and math.dist(event.pos, self._last_click_pos) <= Input.DOUBLE_CLICK_DISTANCE
        )

        if is_double:
            # A third click starts a new pair
            self._last_click_time = None
            self._last_click_pos = None
            self._last_click_button = None
        else:
            self._last_click_time = now
            self._last_click_pos = event.pos
            self._last_click_button = event.button

        return is_double
