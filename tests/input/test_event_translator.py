"""
test_event_translator.py
------------------------
Unit tests for pygame event -> InputEventType translation.
"""

import pygame
import pytest

from viewstack.core.runtime.settings import Input
from viewstack.input.event_translator import EventTranslator
from viewstack.input.input_event_type import InputEventType


@pytest.fixture
def translator(clock):
    return EventTranslator(time_source=clock)


def button_up(button=1, pos=(100, 100)):
    return pygame.event.Event(pygame.MOUSEBUTTONUP, button=button, pos=pos)


@pytest.mark.parametrize("event, expected", [
    (pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)), [InputEventType.MOUSE_PRESSED]),
    (pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 1), rel=(1, 1), buttons=(0, 0, 0)), [InputEventType.MOUSE_MOVED]),
    (pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 1), rel=(1, 1), buttons=(1, 0, 0)), [InputEventType.MOUSE_DRAGGED]),
    (pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=1), [InputEventType.MOUSE_WHEEL]),
    (pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a), [InputEventType.KEY_PRESSED]),
    (pygame.event.Event(pygame.KEYUP, key=pygame.K_a), [InputEventType.KEY_RELEASED]),
    (pygame.event.Event(pygame.TEXTINPUT, text="a"), [InputEventType.KEY_TYPED]),
    (pygame.event.Event(pygame.USEREVENT), []),
])
def test_translation_table(translator, event, expected):
    assert translator.translate(event) == expected


def test_legacy_wheel_buttons_are_ignored(translator):
    assert translator.translate(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=4, pos=(0, 0))) == []
    assert translator.translate(button_up(button=5)) == []


def test_release_produces_release_then_click(translator):
    assert translator.translate(button_up()) == [
        InputEventType.MOUSE_RELEASED,
        InputEventType.MOUSE_CLICKED,
    ]


def test_second_quick_click_is_double_click(translator, clock):
    translator.translate(button_up())
    clock.advance(Input.DOUBLE_CLICK_MS)

    assert translator.translate(button_up()) == [
        InputEventType.MOUSE_RELEASED,
        InputEventType.MOUSE_CLICKED,
        InputEventType.DOUBLE_CLICKED,
    ]


def test_slow_second_click_is_not_double_click(translator, clock):
    translator.translate(button_up())
    clock.advance(Input.DOUBLE_CLICK_MS + 1)

    assert InputEventType.DOUBLE_CLICKED not in translator.translate(button_up())


def test_distant_or_other_button_click_is_not_double_click(translator, clock):
    translator.translate(button_up(pos=(0, 0)))
    clock.advance(10)
    assert InputEventType.DOUBLE_CLICKED not in translator.translate(button_up(pos=(50, 0)))

    clock.advance(10)
    assert InputEventType.DOUBLE_CLICKED not in translator.translate(button_up(button=3, pos=(50, 0)))


def test_third_click_starts_new_pair(translator, clock):
    translator.translate(button_up())
    clock.advance(10)
    translator.translate(button_up())
    clock.advance(10)

    assert InputEventType.DOUBLE_CLICKED not in translator.translate(button_up())
