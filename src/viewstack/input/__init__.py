"""
Input module exports.

Provides the listener registry, global event hooks and pointer lock.
"""

from viewstack.input.input_event_type import InputEventType
from viewstack.input.event_hooks import EventHooks
from viewstack.input.pointer_lock import PointerLock
from viewstack.input.input_manager import InputManager
from viewstack.input.event_translator import EventTranslator

__all__ = [
    'InputEventType',
    'EventHooks',
    'PointerLock',
    'InputManager',
    'EventTranslator',
]
