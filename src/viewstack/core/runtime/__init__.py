"""
Runtime configuration exports.

Provides view stack constants. All exports are lightweight class constants
with no initialization overhead.
"""

from viewstack.core.runtime.settings import (
    Display,
    Timing,
    Transition,
    Input,
    Layers,
    Loading,
    Assets,
)

__all__ = [
    'Display',
    'Timing',
    'Transition',
    'Input',
    'Layers',
    'Loading',
    'Assets',
]
