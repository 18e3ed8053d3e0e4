"""
Graphics module exports.
"""

from viewstack.graphics.draw_manager import DrawManager
from viewstack.graphics.sprite import Sprite

__all__ = [
    'DrawManager',
    'Sprite',
]
