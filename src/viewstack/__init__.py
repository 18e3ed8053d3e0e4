"""
viewstack
---------
Layered view lifecycle and input routing for pygame applications.

Typical use:

    from viewstack import View, ViewLoop

    class TitleView(View):
        def draw(self, draw_manager):
            ...

    ViewLoop().run(TitleView())
"""

from viewstack.core.errors import (
    ViewStackError,
    InvalidLayerError,
    TransitionError,
    ViewOwnershipError,
    PopupError,
    ViewLoadError,
    AssetNotLoadedError,
    RenderStateError,
)
from viewstack.views import View, PopupView, ViewState, ViewLayer, ViewManager
from viewstack.input import InputEventType, InputManager, EventHooks, PointerLock
from viewstack.graphics import DrawManager, Sprite
from viewstack.assets import AssetManager
from viewstack.core.runtime.main_loop import ViewLoop

__version__ = "0.1.0"

__all__ = [
    # Views
    'View',
    'PopupView',
    'ViewState',
    'ViewLayer',
    'ViewManager',
    # Input
    'InputEventType',
    'InputManager',
    'EventHooks',
    'PointerLock',
    # Rendering & assets
    'DrawManager',
    'Sprite',
    'AssetManager',
    # Runtime
    'ViewLoop',
    # Errors
    'ViewStackError',
    'InvalidLayerError',
    'TransitionError',
    'ViewOwnershipError',
    'PopupError',
    'ViewLoadError',
    'AssetNotLoadedError',
    'RenderStateError',
]
