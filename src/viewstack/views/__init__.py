"""
View module exports.

Provides the view base classes, lifecycle states, layers and the manager.
"""

from viewstack.views.view_state import ViewState
from viewstack.views.view import View
from viewstack.views.popup_view import PopupView
from viewstack.views.load_task import LoadTask
from viewstack.views.loading_indicator import LoadingIndicator
from viewstack.views.view_layer import ViewLayer
from viewstack.views.view_manager import ViewManager

__all__ = [
    # Core
    'View',
    'PopupView',
    'ViewState',
    # Stack
    'ViewLayer',
    'ViewManager',
    # Loading
    'LoadTask',
    'LoadingIndicator',
]
