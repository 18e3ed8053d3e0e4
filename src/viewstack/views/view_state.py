"""
view_state.py
-------------
Defines the lifecycle states a view can be in.
"""

from enum import Enum


class ViewState(Enum):
    """Lifecycle states for view management."""
    PENDING = "pending"         # Created, not yet owned by a layer
    LOADING = "loading"         # Waiting for load_assets to finish
    ENTERING = "entering"       # Fading in
    ACTIVE = "active"           # Fully visible, may be enabled
    EXITING = "exiting"         # Fading out before disposal
    FAILED = "failed"           # load_assets raised; the view was discarded
