"""
errors.py
---------
Exception taxonomy for viewstack.

Misuse of the view and input APIs is a programming error: the offending call
logs a failure and raises immediately instead of being ignored.
"""

from viewstack.core.debug.debug_logger import DebugLogger


class ViewStackError(Exception):
    """Base class for every error raised by viewstack."""


class InvalidLayerError(ViewStackError, ValueError):
    """Layer index is not a non-negative integer."""


class TransitionError(ViewStackError):
    """A transition was requested while another one is still in flight."""


class ViewOwnershipError(ViewStackError):
    """A view was addressed that no layer currently owns."""


class PopupError(ViewStackError):
    """A popup was opened over an occupied popup layer."""


class RenderStateError(ViewStackError):
    """Draw state push/pop calls are unbalanced."""


class AssetNotLoadedError(ViewStackError, KeyError):
    """An asset was requested from the cache before it was loaded."""


class ViewLoadError(ViewStackError):
    """A view's load_assets raised. The original exception is chained."""

    def __init__(self, message, view=None, layer=None):
        super().__init__(message)
        self.view = view
        self.layer = layer


def raise_logged(error_type, message, category="system"):
    """Report a precondition failure through DebugLogger, then raise it."""
    DebugLogger.fail(message, category=category)
    raise error_type(message)
