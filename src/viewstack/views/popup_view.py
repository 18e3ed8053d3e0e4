"""
popup_view.py
-------------
Base class for views opened over the current view stack.
"""

from viewstack.core.errors import ViewOwnershipError, raise_logged
from viewstack.views.view import View


class PopupView(View):
    """A view that can close itself."""

    def close(self):
        """Exit this popup through the manager that opened it."""
        if self.manager is None:
            raise_logged(ViewOwnershipError, f"Failed to close {self.name}, it was never opened", category="view")
        self.manager.exit_view(self)
