"""
view_manager.py
---------------
Coordinates a stack of view layers.

Responsibilities:
- Route transition requests to the addressed layer
- Allow a single transition in flight across the whole stack
- Recompute which view is enabled when views activate, exit, or the
  application gains/loses focus
- Drive the per-frame update and draw pass over all layers
"""

from viewstack.core.debug.debug_logger import DebugLogger
from viewstack.core.errors import (
    InvalidLayerError,
    PopupError,
    TransitionError,
    ViewOwnershipError,
    raise_logged,
)
from viewstack.core.runtime.settings import Layers, Timing
from viewstack.input.input_manager import InputManager
from viewstack.views.popup_view import PopupView
from viewstack.views.view import View
from viewstack.views.view_layer import ViewLayer
from viewstack.views.view_state import ViewState


class ViewManager:
    """
    Ordered, sparse collection of ViewLayers.

    Layer 0 is the base layer; higher indices are drawn over lower ones.
    Only the front-most ACTIVE view is enabled (receives input), and only
    while the application has focus.

    Usage:
        views = ViewManager()
        views.transition_to(MainMenuView())
        views.open_popup(SettingsPopup())

        # each frame
        views.update(dt)
        views.draw(draw_manager)
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, input_manager=None):
        """
        Args:
            input_manager: InputManager shared by every view (new one if None)
        """
        self.input_manager = input_manager if input_manager is not None else InputManager()

        self._layers = {}  # {index: ViewLayer}

        self.has_focus = True
        self.is_visible = True
        self._visibility_recovered = False

        # Shared loading indicator: func(draw_manager, progress)
        self.loading_indicator_func = None

        DebugLogger.init_entry("ViewManager")

    # ===========================================================
    # Queries
    # ===========================================================

    @property
    def layers(self) -> list:
        """Existing layers in index order."""
        return [self._layers[index] for index in sorted(self._layers)]

    @property
    def views(self) -> list:
        """Views of all non-empty layers, in layer order."""
        return [layer.view for layer in self.layers if layer.view is not None]

    @property
    def is_in_transition(self) -> bool:
        return any(layer.is_in_transition for layer in self._layers.values())

    @property
    def popup_is_open(self) -> bool:
        return any(isinstance(view, PopupView) for view in self.views)

    def get_layer(self, layer: int):
        return self._layers.get(layer)

    def get_view(self, layer: int):
        """Return the view occupying a layer, or None."""
        slot = self._layers.get(layer)
        return slot.view if slot is not None else None

    # ===========================================================
    # View Control
    # ===========================================================

    def transition_to(self, view, layer: int = Layers.BASE):
        """
        Exit the layer's current view (if any), then load and enter the given view.

        Args:
            view: Fresh (PENDING) view to show
            layer: Non-negative layer index

        Raises:
            InvalidLayerError: layer is not a non-negative int
            TransitionError: any layer is mid-transition, or the view was used before
            ViewLoadError: a synchronous load_assets raised
        """
        self._validate_layer(layer)

        if not isinstance(view, View):
            raise_logged(TypeError, f"Transition failed, {view!r} is not a View", category="view")

        if view.state is not ViewState.PENDING or view.is_disposed:
            raise_logged(
                TransitionError,
                f"Transition failed, {view.name} has already been used ({view.state.value})",
                category="view"
            )

        self._assert_no_transition(f"Transition to {view.name}")

        slot = self._layers.get(layer)
        if slot is None:
            slot = ViewLayer(layer, self)
            self._layers[layer] = slot
            DebugLogger.system(f"Created layer {layer}", category="layer")

        DebugLogger.system(f"Transition -> {view.name} on layer {layer}", category="view")
        view.manager = self
        slot.transition_to(view)

    def exit_view(self, view):
        """
        Exit a view wherever it sits in the stack.

        Raises:
            ViewOwnershipError: no layer currently owns the view
            TransitionError: any layer is mid-transition
        """
        for slot in self._layers.values():
            if slot.view is view:
                self._assert_no_transition(f"Exit of {view.name}")
                slot.exit_view()
                return

        name = view.name if isinstance(view, View) else repr(view)
        raise_logged(ViewOwnershipError, f"Failed to exit {name}, it is not owned by any layer", category="view")

    def clear_layer(self, layer: int):
        """Exit whatever view occupies a layer. No-op when the layer is empty."""
        self._validate_layer(layer)
        slot = self._layers.get(layer)
        if slot is None or slot.is_empty:
            return
        self._assert_no_transition(f"Clearing layer {layer}")
        slot.exit_view()

    def open_popup(self, popup, layer: int = Layers.POPUP):
        """
        Show a popup over the views below it.

        Raises:
            PopupError: the popup layer is already occupied
        """
        self._validate_layer(layer)

        slot = self._layers.get(layer)
        if slot is not None and not slot.is_empty:
            raise_logged(
                PopupError,
                f"Failed to open {popup.name}, layer {layer} already shows {slot.view.name}",
                category="view"
            )

        self.transition_to(popup, layer)

    def set_loading_indicator(self, draw_func):
        """
        Set the shared loading indicator drawn for views without their own.

        Args:
            draw_func: func(draw_manager, progress), or None for the default
        """
        self.loading_indicator_func = draw_func

    # ===========================================================
    # Focus & Visibility
    # ===========================================================

    def set_focus(self, has_focus: bool):
        """Apply an application focus change. Repeating the current state is a no-op."""
        has_focus = bool(has_focus)
        if has_focus == self.has_focus:
            return

        self.has_focus = has_focus
        DebugLogger.state(f"Application {'focused' if has_focus else 'blurred'}", category="focus")

        for slot in self.layers:
            slot.notify_focus(has_focus)

        self.update_enabled_states()

    def set_visibility(self, visible: bool):
        """Track window visibility; becoming visible again clamps the next frame's dt."""
        visible = bool(visible)
        if visible and not self.is_visible:
            self._visibility_recovered = True
            DebugLogger.state("Window visible again, clamping next frame", category="timing")
        self.is_visible = visible

    def update_enabled_states(self):
        """
        Enable only the front-most ACTIVE view, and only while focused.

        Every other view is disabled. Views already in their target state are
        left alone, so no callback fires twice.
        """
        front = None
        for slot in reversed(self.layers):
            if slot.view is not None and slot.view.state is ViewState.ACTIVE:
                front = slot
                break

        # Disable first so two views are never enabled at once
        for slot in reversed(self.layers):
            if slot is not front or not self.has_focus:
                slot.set_enabled(False)

        if front is not None and self.has_focus:
            front.set_enabled(True)

    # ===========================================================
    # Frame Pass
    # ===========================================================

    def update(self, dt: float):
        """Update every layer in index order."""
        if self._visibility_recovered:
            self._visibility_recovered = False
            DebugLogger.trace(f"Clamped dt {dt:.3f}s after visibility change", category="timing")
            dt = Timing.NOMINAL_FRAME_TIME

        # Layers created during the pass start updating next frame
        for slot in self.layers:
            slot.update(dt)

    def draw(self, draw_manager):
        """Draw every layer in index order, lowest first."""
        for slot in self.layers:
            slot.draw(draw_manager)

    # ===========================================================
    # Teardown
    # ===========================================================

    def shutdown(self):
        """Dispose every view immediately and release all input hooks."""
        for slot in reversed(self.layers):
            slot.dispose()
        self._layers.clear()
        self.input_manager.clear()
        DebugLogger.system("ViewManager shut down")

    # ===========================================================
    # Internal Helpers
    # ===========================================================

    def _assert_no_transition(self, action: str):
        """Raise TransitionError if any layer is mid-transition."""
        busy = [slot.index for slot in self.layers if slot.is_in_transition]
        if busy:
            raise_logged(
                TransitionError,
                f"{action} failed, layer(s) {busy} already in transition",
                category="view"
            )

    @staticmethod
    def _validate_layer(layer):
        if isinstance(layer, bool) or not isinstance(layer, int) or layer < 0:
            raise_logged(InvalidLayerError, f"Layer must be a non-negative integer, got {layer!r}", category="view")
