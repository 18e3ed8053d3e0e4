"""
view_layer.py
-------------
A slot in the view stack: one current view plus at most one queued view.

State machine per view:
    PENDING -> LOADING -> ENTERING -> ACTIVE -> EXITING -> (disposed)

A new transition is accepted only while the current view is ACTIVE; the
current view then exits and the queued view starts loading once the exit
fade has finished.
"""

from viewstack.core.debug.debug_logger import DebugLogger
from viewstack.core.errors import TransitionError, ViewLoadError, raise_logged
from viewstack.core.runtime.settings import Layers, Transition
from viewstack.views.load_task import LoadTask
from viewstack.views.loading_indicator import LoadingIndicator
from viewstack.views.view_state import ViewState


class ViewLayer:
    """
    Drives the lifecycle of the views occupying one layer index.

    Attributes:
        index: Position in the stack (0 = base, higher draws on top)
        manager: Owning ViewManager (focus state, cascade, input manager)
        view: Current view or None
        pending_view: View queued to replace the current one, or None
    """

    def __init__(self, index: int, manager):
        self.index = index
        self.manager = manager
        self.view = None
        self.pending_view = None

        self._load_task = None
        self._transition_elapsed = 0.0
        self._loading_indicator = LoadingIndicator()

    # ===========================================================
    # Properties
    # ===========================================================

    @property
    def is_empty(self) -> bool:
        return self.view is None

    @property
    def is_in_transition(self) -> bool:
        """True while the current view is anything but ACTIVE, or a view is queued."""
        if self.pending_view is not None:
            return True
        return self.view is not None and self.view.state is not ViewState.ACTIVE

    @property
    def load_progress(self) -> float:
        return self._load_task.progress if self._load_task is not None else 0.0

    @property
    def _input_manager(self):
        return self.manager.input_manager

    # ===========================================================
    # Transition Control
    # ===========================================================

    def transition_to(self, view):
        """
        Replace the layer's view.

        An empty layer starts loading the view immediately. Otherwise the view
        is queued and the current view starts exiting.

        Raises:
            TransitionError: The current view is mid-transition or a view is already queued
            ViewLoadError: A synchronous load_assets raised
        """
        if self.view is None:
            self.view = view
            self._load_view()
            return

        if self.pending_view is not None or self.view.state is not ViewState.ACTIVE:
            raise_logged(
                TransitionError,
                f"Transition to {view.name} failed, layer {self.index} is mid-transition "
                f"({self.view.name} is {self.view.state.value})",
                category="layer"
            )

        self.pending_view = view
        DebugLogger.state(f"Layer {self.index}: queued {view.name} after {self.view.name}", category="layer")
        self._begin_exit()

    def exit_view(self):
        """
        Start exiting the current view. No-op when the layer is empty.

        Raises:
            TransitionError: The current view is not ACTIVE
        """
        if self.view is None:
            return

        if self.view.state is not ViewState.ACTIVE:
            raise_logged(
                TransitionError,
                f"Failed to exit {self.view.name}, layer {self.index} is mid-transition "
                f"({self.view.state.value})",
                category="layer"
            )

        self._begin_exit()

    def set_enabled(self, enabled: bool):
        """Enable or disable the current view. Repeating the current state fires nothing."""
        view = self.view
        if view is None:
            return

        if enabled:
            if view.state is not ViewState.ACTIVE:
                raise_logged(
                    TransitionError,
                    f"Cannot enable {view.name} while {view.state.value}",
                    category="focus"
                )
            view.enable(self._input_manager)
        else:
            view.disable(self._input_manager)

    def notify_focus(self, has_focus: bool):
        """Forward an application focus change to the view, unless it is still loading."""
        view = self.view
        if view is None or view.state is ViewState.LOADING:
            return

        if has_focus:
            view.on_focus()
        else:
            view.on_blur()

    def dispose(self):
        """Tear the layer down immediately, skipping any running fade."""
        if self.view is not None:
            view = self.view
            self.view = None
            view.dispose(self._input_manager)
        self.pending_view = None
        self._load_task = None

    # ===========================================================
    # Frame Update
    # ===========================================================

    def update(self, dt: float):
        """
        Advance the layer's state machine by one frame.

        The view's own update() runs only while it is ACTIVE.

        Raises:
            ViewLoadError: The view's load_assets raised during this step
        """
        view = self.view
        if view is None:
            return

        enter_dt = dt
        if view.state is ViewState.LOADING:
            self._loading_indicator.update(dt)
            if not self._step_load():
                return
            # The frame spent loading does not count towards the fade
            enter_dt = 0.0

        if view.state is ViewState.ENTERING:
            self._advance_enter(enter_dt)
        elif view.state is ViewState.EXITING:
            self._advance_exit(dt)
            return

        if self.view is view and view.state is ViewState.ACTIVE:
            view.update(dt)

    def _advance_enter(self, dt: float):
        view = self.view

        self._transition_elapsed += dt
        if view.enter_time <= 0 or self._transition_elapsed >= view.enter_time:
            view.transition_pos = 1.0
        else:
            view.transition_pos = max(view.transition_pos, self._transition_elapsed / view.enter_time)

        DebugLogger.trace(f"{view.name} entering: {view.transition_pos:.3f}")

        if view.transition_pos >= 1.0:
            view.state = ViewState.ACTIVE
            self._load_task = None
            DebugLogger.state(f"Layer {self.index}: {view.name} active", category="layer")
            self.manager.update_enabled_states()

    def _advance_exit(self, dt: float):
        view = self.view

        self._transition_elapsed += dt
        if view.exit_time <= 0 or self._transition_elapsed >= view.exit_time:
            view.transition_pos = 0.0
        else:
            view.transition_pos = min(view.transition_pos, 1.0 - self._transition_elapsed / view.exit_time)

        DebugLogger.trace(f"{view.name} exiting: {view.transition_pos:.3f}")

        if view.transition_pos <= 0.0:
            self._finish_exit()

    # ===========================================================
    # Lifecycle Steps
    # ===========================================================

    def _begin_exit(self):
        view = self.view
        view.state = ViewState.EXITING
        self._transition_elapsed = 0.0
        DebugLogger.state(f"Layer {self.index}: {view.name} exiting", category="layer")

        view.disable(self._input_manager)
        self.manager.update_enabled_states()

    def _finish_exit(self):
        view = self.view
        self.view = None
        view.dispose(self._input_manager)

        if self.pending_view is not None:
            self.view = self.pending_view
            self.pending_view = None
            self._load_view()

    def _load_view(self):
        """Start loading the current view; a synchronous load completes inside this call."""
        view = self.view
        view.state = ViewState.LOADING
        view.transition_pos = 0.0
        self._transition_elapsed = 0.0
        self._loading_indicator.reset()
        self._load_task = LoadTask(view.load_assets)

        DebugLogger.state(f"Layer {self.index}: loading {view.name}", category="loading")
        self._step_load()

    def _step_load(self) -> bool:
        try:
            done = self._load_task.step()
        except Exception as exc:
            raise self._discard_failed_view(exc) from exc

        if done:
            self._finish_loading()
        return done

    def _finish_loading(self):
        view = self.view
        view.state = ViewState.ENTERING
        self._transition_elapsed = 0.0
        DebugLogger.state(f"Layer {self.index}: {view.name} entering", category="layer")

        view.init()
        # Start in a focus-consistent state
        if not self.manager.has_focus:
            view.on_blur()

    def _discard_failed_view(self, exc) -> ViewLoadError:
        """Drop a view whose load_assets raised, leaving the layer empty and usable."""
        view = self.view
        view.state = ViewState.FAILED
        self.view = None
        self._load_task = None
        view.dispose(self._input_manager)

        message = f"Layer {self.index}: loading {view.name} failed: {exc!r}"
        DebugLogger.fail(message, category="loading")
        return ViewLoadError(message, view=view, layer=self.index)

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self, draw_manager):
        """Draw the loading indicator, or the view plus its fade overlay."""
        view = self.view
        if view is None:
            return

        with draw_manager.layer_scope(self.index):
            if view.state is ViewState.LOADING:
                self._draw_loading(draw_manager)
                return

            view.draw(draw_manager)

            fading = (
                (view.state is ViewState.ENTERING and view.do_enter_fade)
                or (view.state is ViewState.EXITING and view.do_exit_fade)
            )
            if fading:
                draw_manager.queue_overlay(
                    Transition.FADE_COLOR,
                    alpha=255 * (1.0 - view.transition_pos),
                    layer=Layers.FADE_OVERLAY
                )

    def _draw_loading(self, draw_manager):
        view = self.view
        progress = self.load_progress

        if view.draw_loading_indicator is not None:
            view.draw_loading_indicator(draw_manager, progress)
        elif self.manager.loading_indicator_func is not None:
            self.manager.loading_indicator_func(draw_manager, progress)
        else:
            self._loading_indicator.draw(draw_manager, progress)

    def __repr__(self):
        return f"<ViewLayer {self.index} view={self.view!r} pending={self.pending_view!r}>"
