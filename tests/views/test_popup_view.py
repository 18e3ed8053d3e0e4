"""
test_popup_view.py
------------------
Tests for popups opened over the view stack.
"""

import pytest

from viewstack.core.errors import PopupError, TransitionError, ViewOwnershipError
from viewstack.core.runtime.settings import Layers
from viewstack.views.view_state import ViewState

from conftest import activate


def test_open_popup_uses_popup_layer(view_manager, make_view, make_popup):
    activate(view_manager, make_view("base"))
    popup = make_popup()

    view_manager.open_popup(popup)

    assert view_manager.get_view(Layers.POPUP) is popup
    assert view_manager.popup_is_open


def test_popup_is_open_false_without_popups(view_manager, make_view):
    activate(view_manager, make_view("base"))
    assert not view_manager.popup_is_open


def test_open_popup_over_occupied_layer_raises(view_manager, make_view, make_popup):
    activate(view_manager, make_view("base"))
    activate(view_manager, make_popup("first"), layer=Layers.POPUP)

    with pytest.raises(PopupError):
        view_manager.open_popup(make_popup("second"))


def test_open_popup_during_transition_raises(view_manager, make_view, make_popup):
    view_manager.transition_to(make_view("base"))

    with pytest.raises(TransitionError):
        view_manager.open_popup(make_popup())


def test_close_exits_popup(view_manager, make_view, make_popup):
    base = activate(view_manager, make_view("base"))
    popup = make_popup(exit_time=0.125)
    view_manager.open_popup(popup)
    view_manager.update(0.125)
    view_manager.update(0.125)
    assert popup.state is ViewState.ACTIVE

    popup.close()
    assert popup.state is ViewState.EXITING
    assert base.is_enabled

    view_manager.update(0.125)
    assert popup.is_disposed
    assert not view_manager.popup_is_open


def test_close_unopened_popup_raises(make_popup):
    with pytest.raises(ViewOwnershipError):
        make_popup().close()


def test_popup_on_custom_layer(view_manager, make_view, make_popup):
    activate(view_manager, make_view("base"))
    popup = make_popup()

    view_manager.open_popup(popup, layer=3)

    assert view_manager.get_view(3) is popup
