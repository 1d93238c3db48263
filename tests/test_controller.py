"""Tests for the reactive controller: refresh, event handling, subscription."""

from contextlib import nullcontext
from types import SimpleNamespace

import pytest
from matplotlib.backend_bases import MouseEvent, ResizeEvent

from map_scale.config import Anchor, ScaleConfig, UnitSystem
from map_scale.controller import ScaleBarController
from map_scale.distance import ViewBounds
from map_scale.overlay_mpl import find_overlay_artists
from map_scale.view import container_height_in


@pytest.fixture
def controller(geo_axes):
    ctl = ScaleBarController(geo_axes, ScaleConfig())
    yield ctl
    ctl.unsubscribe()


def _registered(canvas, signal):
    return set(canvas.callbacks.callbacks.get(signal, {}))


class TestRefresh:
    """Full pipeline runs against the current Axes limits."""

    def test_refresh_uses_axes_limits(self, controller):
        art = controller.refresh()
        assert art.label.get_text() == "100 km"
        assert controller.artifacts is art

    def test_idempotent_refresh(self, controller):
        first = controller.refresh()
        count = len(find_overlay_artists(controller.ax))
        second = controller.refresh()
        assert len(find_overlay_artists(controller.ax)) == count == 3
        assert first.label is not second.label
        assert first.label.get_text() == second.label.get_text()

    def test_explicit_bounds_and_height(self, controller):
        bounds = ViewBounds(30.0, 40.0, -91.0, -90.0)
        art = controller.refresh(bounds, container_height=2.0)
        assert art.label.get_text() == "10 km"
        assert art.label.get_fontsize() == pytest.approx(4.6)

    def test_refresh_never_subscribes(self, controller):
        controller.refresh()
        controller.refresh()
        assert not controller.subscribed

    def test_config_captured_at_binding(self, geo_axes):
        ctl = ScaleBarController(geo_axes, ScaleConfig(0.5, Anchor.NW, UnitSystem.IMPERIAL, True))
        art = ctl.refresh()
        assert art.label.get_text().endswith(" mi")
        assert art.line.get_ydata()[0] == pytest.approx(39.2)


class TestSubscription:
    """Exactly one set of canvas connections per controller."""

    def test_subscribe_once(self, controller):
        canvas = controller.canvas
        before = _registered(canvas, "button_press_event")
        controller.subscribe()
        controller.subscribe()
        added = _registered(canvas, "button_press_event") - before
        assert len(added) == 1
        assert len(controller._cids) == 3

    def test_unsubscribe_disconnects_all(self, controller):
        canvas = controller.canvas
        controller.subscribe()
        cids = list(controller._cids)
        controller.unsubscribe()
        assert not controller.subscribed
        for signal in ("resize_event", "button_press_event", "button_release_event"):
            assert not set(cids) & _registered(canvas, signal)

    def test_remove(self, controller):
        controller.subscribe()
        controller.refresh()
        assert controller.remove() == 3
        assert find_overlay_artists(controller.ax) == []
        assert not controller.subscribed


class TestEvents:
    """Handlers for resize, click, zoom-end and pan-end."""

    def test_resize_only_changes_font(self, controller):
        controller.subscribe()
        art = controller.refresh()
        xy_before = art.box.get_xy().copy()
        fig = controller.ax.figure
        fig.set_size_inches(12.0, 8.0)
        fig.canvas.callbacks.process("resize_event", ResizeEvent("resize_event", fig.canvas))
        assert controller.artifacts is art
        assert art.label.get_fontsize() == pytest.approx(8.0 * controller.ax.get_position().height * 2.3)
        assert (art.box.get_xy() == xy_before).all()

    def test_resize_before_refresh_is_noop(self, controller):
        controller.update_font_size(3.0)
        assert controller.artifacts is None

    def test_click_in_axes_rebuilds(self, controller):
        art = controller.refresh()
        controller.ax.set_xlim(-91.0, -90.0)
        controller._on_button_press(SimpleNamespace(inaxes=controller.ax))
        assert controller.artifacts is not art
        assert controller.artifacts.label.get_text() == "10 km"

    def test_click_outside_axes_ignored(self, controller):
        art = controller.refresh()
        controller._on_button_press(SimpleNamespace(inaxes=None))
        assert controller.artifacts is art

    def test_click_through_canvas(self, controller):
        controller.subscribe()
        art = controller.refresh()
        ax = controller.ax
        x, y = ax.transAxes.transform((0.5, 0.5))
        event = MouseEvent("button_press_event", ax.figure.canvas, x, y, button=1)
        ax.figure.canvas.callbacks.process("button_press_event", event)
        assert controller.artifacts is not art
        assert len(find_overlay_artists(ax)) == 3

    @pytest.mark.parametrize("mode", ["zoom rect", "pan/zoom"])
    def test_zoom_pan_end_rebuilds(self, controller, mode):
        art = controller.refresh()
        controller.canvas.toolbar = SimpleNamespace(
            mode=mode, _wait_cursor_for_draw_cm=nullcontext
        )
        controller.ax.set_xlim(-91.0, -90.0)
        controller._on_button_release(SimpleNamespace(inaxes=controller.ax))
        assert controller.artifacts is not art
        assert controller.artifacts.label.get_text() == "10 km"

    def test_release_without_navigation_ignored(self, controller):
        art = controller.refresh()
        controller._on_button_release(SimpleNamespace(inaxes=controller.ax))
        assert controller.artifacts is art

    def test_press_while_navigating_ignored(self, controller):
        art = controller.refresh()
        controller.canvas.toolbar = SimpleNamespace(mode="zoom rect")
        controller._on_button_press(SimpleNamespace(inaxes=controller.ax))
        assert controller.artifacts is art

    @pytest.mark.parametrize("twin", ["twinx", "twiny"])
    def test_click_on_twin_axes_rebuilds(self, controller, twin):
        partner = getattr(controller.ax, twin)()
        art = controller.refresh()
        controller._on_button_press(SimpleNamespace(inaxes=partner))
        assert controller.artifacts is not art

    def test_click_on_unrelated_axes_ignored(self, controller):
        other = controller.ax.figure.add_axes([0.8, 0.8, 0.1, 0.1])
        art = controller.refresh()
        controller._on_button_press(SimpleNamespace(inaxes=other))
        assert controller.artifacts is art


def test_container_height_is_inner_axes_box(geo_axes):
    fig = geo_axes.figure
    assert container_height_in(geo_axes) == pytest.approx(
        fig.get_size_inches()[1] * geo_axes.get_position().height
    )
    geo_axes.set_ylim(35.0, 36.0)
    assert container_height_in(geo_axes) == pytest.approx(
        fig.get_size_inches()[1] * geo_axes.get_position().height
    )
