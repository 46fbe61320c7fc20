import pytest

from deckplan import ViewScale
from deckplan.viewport import MAX_ZOOM, MIN_ZOOM


def test_fit_zoom_never_enlarges_short_surfaces():
    assert ViewScale(12.0).zoom == 1.0


def test_fit_zoom_shrinks_long_surfaces():
    view = ViewScale(20.0)
    assert view.zoom == pytest.approx(1400 / (20 * 80 + 120 + 50))


def test_fit_zoom_respects_minimum():
    assert ViewScale(80.0).zoom == MIN_ZOOM


def test_zoom_steps_are_bounded():
    view = ViewScale(12.0)
    for _ in range(20):
        view.zoom_in()
    assert view.zoom == MAX_ZOOM
    for _ in range(30):
        view.zoom_out()
    assert view.zoom == MIN_ZOOM
    assert view.reset() == 1.0


def test_surface_change_recomputes_fit():
    view = ViewScale(12.0)
    view.zoom_in()
    view.set_surface_length(20.0)
    assert view.zoom == pytest.approx(view.fit_zoom())
    assert view.zoom < 1.0


def test_pixel_mapping_round_trip():
    view = ViewScale(12.0)
    view.zoom_out()
    px, py = view.to_pixels(3.27, 0.69)
    x, y = view.to_surface(px, py)
    assert x == pytest.approx(3.27)
    assert y == pytest.approx(0.69)
    assert view.to_pixels(0.0, 0.0) == (60.0, 60.0)


def test_canvas_size_includes_padding():
    width, height = ViewScale(12.0).canvas_size(2.6)
    assert width == pytest.approx(12 * 80 + 120 + 50)
    assert height == pytest.approx(2.6 * 80 + 120 + 40)
