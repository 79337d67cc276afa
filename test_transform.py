import pytest

from valetudo_map.core import CoordinateTransform, build_map_document
from valetudo_map.utils.math import round_half_away


@pytest.mark.parametrize("v,expected", [
    (2.5, 3), (-2.5, -3), (0.5, 1), (-0.5, -1), (2.4999, 2), (-2.4999, -2),
    (1.5, 2), (0.0, 0), (7, 7), (-7, -7),
])
def test_round_half_away(v, expected):
    assert round_half_away(v) == expected


def test_to_physical_scales_by_pixel_size():
    t = CoordinateTransform(5)
    assert t.to_physical((10, 20)) == (50, 100)


def test_to_physical_subtracts_origin():
    t = CoordinateTransform(5, origin=(2, 3))
    assert t.to_physical((10, 20)) == (40, 85)
    assert t.to_pixel((40, 85)) == (10, 20)


@pytest.mark.parametrize("scale", [1, 2, 5, 7])
def test_round_trip_integer_scale(scale):
    t = CoordinateTransform(scale)
    for x in range(0, 40, 3):
        for y in range(0, 40, 7):
            assert t.to_pixel(t.to_physical((x, y))) == (x, y)


def test_round_trip_large_map():
    t = CoordinateTransform(5)
    p = (65000, 48000)
    assert t.to_physical(p) == (325000, 240000)
    assert t.to_pixel(t.to_physical(p)) == p


def test_to_pixel_ties_round_away_from_zero():
    t = CoordinateTransform(2)
    assert t.to_pixel((5, -5)) == (3, -3)
    assert t.to_pixel((3, -3)) == (2, -2)


def test_fractional_scale():
    t = CoordinateTransform(2.5)
    assert t.to_physical((4, 3)) == (10.0, 7.5)
    assert t.to_pixel((10.0, 7.5)) == (4, 3)
    assert t.to_pixel((11.0, 6.0)) == (4, 2)


@pytest.mark.parametrize("bad", [0, -5, None])
def test_rejects_non_positive_scale(bad):
    with pytest.raises(ValueError):
        CoordinateTransform(bad)


def test_for_document_uses_reported_pixel_size():
    doc = build_map_document({"pixelSize": 4})
    assert CoordinateTransform.for_document(doc).pixel_size_mm == 4


def test_for_document_falls_back_to_default():
    doc = build_map_document({})
    assert CoordinateTransform.for_document(doc).pixel_size_mm == 5
    assert CoordinateTransform.for_document(doc, default_pixel_size_mm=3).pixel_size_mm == 3


def test_rect_to_physical_normalises_corners():
    t = CoordinateTransform(5)
    pA, pB, pC, pD = t.rect_to_physical((20, 4), (10, 8))
    assert (pA, pB, pC, pD) == ((50, 20), (100, 20), (100, 40), (50, 40))


def test_points_lists():
    t = CoordinateTransform(5)
    assert t.points_to_physical([1, 2, 3, 4]) == [5, 10, 15, 20]
    assert t.points_to_pixels([5, 10, 15, 20]) == [1, 2, 3, 4]
