import pytest

from valetudo_map.core import CoordinateTransform, build_map_document
from valetudo_map.models import PixelPoint
from valetudo_map.services.command_service import (
    CommandBuildError, go_to_command, join_segments_command, rename_segment_command,
    segment_clean_command, split_segment_command, zone_clean_command,
)
from valetudo_map.services.map_service import restrictions_service


@pytest.fixture
def doc():
    return build_map_document({
        "pixelSize": 5,
        "layers": [
            {"type": "segment", "compressedPixels": [0, 0, 10], "metaData": {"segmentId": "1"}},
            {"type": "segment", "compressedPixels": [20, 0, 10], "metaData": {"segmentId": "2"}},
            {"type": "segment", "compressedPixels": [40, 0, 10]},
        ],
        "entities": [
            {"type": "virtual_wall", "points": [0, 0, 100, 0]},
            {"type": "no_go_area", "points": [0, 0, 50, 0, 50, 50, 0, 50]},
            {"type": "no_mop_area", "points": [10, 10, 20, 10, 20, 20, 10, 20]},
        ],
    })


@pytest.fixture
def transform(doc):
    return CoordinateTransform.for_document(doc)


def test_go_to(transform):
    req = go_to_command(transform, PixelPoint(x=10, y=20))
    assert req.model_dump() == {"action": "goto", "coordinates": {"x": 50, "y": 100}}


def test_zone_clean(transform):
    req = zone_clean_command(transform, [(PixelPoint(x=20, y=8), PixelPoint(x=10, y=4))], iterations=[9])
    body = req.model_dump()
    assert body["action"] == "clean"
    zone = body["zones"][0]
    assert zone["iterations"] == 3
    assert zone["points"] == {
        "pA": {"x": 50, "y": 20}, "pB": {"x": 100, "y": 20},
        "pC": {"x": 100, "y": 40}, "pD": {"x": 50, "y": 40},
    }


def test_zone_clean_needs_a_zone(transform):
    with pytest.raises(CommandBuildError):
        zone_clean_command(transform, [])


@pytest.mark.parametrize("iterations", [[], [1], [1, 2, 3]])
def test_zone_clean_iterations_must_match_zones(transform, iterations):
    rects = [
        (PixelPoint(x=0, y=0), PixelPoint(x=4, y=4)),
        (PixelPoint(x=10, y=10), PixelPoint(x=14, y=14)),
    ]
    with pytest.raises(CommandBuildError):
        zone_clean_command(transform, rects, iterations=iterations)


def test_zone_clean_accepts_a_generator(transform):
    rects = ((PixelPoint(x=i, y=0), PixelPoint(x=i + 2, y=2)) for i in (0, 10))
    req = zone_clean_command(transform, rects, iterations=[1, 2])
    assert [z.iterations for z in req.zones] == [1, 2]


def test_segment_clean_from_picks(doc):
    req = segment_clean_command(doc, points=[PixelPoint(x=3, y=0), PixelPoint(x=25, y=0), PixelPoint(x=4, y=0)])
    assert req.model_dump() == {"action": "start_segment_action", "segment_ids": ["1", "2"], "iterations": 1}


def test_segment_clean_by_id(doc):
    req = segment_clean_command(doc, segment_ids=["2"], iterations=0)
    assert req.segment_ids == ["2"]
    assert req.iterations == 1


@pytest.mark.parametrize("kwargs", [
    {"segment_ids": ["9"]},
    {"points": [PixelPoint(x=15, y=0)]},
    # segment without an id is not addressable
    {"points": [PixelPoint(x=45, y=0)]},
    {},
])
def test_segment_clean_rejects(doc, kwargs):
    with pytest.raises(CommandBuildError):
        segment_clean_command(doc, **kwargs)


def test_split_segment(doc, transform):
    req = split_segment_command(doc, transform, "1", PixelPoint(x=5, y=0), PixelPoint(x=5, y=10))
    assert req.model_dump() == {
        "action": "split_segment", "segment_id": "1",
        "pA": {"x": 25, "y": 0}, "pB": {"x": 25, "y": 50},
    }


def test_join_and_rename(doc):
    assert join_segments_command(doc, "1", "2").action == "join_segments"
    with pytest.raises(CommandBuildError):
        join_segments_command(doc, "1", "1")
    req = rename_segment_command(doc, "2", "  Office ")
    assert (req.action, req.segment_id, req.name) == ("rename_segment", "2", "Office")
    with pytest.raises(CommandBuildError):
        rename_segment_command(doc, "2", "   ")


def test_restrictions(doc):
    body = restrictions_service(doc).model_dump()
    assert body["virtualWalls"] == [{"points": {"pA": {"x": 0, "y": 0}, "pB": {"x": 100, "y": 0}}}]
    assert body["restrictedZones"][0]["points"]["pC"] == {"x": 50, "y": 50}
    assert body["noMopZones"][0]["points"]["pA"] == {"x": 10, "y": 10}
