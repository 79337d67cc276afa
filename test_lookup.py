import pytest

from valetudo_map.core import build_map_document, content_bounds, layer_at, segment_at, segment_infos


def _rooms(with_dimensions):
    def layer(sid, runs, dims, name=None):
        out = {"type": "segment", "compressedPixels": runs, "metaData": {"segmentId": sid}}
        if name:
            out["metaData"]["name"] = name
        if with_dimensions:
            out["dimensions"] = dims
        return out

    return build_map_document({
        "size": {"x": 50, "y": 50},
        "pixelSize": 5,
        "layers": [
            {"type": "floor", "compressedPixels": [0, 0, 30, 0, 1, 30, 0, 2, 30]},
            layer("1", [0, 0, 10, 0, 1, 10], {"x": {"min": 0, "max": 9, "mid": 4}, "y": {"min": 0, "max": 1, "mid": 0}}, "Hall"),
            layer("2", [20, 0, 5, 20, 1, 5], {"x": {"min": 20, "max": 24, "mid": 22}, "y": {"min": 0, "max": 1, "mid": 0}}),
        ],
    })


@pytest.mark.parametrize("with_dimensions", [True, False])
@pytest.mark.parametrize("use_dimensions", [True, False])
def test_segment_at(with_dimensions, use_dimensions):
    doc = _rooms(with_dimensions)
    assert segment_at(doc, (5, 1), use_dimensions=use_dimensions) == "1"
    assert segment_at(doc, (22, 0), use_dimensions=use_dimensions) == "2"
    # floor only
    assert segment_at(doc, (15, 1), use_dimensions=use_dimensions) is None
    # nothing at all
    assert segment_at(doc, (40, 40), use_dimensions=use_dimensions) is None


def test_results_match_with_and_without_dimensions():
    a, b = _rooms(True), _rooms(False)
    for x in range(-1, 31):
        for y in range(-1, 4):
            assert segment_at(a, (x, y)) == segment_at(b, (x, y))


def test_overlapping_segments_first_match_wins():
    # Overlap is not expected from the firmware; first in layer order is the documented policy.
    doc = build_map_document({"layers": [
        {"type": "segment", "compressedPixels": [0, 0, 5], "metaData": {"segmentId": "a"}},
        {"type": "segment", "compressedPixels": [3, 0, 5], "metaData": {"segmentId": "b"}},
    ]})
    assert segment_at(doc, (4, 0)) == "a"
    assert segment_at(doc, (6, 0)) == "b"


def test_non_segment_layers_are_ignored():
    doc = build_map_document({"layers": [
        {"type": "wall", "compressedPixels": [0, 0, 5]},
        {"type": "mystery", "compressedPixels": [0, 0, 5], "metaData": {"segmentId": "x"}},
    ]})
    assert layer_at(doc, (1, 0)) is None


def test_stale_dimensions_only_reject():
    # dimensions wider than the pixels must not create a match
    doc = build_map_document({"layers": [{
        "type": "segment", "compressedPixels": [0, 0, 2], "metaData": {"segmentId": "1"},
        "dimensions": {"x": {"min": 0, "max": 100}, "y": {"min": 0, "max": 100}},
    }]})
    assert segment_at(doc, (50, 50)) is None


def test_segment_infos():
    infos = segment_infos(_rooms(True))
    assert [(i.segment_id, i.name) for i in infos] == [("1", "Hall"), ("2", "Room 2")]
    assert (infos[0].label_x, infos[0].label_y) == (4, 0)
    assert infos[0].pixel_count == 20


def test_segment_infos_label_from_pixel_mean():
    infos = segment_infos(_rooms(False))
    assert (infos[1].label_x, infos[1].label_y) == (22, 0)


def test_segment_infos_skip_unaddressable():
    doc = build_map_document({"layers": [{"type": "segment", "compressedPixels": [0, 0, 3]}]})
    assert segment_infos(doc) == []


def test_content_bounds():
    box = content_bounds(_rooms(False))
    assert (box.min_x, box.max_x, box.min_y, box.max_y) == (0, 29, 0, 2)
    assert content_bounds(build_map_document({})) is None
