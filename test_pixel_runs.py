import pytest

from valetudo_map.core.pixels import decode_pixel_runs, pair_pixels


@pytest.mark.parametrize("x,y,count", [(0, 0, 1), (10, 10, 5), (-3, 7, 4), (250, 0, 12)])
def test_run_expands_along_x(x, y, count):
    assert decode_pixel_runs([x, y, count]) == [(x + i, y) for i in range(count)]


def test_empty_stream():
    assert decode_pixel_runs([]) == []


@pytest.mark.parametrize("count", [0, -1, -100])
def test_non_positive_count_emits_nothing(count):
    assert decode_pixel_runs([4, 4, count]) == []


@pytest.mark.parametrize("extra", [[9], [9, 9]])
def test_trailing_partial_triple_is_dropped(extra):
    stream = [1, 2, 3, 5, 6, 2]
    assert decode_pixel_runs(stream + extra) == decode_pixel_runs(stream)


def test_runs_keep_encoding_order():
    out = decode_pixel_runs([5, 1, 2, 0, 0, 2, 3, 1, 1])
    assert out == [(5, 1), (6, 1), (0, 0), (1, 0), (3, 1)]


def test_short_stream_decodes_to_nothing():
    assert decode_pixel_runs([1, 2]) == []


def test_pair_pixels_ignores_odd_tail():
    assert pair_pixels([1, 2, 3, 4, 5]) == [(1, 2), (3, 4)]
