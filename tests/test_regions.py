import numpy as np
import pytest

from colour_remover.errors import InvalidImage, InvalidThreshold
from colour_remover.image.buffer import PixelBuffer
from colour_remover.segmentation import (
    ComponentScanner,
    RegionDecision,
    classify_region,
    detect_background,
    erase_region,
    find_connected_region,
    new_visited,
    should_remove,
)

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


def _canvas(width, height, black_pixels=()):
    buf = PixelBuffer.filled(width, height, WHITE)
    for x, y in black_pixels:
        buf.set(x, y, BLACK)
    return buf


def test_detect_background_reads_top_left():
    buf = _canvas(3, 3)
    buf.set(0, 0, (1, 2, 3))
    assert detect_background(buf) == (1, 2, 3)


def test_detect_background_rejects_empty_image():
    with pytest.raises(InvalidImage):
        detect_background(PixelBuffer(np.zeros((0, 4, 3), dtype=np.uint8)))


def test_isolated_pixel_is_region_of_one():
    buf = _canvas(3, 3, [(1, 1)])
    region = find_connected_region(buf, BLACK, (1, 1))
    assert region.size == 1
    assert region.coordinates() == [(1, 1)]


def test_diagonal_pixels_are_separate_regions():
    buf = _canvas(4, 4, [(1, 1), (2, 2)])
    visited = new_visited(buf)
    scanner = ComponentScanner(buf, BLACK)
    first = scanner.scan((1, 1), visited)
    assert first.size == 1
    assert not visited[2, 2]
    second = scanner.scan((2, 2), visited)
    assert second.size == 1


def test_region_touching_border_is_complete():
    # full left column plus top row
    pixels = [(0, y) for y in range(1, 5)] + [(x, 0) for x in range(1, 5)]
    buf = _canvas(5, 5, pixels)
    buf.set(0, 0, BLACK)
    region = find_connected_region(buf, BLACK, (4, 0))
    assert region.size == 9
    assert sorted(region.coordinates()) == sorted(pixels + [(0, 0)])
    box = region.bounding_box()
    assert box.as_tuple() == (0, 0, 4, 4)


def test_scan_marks_visited_and_has_no_duplicates():
    buf = _canvas(6, 4, [(x, y) for x in range(1, 5) for y in range(1, 3)])
    visited = new_visited(buf)
    region = ComponentScanner(buf, BLACK).scan((2, 2), visited)
    coords = region.coordinates()
    assert len(coords) == len(set(coords)) == 8
    assert visited.sum() == 8


def test_large_uniform_region_does_not_hit_recursion_limit():
    buf = PixelBuffer.filled(400, 400, BLACK)
    region = find_connected_region(buf, BLACK, (399, 399))
    assert region.size == 400 * 400


def test_scan_rejects_non_matching_start():
    buf = _canvas(3, 3, [(1, 1)])
    with pytest.raises(ValueError):
        find_connected_region(buf, BLACK, (0, 0))


def test_scan_reads_current_pixels_after_buffer_changes():
    buf = _canvas(3, 1, [(0, 0)])
    scanner = ComponentScanner(buf, BLACK)
    buf.set(1, 0, BLACK)
    region = scanner.scan((0, 0), new_visited(buf))
    assert region.size == 2
    assert sorted(region.coordinates()) == [(0, 0), (1, 0)]


def test_scan_rejects_already_visited_start():
    buf = _canvas(4, 1, [(x, 0) for x in range(4)])
    visited = new_visited(buf)
    scanner = ComponentScanner(buf, BLACK)
    assert scanner.scan((0, 0), visited).size == 4
    with pytest.raises(ValueError):
        scanner.scan((3, 0), visited)
    assert visited.sum() == 4


def test_regions_compare_by_identity():
    buf = _canvas(2, 1, [(0, 0)])
    first = find_connected_region(buf, BLACK, (0, 0))
    second = find_connected_region(buf, BLACK, (0, 0))
    assert first == first
    assert first != second


def test_threshold_boundary():
    assert should_remove(3, 3)
    assert not should_remove(2, 3)
    assert should_remove(1, 1)


def test_classify_region_decisions():
    buf = _canvas(4, 1, [(1, 0), (2, 0)])
    region = find_connected_region(buf, BLACK, (1, 0))
    assert classify_region(region, 2) is RegionDecision.REMOVE
    assert classify_region(region, 3) is RegionDecision.KEEP


@pytest.mark.parametrize("threshold", [0, -4, 1.5, True, "3"])
def test_invalid_threshold(threshold):
    with pytest.raises(InvalidThreshold):
        should_remove(5, threshold)


def test_erase_region_writes_background_and_extraction():
    buf = _canvas(3, 2, [(0, 1), (1, 1)])
    extraction = PixelBuffer.filled(3, 2, WHITE)
    region = find_connected_region(buf, BLACK, (0, 1))
    erase_region(buf, region, WHITE, extraction)
    assert buf.mask_of(WHITE).all()
    assert extraction.mask_of(BLACK).tolist() == [[False, False, False], [True, True, False]]
