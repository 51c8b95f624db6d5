import pytest

from visflowkit.marching_tables import (
    cube_case,
    cube_edge_endpoints,
    cube_edge_mask,
    cube_triangles,
    square_case,
    square_edge_endpoints,
    square_edge_mask,
)


def test_cube_case_extremes():
    assert cube_case([0] * 8, 10) == 255
    assert cube_case([20] * 8, 10) == 0


@pytest.mark.parametrize("corner", range(8))
def test_cube_case_single_corner(corner):
    values = [100] * 8
    values[corner] = 0
    assert cube_case(values, 50) == 1 << corner


def test_cube_case_rejects_wrong_length():
    with pytest.raises(ValueError):
        cube_case([1, 2, 3], 2)


def test_cube_edge_mask_pinned_values():
    assert cube_edge_mask(1) == 0x109
    assert cube_edge_mask(2) == 0x203
    assert cube_edge_mask(16) == 0x190
    assert cube_edge_mask(0) == 0
    assert cube_edge_mask(255) == 0


def test_cube_edge_mask_is_symmetric_under_complement():
    for case in range(256):
        assert cube_edge_mask(case) == cube_edge_mask(255 - case)


def test_cube_triangles_use_exactly_the_crossed_edges():
    for case in range(256):
        used = 0
        for triangle in cube_triangles(case):
            for edge in triangle:
                used |= 1 << edge
        assert used == cube_edge_mask(case)


def test_cube_triangle_counts():
    for case in range(256):
        triangles = cube_triangles(case)
        assert len(triangles) <= 5
        assert all(len(t) == 3 for t in triangles)
    assert cube_triangles(0) == []
    assert cube_triangles(255) == []
    assert cube_triangles(1) == [(0, 8, 3)]
    assert cube_triangles(3) == [(1, 8, 3), (9, 8, 1)]


def test_cube_case_out_of_range():
    with pytest.raises(ValueError):
        cube_triangles(256)
    with pytest.raises(ValueError):
        cube_edge_mask(-1)


def test_cube_edge_endpoints():
    assert cube_edge_endpoints(0) == (0, 1)
    assert cube_edge_endpoints(11) == (3, 7)
    with pytest.raises(ValueError):
        cube_edge_endpoints(12)


def test_square_case_and_masks():
    assert square_case([0, 100, 100, 100], 50) == 1
    assert square_edge_mask(1) == 0b1001
    assert square_edge_mask(5) == 0b1111
    assert square_edge_mask(0) == 0
    assert square_edge_mask(15) == 0


def test_square_mask_matches_endpoints():
    for case in range(16):
        expected = 0
        for edge in range(4):
            a, b = square_edge_endpoints(edge)
            if ((case >> a) & 1) != ((case >> b) & 1):
                expected |= 1 << edge
        assert square_edge_mask(case) == expected


def test_square_errors():
    with pytest.raises(ValueError):
        square_case([1, 2, 3], 2)
    with pytest.raises(ValueError):
        square_edge_mask(16)
    with pytest.raises(ValueError):
        square_edge_endpoints(4)
    assert square_edge_endpoints(2) == (3, 2)