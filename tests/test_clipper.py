import numpy as np
import pytest

from visflowkit.clipper import mesh_plane, mesh_plane_flat, tri_plane


def unit_cube():
    tris = []
    for axis in range(3):
        u, v = [i for i in range(3) if i != axis]
        for side in (-0.5, 0.5):
            quad = []
            for cu, cv in ((-0.5, -0.5), (0.5, -0.5), (0.5, 0.5), (-0.5, 0.5)):
                p = [0.0, 0.0, 0.0]
                p[axis] = side
                p[u] = cu
                p[v] = cv
                quad.append(p)
            tris += [quad[0], quad[1], quad[2], quad[0], quad[2], quad[3]]
    return np.array(tris)


def total_area(points):
    tris = np.asarray(points).reshape(-1, 3, 3)
    cross = np.cross(tris[:, 1] - tris[:, 0], tris[:, 2] - tris[:, 0])
    return float(np.linalg.norm(cross, axis=1).sum() / 2)


def test_triangle_on_positive_side_is_discarded():
    tri = [[1, 0, 0], [2, 0, 0], [1, 1, 0]]
    kept, created = tri_plane(tri, (1, 0, 0), 0.0)
    assert kept.shape == (0, 3)
    assert created.shape == (0, 3)


def test_triangle_on_negative_side_is_kept_unchanged():
    tri = np.array([[-1, 0, 0], [-2, 0, 0], [-1, 1, 0]], dtype=float)
    kept, created = tri_plane(tri, (1, 0, 0), 0.0)
    assert np.array_equal(kept, tri)
    assert len(created) == 0


def test_length_not_multiple_of_three_is_untouched():
    points = np.array([[1, 0, 0], [2, 0, 0]], dtype=float)
    kept, created = tri_plane(points, (1, 0, 0), 0.0)
    assert np.array_equal(kept, points)
    assert len(created) == 0


def test_split_triangle_creates_points_on_plane():
    tri = [[-0.5, 0, 0], [0.5, 0, 0], [0.5, 1, 0]]
    kept, created = tri_plane(tri, (1, 0, 0), 0.0)
    assert len(created) == 2
    assert np.allclose(created[:, 0], 0.0)
    assert (kept[:, 0] <= 1e-12).all()
    assert len(kept) % 3 == 0


def test_split_keeps_quad_when_single_vertex_outside():
    tri = [[-0.5, 0, 0], [-0.5, 1, 0], [0.5, 0, 0]]
    kept, created = tri_plane(tri, (1, 0, 0), 0.0)
    assert len(kept) == 6
    assert (kept[:, 0] <= 1e-12).all()


def test_points_within_epsilon_count_as_on_plane():
    tri = [[1e-9, 0, 0], [-1, 0, 0], [-1, 1, 0]]
    kept, created = tri_plane(tri, (1, 0, 0), 0.0)
    assert len(created) == 0
    assert len(kept) == 3


def test_offset_plane_respected():
    tri = [[0.0, 0, 0], [1.0, 0, 0], [0.0, 1, 0]]
    kept, _ = tri_plane(tri, (1, 0, 0), -0.5)
    assert (kept[:, 0] <= 0.5 + 1e-12).all()


def test_mesh_plane_halves_cube_and_caps():
    result = mesh_plane(unit_cube(), (1, 0, 0), 0.0)
    assert (result[:, 0] <= 1e-12).all()
    assert len(result) % 3 == 0
    assert total_area(result) == pytest.approx(4.0)


def test_mesh_plane_cap_lies_on_plane():
    clipped, _ = tri_plane(unit_cube(), (0, 1, 0), 0.0)
    capped = mesh_plane(unit_cube(), (0, 1, 0), 0.0)
    cap = capped[len(clipped):]
    assert len(cap) > 0
    assert np.allclose(cap[:, 1], 0.0)
    assert total_area(cap) == pytest.approx(1.0)


def test_mesh_plane_without_cut_adds_nothing():
    cube = unit_cube()
    result = mesh_plane(cube, (1, 0, 0), -2.0)
    assert np.array_equal(result, cube)


def test_mesh_plane_flat_matches_vector_form():
    cube = unit_cube()
    flat = mesh_plane_flat(cube.ravel().tolist(), (0, 0, 1), 0.1)
    assert np.allclose(flat, mesh_plane(cube, (0, 0, 1), 0.1).ravel())


def test_mesh_plane_flat_ignores_trailing_values():
    cube = unit_cube().ravel()
    with_extra = np.concatenate([cube, [7.0]])
    assert np.allclose(
        mesh_plane_flat(with_extra, (1, 0, 0), 0.0),
        mesh_plane_flat(cube, (1, 0, 0), 0.0),
    )


def test_bad_normal_rejected():
    with pytest.raises(ValueError):
        tri_plane(unit_cube(), (1, 0), 0.0)