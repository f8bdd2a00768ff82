import numpy as np

from beam_model import CANTILEVER, BeamModel
from distributed_load import DistributedLoad
from reactions import solve_reactions
from shear_moment import extrema, shear_moment
from triangular_load import TriangularLoad


def _full_span(w=5.0, L=6.0, **kwargs):
    return BeamModel(
        length=L,
        left_support=0.0,
        right_support=L,
        triangular_loads=[TriangularLoad(start=0.0, end=L, magnitude=w)],
        **kwargs,
    )


def test_resultant_and_centroid():
    load = TriangularLoad(start=1.0, end=7.0, magnitude=4.0)
    assert np.isclose(load.resultant(), 12.0)
    assert np.isclose(load.centroid(), 5.0)


def test_partial_load_arm_is_a_third_of_loaded_length():
    load = TriangularLoad(start=0.0, end=6.0, magnitude=6.0)
    force, moment = load.left_of(np.array([3.0]))
    # k = 1; resultant d^2/2 = 4.5 acting d/3 = 1 back from the cut
    assert np.isclose(force[0], 4.5)
    assert np.isclose(moment[0], 4.5 * 1.0)


def test_past_the_end_uses_whole_resultant():
    load = TriangularLoad(start=0.0, end=6.0, magnitude=6.0)
    force, moment = load.left_of(np.array([8.0]))
    assert np.isclose(force[0], 18.0)
    assert np.isclose(moment[0], 18.0 * (8.0 - 4.0))


def test_textbook_simply_supported_triangle():
    w, L = 5.0, 6.0
    model = _full_span(w, L)
    reactions = solve_reactions(model)
    assert np.isclose(reactions.ra, w * L / 6)
    assert np.isclose(reactions.rb, w * L / 3)

    x, V, M = shear_moment(model, reactions, resolution=6000)
    np.testing.assert_allclose(M, w * L / 6 * x - w * x**3 / (6 * L), atol=1e-5)
    ext = extrema(x, V, M)
    assert np.isclose(ext.max_abs_moment, w * L**2 / (9 * np.sqrt(3)), rtol=1e-5)
    assert abs(ext.moment_position - L / np.sqrt(3)) < 2e-3
    assert np.isclose(V[-1], -w * L / 3, atol=1e-5)


def test_cantilever_triangle_peaking_at_free_end():
    model = BeamModel(
        length=6.0,
        support_kind=CANTILEVER,
        triangular_loads=[TriangularLoad(start=0.0, end=6.0, magnitude=5.0)],
    )
    reactions = solve_reactions(model)
    assert np.isclose(reactions.ra, 15.0)
    assert np.isclose(reactions.m_fix, -60.0)
    x, V, M = shear_moment(model, reactions, resolution=12)
    assert np.isclose(V[0], -15.0)
    assert np.isclose(M[0], -60.0)
    assert np.isclose(V[-1], 0.0, atol=1e-6)
    assert np.isclose(M[-1], 0.0, atol=1e-6)


def test_degenerate_triangle():
    load = TriangularLoad(start=3.0, end=3.0, magnitude=9.0)
    assert load.slope == 0.0
    assert load.resultant() == 0.0
    force, moment = load.left_of(np.array([0.0, 3.0, 5.0]))
    assert np.allclose(force, 0.0) and np.allclose(moment, 0.0)


def test_reversed_range_is_swapped():
    load = TriangularLoad(start=6.0, end=2.0, magnitude=1.0)
    assert (load.start, load.end) == (2.0, 6.0)


def test_clipped_at_end_scales_the_peak():
    part = TriangularLoad(start=0.0, end=12.0, magnitude=12.0).clipped(6.0)
    assert (part.start, part.end) == (0.0, 6.0)
    assert np.isclose(part.magnitude, 6.0)
    assert part.start_magnitude == 0.0
    assert np.isclose(part.resultant(), 18.0)
    assert np.isclose(part.centroid(), 4.0)


def test_clipped_at_start_leaves_a_trapezoid():
    part = TriangularLoad(start=-6.0, end=6.0, magnitude=12.0).clipped(6.0)
    assert (part.start, part.end) == (0.0, 6.0)
    assert np.isclose(part.start_magnitude, 6.0)
    assert np.isclose(part.magnitude, 12.0)
    assert np.isclose(part.resultant(), 54.0)
    # Rectangle 36 at 3 plus triangle 18 at 4
    assert np.isclose(part.centroid(), (36.0 * 3.0 + 18.0 * 4.0) / 54.0)


def test_clipped_off_the_beam():
    assert TriangularLoad(start=7.0, end=9.0, magnitude=3.0).clipped(6.0) is None


def test_trapezoid_matches_rectangle_plus_triangle():
    x = np.linspace(0.0, 8.0, 17)
    trapezoid = TriangularLoad(start=1.0, end=5.0, magnitude=6.0, start_magnitude=2.0)
    rectangle = DistributedLoad(start=1.0, end=5.0, magnitude=2.0)
    triangle = TriangularLoad(start=1.0, end=5.0, magnitude=4.0)
    force, moment = trapezoid.left_of(x)
    rf, rm = rectangle.left_of(x)
    tf, tm = triangle.left_of(x)
    np.testing.assert_allclose(force, rf + tf)
    np.testing.assert_allclose(moment, rm + tm)


def test_overhanging_triangle_closes_at_right_support():
    model = BeamModel(
        length=6.0,
        left_support=0.0,
        right_support=6.0,
        triangular_loads=[TriangularLoad(start=-6.0, end=6.0, magnitude=12.0)],
    )
    reactions = solve_reactions(model)
    assert np.isclose(reactions.ra + reactions.rb, 54.0)
    x, V, M = shear_moment(model, reactions, resolution=60)
    assert np.isclose(V[-1], -reactions.rb, atol=1e-5)
    assert np.isclose(M[-1], 0.0, atol=1e-5)
