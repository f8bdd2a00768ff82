"""Test distributed load functionality."""
import numpy as np

from beam_model import CANTILEVER, BeamModel
from distributed_load import DistributedLoad
from reactions import solve_reactions
from shear_moment import extrema, shear_moment


def test_distributed_load_simple():
    """Partial UDL centred on a simply supported beam."""
    model = BeamModel(
        length=2.0,
        left_support=0.0,
        right_support=2.0,
        distributed_loads=[DistributedLoad(start=0.5, end=1.5, magnitude=1000.0)],
    )
    reactions = solve_reactions(model)
    assert np.isclose(reactions.ra, 500.0)
    assert np.isclose(reactions.rb, 500.0)

    x, shear, moment = shear_moment(model, reactions, resolution=100)
    assert len(x) == 101

    # Maximum moment at midspan: RA*L/2 - w*(c/2)^2/2
    ext = extrema(x, shear, moment)
    assert np.isclose(ext.max_abs_moment, 375.0, rtol=1e-6)
    assert abs(ext.moment_position - 1.0) <= 0.02

    # Shear should change sign across the load
    assert shear.max() > 0 > shear.min()


def test_multiple_distributed_loads():
    model = BeamModel(
        length=3.0,
        left_support=0.0,
        right_support=3.0,
        distributed_loads=[
            DistributedLoad(start=0.0, end=1.0, magnitude=500.0),
            DistributedLoad(start=2.0, end=3.0, magnitude=1000.0),
        ],
    )
    reactions = solve_reactions(model)
    assert np.isclose(reactions.rb, (500.0 * 0.5 + 1000.0 * 2.5) / 3.0)
    assert np.isclose(reactions.ra + reactions.rb, 1500.0)

    x, shear, moment = shear_moment(model, reactions, resolution=150)
    assert np.isclose(shear[-1], -reactions.rb, atol=1e-5)
    assert np.isclose(moment[-1], 0.0, atol=1e-5)


def test_reversed_range_is_swapped():
    load = DistributedLoad(start=4.0, end=1.0, magnitude=2.0)
    assert (load.start, load.end) == (1.0, 4.0)
    assert load.resultant() == 6.0
    assert load.centroid() == 2.5


def test_full_resultant_acts_at_centroid_past_the_end():
    load = DistributedLoad(start=1.0, end=3.0, magnitude=2.0)
    force, moment = load.left_of(np.array([0.5, 2.0, 5.0]))
    np.testing.assert_allclose(force, [0.0, 2.0, 4.0])
    np.testing.assert_allclose(moment, [0.0, 1.0, 4.0 * (5.0 - 2.0)])


def test_zero_length_load_contributes_nothing():
    load = DistributedLoad(start=2.0, end=2.0, magnitude=10.0)
    assert load.resultant() == 0.0
    force, moment = load.left_of(np.linspace(0.0, 4.0, 9))
    assert np.allclose(force, 0.0) and np.allclose(moment, 0.0)


def test_cantilever_uniform_load():
    model = BeamModel(
        length=6.0,
        support_kind=CANTILEVER,
        distributed_loads=[DistributedLoad(start=0.0, end=6.0, magnitude=5.0)],
    )
    reactions = solve_reactions(model)
    assert np.isclose(reactions.ra, 30.0)
    assert np.isclose(reactions.m_fix, -90.0)

    x, shear, moment = shear_moment(model, reactions, resolution=12)
    np.testing.assert_allclose(shear, -5.0 * (6.0 - x), atol=1e-6)
    np.testing.assert_allclose(moment, -2.5 * (6.0 - x) ** 2, atol=1e-6)


def test_load_running_past_beam_end_is_clipped_to_overlap():
    model = BeamModel(
        length=6.0,
        left_support=0.0,
        right_support=6.0,
        distributed_loads=[DistributedLoad(start=4.0, end=8.0, magnitude=1.0)],
    )
    reactions = solve_reactions(model)
    # Only the 2 m overlap, centred at x = 5, reaches the supports
    assert np.isclose(reactions.ra + reactions.rb, 2.0)
    assert np.isclose(reactions.rb, 5.0 / 3.0)

    x, shear, moment = shear_moment(model, reactions, resolution=12)
    assert np.isclose(shear[-1], -reactions.rb, atol=1e-5)
    assert np.isclose(moment[-1], 0.0, atol=1e-5)


def test_clipped_keeps_the_overlap():
    load = DistributedLoad(start=-2.0, end=3.0, magnitude=4.0)
    part = load.clipped(6.0)
    assert (part.start, part.end, part.magnitude) == (0.0, 3.0, 4.0)
    assert DistributedLoad(start=7.0, end=9.0, magnitude=1.0).clipped(6.0) is None
    inside = DistributedLoad(start=1.0, end=2.0, magnitude=1.0)
    assert inside.clipped(6.0) is inside
