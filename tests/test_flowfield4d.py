import numpy as np
import pytest

from visflowkit.flowfield import DemoType, Flowfield
from visflowkit.flowfield4d import Flowfield4D

SIZE = 6
POS = (0.3, 0.55, 0.8)


@pytest.fixture
def field():
    return Flowfield4D.gen_demo(SIZE, [DemoType.SADDLE, DemoType.DRAIN, DemoType.CRITICAL])


def test_integer_times_match_steady_fields(field):
    saddle = Flowfield.gen_demo(SIZE, DemoType.SADDLE).interpolate(POS)
    drain = Flowfield.gen_demo(SIZE, DemoType.DRAIN).interpolate(POS)
    np.testing.assert_allclose(field.interpolate(POS, 0.0), saddle)
    np.testing.assert_allclose(field.interpolate(POS, 1.0), drain)


def test_half_time_is_average(field):
    a = field.interpolate_step(POS, 0)
    b = field.interpolate_step(POS, 1)
    np.testing.assert_allclose(field.interpolate(POS, 0.5), (a + b) / 2)


def test_steps_wrap_around(field):
    np.testing.assert_allclose(field.interpolate_step(POS, 2), field.interpolate_step(POS, 0))
    np.testing.assert_allclose(field.interpolate(POS, 3.0), field.interpolate(POS, 1.0))


def test_time_between_last_and_wrapped_step(field):
    a = field.interpolate_step(POS, 1)
    b = field.interpolate_step(POS, 0)
    np.testing.assert_allclose(field.interpolate(POS, 1.25), a * 0.75 + b * 0.25)


def test_negative_time_raises(field):
    with pytest.raises(ValueError):
        field.interpolate(POS, -0.5)


def test_gen_demo_needs_two_types():
    with pytest.raises(ValueError):
        Flowfield4D.gen_demo(4, [DemoType.DRAIN])


def test_zero_timesteps_rejected():
    with pytest.raises(ValueError):
        Flowfield4D(2, 2, 2, 0)


def test_empty_field_is_zero():
    field = Flowfield4D(3, 3, 3, 3)
    assert len(field.steps) == 3
    np.testing.assert_array_equal(field.interpolate((0.5, 0.5, 0.5), 1.7), [0, 0, 0])