import pytest

from latticefields.forcefields import lj_3_9, lj_6_12


@pytest.mark.parametrize("func", [lj_6_12, lj_3_9])
def test_zero_at_sigma(func):
    assert func(1.3, 2.0, 1.3) == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("func", [lj_6_12, lj_3_9])
def test_repulsive_inside_attractive_outside(func):
    assert func(0.9, 1.0, 1.0) > 0.0
    assert func(1.5, 1.0, 1.0) < 0.0


@pytest.mark.parametrize("func", [lj_6_12, lj_3_9])
def test_linear_in_epsilon(func):
    assert func(1.2, 3.0, 1.0) == pytest.approx(3.0 * func(1.2, 1.0, 1.0))


@pytest.mark.parametrize("func", [lj_6_12, lj_3_9])
def test_depends_only_on_ratio(func):
    assert func(2.4, 1.0, 2.0) == pytest.approx(func(1.2, 1.0, 1.0))


@pytest.mark.parametrize("func", [lj_6_12, lj_3_9])
def test_vanishes_at_long_range(func):
    assert abs(func(100.0, 1.0, 1.0)) < 1e-5


def test_lj_6_12_well_depth_is_epsilon():
    epsilon = 0.7
    assert lj_6_12(2 ** (1 / 6), epsilon, 1.0) == pytest.approx(-epsilon)


def test_lj_3_9_well_depth_is_epsilon():
    epsilon = 0.7
    assert lj_3_9(3 ** (1 / 6), epsilon, 1.0) == pytest.approx(-epsilon, rel=1e-8)


@pytest.mark.parametrize("func", [lj_6_12, lj_3_9])
def test_minimum_is_lowest_point(func):
    r_min = 2 ** (1 / 6) if func is lj_6_12 else 3 ** (1 / 6)
    well = func(r_min, 1.0, 1.0)
    assert func(r_min * 0.98, 1.0, 1.0) > well
    assert func(r_min * 1.02, 1.0, 1.0) > well