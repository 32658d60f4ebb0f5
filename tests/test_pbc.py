import math

import pytest

from latticefields import pbc

BOX = (10.0, 8.0, 6.0)


def test_wrap_index_negative():
    assert pbc.wrap_index(-1, 5) == 4


@pytest.mark.parametrize("i", [-17, -5, 0, 3, 5, 23])
def test_wrap_index_range_and_congruence(i):
    w = pbc.wrap_index(i, 5)
    assert 0 <= w < 5
    assert (w - i) % 5 == 0


def test_wrap_number_negative():
    assert pbc.wrap_number(-1.0, 10.0) == pytest.approx(9.0)


@pytest.mark.parametrize("x", [-23.5, -0.25, 0.0, 4.0, 17.75])
def test_wrap_number_range(x):
    w = pbc.wrap_number(x, 10.0)
    assert 0.0 <= w < 10.0
    assert (x - w) / 10.0 == pytest.approx(round((x - w) / 10.0))


def test_place_inside_box_range():
    pos = pbc.place_inside_box((-3.0, 17.0, 6.5), BOX)
    assert all(0.0 <= p < b for p, b in zip(pos, BOX))


def test_place_inside_box_leaves_inside_points():
    inside = (1.0, 2.0, 3.0)
    assert pbc.place_inside_box(inside, BOX) == inside


def test_place_inside_box_rejects_triclinic():
    with pytest.raises(ValueError):
        pbc.place_inside_box((1.0, 2.0, 3.0), (1.0,) * 9)


def test_distance_across_boundary():
    assert pbc.distance((0.0, 0.0, 0.0), (9.0, 0.0, 0.0), BOX) == pytest.approx(1.0)


def test_distance_symmetric_and_bounded():
    a, b = (0.5, 7.5, 1.0), (9.0, 0.2, 5.5)
    d = pbc.distance(a, b, BOX)
    assert d == pytest.approx(pbc.distance(b, a, BOX))
    assert d <= 0.5 * math.sqrt(sum(x * x for x in BOX)) + 1e-12
    assert d <= pbc.distance_no_pbc(a, b)


def test_distance_matches_plain_distance_for_close_points():
    a, b = (2.0, 2.0, 2.0), (3.0, 3.0, 2.5)
    assert pbc.distance(a, b, BOX) == pytest.approx(pbc.distance_no_pbc(a, b))


def test_distance_invariant_under_box_shifts():
    a, b = (1.0, 2.0, 3.0), (4.0, 1.0, 5.0)
    shifted = (b[0] + 2 * BOX[0], b[1] - 3 * BOX[1], b[2] + BOX[2])
    assert pbc.distance(a, shifted, BOX) == pytest.approx(pbc.distance(a, b, BOX))


def test_distance_no_pbc_zero_for_same_point():
    assert pbc.distance_no_pbc((1.0, 2.0, 3.0), (1.0, 2.0, 3.0)) == 0.0


def test_nearest_image_1d_within_half_box():
    for x in (-25.0, -4.0, 0.0, 6.0, 31.0):
        img = pbc.nearest_image_1d(x, 2.0, 10.0)
        assert -5.0 <= img - 2.0 < 5.0
        assert (img - x) / 10.0 == pytest.approx(round((img - x) / 10.0))


def test_nearest_image_3d_agrees_with_distance():
    x, ref = (9.5, 0.5, 5.9), (0.5, 7.5, 0.1)
    img = pbc.nearest_image_3d(x, ref, BOX)
    assert pbc.distance_no_pbc(img, ref) == pytest.approx(pbc.distance(ref, x, BOX))