import pytest

from latticefields import smear

SIGMA = 0.1
XC = 0.2
XMIN = 0.0
XMAX = 10.0


def test_heaviside():
    assert smear.heaviside(0.0) == 0
    assert smear.heaviside(-3.0) == 0
    assert smear.heaviside(1e-9) == 1.0


def test_indus_k_positive():
    assert smear.indus_k(SIGMA, XC) > 0.0


def test_indus_k2_is_inverse_k_at_zero_cutoff():
    k = smear.indus_k(SIGMA, XC)
    assert smear.indus_k2(k, SIGMA, 0.0) == pytest.approx(1.0 / k)


def test_phi_x_is_symmetric():
    assert smear.phi_x(0.07, SIGMA, XC) == pytest.approx(smear.phi_x(-0.07, SIGMA, XC))


@pytest.mark.parametrize("x", [XC, -XC, 0.5, -3.0])
def test_phi_x_vanishes_outside_cutoff(x):
    assert smear.phi_x(x, SIGMA, XC) == 0.0


def test_h_x_inside_and_outside():
    assert smear.h_x(5.0, XMIN, XMAX, SIGMA, XC) == 1.0
    assert smear.h_x(20.0, XMIN, XMAX, SIGMA, XC) == 0.0
    assert smear.h_x(-5.0, XMIN, XMAX, SIGMA, XC) == 0.0


def test_h_x_is_half_at_edges():
    assert smear.h_x(XMIN, XMIN, XMAX, SIGMA, XC) == pytest.approx(0.5)
    assert smear.h_x(XMAX, XMIN, XMAX, SIGMA, XC) == pytest.approx(0.5)


@pytest.mark.parametrize("d", [-0.15, -0.05, 0.03, 0.12])
def test_h_x_symmetric_about_centre(d):
    left = smear.h_x(XMIN + d, XMIN, XMAX, SIGMA, XC)
    right = smear.h_x(XMAX - d, XMIN, XMAX, SIGMA, XC)
    assert left == pytest.approx(right)


def test_dh_x_zero_deep_inside():
    assert smear.dh_x(5.0, XMIN, XMAX, SIGMA, XC) == 0.0


def test_dh_x_antisymmetric_near_edges():
    left = smear.dh_x(XMIN + 0.05, XMIN, XMAX, SIGMA, XC)
    right = smear.dh_x(XMAX - 0.05, XMIN, XMAX, SIGMA, XC)
    assert left == pytest.approx(-right)


def test_h_r_values():
    assert smear.h_r(XMAX, XMAX, SIGMA, XC) == pytest.approx(0.5)
    assert smear.h_r(1.0, XMAX, SIGMA, XC) == 1.0
    assert smear.h_r(XMAX + 1.0, XMAX, SIGMA, XC) == 0.0


def test_dh_r_relates_to_phi():
    x = XMAX - 0.05
    assert smear.dh_r(x, XMIN, XMAX, SIGMA, XC) == -smear.phi_x(XMAX - x, SIGMA, XC)