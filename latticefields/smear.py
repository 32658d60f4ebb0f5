"""Coarse-graining (smearing) functions of the INDUS kind."""

from __future__ import annotations

import math


def heaviside(x: float) -> float:
    """Step function that is 0 for ``x <= 0`` and 1 otherwise."""
    return 0.0 if x <= 0 else 1.0


def indus_k(sigma: float, xc: float) -> float:
    """Normalisation constant of the truncated Gaussian."""
    return math.sqrt(2 * math.pi) * sigma * math.erf(xc / (math.sqrt(2) * sigma)) - 2 * xc * math.exp(
        -(xc * xc) / (2 * sigma * sigma)
    )


def indus_k1(k: float, sigma: float) -> float:
    return (1.0 / k) * math.sqrt(0.5 * math.pi * sigma * sigma)


def indus_k2(k: float, sigma: float, xc: float) -> float:
    return (1.0 / k) * math.exp(-0.5 * (xc * xc) / (sigma * sigma))


def phi_x(x: float, sigma: float, xc: float) -> float:
    """Truncated smearing kernel, zero for ``|x| >= xc``."""
    sigma2 = sigma * sigma
    invk = 1.0 / indus_k(sigma, xc)
    return (
        invk
        * math.exp(-x * x / (2 * sigma2) - math.exp(xc * xc / (2 * sigma2)))
        * heaviside(xc - abs(x))
    )


def h_x(x: float, xmin: float, xmax: float, sigma: float, xc: float) -> float:
    """Smoothed indicator of the interval ``[xmin, xmax]``."""
    k = indus_k(sigma, xc)
    k1 = indus_k1(k, sigma)
    k2 = indus_k2(k, sigma, xc)
    root2_sigma = math.sqrt(2) * sigma
    upper = (k1 * math.erf((xmax - x) / root2_sigma) - k2 * (xmax - x) - 0.5) * heaviside(
        xc - abs(xmax - x)
    )
    lower = (k1 * math.erf((x - xmin) / root2_sigma) - k2 * (x - xmin) - 0.5) * heaviside(
        xc - abs(x - xmin)
    )
    body = heaviside(xc + 0.5 * (xmax - xmin) - abs(x - 0.5 * (xmin + xmax)))
    return upper + lower + body


def dh_x(x: float, xmin: float, xmax: float, sigma: float, xc: float) -> float:
    """Derivative of :func:`h_x` with respect to ``x``."""
    return phi_x(xmin - x, sigma, xc) - phi_x(xmax - x, sigma, xc)


def h_r(x: float, xmax: float, sigma: float, xc: float) -> float:
    """Smoothed indicator of ``x <= xmax`` (radial variant)."""
    k = indus_k(sigma, xc)
    k1 = indus_k1(k, sigma)
    k2 = indus_k2(k, sigma, xc)
    edge = (
        k1 * math.erf((xmax - x) / (math.sqrt(2) * sigma)) - k2 * (xmax - x) - 0.5
    ) * heaviside(xc - abs(xmax - x))
    return edge + heaviside(xc + xmax - x)


def dh_r(x: float, xmin: float, xmax: float, sigma: float, xc: float) -> float:
    """Derivative of :func:`h_r`; ``xmin`` is accepted for symmetry with :func:`dh_x`."""
    return -phi_x(xmax - x, sigma, xc)