# tests/test_astro_args.py

import math

import pytest
from elp82b.reference import astro_args as aa

def test_meeus_example_47a_time_argument():
    """
    Jean Meeus, Astronomical Algorithms (2nd Ed), Example 47.a.
    Date: 1992 April 12, 0h TD (TT).
    """
    T = aa.t_centuries(2448724.5)
    assert T == pytest.approx(-0.077221081451, abs=1e-12)
    assert aa.t_centuries(aa.J2000_TT) == 0.0

def test_arguments_at_j2000():
    fa = aa.fundamental_args(0.0)
    deg = fa.as_degrees()

    # W1 = 218 deg 18' 59.95571"
    assert deg["W1"] == pytest.approx(218.3166543642, abs=1e-9)

    assert fa.D_deg  == pytest.approx(297.8502042, abs=1e-6)
    assert fa.lp_deg == pytest.approx(357.5291008, abs=1e-6)
    assert fa.l_deg  == pytest.approx(134.9634114, abs=1e-6)
    assert fa.F_deg  == pytest.approx(93.2720993, abs=1e-6)

    # degree-1 arguments coincide with the full ones at t = 0
    for a, b in zip(fa.delaunay, fa.delaunay_lin):
        assert a == pytest.approx(b, abs=1e-15)
    assert fa.zeta == pytest.approx(fa.W1, abs=1e-15)
    assert deg["T"] == pytest.approx(aa.arcsec_to_deg(aa.EART[0]), abs=1e-12)

@pytest.mark.parametrize("t", [-12.5, -0.3, 0.37, 4.0])
def test_delaunay_relations(t):
    fa = aa.fundamental_args(t)

    def arcsec(coeffs):
        return aa.poly_eval(coeffs, t)

    expected = (
        arcsec(aa.W1) - arcsec(aa.EART) + 648000.0,
        arcsec(aa.EART) - arcsec(aa.PERI),
        arcsec(aa.W1) - arcsec(aa.W2),
        arcsec(aa.W1) - arcsec(aa.W3),
    )
    for got, want in zip(fa.delaunay, expected):
        diff = (math.degrees(got) - aa.arcsec_to_deg(want) + 180.0) % 360.0 - 180.0
        assert diff == pytest.approx(0.0, abs=1e-8)

def test_arguments_are_wrapped():
    for t in (-50.0, -1.0, 1.0, 50.0):
        fa = aa.fundamental_args(t)
        assert 0.0 <= fa.W1_arcsec < aa.ARCSEC_PER_TURN
        for v in fa.delaunay + fa.delaunay_lin + fa.planets + (fa.zeta,):
            assert 0.0 <= v < aa.TAU

def test_zeta_includes_precession():
    t = 0.01
    fa = aa.fundamental_args(t)
    lin_w1 = aa.W1[0] + aa.W1[1] * t
    diff = aa.rad_to_arcsec(fa.zeta) - aa.wrap_arcsec(lin_w1)
    assert aa.wrap_arcsec(diff + 648000.0) - 648000.0 == pytest.approx(aa.PRECESSION * t, abs=1e-6)

def test_wrap_helpers():
    assert aa.wrap_arcsec(-1.0) == pytest.approx(1295999.0)
    assert aa.wrap_arcsec(1296000.0) == 0.0
    assert aa.wrap_arcsec(2592000.5) == pytest.approx(0.5)
    assert aa.wrap_rad(-0.1) == pytest.approx(aa.TAU - 0.1)
    assert aa.poly_eval((1.0, 2.0, 3.0), 2.0) == 17.0
    assert aa.dms_to_arcsec(1, 1, 1.5) == 3661.5

@pytest.mark.parametrize("x", [math.inf, -math.inf, math.nan])
def test_wrap_non_finite(x):
    assert math.isnan(aa.wrap_arcsec(x))
    assert math.isnan(aa.wrap_rad(x))

def test_arguments_overflow_to_nan():
    fa = aa.fundamental_args(1e80)
    assert math.isnan(fa.W1_arcsec)
    assert all(math.isnan(v) for v in fa.delaunay)
    # degree-1 polynomials stay finite at 1e80
    assert all(0.0 <= v < aa.TAU for v in fa.delaunay_lin)
