# tests/test_series.py

import math

import pytest

from elp82b.core.errors import TheoryDataError
from elp82b.engines.astro import series as s
from elp82b.reference import astro_args as aa

NO_PLA_1 = (0,) * 8
NO_PLA_2 = (0,) * 7

@pytest.fixture
def args():
    return aa.fundamental_args(0.5)

@pytest.mark.parametrize(
    "number, coord, category, t_power",
    [
        (1, "longitude", "main_problem", 0),
        (3, "distance", "main_problem", 0),
        (5, "latitude", "earth_figure", 0),
        (7, "longitude", "earth_figure", 1),
        (12, "distance", "planetary_1", 0),
        (13, "longitude", "planetary_1", 1),
        (17, "latitude", "planetary_2", 0),
        (20, "latitude", "planetary_2", 1),
        (24, "distance", "tides", 0),
        (26, "latitude", "tides", 1),
        (29, "latitude", "moon_figure", 0),
        (33, "distance", "relativity", 0),
        (35, "latitude", "solar_eccentricity", 2),
    ],
)
def test_series_layout(number, coord, category, t_power):
    lay = s.series_layout(number)
    assert (lay.coord, lay.category, lay.t_power) == (coord, category, t_power)

@pytest.mark.parametrize("number", [0, 37, -3])
def test_series_layout_out_of_range(number):
    with pytest.raises(TheoryDataError):
        s.series_layout(number)

def test_table_rejects_wrong_term_type():
    with pytest.raises(TheoryDataError):
        s.SeriesTable(1, (s.FigureTerm(0, (0, 0, 1, 0), 0.0, 1.0),))
    with pytest.raises(TheoryDataError):
        s.SeriesTable(4, (s.MainProblemTerm((0, 0, 1, 0), 1.0),))

def test_table_rejects_wrong_multiplier_count():
    # table 2 layout in a table 1 file
    with pytest.raises(TheoryDataError):
        s.SeriesTable(10, (s.PlanetaryTerm(NO_PLA_2, (0, 0, 1, 0), 0.0, 1.0),))
    with pytest.raises(TheoryDataError):
        s.SeriesTable(16, (s.PlanetaryTerm(NO_PLA_1, (0, 1, 0), 0.0, 1.0),))

def test_empty_table_sums_to_zero(args):
    for n in range(1, s.N_SERIES + 1):
        assert s.sum_series(s.SeriesTable(n), args) == 0.0

def test_main_problem_sine_series(args):
    tab = s.SeriesTable(1, (s.MainProblemTerm((0, 0, 1, 0), 10.0),))
    assert s.sum_series(tab, args) == pytest.approx(10.0 * math.sin(args.delaunay[2]), abs=1e-12)

def test_main_problem_distance_is_cosine(args):
    scale = 1.0 - 2.0 * aa.DELNU / 3.0
    const = s.SeriesTable(3, (s.MainProblemTerm((0, 0, 0, 0), 385000.0),))
    assert s.sum_series(const, args) == pytest.approx(385000.0 * scale, abs=1e-6)

    tab = s.SeriesTable(3, (s.MainProblemTerm((0, 0, 1, 0), 5.0),))
    assert s.sum_series(tab, args) == pytest.approx(5.0 * scale * math.cos(args.delaunay[2]), abs=1e-12)

def test_main_amplitude_corrections():
    term = s.MainProblemTerm((0, 0, 1, 0), 100.0, (1.0, 2.0, 3.0, 4.0, 5.0))
    expected = (
        100.0
        + (1.0 + aa.DTASM * 5.0) * (aa.DELNP - aa.AM * aa.DELNU)
        + 2.0 * aa.DELG
        + 3.0 * aa.DELE
        + 4.0 * aa.DELEP
    )
    assert s.main_amplitude(term, "longitude") == pytest.approx(expected, rel=1e-15)
    # no derivatives: longitude amplitude unchanged
    assert s.main_amplitude(s.MainProblemTerm((0, 0, 1, 0), 7.0), "latitude") == 7.0

def test_figure_phase_uses_zeta_and_phase(args):
    tab = s.SeriesTable(4, (s.FigureTerm(1, (0, 0, 0, 0), 0.0, 3.0),))
    assert s.sum_series(tab, args) == pytest.approx(3.0 * math.sin(args.zeta), abs=1e-12)

    tab = s.SeriesTable(5, (s.FigureTerm(0, (0, 0, 0, 1), 90.0, 2.0),))
    assert s.sum_series(tab, args) == pytest.approx(2.0 * math.cos(args.delaunay_lin[3]), abs=1e-12)

def test_planetary_tables_select_their_delaunay_arguments(args):
    # table 1 multipliers are (D, l, F)
    t1 = s.SeriesTable(10, (s.PlanetaryTerm(NO_PLA_1, (0, 0, 1), 0.0, 1.0),))
    assert s.sum_series(t1, args) == pytest.approx(math.sin(args.delaunay_lin[3]), abs=1e-12)
    # table 2 multipliers are (D, l', l, F)
    t2 = s.SeriesTable(16, (s.PlanetaryTerm(NO_PLA_2, (0, 1, 0, 0), 0.0, 1.0),))
    assert s.sum_series(t2, args) == pytest.approx(math.sin(args.delaunay_lin[1]), abs=1e-12)

def test_planetary_phase_uses_planet_longitudes(args):
    term = s.PlanetaryTerm((0, 18, -16, 0, 0, 0, 0, 0), (0, -1, 0), 26.54, 1.0)
    y = math.radians(26.54) + 18 * args.planets[1] - 16 * args.planets[2] - args.delaunay_lin[2]
    assert math.sin(s.planetary_phase(term, args)) == pytest.approx(math.sin(y), abs=1e-12)

@pytest.mark.parametrize("number, power", [(7, 1), (13, 1), (19, 1), (25, 1), (34, 2)])
def test_secular_series_scale_with_t(number, power):
    kind = s.series_layout(number).kind
    if kind == "figure":
        term = s.FigureTerm(0, (0, 0, 0, 0), 90.0, 2.0)
    elif kind == "planetary_1":
        term = s.PlanetaryTerm(NO_PLA_1, (0, 0, 0), 90.0, 2.0)
    else:
        term = s.PlanetaryTerm(NO_PLA_2, (0, 0, 0, 0), 90.0, 2.0)
    tab = s.SeriesTable(number, (term,))
    for t in (-2.0, 0.0, 0.5):
        assert s.sum_series(tab, aa.fundamental_args(t)) == pytest.approx(2.0 * t ** power, abs=1e-12)

def test_phases_are_reduced_to_one_turn():
    fa = aa.fundamental_args(30.0)
    term = s.MainProblemTerm((4, 3, -4, 2), 1.0)
    for coord in ("longitude", "distance"):
        assert abs(s.main_phase(term, fa, coord)) < aa.TAU
    assert abs(s.planetary_phase(s.PlanetaryTerm((5, 18, -16, 3, 2, 1, 1, 1), (4, -3, 2), 359.0, 1.0), fa)) < aa.TAU
