# reference/elp_series.py
"""
Bundled abridged ELP2000-82B term set.

The main problem keeps the leading terms of ELP1-ELP3 in the units of the
published abridgement (Meeus 1998, tables 47.A/47.B): 10^-6 degree for
longitude and latitude, metres for distance. They are converted once, at
import, to the arcseconds and kilometres of the ELP files.

The perturbation series keep their leading terms:
  - Earth figure: the ζ-terms of longitude and latitude;
  - planetary table 1: the Venus term 18V - 16T - l and the D + T latitude term;
  - planetary table 2 x t and solar eccentricity x t^2: the secular decrease
    of the solar eccentricity, E = 1 - 0.002516 t - 0.0000074 t^2, applied to
    the largest l'-terms of the main problem.
Tides, Moon figure and relativity fall below the abridgement threshold.

The complete tables are read from the published files by
elp82b.ephemeris.elp_files.
"""

from __future__ import annotations

from typing import Dict, Tuple

from ..engines.astro.series import (
    N_SERIES,
    FigureTerm,
    MainProblemTerm,
    PlanetaryTerm,
    SeriesTable,
)

SOURCE = "ELP2000-82B abridged (bundled)"

MICRODEG_TO_ARCSEC = 0.0036
METRE_TO_KM = 0.001

# (D, l', l, F, coefficient in microdegrees), sine series.
MAIN_LONGITUDE = (
    (0, 0, 1, 0, 6288774),
    (2, 0, -1, 0, 1274027),
    (2, 0, 0, 0, 658314),
    (0, 0, 2, 0, 213618),
    (0, 1, 0, 0, -185116),
    (0, 0, 0, 2, -114332),
    (2, 0, -2, 0, 58793),
    (2, -1, -1, 0, 57066),
    (2, 0, 1, 0, 53322),
    (2, -1, 0, 0, 45758),
    (0, 1, -1, 0, -40923),
    (1, 0, 0, 0, -34720),
    (0, 1, 1, 0, -30383),
    (2, 0, 0, -2, 15327),
    (0, 0, 1, 2, -12528),
    (0, 0, 1, -2, 10980),
    (4, 0, -1, 0, 10675),
    (0, 0, 3, 0, 10034),
    (4, 0, -2, 0, 8548),
    (2, 1, -1, 0, -7888),
    (2, 1, 0, 0, -6766),
    (1, 0, -1, 0, -5163),
    (1, 1, 0, 0, 4987),
    (2, -1, 1, 0, 4036),
    (2, 0, 2, 0, 3994),
    (4, 0, 0, 0, 3861),
    (2, 0, -3, 0, 3665),
    (0, 1, -2, 0, -2689),
    (2, 0, -1, 2, -2602),
    (2, -1, -2, 0, 2390),
    (1, 0, 1, 0, -2348),
    (2, -2, 0, 0, 2236),
    (0, 1, 2, 0, -2120),
    (0, 2, 0, 0, -2069),
    (2, -2, -1, 0, 2048),
    (2, 0, 1, -2, -1773),
    (2, 0, 0, 2, -1595),
    (4, -1, -1, 0, 1215),
    (0, 0, 2, 2, -1110),
    (3, 0, -1, 0, -892),
    (2, 1, 1, 0, -810),
    (4, -1, -2, 0, 759),
    (0, 2, -1, 0, -713),
    (2, 2, -1, 0, -700),
    (2, 1, -2, 0, 691),
    (2, -1, 0, -2, 596),
    (4, 0, 1, 0, 549),
    (0, 0, 4, 0, 537),
    (4, -1, 0, 0, 520),
    (1, 0, -2, 0, -487),
    (2, 1, 0, -2, -399),
    (0, 0, 2, -2, -381),
    (1, 1, 1, 0, 351),
    (3, 0, -2, 0, -340),
    (4, 0, -3, 0, 330),
    (2, -1, 2, 0, 327),
    (0, 2, 1, 0, -323),
    (1, 1, -1, 0, 299),
    (2, 0, 3, 0, 294),
)

# (D, l', l, F, coefficient in microdegrees), sine series.
MAIN_LATITUDE = (
    (0, 0, 0, 1, 5128122),
    (0, 0, 1, 1, 280602),
    (0, 0, 1, -1, 277693),
    (2, 0, 0, -1, 173237),
    (2, 0, -1, 1, 55413),
    (2, 0, -1, -1, 46271),
    (2, 0, 0, 1, 32573),
    (0, 0, 2, 1, 17198),
    (2, 0, 1, -1, 9266),
    (0, 0, 2, -1, 8822),
    (2, -1, 0, -1, 8216),
    (2, 0, -2, -1, 4324),
    (2, 0, 1, 1, 4200),
    (2, 1, 0, -1, -3359),
    (2, -1, -1, 1, 2463),
    (2, -1, 0, 1, 2211),
    (2, -1, -1, -1, 2065),
    (0, 1, -1, -1, -1870),
    (4, 0, -1, -1, 1828),
    (0, 1, 0, 1, -1794),
    (0, 0, 0, 3, -1749),
    (0, 1, -1, 1, -1565),
    (1, 0, 0, 1, -1491),
    (0, 1, 1, 1, -1475),
    (0, 1, 1, -1, -1410),
    (0, 1, 0, -1, -1344),
    (1, 0, 0, -1, -1335),
    (0, 0, 3, 1, 1107),
    (4, 0, 0, -1, 1021),
    (4, 0, -1, 1, 833),
    (0, 0, 1, -3, 777),
    (4, 0, -2, 1, 671),
    (2, 0, 0, -3, 607),
    (2, 0, 2, -1, 596),
    (2, -1, 1, -1, 491),
    (2, 0, -2, 1, -451),
    (0, 0, 3, -1, 439),
    (2, 0, 2, 1, 422),
    (2, 0, -3, -1, 421),
    (2, 1, -1, 1, -366),
    (2, 1, 0, 1, -351),
    (4, 0, 0, 1, 331),
    (2, -1, 1, 1, 315),
    (2, -2, 0, -1, 302),
    (0, 0, 1, 3, -283),
    (2, 1, 1, -1, -229),
    (1, 1, 0, -1, 223),
    (1, 1, 0, 1, 223),
    (0, 1, -2, -1, -220),
    (2, 1, -1, -1, -220),
    (1, 0, 1, 1, -185),
    (2, -1, -2, -1, 181),
    (0, 1, 2, 1, -177),
    (4, 0, -2, -1, 176),
    (4, -1, -1, -1, 166),
    (1, 0, 1, -1, -164),
    (4, 0, 1, -1, 132),
    (1, 0, -1, -1, -119),
    (4, -1, 0, -1, 115),
    (2, -2, 0, 1, 107),
)

# Constant term of the distance series (km).
MEAN_DISTANCE_KM = 385000.52719

# (D, l', l, F, coefficient in metres), cosine series.
MAIN_DISTANCE = (
    (0, 0, 1, 0, -20905355),
    (2, 0, -1, 0, -3699111),
    (2, 0, 0, 0, -2955968),
    (0, 0, 2, 0, -569925),
    (2, 0, -2, 0, 246158),
    (2, -1, 0, 0, -204586),
    (2, 0, 1, 0, -170733),
    (2, -1, -1, 0, -152138),
    (0, 1, -1, 0, -129620),
    (1, 0, 0, 0, 108743),
    (0, 1, 1, 0, 104755),
    (0, 0, 1, -2, 79661),
    (0, 1, 0, 0, 48888),
    (4, 0, -1, 0, -34782),
    (2, 1, 0, 0, 30824),
    (2, 1, -1, 0, 24208),
    (0, 0, 3, 0, -23210),
    (4, 0, -2, 0, -21636),
    (1, 1, 0, 0, -16675),
    (2, 0, -3, 0, 14403),
    (2, -1, 1, 0, -12831),
    (4, 0, 0, 0, -11650),
    (2, 0, 2, 0, -10445),
    (2, 0, 0, -2, 10321),
    (2, -1, -2, 0, 10056),
    (2, -2, 0, 0, -9884),
    (2, 0, -1, -2, 8752),
    (1, 0, -1, 0, -8379),
    (0, 1, -2, 0, -7003),
    (1, 0, 1, 0, 6322),
    (0, 1, 2, 0, 5751),
    (2, -2, -1, 0, -4950),
    (0, 0, 2, -2, -4421),
    (2, 0, 1, -2, 4130),
    (4, -1, -1, 0, -3958),
    (3, 0, -1, 0, 3258),
    (0, 0, 0, 2, -3149),
    (2, 1, 1, 0, 2616),
    (2, 2, -1, 0, 2354),
    (0, 2, -1, 0, -2117),
    (4, -1, -2, 0, -1897),
    (1, 0, -2, 0, -1739),
    (4, -1, 0, 0, -1571),
    (4, 0, 1, 0, -1423),
    (0, 2, 1, 0, 1165),
    (0, 0, 4, 0, -1117),
)


def _main(rows, scale: float) -> Tuple[MainProblemTerm, ...]:
    return tuple(MainProblemTerm((d, lp, l, f), c * scale) for d, lp, l, f, c in rows)


ELP1 = SeriesTable(1, _main(MAIN_LONGITUDE, MICRODEG_TO_ARCSEC))
ELP2 = SeriesTable(2, _main(MAIN_LATITUDE, MICRODEG_TO_ARCSEC))
ELP3 = SeriesTable(
    3,
    (MainProblemTerm((0, 0, 0, 0), MEAN_DISTANCE_KM),) + _main(MAIN_DISTANCE, METRE_TO_KM),
)

# Earth figure: (zeta, D, l', l, F, phase deg, amplitude arcsec).
ELP4 = SeriesTable(4, (
    FigureTerm(1, (0, 0, 0, -1), 0.0, 7.0632),
))
ELP5 = SeriesTable(5, (
    FigureTerm(1, (0, 0, 0, 0), 0.0, -8.046),
    FigureTerm(1, (0, 0, -1, 0), 0.0, 0.4572),
    FigureTerm(1, (0, 0, 1, 0), 0.0, -0.414),
))

# Planetary table 1: (Me, V, T, Ma, J, S, U, N), (D, l, F).
_VENUS = (0, 18, -16, 0, 0, 0, 0, 0)
ELP10 = SeriesTable(10, (
    PlanetaryTerm(_VENUS, (0, -1, 0), 26.54, 14.2488),
))
ELP11 = SeriesTable(11, (
    PlanetaryTerm((0, 0, 1, 0, 0, 0, 0, 0), (1, 0, 0), 275.13, 1.3752),
    PlanetaryTerm(_VENUS, (0, -1, -1), 26.54, 0.63),
    PlanetaryTerm(_VENUS, (0, -1, 1), 26.54, 0.63),
))

# Planetary table 2 x t: (Me, V, T, Ma, J, S, U), (D, l', l, F).
_NO_PLANETS = (0, 0, 0, 0, 0, 0, 0)
ELP19 = SeriesTable(19, (
    PlanetaryTerm(_NO_PLANETS, (0, 1, 0, 0), 0.0, 1.676707),
    PlanetaryTerm(_NO_PLANETS, (2, -1, -1, 0), 0.0, -0.516881),
    PlanetaryTerm(_NO_PLANETS, (2, -1, 0, 0), 0.0, -0.414458),
    PlanetaryTerm(_NO_PLANETS, (0, 1, -1, 0), 0.0, 0.370664),
    PlanetaryTerm(_NO_PLANETS, (0, 1, 1, 0), 0.0, 0.275197),
))
ELP20 = SeriesTable(20, (
    PlanetaryTerm(_NO_PLANETS, (2, -1, 0, -1), 0.0, -0.074417),
))
ELP21 = SeriesTable(21, (
    PlanetaryTerm(_NO_PLANETS, (2, -1, 0, 0), 90.0, 0.514738),
    PlanetaryTerm(_NO_PLANETS, (2, -1, -1, 0), 90.0, 0.382779),
    PlanetaryTerm(_NO_PLANETS, (0, 1, -1, 0), 90.0, 0.326124),
    PlanetaryTerm(_NO_PLANETS, (0, 1, 1, 0), 90.0, -0.263564),
    PlanetaryTerm(_NO_PLANETS, (0, 1, 0, 0), 90.0, -0.123002),
))

# Solar eccentricity x t^2.
ELP34 = SeriesTable(34, (
    FigureTerm(0, (0, 1, 0, 0), 0.0, 0.004931),
))
ELP36 = SeriesTable(36, (
    FigureTerm(0, (0, 1, 0, 0), 90.0, -0.000362),
))

_NON_EMPTY: Dict[int, SeriesTable] = {
    tab.number: tab
    for tab in (ELP1, ELP2, ELP3, ELP4, ELP5, ELP10, ELP11, ELP19, ELP20, ELP21, ELP34, ELP36)
}

TABLES: Tuple[SeriesTable, ...] = tuple(
    _NON_EMPTY.get(n, SeriesTable(n)) for n in range(1, N_SERIES + 1)
)
