from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Tuple, Union

import math

from ...core.errors import TheoryDataError
from ...core.types import COORDINATES, Coordinate
from ...reference import astro_args as aa

Category = Literal[
    "main_problem",
    "earth_figure",
    "planetary_1",
    "planetary_2",
    "tides",
    "moon_figure",
    "relativity",
    "solar_eccentricity",
]
TermKind = Literal["main", "figure", "planetary_1", "planetary_2"]

HALF_PI = 0.5 * math.pi
N_SERIES = 36


@dataclass(frozen=True)
class MainProblemTerm:
    """
    amp * sin(D*d + l'*lp + l*l + F*f)  (cos for distance).

    derivs = (B1..B5): partial derivatives of amp with respect to the fitted
    constants, zero when the source table does not publish them.
    """
    mult: Tuple[int, int, int, int]
    amp: float
    derivs: Tuple[float, float, float, float, float] = (0.0, 0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class FigureTerm:
    """amp * sin(phase + zeta*ζ + D*d + l'*lp + l*l + F*f)  (degree 1 arguments)."""
    zeta: int
    mult: Tuple[int, int, int, int]
    phase_deg: float
    amp: float


@dataclass(frozen=True)
class PlanetaryTerm:
    """
    amp * sin(phase + Σ planets_i * λ_i + Σ mult_j * delaunay_j).

    Table 1: 8 planets (Me..N) and (D, l, F).
    Table 2: 7 planets (Me..U) and (D, l', l, F).
    """
    planets: Tuple[int, ...]
    mult: Tuple[int, ...]
    phase_deg: float
    amp: float


PeriodicTerm = Union[MainProblemTerm, FigureTerm, PlanetaryTerm]


@dataclass(frozen=True)
class SeriesLayout:
    number: int
    coord: Coordinate
    category: Category
    kind: TermKind
    t_power: int


def series_layout(number: int) -> SeriesLayout:
    """Coordinate, category, term format and power of t of the ELP file `number` (1..36)."""
    if not 1 <= number <= N_SERIES:
        raise TheoryDataError(f"ELP series number must be in 1..{N_SERIES}, got {number}")

    coord = COORDINATES[(number - 1) % 3]
    if number <= 3:
        return SeriesLayout(number, coord, "main_problem", "main", 0)
    if number <= 9:
        return SeriesLayout(number, coord, "earth_figure", "figure", 0 if number <= 6 else 1)
    if number <= 15:
        return SeriesLayout(number, coord, "planetary_1", "planetary_1", 0 if number <= 12 else 1)
    if number <= 21:
        return SeriesLayout(number, coord, "planetary_2", "planetary_2", 0 if number <= 18 else 1)
    if number <= 27:
        return SeriesLayout(number, coord, "tides", "figure", 0 if number <= 24 else 1)
    if number <= 30:
        return SeriesLayout(number, coord, "moon_figure", "figure", 0)
    if number <= 33:
        return SeriesLayout(number, coord, "relativity", "figure", 0)
    return SeriesLayout(number, coord, "solar_eccentricity", "figure", 2)


_TERM_TYPES = {
    "main": MainProblemTerm,
    "figure": FigureTerm,
    "planetary_1": PlanetaryTerm,
    "planetary_2": PlanetaryTerm,
}
_PLANET_COUNT = {"planetary_1": 8, "planetary_2": 7}


@dataclass(frozen=True)
class SeriesTable:
    """One ELP file: ordered periodic terms of a single coordinate and category."""
    number: int
    terms: Tuple[PeriodicTerm, ...] = ()

    def __post_init__(self) -> None:
        layout = series_layout(self.number)
        cls = _TERM_TYPES[layout.kind]
        for term in self.terms:
            if not isinstance(term, cls):
                raise TheoryDataError(
                    f"ELP{self.number} ({layout.category}) expects {cls.__name__}, got {type(term).__name__}"
                )
            if layout.kind in _PLANET_COUNT:
                n_pla = _PLANET_COUNT[layout.kind]
                n_del = 11 - n_pla
                if len(term.planets) != n_pla or len(term.mult) != n_del:
                    raise TheoryDataError(
                        f"ELP{self.number} terms need {n_pla} planet and {n_del} Delaunay multipliers"
                    )

    @property
    def layout(self) -> SeriesLayout:
        return series_layout(self.number)

    def __len__(self) -> int:
        return len(self.terms)


# ------------------------------------------------------------
# Phases and amplitudes
# ------------------------------------------------------------

def main_amplitude(term: MainProblemTerm, coord: Coordinate) -> float:
    """Amplitude corrected for the fitted constants (Δν, Δγ, ΔE, Δn', Δe')."""
    b1, b2, b3, b4, b5 = term.derivs
    a = term.amp
    if coord == "distance":
        a = a - 2.0 * a * aa.DELNU / 3.0
    tgv = b1 + aa.DTASM * b5
    return a + tgv * (aa.DELNP - aa.AM * aa.DELNU) + b2 * aa.DELG + b3 * aa.DELE + b4 * aa.DELEP


def main_phase(term: MainProblemTerm, args: aa.FundamentalArgs, coord: Coordinate) -> float:
    y = 0.0
    for k, v in zip(term.mult, args.delaunay):
        if k:
            y += k * v
    if coord == "distance":
        y += HALF_PI
    return aa.wrap_rad(y)


def figure_phase(term: FigureTerm, args: aa.FundamentalArgs) -> float:
    y = math.radians(term.phase_deg) + term.zeta * args.zeta
    for k, v in zip(term.mult, args.delaunay_lin):
        if k:
            y += k * v
    return aa.wrap_rad(y)


def planetary_phase(term: PlanetaryTerm, args: aa.FundamentalArgs) -> float:
    y = math.radians(term.phase_deg)
    for k, v in zip(term.planets, args.planets):
        if k:
            y += k * v
    if len(term.mult) == 3:
        # table 1: D, l, F
        d, l, _, f = args.delaunay_lin
        lin = (d, l, f)
    else:
        lin = args.delaunay_lin
    for k, v in zip(term.mult, lin):
        if k:
            y += k * v
    return aa.wrap_rad(y)


# ------------------------------------------------------------
# Summation
# ------------------------------------------------------------

def sum_series(table: SeriesTable, args: aa.FundamentalArgs) -> float:
    """
    Σ amp_i * sin(phase_i) over the table in stored order, times t^k for the
    secular series (k from the file number).

    Units: arcsec for longitude/latitude, km for distance.
    """
    layout = table.layout
    total = 0.0
    if layout.kind == "main":
        for term in table.terms:
            total += main_amplitude(term, layout.coord) * math.sin(main_phase(term, args, layout.coord))
        return total

    if layout.kind == "figure":
        for term in table.terms:
            total += term.amp * math.sin(figure_phase(term, args))
    else:
        for term in table.terms:
            total += term.amp * math.sin(planetary_phase(term, args))

    # repeated product: overflows to inf where float ** raises
    for _ in range(layout.t_power):
        total *= args.t
    return total
