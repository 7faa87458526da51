# ephemeris/elp_files.py
"""
Reader for the published ELP2000-82B data files ELP1 ... ELP36
(CDS catalogue VI/79).

Each file starts with one header line, followed by fixed-width records:

  ELP1-3    (main problem)       4i3, 2x, f13.5, 6f12.2
                                 D l' l F, amplitude, B1..B6
  ELP4-9, ELP22-36 (figures,     5i3, 1x, f9.5, 1x, f9.5
  tides, relativity, solar ecc.) zeta D l' l F, phase (deg), amplitude
  ELP10-21  (planetary)          11i3, 1x, f9.5, 1x, f9.5
                                 11 multipliers, phase (deg), amplitude

Anything after the amplitude (the period column) is ignored.
"""
from __future__ import annotations

import logging
import pathlib
from typing import List, Optional, Sequence, Tuple, Union

from ..core.errors import TableFormatError, TheoryDataError
from ..engines.astro.series import (
    N_SERIES,
    FigureTerm,
    MainProblemTerm,
    PeriodicTerm,
    PlanetaryTerm,
    SeriesTable,
    series_layout,
)
from ..engines.theory import ElpTheory

logger = logging.getLogger(__name__)

PathLike = Union[str, pathlib.Path]


def _ints(line: str, n: int) -> Tuple[int, ...]:
    return tuple(int(line[3 * i:3 * i + 3]) for i in range(n))


def _float(field: str, default: Optional[float] = None) -> float:
    field = field.strip()
    if not field:
        if default is None:
            raise ValueError("missing numeric field")
        return default
    return float(field.replace("D", "E").replace("d", "e"))


def parse_main_line(line: str) -> MainProblemTerm:
    ilu = _ints(line, 4)
    amp = _float(line[14:27])
    b = tuple(_float(line[27 + 12 * k:39 + 12 * k], 0.0) for k in range(5))
    return MainProblemTerm(ilu, amp, b)


def parse_figure_line(line: str) -> FigureTerm:
    iz, *ilu = _ints(line, 5)
    return FigureTerm(iz, tuple(ilu), _float(line[16:25]), _float(line[26:35]))


def parse_planetary_line(line: str, number: int) -> PlanetaryTerm:
    ipla = _ints(line, 11)
    n_pla = 8 if number <= 15 else 7
    return PlanetaryTerm(ipla[:n_pla], ipla[n_pla:], _float(line[34:43]), _float(line[44:53]))


def parse_lines(lines: Sequence[str], number: int, *, name: str = "<lines>") -> Tuple[PeriodicTerm, ...]:
    """Parse the records of ELP file `number` (header line already removed)."""
    kind = series_layout(number).kind
    terms: List[PeriodicTerm] = []
    for i, raw in enumerate(lines, start=2):
        line = raw.rstrip("\r\n")
        if not line.strip():
            logger.debug("%s:%d: blank line skipped", name, i)
            continue
        try:
            if kind == "main":
                terms.append(parse_main_line(line))
            elif kind == "figure":
                terms.append(parse_figure_line(line))
            else:
                terms.append(parse_planetary_line(line, number))
        except ValueError as e:
            raise TableFormatError(name, i, f"cannot parse ELP{number} record: {e}") from e
    return tuple(terms)


def load_elp_file(path: PathLike, number: int, *, sort: bool = False) -> SeriesTable:
    """
    Read one published ELP file into a SeriesTable.

    sort=True reorders the terms by decreasing |amplitude| (stable); by default
    the published order is kept.
    """
    p = pathlib.Path(path)
    try:
        text = p.read_text(encoding="ascii", errors="replace")
    except OSError as e:
        raise TheoryDataError(f"cannot read {p}: {e}") from e

    lines = text.splitlines()
    if not lines:
        raise TableFormatError(str(p), 1, "empty file, expected a header line")
    terms = parse_lines(lines[1:], number, name=str(p))
    if sort:
        terms = tuple(sorted(terms, key=lambda term: -abs(term.amp)))
    logger.debug("ELP%d: %d terms from %s", number, len(terms), p)
    return SeriesTable(number, terms)


def find_elp_file(directory: PathLike, number: int) -> pathlib.Path:
    d = pathlib.Path(directory)
    for name in (f"ELP{number}", f"elp{number}", f"ELP{number}.txt", f"elp{number}.txt", f"ELP{number}.dat"):
        p = d / name
        if p.is_file():
            return p
    raise TheoryDataError(f"ELP{number} not found in {d}")


def load_theory(directory: PathLike, *, sort: bool = False) -> ElpTheory:
    """Read ELP1 ... ELP36 from a directory into an ElpTheory."""
    tables = tuple(
        load_elp_file(find_elp_file(directory, n), n, sort=sort) for n in range(1, N_SERIES + 1)
    )
    theory = ElpTheory(tables, source=f"ELP2000-82B files ({pathlib.Path(directory)})")
    logger.info("Loaded %d ELP2000-82B terms from %s", theory.n_terms, directory)
    return theory
