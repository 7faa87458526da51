from __future__ import annotations
import importlib
import importlib.util
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Tuple

from ..core.errors import TheoryDataError
from ..core.types import Coordinate, SphericalPoint
from ..reference import astro_args as aa
from .astro.series import N_SERIES, SeriesTable, sum_series

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ElpTheory:
    """The 36 series of ELP2000-82B, indexed by file number (tables[0] is ELP1)."""
    tables: Tuple[SeriesTable, ...]
    source: str = "custom"

    def __post_init__(self) -> None:
        if len(self.tables) != N_SERIES:
            raise TheoryDataError(f"ELP2000-82B needs {N_SERIES} series, got {len(self.tables)}")
        for i, tab in enumerate(self.tables, start=1):
            if tab.number != i:
                raise TheoryDataError(f"series at position {i} is ELP{tab.number}")

    def table(self, number: int) -> SeriesTable:
        return self.tables[number - 1]

    def for_coordinate(self, coord: Coordinate) -> Tuple[SeriesTable, ...]:
        return tuple(t for t in self.tables if t.layout.coord == coord)

    def term_counts(self) -> Dict[int, int]:
        return {t.number: len(t) for t in self.tables}

    @property
    def n_terms(self) -> int:
        return sum(len(t) for t in self.tables)


# Module written by `elp82b compile-tables --install` from the complete ELP files.
FULL_TABLES_MODULE = "elp82b.reference.elp82b_tables"


def full_tables_available() -> bool:
    return importlib.util.find_spec(FULL_TABLES_MODULE) is not None


@lru_cache(maxsize=1)
def abridged_theory() -> ElpTheory:
    """Bundled abridged tables (largest terms only), built once per process."""
    from ..reference import elp_series
    return ElpTheory(elp_series.TABLES, source=elp_series.SOURCE)


@lru_cache(maxsize=1)
def default_theory() -> ElpTheory:
    """
    The complete ELP2000-82B series when they have been compiled into
    FULL_TABLES_MODULE, otherwise the bundled abridged tables.
    """
    if full_tables_available():
        return theory_from_module(FULL_TABLES_MODULE)
    logger.info("%s not installed; using the abridged series", FULL_TABLES_MODULE)
    return abridged_theory()


def theory_from_module(name: str) -> ElpTheory:
    """Load a table module written by elp82b.design.compile_tables (importable name)."""
    try:
        mod = importlib.import_module(name)
    except ImportError as e:
        raise TheoryDataError(f"cannot import table module {name!r}: {e}") from e
    try:
        tables, source = mod.TABLES, getattr(mod, "SOURCE", name)
    except AttributeError as e:
        raise TheoryDataError(f"{name} defines no TABLES") from e
    return ElpTheory(tuple(tables), source=source)


def sum_coordinate(theory: ElpTheory, coord: Coordinate, args: aa.FundamentalArgs) -> float:
    """Σ of the twelve series of one coordinate, in file-number order."""
    total = 0.0
    for tab in theory.for_coordinate(coord):
        total += sum_series(tab, args)
    return total


def assemble_spherical(theory: ElpTheory, args: aa.FundamentalArgs) -> SphericalPoint:
    """
    longitude = W1 + Σ longitude series (arcsec, wrapped to one turn)
    latitude  = Σ latitude series (arcsec)
    distance  = Σ distance series * a0/a_th (km)
    """
    lon = aa.wrap_arcsec(args.W1_arcsec + sum_coordinate(theory, "longitude", args))
    lat = sum_coordinate(theory, "latitude", args)
    dist = sum_coordinate(theory, "distance", args) * (aa.A0 / aa.ATH)
    return SphericalPoint(lon, lat, dist)
