# design/compile_tables.py

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

from elp82b.core.errors import Elp82bError
from elp82b.engines.astro.series import FigureTerm, MainProblemTerm, PeriodicTerm, SeriesTable
from elp82b.engines.theory import ElpTheory, default_theory
from elp82b.ephemeris.elp_files import load_theory

logger = logging.getLogger(__name__)

# Importable as elp82b.engines.theory.FULL_TABLES_MODULE; default_theory() picks it up.
INSTALL_PATH = Path(__file__).resolve().parents[1] / "reference" / "elp82b_tables.py"


def truncate(theory: ElpTheory, min_arcsec: float, min_km: Optional[float] = None) -> ElpTheory:
    """
    Drop terms with |amplitude| below the threshold (arcsec for longitude and
    latitude, km for distance; min_km defaults to min_arcsec * 1.86, i.e. the
    same angle at the mean lunar distance). Order is preserved.
    """
    if min_km is None:
        min_km = min_arcsec * 1.86
    tables = []
    for tab in theory.tables:
        limit = min_km if tab.layout.coord == "distance" else min_arcsec
        kept = tuple(term for term in tab.terms if abs(term.amp) >= limit)
        tables.append(SeriesTable(tab.number, kept))
    out = ElpTheory(tuple(tables), source=f"{theory.source}, |amp| >= {min_arcsec:g}\"")
    logger.info("Truncation kept %d of %d terms", out.n_terms, theory.n_terms)
    return out


def _render_term(term: PeriodicTerm) -> str:
    if isinstance(term, MainProblemTerm):
        return f"MainProblemTerm({term.mult!r}, {term.amp!r}, {term.derivs!r})"
    if isinstance(term, FigureTerm):
        return f"FigureTerm({term.zeta}, {term.mult!r}, {term.phase_deg!r}, {term.amp!r})"
    return f"PlanetaryTerm({term.planets!r}, {term.mult!r}, {term.phase_deg!r}, {term.amp!r})"


def render_module(theory: ElpTheory) -> str:
    """Python source defining SOURCE and TABLES as literal constants."""
    out = [
        '"""ELP2000-82B series compiled by elp82b.design.compile_tables. Do not edit."""',
        "",
        "from elp82b.engines.astro.series import FigureTerm, MainProblemTerm, PlanetaryTerm, SeriesTable",
        "",
        f"SOURCE = {theory.source!r}",
        "",
        "TABLES = (",
    ]
    for tab in theory.tables:
        layout = tab.layout
        out.append(f"    # ELP{tab.number}: {layout.category} {layout.coord}, t^{layout.t_power}, {len(tab)} terms")
        if not tab.terms:
            out.append(f"    SeriesTable({tab.number}),")
            continue
        out.append(f"    SeriesTable({tab.number}, (")
        for term in tab.terms:
            out.append(f"        {_render_term(term)},")
        out.append("    )),")
    out.append(")")
    return "\n".join(out) + "\n"


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Compile the published ELP1..ELP36 files into a Python table module.")
    p.add_argument("data_dir", help="Directory containing ELP1 ... ELP36")
    dest = p.add_mutually_exclusive_group()
    dest.add_argument("--out", type=str, default="", help="Output .py file (default: stdout)")
    dest.add_argument("--install", action="store_true",
                      help=f"Write {INSTALL_PATH.name} into the package; it then becomes the default theory")
    p.add_argument("--min-amplitude", type=float, default=0.0,
                   help="Drop terms below this amplitude (arcsec; km for distance scaled by 1.86)")
    p.add_argument("--sort", action="store_true", help="Order terms by decreasing |amplitude|")
    args = p.parse_args(argv)

    try:
        theory = load_theory(args.data_dir, sort=args.sort)
    except Elp82bError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.min_amplitude > 0.0:
        theory = truncate(theory, args.min_amplitude)

    src = render_module(theory)
    out = str(INSTALL_PATH) if args.install else args.out
    if out:
        with open(out, "w", encoding="utf-8") as f:
            f.write(src)
        print(f"Wrote {theory.n_terms} terms to {out}")
        if args.install:
            importlib.invalidate_caches()
            default_theory.cache_clear()
    else:
        sys.stdout.write(src)
    return 0

if __name__ == "__main__":
    sys.exit(main())
