from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys
from typing import List, Optional

from elp82b.core.errors import Elp82bError


def _run_module_main(modpath: str, argv: List[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _add_time_args(p: argparse.ArgumentParser) -> None:
    g = p.add_mutually_exclusive_group()
    g.add_argument("--jd-tt", type=float, default=None, help="Julian Date in TT (default: J2000.0 = 2451545.0)")
    g.add_argument("--t", type=float, default=None, help="Julian centuries (TT) from J2000.0")


def _time_from_args(args: argparse.Namespace) -> tuple[float, float]:
    from elp82b.reference import astro_args as aa

    if args.t is not None:
        return aa.J2000_TT + args.t * 36525.0, float(args.t)
    jd = aa.J2000_TT if args.jd_tt is None else float(args.jd_tt)
    return jd, aa.t_centuries(jd)


def cmd_position(argv: List[str]) -> int:
    from elp82b import api
    from elp82b.engines.astro import trans
    from elp82b.engines.astro.series import sum_series
    from elp82b.engines.theory import abridged_theory, default_theory, theory_from_module
    from elp82b.ephemeris.elp_files import load_theory
    from elp82b.reference import astro_args as aa

    p = argparse.ArgumentParser(prog="elp82b position", description="Geocentric Moon position from ELP2000-82B.")
    _add_time_args(p)
    src = p.add_mutually_exclusive_group()
    src.add_argument("--data-dir", type=str, default="", help="Directory with the published ELP1 ... ELP36 files")
    src.add_argument("--tables-module", type=str, default="", help="Importable module written by compile-tables")
    src.add_argument("--abridged", action="store_true", help="Use the bundled abridged series")
    p.add_argument("--breakdown", action="store_true", help="Print the contribution of every ELP series")
    args = p.parse_args(argv)

    jd, t = _time_from_args(args)
    if args.data_dir:
        theory = load_theory(args.data_dir)
    elif args.abridged:
        theory = abridged_theory()
    elif args.tables_module:
        theory = theory_from_module(args.tables_module)
    else:
        theory = default_theory()

    sph = api.geocentric_moon_position(t, theory=theory)
    rect = api.geocentric_moon_position_rect(t, theory=theory)
    j2000 = api.geocentric_moon_position_of_J2000(t, theory=theory)
    fk5 = api.geocentric_moon_position_FK5(t, theory=theory)
    ra, dec = trans.equatorial_ra_dec(fk5)

    print("Time Input:")
    print(f"  JD_TT = {jd:.6f}")
    print(f"  t     = {t:.12f} (Julian centuries from J2000.0)")
    print(f"  Series: {theory.source} ({theory.n_terms} terms)")
    print()
    print("ELP2000 frame (mean ecliptic of date, departure point gamma'2000):")
    print(f"  Longitude = {sph.longitude:.4f} arcsec = {aa.arcsec_to_deg(sph.longitude):.8f} deg")
    print(f"  Latitude  = {sph.latitude:.4f} arcsec = {aa.arcsec_to_deg(sph.latitude):.8f} deg")
    print(f"  Distance  = {sph.distance:.5f} km")
    print()
    print("Rectangular (km):")
    print(f"  ELP2000      = ({rect.x:.5f}, {rect.y:.5f}, {rect.z:.5f})")
    print(f"  J2000 eclip. = ({j2000.x:.5f}, {j2000.y:.5f}, {j2000.z:.5f})")
    print(f"  FK5 equat.   = ({fk5.x:.5f}, {fk5.y:.5f}, {fk5.z:.5f})")
    print()
    print(f"FK5 RA = {ra:.8f} deg, Dec = {dec:.8f} deg")

    if args.breakdown:
        fa = aa.fundamental_args(t)
        print()
        print("Series contributions (arcsec; km for distance):")
        for tab in theory.tables:
            lay = tab.layout
            print(f"  ELP{tab.number:<3d} {lay.category:<14s} {lay.coord:<10s} n={len(tab):<6d} {sum_series(tab, fa): .6f}")

    return 0


def cmd_astro_args(argv: List[str]) -> int:
    from elp82b.reference import astro_args as aa

    p = argparse.ArgumentParser(prog="elp82b astro-args", description="Print the ELP2000-82B fundamental arguments.")
    _add_time_args(p)
    args = p.parse_args(argv)

    jd, t = _time_from_args(args)
    fa = aa.fundamental_args(t)

    print(f"JD_TT = {jd:.6f}")
    print(f"t (Julian centuries from J2000.0) = {t:.12f}")
    print()
    print("Arguments (degrees, wrapped to [0,360))")
    for name, v in fa.as_degrees().items():
        print(f"  {name:<6s} = {v:.10f}")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="elp82b", description="ELP2000-82B lunar theory CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("position", help="Geocentric Moon position in all four frames.")
    sub.add_parser("astro-args", help="Print the fundamental arguments at a given time.")
    sub.add_parser("compile-tables", help="Compile ELP1 ... ELP36 into a Python table module.")
    sub.add_parser("validate", help="Compare against a JPL DE kernel (needs the ephemeris extra).")

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.cmd == "position":
            return cmd_position(rest)

        if args.cmd == "astro-args":
            return cmd_astro_args(rest)

        if args.cmd == "compile-tables":
            return _run_module_main("elp82b.design.compile_tables", rest)

        if args.cmd == "validate":
            return _run_module_main("elp82b.diagnostics.validate_de", rest)
    except Elp82bError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
