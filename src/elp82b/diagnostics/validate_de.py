#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import math
from typing import Dict, Optional, List

from elp82b.api import geocentric_moon_position_FK5
from elp82b.engines.theory import ElpTheory, default_theory
from elp82b.reference import astro_args as aa

logger = logging.getLogger(__name__)


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "elp82b[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "elp82b[diagnostics]"') from e


def compare(moon, jds, theory: Optional[ElpTheory] = None) -> Dict[str, object]:
    """
    ELP (FK5) minus reference geocentric Moon on a grid of JD(TT).

    `moon` is anything with geocentric_moon(jd_tt) -> RectangularPoint (km),
    e.g. elp82b.ephemeris.jpl.JplMoon.

    Returns numpy arrays: jd, position error (km), radial error (km) and
    angular separation (arcsec).
    """
    np = _need_numpy()
    th = theory if theory is not None else default_theory()

    jd_arr = np.asarray(jds, dtype=float)
    pos_err = np.empty_like(jd_arr)
    rad_err = np.empty_like(jd_arr)
    ang_err = np.empty_like(jd_arr)

    for i, jd in enumerate(jd_arr):
        e = np.array(geocentric_moon_position_FK5(aa.t_centuries(float(jd)), theory=th).as_tuple())
        r = np.array(moon.geocentric_moon(float(jd)).as_tuple())
        ne = float(np.linalg.norm(e))
        nr = float(np.linalg.norm(r))
        pos_err[i] = np.linalg.norm(e - r)
        rad_err[i] = ne - nr
        # atan2 form stays accurate for tiny separations
        ang = math.atan2(float(np.linalg.norm(np.cross(e, r))), float(np.dot(e, r)))
        ang_err[i] = aa.rad_to_arcsec(ang)

    return {"jd": jd_arr, "pos_km": pos_err, "radial_km": rad_err, "angle_arcsec": ang_err}


def summarize(res: Dict[str, object]) -> Dict[str, float]:
    np = _need_numpy()
    out = {}
    for key in ("pos_km", "radial_km", "angle_arcsec"):
        a = np.asarray(res[key])
        out[f"{key}_max"] = float(np.max(np.abs(a)))
        out[f"{key}_rms"] = float(np.sqrt(np.mean(a * a)))
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate ELP2000-82B positions against a JPL SPK kernel.")
    p.add_argument("--kernel", required=True, help="Path to an SPK kernel with Moon and Earth segments (e.g. de421.bsp)")
    p.add_argument("--data-dir", default="", help="Directory with ELP1..ELP36 (default: compiled full tables if installed, else the abridged set)")
    p.add_argument("--year-start", type=int, default=1900)
    p.add_argument("--year-end", type=int, default=2050)
    p.add_argument("--step-days", type=float, default=100.0)
    p.add_argument("--out-png", default="", help="Optional plot of the residuals")
    args = p.parse_args(argv)

    np = _need_numpy()
    from elp82b.ephemeris.jpl import JplMoon

    theory = None
    if args.data_dir:
        from elp82b.ephemeris.elp_files import load_theory
        theory = load_theory(args.data_dir)

    moon = JplMoon.load(args.kernel)
    try:
        jd_start = aa.J2000_TT + (args.year_start - 2000) * 365.25
        jd_end = aa.J2000_TT + (args.year_end - 2000) * 365.25
        jds = np.arange(jd_start, jd_end, args.step_days)
        logger.info("Comparing %d epochs from %d to %d", len(jds), args.year_start, args.year_end)
        res = compare(moon, jds, theory)
    finally:
        moon.close()

    stats = summarize(res)
    print(f"Epochs: {len(jds)}  ({args.year_start} .. {args.year_end}, every {args.step_days:g} d)")
    print(f"  position error  max = {stats['pos_km_max']:.3f} km   rms = {stats['pos_km_rms']:.3f} km")
    print(f"  radial error    max = {stats['radial_km_max']:.3f} km   rms = {stats['radial_km_rms']:.3f} km")
    print(f"  angular error   max = {stats['angle_arcsec_max']:.3f}\"   rms = {stats['angle_arcsec_rms']:.3f}\"")

    if args.out_png:
        plt = _need_matplotlib()
        years = 2000 + (res["jd"] - aa.J2000_TT) / 365.25

        fig, axs = plt.subplots(2, 1, figsize=(12, 8), sharex=True)
        axs[0].scatter(years, res["angle_arcsec"], s=1, alpha=0.5, color="blue")
        axs[0].set_title("Angular separation ELP2000-82B vs JPL")
        axs[0].set_ylabel("arcsec")
        axs[0].grid(True, alpha=0.3)

        axs[1].scatter(years, res["radial_km"], s=1, alpha=0.5, color="green")
        axs[1].set_title("Radial error (ELP - JPL)")
        axs[1].set_ylabel("km")
        axs[1].set_xlabel("Year")
        axs[1].grid(True, alpha=0.3)

        plt.tight_layout()
        plt.savefig(args.out_png, dpi=200)
        print(f"Plot saved to {args.out_png}")

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
