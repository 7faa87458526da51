from __future__ import annotations

from typing import Optional, Union

from .core.types import FRAMES, Frame, RectangularPoint, SphericalPoint
from .engines.astro import trans
from .engines.theory import ElpTheory, assemble_spherical, default_theory
from .reference.astro_args import fundamental_args

# Terminal stage of the pipeline for each output frame.
_STAGES = {"elp": 0, "elp_rect": 1, "j2000": 2, "fk5": 3}


def _pipeline(t: float, stage: int, theory: Optional[ElpTheory]) -> Union[SphericalPoint, RectangularPoint]:
    th = theory if theory is not None else default_theory()
    p = assemble_spherical(th, fundamental_args(t))
    if stage == 0:
        return p
    r = trans.spherical_to_rectangular(p)
    if stage == 1:
        return r
    r = trans.elp_to_j2000(r, t)
    if stage == 2:
        return r
    return trans.j2000_to_fk5(r)


def geocentric_moon_position(t: float, *, theory: Optional[ElpTheory] = None) -> SphericalPoint:
    """
    Geocentric Moon in spherical coordinates referred to the ELP2000 frame
    (mean dynamical ecliptic of date, departure point γ'(2000)).

    t: Julian centuries (TT) from J2000.0, t = (JD - 2451545.0) / 36525.
    Returns longitude and latitude in arcseconds, distance in kilometres.
    """
    return _pipeline(t, 0, theory)


def geocentric_moon_position_rect(t: float, *, theory: Optional[ElpTheory] = None) -> RectangularPoint:
    """Geocentric Moon, cartesian (km), ELP2000 frame."""
    return _pipeline(t, 1, theory)


def geocentric_moon_position_of_J2000(t: float, *, theory: Optional[ElpTheory] = None) -> RectangularPoint:
    """Geocentric Moon, cartesian (km), mean ecliptic and equinox of J2000."""
    return _pipeline(t, 2, theory)


def geocentric_moon_position_FK5(t: float, *, theory: Optional[ElpTheory] = None) -> RectangularPoint:
    """Geocentric Moon, cartesian (km), FK5 mean equator and equinox of J2000."""
    return _pipeline(t, 3, theory)


def moon_position(
    t: float,
    frame: Frame = "elp",
    *,
    theory: Optional[ElpTheory] = None,
) -> Union[SphericalPoint, RectangularPoint]:
    if frame not in _STAGES:
        raise ValueError(f"frame must be one of: {', '.join(FRAMES)}")
    return _pipeline(t, _STAGES[frame], theory)
