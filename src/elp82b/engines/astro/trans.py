from __future__ import annotations

import math
from typing import Tuple

from ...core.types import RectangularPoint, SphericalPoint
from ...reference import astro_args as aa

Matrix3 = Tuple[Tuple[float, float, float], Tuple[float, float, float], Tuple[float, float, float]]

# Laskar's precession of the ecliptic, P and Q as polynomials in t (t^1..t^5).
P_COEFFS = (0.10180391e-4, 0.47020439e-6, -0.5417367e-9, -0.2507948e-11, 0.463486e-14)
Q_COEFFS = (-0.113469002e-3, 0.12372674e-6, 0.1265417e-8, -0.1371808e-11, -0.320334e-14)

# Mean ecliptic and equinox of J2000 -> FK5 mean equator and equinox of J2000.
FK5_MATRIX: Matrix3 = (
    (1.000000000000, 0.000000437913, -0.000000189859),
    (-0.000000477299, 0.917482137607, -0.397776981701),
    (0.000000000000, 0.397776981701, 0.917482137607),
)


def apply_matrix(M: Matrix3, p: RectangularPoint) -> RectangularPoint:
    """Applies a 3x3 matrix to a point."""
    x, y, z = p.x, p.y, p.z
    return RectangularPoint(
        M[0][0]*x + M[0][1]*y + M[0][2]*z,
        M[1][0]*x + M[1][1]*y + M[1][2]*z,
        M[2][0]*x + M[2][1]*y + M[2][2]*z,
    )


# ------------------------------------------------------------
# Stage 1: spherical -> rectangular (ELP frame)
# ------------------------------------------------------------

def spherical_to_rectangular(p: SphericalPoint) -> RectangularPoint:
    lon = aa.wrap_rad(aa.arcsec_to_rad(p.longitude))
    lat = aa.wrap_rad(aa.arcsec_to_rad(p.latitude))
    r_cos_b = p.distance * math.cos(lat)
    return RectangularPoint(
        r_cos_b * math.cos(lon),
        r_cos_b * math.sin(lon),
        p.distance * math.sin(lat),
    )


def rectangular_to_spherical(p: RectangularPoint) -> SphericalPoint:
    """Inverse of stage 1; longitude wrapped to [0, 1296000) arcsec."""
    rho = math.hypot(p.x, p.y)
    lon = aa.wrap_arcsec(aa.rad_to_arcsec(math.atan2(p.y, p.x)))
    lat = aa.rad_to_arcsec(math.atan2(p.z, rho))
    return SphericalPoint(lon, lat, math.hypot(rho, p.z))


# ------------------------------------------------------------
# Stage 2: ELP frame -> mean ecliptic and equinox of J2000
# ------------------------------------------------------------

def precession_pq(t: float) -> Tuple[float, float]:
    return aa.poly_eval(P_COEFFS, t) * t, aa.poly_eval(Q_COEFFS, t) * t


def matrix_elp_to_j2000(t: float) -> Matrix3:
    """
    Rotation from the mean ecliptic of date (departure point γ'(2000)) to the
    mean ecliptic and equinox of J2000. Identity at t = 0.
    """
    pw, qw = precession_pq(t)
    rr = 1.0 - pw * pw - qw * qw
    ra = 2.0 * math.sqrt(rr) if rr >= 0.0 else math.nan
    pwqw = 2.0 * pw * qw
    pw2 = 1.0 - 2.0 * pw * pw
    qw2 = 1.0 - 2.0 * qw * qw
    pwra = pw * ra
    qwra = qw * ra
    return (
        (pw2, pwqw, pwra),
        (pwqw, qw2, -qwra),
        (-pwra, qwra, pw2 + qw2 - 1.0),
    )


def elp_to_j2000(p: RectangularPoint, t: float) -> RectangularPoint:
    return apply_matrix(matrix_elp_to_j2000(t), p)


# ------------------------------------------------------------
# Stage 3: J2000 ecliptic -> FK5 equator
# ------------------------------------------------------------

def j2000_to_fk5(p: RectangularPoint) -> RectangularPoint:
    return apply_matrix(FK5_MATRIX, p)


def equatorial_ra_dec(p: RectangularPoint) -> Tuple[float, float]:
    """Right ascension in [0, 360) and declination (degrees) of an equatorial vector."""
    ra = math.degrees(math.atan2(p.y, p.x)) % 360.0
    dec = math.degrees(math.atan2(p.z, math.hypot(p.x, p.y)))
    return ra, dec
