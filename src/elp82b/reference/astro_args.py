from __future__ import annotations

from dataclasses import dataclass
from math import fmod
from typing import Dict, Sequence, Tuple

import math


# ------------------------------------------------------------
# Units & helpers
# ------------------------------------------------------------

TAU = 6.283185307179586  # 2*pi
ARCSEC_PER_TURN = 1296000.0
ARCSEC_TO_RAD = math.pi / 648000.0


def dms_to_arcsec(deg: float, minutes: float, seconds: float) -> float:
    return deg * 3600.0 + minutes * 60.0 + seconds

def wrap_arcsec(x: float) -> float:
    """Wrap arcseconds to [0, 1296000). Non-finite input gives nan."""
    if not math.isfinite(x):
        return math.nan
    y = fmod(x, ARCSEC_PER_TURN)
    if y < 0:
        y += ARCSEC_PER_TURN
    return y

def wrap_rad(x: float) -> float:
    """Wrap radians to [0, 2*pi). Non-finite input gives nan."""
    if not math.isfinite(x):
        return math.nan
    y = fmod(x, TAU)
    if y < 0:
        y += TAU
    return y

def arcsec_to_rad(arcsec: float) -> float:
    return arcsec * ARCSEC_TO_RAD

def rad_to_arcsec(rad: float) -> float:
    return rad / ARCSEC_TO_RAD

def arcsec_to_deg(arcsec: float) -> float:
    return arcsec / 3600.0

def poly_eval(coeffs: Sequence[float], t: float) -> float:
    """c0 + c1*t + c2*t^2 + ... (Horner)."""
    s = 0.0
    for c in reversed(coeffs):
        s = s * t + c
    return s

# ------------------------------------------------------------
# Time variable (TT)
# ------------------------------------------------------------

J2000_TT = 2451545.0  # JD(TT) at J2000.0


def t_centuries(jd_tt: float) -> float:
    """Julian centuries from J2000.0 in TT."""
    return (jd_tt - J2000_TT) / 36525.0


# ------------------------------------------------------------
# ELP2000-82B mean arguments (arcseconds, powers of t in Julian centuries)
# ------------------------------------------------------------

# Moon: mean longitude W1, mean longitude of the perigee W2, of the node W3.
W1 = (dms_to_arcsec(218, 18, 59.95571), 1732559343.73604, -5.8883, 0.6604e-2, -0.3169e-4)
W2 = (dms_to_arcsec(83, 21, 11.67475), 14643420.2632, -38.2776, -0.45047e-1, 0.21301e-3)
W3 = (dms_to_arcsec(125, 2, 40.39816), -6967919.3622, 6.3622, 0.7625e-2, -0.3586e-4)

# Earth-Moon barycentre: mean longitude T and longitude of the perihelion.
EART = (dms_to_arcsec(100, 27, 59.22059), 129597742.2758, -0.0202, 0.9e-5, 0.15e-6)
PERI = (dms_to_arcsec(102, 56, 14.45766), 1161.2283, 0.5327, -0.138e-3, 0.0)

# Precession constant used to build zeta = W1 + precession*t.
PRECESSION = 5029.0966

# Planetary mean longitudes (linear): Me, V, T, Ma, J, S, U, N.
PLANET_NAMES = ("Me", "V", "T", "Ma", "J", "S", "U", "N")
PLANETS: Tuple[Tuple[float, float], ...] = (
    (dms_to_arcsec(252, 15, 3.25986), 538101628.68898),
    (dms_to_arcsec(181, 58, 47.28305), 210664136.43355),
    (EART[0], EART[1]),
    (dms_to_arcsec(355, 25, 59.78866), 68905077.59284),
    (dms_to_arcsec(34, 21, 5.34212), 10925660.42861),
    (dms_to_arcsec(50, 4, 38.89694), 4399609.65932),
    (dms_to_arcsec(314, 3, 18.01841), 1542481.19393),
    (dms_to_arcsec(304, 20, 55.19575), 786550.32074),
)

# Delaunay arguments D, l', l, F as polynomial combinations of the above.
DELAUNAY_NAMES = ("D", "l'", "l", "F")
_D = tuple(w - e for w, e in zip(W1, EART))
DELAUNAY: Tuple[Tuple[float, ...], ...] = (
    (_D[0] + 648000.0,) + _D[1:],
    tuple(e - p for e, p in zip(EART, PERI)),
    tuple(a - b for a, b in zip(W1, W2)),
    tuple(a - b for a, b in zip(W1, W3)),
)

# ------------------------------------------------------------
# Corrections of the main-problem constants (fit to DE200/LE200)
# ------------------------------------------------------------

AM = 0.074801329518       # m = n'/n
ALPHA = 0.002571881335    # a/a'
DTASM = 2.0 * ALPHA / (3.0 * AM)

DELNU = 0.55604 / W1[1]   # relative correction of the sidereal mean motion
DELE = arcsec_to_rad(0.01789)
DELG = arcsec_to_rad(-0.08066)
DELNP = -0.06424 / W1[1]
DELEP = arcsec_to_rad(-0.12879)

# Semi-major axis of the theory and the value fitted to LLR (km).
A0 = 384747.9806448954
ATH = 384747.9806743165


# ------------------------------------------------------------
# Fundamental arguments
# ------------------------------------------------------------

@dataclass(frozen=True)
class FundamentalArgs:
    """
    Fundamental arguments at t, radians wrapped to [0, 2*pi).

    - delaunay: D, l', l, F with full (degree 4) polynomials, main problem only
    - delaunay_lin: the same truncated to degree 1, used by all perturbation series
    - zeta: W1 + precession, degree 1
    - planets: Me, V, T, Ma, J, S, U, N, degree 1
    """
    t: float
    W1_arcsec: float
    delaunay: Tuple[float, float, float, float]
    delaunay_lin: Tuple[float, float, float, float]
    zeta: float
    planets: Tuple[float, ...]

    @property
    def W1(self) -> float: return arcsec_to_rad(self.W1_arcsec)
    @property
    def D_deg(self) -> float: return math.degrees(self.delaunay[0])
    @property
    def lp_deg(self) -> float: return math.degrees(self.delaunay[1])
    @property
    def l_deg(self) -> float: return math.degrees(self.delaunay[2])
    @property
    def F_deg(self) -> float: return math.degrees(self.delaunay[3])

    def as_degrees(self) -> Dict[str, float]:
        out = {"W1": arcsec_to_deg(self.W1_arcsec)}
        for name, v in zip(DELAUNAY_NAMES, self.delaunay):
            out[name] = math.degrees(v)
        out["zeta"] = math.degrees(self.zeta)
        for name, v in zip(PLANET_NAMES, self.planets):
            out[name] = math.degrees(v)
        return out


def _angle(coeffs: Sequence[float], t: float) -> float:
    return arcsec_to_rad(wrap_arcsec(poly_eval(coeffs, t)))


def mean_longitude_arcsec(t: float) -> float:
    """Moon mean longitude W1 referred to γ'(2000), arcsec in [0, 1296000)."""
    return wrap_arcsec(poly_eval(W1, t))


def fundamental_args(t: float) -> FundamentalArgs:
    """
    Evaluate every argument used by the 36 ELP2000-82B series.

    Each polynomial is reduced modulo a full turn in arcseconds before
    conversion to radians, so large |t| keeps its precision.
    """
    return FundamentalArgs(
        t=t,
        W1_arcsec=mean_longitude_arcsec(t),
        delaunay=tuple(_angle(c, t) for c in DELAUNAY),
        delaunay_lin=tuple(_angle(c[:2], t) for c in DELAUNAY),
        zeta=_angle((W1[0], W1[1] + PRECESSION), t),
        planets=tuple(_angle(c, t) for c in PLANETS),
    )
