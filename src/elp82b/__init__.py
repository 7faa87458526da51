"""elp82b public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    geocentric_moon_position,
    geocentric_moon_position_rect,
    geocentric_moon_position_of_J2000,
    geocentric_moon_position_FK5,
    moon_position,
)
from .core.errors import Elp82bError, EphemerisUnavailableError, TableFormatError, TheoryDataError
from .core.types import RectangularPoint, SphericalPoint
from .engines.theory import ElpTheory, abridged_theory, default_theory, theory_from_module
from .ephemeris.elp_files import load_theory
from .reference.astro_args import t_centuries

__all__ = [
    "geocentric_moon_position",
    "geocentric_moon_position_rect",
    "geocentric_moon_position_of_J2000",
    "geocentric_moon_position_FK5",
    "moon_position",
    "SphericalPoint",
    "RectangularPoint",
    "ElpTheory",
    "default_theory",
    "abridged_theory",
    "theory_from_module",
    "load_theory",
    "t_centuries",
    "Elp82bError",
    "TheoryDataError",
    "TableFormatError",
    "EphemerisUnavailableError",
]
