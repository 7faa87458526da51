# ephemeris/jpl.py
from __future__ import annotations

import logging
import pathlib
from dataclasses import dataclass
from typing import Union

from ..core.errors import EphemerisUnavailableError
from ..core.types import RectangularPoint
from . import require_ephemeris

logger = logging.getLogger(__name__)

# NAIF ids: Earth-Moon barycentre, Moon, Earth.
EMB = 3
MOON = 301
EARTH = 399


@dataclass
class JplMoon:
    """
    Geocentric Moon vectors (km, ICRF ~ FK5 J2000) from a JPL SPK kernel
    such as de421.bsp or de440s.bsp.

    Requires optional deps:
      pip install "elp82b[ephemeris]"
    """
    kernel: object
    path: str

    @classmethod
    def load(cls, path: Union[str, pathlib.Path]) -> "JplMoon":
        require_ephemeris()
        from jplephem.spk import SPK

        p = pathlib.Path(path)
        if not p.is_file():
            raise EphemerisUnavailableError(f"SPK kernel not found: {p}")
        kernel = SPK.open(str(p))
        for pair in ((EMB, MOON), (EMB, EARTH)):
            try:
                kernel[pair]
            except KeyError as e:
                kernel.close()
                raise EphemerisUnavailableError(f"{p} has no segment {pair[0]} -> {pair[1]}") from e
        logger.info("Opened SPK kernel %s", p)
        return cls(kernel=kernel, path=str(p))

    def close(self) -> None:
        self.kernel.close()

    def geocentric_moon(self, jd_tt: float) -> RectangularPoint:
        """Moon - Earth at TDB ~ TT Julian day `jd_tt`."""
        moon = self.kernel[EMB, MOON].compute(jd_tt)
        earth = self.kernel[EMB, EARTH].compute(jd_tt)
        return RectangularPoint(
            float(moon[0] - earth[0]),
            float(moon[1] - earth[1]),
            float(moon[2] - earth[2]),
        )
