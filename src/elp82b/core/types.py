from __future__ import annotations
from dataclasses import dataclass
from typing import Literal

Coordinate = Literal["longitude", "latitude", "distance"]
Frame = Literal["elp", "elp_rect", "j2000", "fk5"]

COORDINATES: tuple[Coordinate, ...] = ("longitude", "latitude", "distance")
FRAMES: tuple[Frame, ...] = ("elp", "elp_rect", "j2000", "fk5")

@dataclass(frozen=True)
class SphericalPoint:
    """
    Geocentric spherical position in the ELP2000 frame
    (mean dynamical ecliptic of date, departure point γ'(2000)).

    longitude, latitude in arcseconds; distance in kilometres.
    """
    longitude: float
    latitude: float
    distance: float

@dataclass(frozen=True)
class RectangularPoint:
    """Geocentric cartesian position in kilometres. The frame is implied by the producer."""
    x: float
    y: float
    z: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)
