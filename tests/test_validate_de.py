# tests/test_validate_de.py

import pytest

from elp82b.api import geocentric_moon_position_FK5
from elp82b.core.errors import EphemerisUnavailableError
from elp82b.core.types import RectangularPoint
from elp82b.reference import astro_args as aa

np = pytest.importorskip("numpy")

from elp82b.diagnostics import validate_de  # noqa: E402


class ShiftedMoon:
    """Stand-in for JplMoon: the ELP position itself, shifted along x."""

    def __init__(self, dx=0.0):
        self.dx = dx

    def geocentric_moon(self, jd_tt):
        p = geocentric_moon_position_FK5(aa.t_centuries(jd_tt))
        return RectangularPoint(p.x + self.dx, p.y, p.z)

def test_compare_identical_positions():
    jds = [2451545.0, 2451600.25, 2448724.5]
    res = validate_de.compare(ShiftedMoon(), jds)
    assert np.allclose(res["jd"], jds)
    assert np.all(res["pos_km"] == 0.0)
    assert np.all(res["angle_arcsec"] == 0.0)

    stats = validate_de.summarize(res)
    assert stats["pos_km_max"] == 0.0
    assert stats["radial_km_rms"] == 0.0

def test_compare_reports_offsets():
    res = validate_de.compare(ShiftedMoon(dx=10.0), np.arange(2451545.0, 2451575.0, 5.0))
    assert np.allclose(res["pos_km"], 10.0)
    assert np.all(np.abs(res["radial_km"]) <= 10.0)
    # 10 km at ~384000 km is at most ~5.4"
    assert np.all(res["angle_arcsec"] < 6.0)

    stats = validate_de.summarize(res)
    assert stats["pos_km_max"] == pytest.approx(10.0)
    assert stats["pos_km_rms"] == pytest.approx(10.0)

def test_missing_kernel(tmp_path):
    pytest.importorskip("jplephem")
    from elp82b.ephemeris.jpl import JplMoon

    with pytest.raises(EphemerisUnavailableError):
        JplMoon.load(tmp_path / "de_missing.bsp")
