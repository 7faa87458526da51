# tests/test_elp_files.py

import math

import pytest

import elp82b
from elp82b.core.errors import TableFormatError, TheoryDataError
from elp82b.engines.astro.series import FigureTerm, MainProblemTerm, PlanetaryTerm
from elp82b.ephemeris import elp_files as ef
from elp82b.reference import astro_args as aa

HEADER = " ELP2000-82B  test file\n"

def main_line(ilu, amp, b=(0.0,) * 6):
    return "".join(f"{k:3d}" for k in ilu) + "  " + f"{amp:13.5f}" + "".join(f"{x:12.2f}" for x in b) + "\n"

def figure_line(iz, ilu, phase, amp):
    return "".join(f"{k:3d}" for k in (iz,) + tuple(ilu)) + f" {phase:9.5f} {amp:9.5f}" + "   12.3456\n"

def planetary_line(ipla, phase, amp):
    return "".join(f"{k:3d}" for k in ipla) + f" {phase:9.5f} {amp:9.5f}" + "   99.9999\n"

def write_all(directory, contents=None):
    contents = contents or {}
    for n in range(1, 37):
        (directory / f"ELP{n}").write_text(HEADER + contents.get(n, ""), encoding="ascii")

def test_parse_main_line():
    term = ef.parse_main_line(main_line((2, 0, -1, 0), 4586.43061, (1.5, -2.25, 3.0, 4.0, 5.0, 6.0)))
    assert term == MainProblemTerm((2, 0, -1, 0), 4586.43061, (1.5, -2.25, 3.0, 4.0, 5.0))

def test_parse_figure_line():
    term = ef.parse_figure_line(figure_line(1, (0, 0, 0, -1), 270.0, 0.00125))
    assert term == FigureTerm(1, (0, 0, 0, -1), 270.0, 0.00125)

def test_parse_planetary_lines():
    ipla = (0, 18, -16, 0, 0, 0, 0, 0, 0, -1, 0)
    t1 = ef.parse_planetary_line(planetary_line(ipla, 26.54, 14.2488), 10)
    assert t1 == PlanetaryTerm(ipla[:8], ipla[8:], 26.54, 14.2488)

    ipla = (0, 0, 0, 0, 0, 0, 0, 2, -1, 0, 0)
    t2 = ef.parse_planetary_line(planetary_line(ipla, 0.0, 1.67671), 19)
    assert t2 == PlanetaryTerm(ipla[:7], ipla[7:], 0.0, 1.67671)

def test_fortran_exponent():
    assert ef._float(" 0.1D+01") == 1.0
    assert ef._float("", 0.0) == 0.0
    with pytest.raises(ValueError):
        ef._float("   ")

def test_load_file_skips_blank_lines(tmp_path):
    path = tmp_path / "ELP1"
    path.write_text(
        HEADER + main_line((0, 0, 1, 0), 22639.55) + "\n" + main_line((2, 0, -1, 0), 4586.43),
        encoding="ascii",
    )
    tab = ef.load_elp_file(path, 1)
    assert tab.number == 1
    assert [t.amp for t in tab.terms] == [22639.55, 4586.43]

def test_load_file_sort(tmp_path):
    path = tmp_path / "ELP2"
    path.write_text(
        HEADER + main_line((0, 0, 0, 1), 18.0) + main_line((0, 0, 1, 1), -999.0) + main_line((0, 0, 1, -1), 50.0),
        encoding="ascii",
    )
    assert [t.amp for t in ef.load_elp_file(path, 2).terms] == [18.0, -999.0, 50.0]
    assert [t.amp for t in ef.load_elp_file(path, 2, sort=True).terms] == [-999.0, 50.0, 18.0]

def test_bad_record_reports_line(tmp_path):
    path = tmp_path / "ELP4"
    path.write_text(HEADER + figure_line(1, (0, 0, 0, 1), 0.0, 1.0) + "  x  y  z\n", encoding="ascii")
    with pytest.raises(TableFormatError) as exc:
        ef.load_elp_file(path, 4)
    assert exc.value.line_no == 3
    assert str(path) in str(exc.value)

def test_empty_file(tmp_path):
    path = tmp_path / "ELP5"
    path.write_text("", encoding="ascii")
    with pytest.raises(TableFormatError):
        ef.load_elp_file(path, 5)

def test_missing_files(tmp_path):
    with pytest.raises(TheoryDataError):
        ef.find_elp_file(tmp_path, 7)
    with pytest.raises(TheoryDataError):
        ef.load_theory(tmp_path)
    with pytest.raises(TheoryDataError):
        ef.load_elp_file(tmp_path / "ELP9", 9)

def test_find_lowercase_name(tmp_path):
    (tmp_path / "elp12.txt").write_text(HEADER, encoding="ascii")
    assert ef.find_elp_file(tmp_path, 12).name == "elp12.txt"

def test_load_theory_and_evaluate(tmp_path):
    write_all(
        tmp_path,
        {
            1: main_line((0, 0, 1, 0), 22639.55),
            3: main_line((0, 0, 0, 0), 385000.52719),
            10: planetary_line((0, 18, -16, 0, 0, 0, 0, 0, 0, -1, 0), 26.54, 14.2488),
        },
    )
    th = elp82b.load_theory(tmp_path)
    assert th.n_terms == 3
    assert th.term_counts()[10] == 1
    assert "ELP2000-82B files" in th.source

    t = 0.1
    fa = aa.fundamental_args(t)
    venus = math.radians(26.54) + 18 * fa.planets[1] - 16 * fa.planets[2] - fa.delaunay_lin[2]
    lon = fa.W1_arcsec + 22639.55 * math.sin(fa.delaunay[2]) + 14.2488 * math.sin(venus)

    p = elp82b.geocentric_moon_position(t, theory=th)
    assert p.longitude == pytest.approx(aa.wrap_arcsec(lon), abs=1e-6)
    assert p.latitude == 0.0
    assert p.distance == pytest.approx(385000.52719 * (1.0 - 2.0 * aa.DELNU / 3.0) * aa.A0 / aa.ATH, abs=1e-6)
