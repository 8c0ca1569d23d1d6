"""Cross-check decoded elements against the reference ``sgp4`` reader."""

from __future__ import annotations

import math

import pytest
from sgp4.api import WGS72, Satrec

from tle_parser import parse

SAMPLES = [
    (
        "GRUS-1A",
        "1 43890U 18111Q   20044.88470557  .00000320  00000-0  36258-4 0  9993",
        "2 43890  97.7009 312.6237 0003899   7.8254 352.3026 14.92889838 61757",
    ),
    (
        "ISS (ZARYA)",
        "1 25544U 98067A   20045.18587073  .00000950  00000-0  25302-4 0  9990",
        "2 25544  51.6443 242.0161 0004885 264.6060 207.3845 15.49165514212791",
    ),
    (
        "ISS (ZARYA)",
        "1 25544U 98067A   24045.54896019  .00016717  00000-0  30093-3 0  9993",
        "2 25544  51.6412 207.4925 0004948 290.5508 178.9792 15.49583488439596",
    ),
]


@pytest.mark.parametrize("name, line1, line2", SAMPLES, ids=[s[0] for s in SAMPLES])
def test_fields_agree_with_sgp4(name: str, line1: str, line2: str) -> None:
    tle = parse(f"{name}\n{line1}\n{line2}\n")
    sat = Satrec.twoline2rv(line1, line2, WGS72)

    assert tle.satellite_number == sat.satnum
    assert tle.eccentricity == pytest.approx(sat.ecco, rel=1e-12)
    assert tle.drag_term == pytest.approx(sat.bstar, rel=1e-9)
    assert tle.inclination == pytest.approx(math.degrees(sat.inclo), rel=1e-9)
    assert tle.right_ascension == pytest.approx(math.degrees(sat.nodeo), rel=1e-9)
    assert tle.argument_of_perigee == pytest.approx(math.degrees(sat.argpo), rel=1e-9)
    assert tle.mean_anomaly == pytest.approx(math.degrees(sat.mo), rel=1e-9)
    assert tle.mean_motion == pytest.approx(sat.no_kozai * 1440.0 / (2 * math.pi), rel=1e-9)
    assert tle.element_number == sat.elnum
    assert tle.revolution_number == sat.revnum
