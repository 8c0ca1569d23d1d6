"""Fixed column layout of TLE data lines.

Offsets are zero-based, so ``start=2, width=5`` covers columns 3-7 of the
published one-based format description.  Both layouts span 69 characters.
"""

from __future__ import annotations

import enum
from typing import NamedTuple, Optional, Tuple

LINE_WIDTH = 69


class Kind(str, enum.Enum):
    TAG = "tag"
    SPACE = "space"
    TEXT = "text"
    CHAR = "char"
    DIGIT = "digit"
    UINT = "uint"
    DECIMAL = "decimal"
    UGLY_FLOAT = "ugly_float"
    ECCENTRICITY = "eccentricity"
    CHECKSUM = "checksum"


class Column(NamedTuple):
    name: str
    start: int
    width: int
    kind: Kind
    literal: Optional[str] = None

    @property
    def end(self) -> int:
        return self.start + self.width


def _space(start: int) -> Column:
    return Column("space", start, 1, Kind.SPACE, " ")


LINE1: Tuple[Column, ...] = (
    Column("line_number", 0, 1, Kind.TAG, "1"),
    _space(1),
    Column("satellite_number", 2, 5, Kind.UINT),
    Column("classification", 7, 1, Kind.CHAR),
    _space(8),
    Column("international_designator", 9, 8, Kind.TEXT),
    _space(17),
    Column("epoch", 18, 14, Kind.TEXT),
    _space(32),
    Column("first_derivative_mean_motion", 33, 10, Kind.DECIMAL),
    _space(43),
    Column("second_derivative_mean_motion", 44, 8, Kind.UGLY_FLOAT),
    _space(52),
    Column("drag_term", 53, 8, Kind.UGLY_FLOAT),
    _space(61),
    Column("ephemeris_type", 62, 1, Kind.DIGIT),
    _space(63),
    Column("element_number", 64, 4, Kind.UINT),
    Column("checksum", 68, 1, Kind.CHECKSUM),
)

# mean_motion and revolution_number share cols 53-68 with no separator.
LINE2: Tuple[Column, ...] = (
    Column("line_number", 0, 1, Kind.TAG, "2"),
    _space(1),
    Column("satellite_number", 2, 5, Kind.UINT),
    _space(7),
    Column("inclination", 8, 8, Kind.DECIMAL),
    _space(16),
    Column("right_ascension", 17, 8, Kind.DECIMAL),
    _space(25),
    Column("eccentricity", 26, 7, Kind.ECCENTRICITY),
    _space(33),
    Column("argument_of_perigee", 34, 8, Kind.DECIMAL),
    _space(42),
    Column("mean_anomaly", 43, 8, Kind.DECIMAL),
    _space(51),
    Column("mean_motion", 52, 11, Kind.DECIMAL),
    Column("revolution_number", 63, 5, Kind.UINT),
    Column("checksum", 68, 1, Kind.CHECKSUM),
)


__all__ = ["LINE_WIDTH", "Kind", "Column", "LINE1", "LINE2"]
