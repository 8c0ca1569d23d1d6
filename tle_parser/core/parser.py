"""Pure Python parser turning three-line TLE text into a :class:`TLE`."""

from __future__ import annotations

from typing import Any, Callable, Dict, Sequence, Tuple

from ..logging import get_logger, log_context
from .columns import LINE1, LINE2, Column, Kind
from .fields import (
    parse_char,
    parse_decimal,
    parse_digit,
    parse_eccentricity,
    parse_text,
    parse_uint,
    parse_ugly_float,
)
from .types import TLE, TLEError

LOGGER = get_logger("core.parser")

_CONVERTERS: Dict[Kind, Callable[[str], Any]] = {
    Kind.TEXT: parse_text,
    Kind.CHAR: parse_char,
    Kind.DIGIT: parse_digit,
    Kind.UINT: parse_uint,
    Kind.DECIMAL: parse_decimal,
    Kind.UGLY_FLOAT: parse_ugly_float,
    Kind.ECCENTRICITY: parse_eccentricity,
    Kind.CHECKSUM: parse_digit,
}
_DISCARDED = {Kind.TAG, Kind.SPACE, Kind.CHECKSUM}


def _split(text: str) -> Tuple[str, str, str]:
    name, sep, rest = text.partition("\n")
    if not sep:
        raise TLEError(line="name")
    line1, sep, rest = rest.partition("\n")
    if not sep:
        raise TLEError(line=1)
    line2 = rest.partition("\n")[0]
    return name.strip(), line1.rstrip("\r"), line2.rstrip("\r")


def _read_column(line: str, column: Column) -> Any:
    raw = line[column.start:column.end]
    if len(raw) != column.width:
        raise TLEError()
    if column.literal is not None:
        if raw != column.literal:
            raise TLEError()
        return raw
    return _CONVERTERS[column.kind](raw)


def read_line(line: str, layout: Sequence[Column], line_number: int) -> Dict[str, Any]:
    """Apply ``layout`` to a single data line and return the kept fields.

    Characters past the last column are ignored.
    """

    values: Dict[str, Any] = {}
    for column in layout:
        try:
            value = _read_column(line, column)
        except TLEError as exc:
            raise TLEError(line=line_number, field=column.name) from exc
        if column.kind not in _DISCARDED:
            values[column.name] = value
    return values


def parse(text: str) -> TLE:
    """Parse a name line followed by TLE lines 1 and 2.

    Raises :class:`TLEError` for any structural or numeric problem; no
    partial record is ever returned.
    """

    try:
        name, line1, line2 = _split(text)
    except TLEError as exc:
        _log_failure(exc, text)
        raise

    with log_context(tle_name=name):
        try:
            first = read_line(line1, LINE1, 1)
            second = read_line(line2, LINE2, 2)
        except TLEError as exc:
            _log_failure(exc, text)
            raise
        tle = _assemble(name, first, second)
        LOGGER.debug("tle_parsed", extra={"satellite_number": tle.satellite_number})
    return tle


def _log_failure(exc: TLEError, text: str) -> None:
    LOGGER.debug("tle_parse_failed", extra={"line": exc.line, "field": exc.field, "raw": text})


def _assemble(name: str, first: Dict[str, Any], second: Dict[str, Any]) -> TLE:
    return TLE(
        name=name,
        satellite_number=first["satellite_number"],
        classification=first["classification"],
        international_designator=first["international_designator"],
        epoch=first["epoch"],
        first_derivative_mean_motion=first["first_derivative_mean_motion"],
        second_derivative_mean_motion=first["second_derivative_mean_motion"],
        drag_term=first["drag_term"],
        ephemeris_type=first["ephemeris_type"],
        element_number=first["element_number"],
        inclination=second["inclination"],
        right_ascension=second["right_ascension"],
        eccentricity=second["eccentricity"],
        argument_of_perigee=second["argument_of_perigee"],
        mean_anomaly=second["mean_anomaly"],
        mean_motion=second["mean_motion"],
        revolution_number=second["revolution_number"],
    )


__all__ = ["parse", "read_line"]
