"""Field-level converters for TLE columns.

Every converter takes the raw column text and returns a Python value or
raises :class:`~tle_parser.core.types.TLEError`.  Python's ``int`` and
``float`` accept underscores, non-ASCII digits and ``inf``/``nan``, so input
is matched against ASCII patterns before conversion.
"""

from __future__ import annotations

import re

from .types import TLEError

_UINT_RE = re.compile(r"[0-9]+", re.ASCII)
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)", re.ASCII)
_UGLY_FLOAT_RE = re.compile(r"(-?)([0-9]+)-([0-9]+)", re.ASCII)
_ECCENTRICITY_RE = re.compile(r"[0-9]{7}", re.ASCII)


def parse_uint(text: str) -> int:
    """Parse a right-justified unsigned integer, ignoring surrounding blanks."""

    value = text.strip()
    if not _UINT_RE.fullmatch(value):
        raise TLEError()
    return int(value)


def parse_digit(text: str) -> int:
    if len(text) != 1 or not _UINT_RE.fullmatch(text):
        raise TLEError()
    return int(text)


def parse_decimal(text: str) -> float:
    """Parse a plain decimal such as ``" .00000320"`` or ``"-.00002182"``."""

    value = text.strip()
    if not _DECIMAL_RE.fullmatch(value):
        raise TLEError()
    return float(value)


def parse_ugly_float(text: str) -> float:
    """Decode the assumed-decimal notation used for drag terms.

    ``"36258-4"`` is ``0.36258e-4``; a leading ``-`` applies to the mantissa.
    The hyphen between the groups always marks a negative exponent.

    >>> parse_ugly_float("-36258-4")
    -3.6258e-05
    """

    match = _UGLY_FLOAT_RE.fullmatch(text.strip())
    if match is None:
        raise TLEError()
    sign, mantissa, exponent = match.groups()
    return float(f"{sign}0.{mantissa}e-{exponent}")


def parse_eccentricity(text: str) -> float:
    """Parse the seven digit eccentricity field, which has an implied ``0.``."""

    if not _ECCENTRICITY_RE.fullmatch(text):
        raise TLEError()
    return float(f"0.{text}")


def parse_text(text: str) -> str:
    return text.strip()


def parse_char(text: str) -> str:
    if len(text) != 1:
        raise TLEError()
    return text


__all__ = [
    "parse_uint",
    "parse_digit",
    "parse_decimal",
    "parse_ugly_float",
    "parse_eccentricity",
    "parse_text",
    "parse_char",
]
