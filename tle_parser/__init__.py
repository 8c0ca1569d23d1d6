"""
Parser for NORAD Two-Line Element (TLE) sets.

Turns a name line plus the two fixed-column element lines into an immutable
:class:`TLE` record, or raises :class:`TLEError` ("Invalid TLE Format").

Column layout reference: CelesTrak "NORAD Two-Line Element Set Format".
"""

from __future__ import annotations

__version__ = "0.1.0"

from .core import TLE, TLEError, parse, parse_eccentricity, parse_ugly_float

__all__ = [
    "__version__",
    "TLE",
    "TLEError",
    "parse",
    "parse_ugly_float",
    "parse_eccentricity",
]
