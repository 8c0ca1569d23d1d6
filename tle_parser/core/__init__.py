"""Public API for tle_parser core primitives."""

from .fields import parse_eccentricity, parse_ugly_float
from .parser import parse
from .types import TLE, TLEError

__all__ = ["TLE", "TLEError", "parse", "parse_ugly_float", "parse_eccentricity"]
