"""Shared dataclasses and errors for the TLE parser core."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

ERROR_MESSAGE = "Invalid TLE Format"


class TLEError(ValueError):
    """Raised when text does not follow the two-line element format.

    The message is always ``"Invalid TLE Format"``.  ``line`` and ``field``
    name where parsing stopped and are only meant for diagnostics.
    """

    def __init__(self, line: Optional[Union[int, str]] = None, field: Optional[str] = None) -> None:
        super().__init__(ERROR_MESSAGE)
        self.line = line
        self.field = field

    def __str__(self) -> str:
        return ERROR_MESSAGE

    def __repr__(self) -> str:
        return f"TLEError(line={self.line!r}, field={self.field!r})"


@dataclass(frozen=True)
class TLE:
    """Representation of a parsed two-line element set."""

    name: str
    satellite_number: int
    classification: str
    international_designator: str
    epoch: str
    first_derivative_mean_motion: float
    second_derivative_mean_motion: float
    drag_term: float
    ephemeris_type: int
    element_number: int
    inclination: float
    right_ascension: float
    eccentricity: float
    argument_of_perigee: float
    mean_anomaly: float
    mean_motion: float
    revolution_number: int

    def as_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


__all__ = ["ERROR_MESSAGE", "TLE", "TLEError"]
