"""NMEA data types for sentence-local records.

Design Decisions:
    1. Presence follows the unit tag: a field group is present exactly when
       its unit tag is set, and ``present`` is computed from the tags rather
       than stored next to them. A record can never claim a group is present
       while its unit is blank, or the other way round.

    2. Absent values are 0.0: the decoder uses NaN only while tokenizing.
       Once a record exists, absent groups hold 0.0 with an empty unit, and
       present values are always finite.

    3. Immutable records: a record is validated once at construction, so
       the unit tags cannot later be swapped for invalid ones.
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass

from nmeanav.info.types import InfoField

UNIT_TRACK_TRUE = "T"
UNIT_TRACK_MAGNETIC = "M"
UNIT_KNOTS = "N"
UNIT_KILOMETERS_PER_HOUR = "K"


@dataclass(frozen=True)
class VTGData:
    """Decoded (or about to be encoded) VTG sentence.

    VTG (Track Made Good and Ground Speed) carries the course over ground,
    relative to true and magnetic north, and the ground speed in both knots
    and km/h.

    Attributes:
        track_true_degrees: Track relative to true north, 0.0 to 360.0.
        track_true_unit: ``"T"`` when present, else ``""``.

        track_magnetic_degrees: Track relative to magnetic north.
        track_magnetic_unit: ``"M"`` when present, else ``""``.

        speed_knots: Ground speed in knots (1 knot = 1.852 km/h).
        speed_knots_unit: ``"N"`` when present, else ``""``.

        speed_kilometers_per_hour: Ground speed in km/h.
        speed_kilometers_per_hour_unit: ``"K"`` when present, else ``""``.

    Raises:
        ValueError: If a unit tag is neither empty nor the letter its field
            requires, or a present value is not finite.

    Example:
        >>> vtg = parse_vtg("$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*")
        >>> vtg.track_true_degrees
        54.7
        >>> InfoField.SPEED in vtg.present
        True
    """

    track_true_degrees: float = 0.0
    track_true_unit: str = ""
    track_magnetic_degrees: float = 0.0
    track_magnetic_unit: str = ""
    speed_knots: float = 0.0
    speed_knots_unit: str = ""
    speed_kilometers_per_hour: float = 0.0
    speed_kilometers_per_hour_unit: str = ""

    def __post_init__(self) -> None:
        for name, value, unit, expected in self._groups():
            if unit not in ("", expected):
                raise ValueError(
                    f"{name} unit must be '{expected}' or empty, got '{unit}'"
                )
            if unit and not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value}")

    def _groups(self) -> Iterator[tuple[str, float, str, str]]:
        yield (
            "track",
            self.track_true_degrees,
            self.track_true_unit,
            UNIT_TRACK_TRUE,
        )
        yield (
            "mtrack",
            self.track_magnetic_degrees,
            self.track_magnetic_unit,
            UNIT_TRACK_MAGNETIC,
        )
        yield (
            "knots speed",
            self.speed_knots,
            self.speed_knots_unit,
            UNIT_KNOTS,
        )
        yield (
            "kph speed",
            self.speed_kilometers_per_hour,
            self.speed_kilometers_per_hour_unit,
            UNIT_KILOMETERS_PER_HOUR,
        )

    @property
    def present(self) -> InfoField:
        """Field groups holding data: ``TRACK``, ``MTRACK`` and ``SPEED``."""
        present = InfoField(0)
        if self.track_true_unit:
            present |= InfoField.TRACK
        if self.track_magnetic_unit:
            present |= InfoField.MTRACK
        if self.speed_knots_unit or self.speed_kilometers_per_hour_unit:
            present |= InfoField.SPEED
        return present
