"""Aggregate navigation record shared by all sentence handlers.

Design Decisions:
    1. Presence as flags: every sentence type fills only the fields it
       carries, so the record keeps one ``InfoField`` bit per field group.
       A value whose bit is unset is meaningless, whatever it holds.

    2. Bits are only ever added: handlers merge into the record and never
       clear what another sentence type decoded. Resetting the record is
       the owner's job (create a new ``NavigationInfo``).

    3. Canonical units: speed is stored once, in km/h. Handlers convert
       from whatever unit their sentence carries.
"""

from dataclasses import dataclass
from enum import IntFlag


class InfoField(IntFlag):
    """Field groups of the aggregate record.

    A sentence-local record uses the same flags for the groups it owns,
    e.g. VTG uses ``TRACK``, ``MTRACK`` and ``SPEED``. ``SMASK`` marks the
    sentence mask itself as populated.
    """

    SMASK = 1 << 0
    UTCDATE = 1 << 1
    UTCTIME = 1 << 2
    SIG = 1 << 3
    FIX = 1 << 4
    PDOP = 1 << 5
    HDOP = 1 << 6
    VDOP = 1 << 7
    LAT = 1 << 8
    LON = 1 << 9
    ELV = 1 << 10
    SPEED = 1 << 11
    TRACK = 1 << 12
    MTRACK = 1 << 13
    MAGVAR = 1 << 14
    SATINUSECOUNT = 1 << 15
    SATINUSE = 1 << 16
    SATINVIEW = 1 << 17


class SentenceType(IntFlag):
    """Sentence types that can contribute to the aggregate record."""

    GPGGA = 1 << 0
    GPGSA = 1 << 1
    GPGSV = 1 << 2
    GPRMC = 1 << 3
    GPVTG = 1 << 4


@dataclass
class NavigationInfo:
    """Long-lived navigation snapshot merged from many sentences.

    Attributes:
        track_true_degrees: Track made good relative to true north.
            Meaningful only while ``InfoField.TRACK`` is present.

        track_magnetic_degrees: Track made good relative to magnetic
            north. Meaningful only while ``InfoField.MTRACK`` is present.

        speed_kilometers_per_hour: Ground speed in km/h (canonical unit).
            Meaningful only while ``InfoField.SPEED`` is present.

        present: Field groups some sentence has decoded.

        sentence_mask: Sentence types that have been merged in.

    Example:
        >>> info = NavigationInfo()
        >>> vtg_to_info(parse_vtg("$GPVTG,045.2,T,,,,,,*"), info)
        >>> info.track_true_degrees
        45.2
        >>> InfoField.TRACK in info.present
        True
    """

    track_true_degrees: float = 0.0
    track_magnetic_degrees: float = 0.0
    speed_kilometers_per_hour: float = 0.0
    present: InfoField = InfoField(0)
    sentence_mask: SentenceType = SentenceType(0)
