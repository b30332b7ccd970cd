"""Navigation package for NMEA VTG conversion and the aggregate record."""

from nmeanav.info import InfoField, NavigationInfo, SentenceType
from nmeanav.nmea import (
    VTGData,
    format_sentence,
    generate_vtg,
    parse_vtg,
    validate_checksum,
    vtg_from_info,
    vtg_to_info,
)

__all__ = [
    "InfoField",
    "NavigationInfo",
    "SentenceType",
    "VTGData",
    "format_sentence",
    "generate_vtg",
    "parse_vtg",
    "validate_checksum",
    "vtg_from_info",
    "vtg_to_info",
]
