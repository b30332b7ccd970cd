"""NMEA 0183 VTG conversion: tokenizing, decoding, encoding and framing."""

from nmeanav.nmea.checksum import calculate_checksum, validate_checksum
from nmeanav.nmea.errors import (
    ArityMismatchError,
    SentenceError,
    SentenceTooLongError,
    UnitMismatchError,
)
from nmeanav.nmea.fields import scan_sentence
from nmeanav.nmea.sentence import SentenceFormatter, format_sentence
from nmeanav.nmea.types import VTGData
from nmeanav.nmea.vtg import generate_vtg, parse_vtg, vtg_from_info, vtg_to_info

__all__ = [
    "ArityMismatchError",
    "SentenceError",
    "SentenceFormatter",
    "SentenceTooLongError",
    "UnitMismatchError",
    "VTGData",
    "calculate_checksum",
    "format_sentence",
    "generate_vtg",
    "parse_vtg",
    "scan_sentence",
    "validate_checksum",
    "vtg_from_info",
    "vtg_to_info",
]
