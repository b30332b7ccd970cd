"""VTG sentence conversion.

VTG (Track Made Good and Ground Speed) provides the course and speed over
ground. This module converts it in both directions:

    parse_vtg       sentence text        -> VTGData
    vtg_to_info     VTGData              -> NavigationInfo (merge)
    vtg_from_info   NavigationInfo       -> VTGData
    generate_vtg    VTGData              -> sentence text

VTG Sentence Format:
    $GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*48
           |     | |     | |     | |     |
           |     | |     | |     | +-----+-- Speed in km/h
           |     | |     | +-----+-- Speed in knots
           |     | +-----+-- Track (magnetic north, degrees)
           +-----+-- Track (true north, degrees)

Every value travels with its unit tag. A value without its tag (or a tag
without its value) counts as absent. A tag that is present but wrong for
its slot rejects the whole sentence.

Speed is one quantity reported twice. When only one of the two speed
fields is present the other is derived (1 knot = 1.852 km/h); when both
are present they are kept exactly as reported, even if they disagree.

The checksum is not verified here; framing and checksum validation belong
to whoever splits the byte stream into sentences.
"""

import logging
import math
from typing import cast

from nmeanav.info.presence import is_present, set_present
from nmeanav.info.types import InfoField, NavigationInfo, SentenceType
from nmeanav.nmea.errors import ArityMismatchError, SentenceError, UnitMismatchError
from nmeanav.nmea.fields import scan_sentence
from nmeanav.nmea.sentence import SentenceFormatter, format_sentence
from nmeanav.nmea.types import (
    UNIT_KILOMETERS_PER_HOUR,
    UNIT_KNOTS,
    UNIT_TRACK_MAGNETIC,
    UNIT_TRACK_TRUE,
    VTGData,
)

logger = logging.getLogger(__name__)

_SENTENCE_ID = "GPVTG"
_TEMPLATE = "$GPVTG,%f,%c,%f,%c,%f,%c,%f,%c*"
_FIELD_COUNT = 8

_KNOTS_TO_KILOMETERS_PER_HOUR = 1.852

_ScannedFields = tuple[float, str, float, str, float, str, float, str]


# --- decoding -----------------------------------------------------------------


def _scan_fields(sentence: str) -> _ScannedFields:
    """Tokenize a VTG sentence, insisting on all eight fields.

    Empty values come back as NaN and empty units as "", so a field that
    was left blank and one that was never filled look the same.

    Raises:
        ArityMismatchError: If the tokenizer parsed fewer than 8 fields.
    """
    values = scan_sentence(sentence, _TEMPLATE)
    if len(values) != _FIELD_COUNT:
        raise ArityMismatchError(len(values), _FIELD_COUNT)
    return cast(_ScannedFields, tuple(values))


def _resolve_field(
    value: float,
    unit: str,
    expected: str,
    name: str,
) -> tuple[float, str]:
    """Decide whether one value/unit pair is present and check its unit.

    Returns:
        ``(value, unit)`` with the unit uppercased when present, or
        ``(0.0, "")`` when the value is NaN or the unit is empty.

    Raises:
        UnitMismatchError: If the pair is present with the wrong unit.
    """
    if math.isnan(value) or not unit:
        return 0.0, ""

    unit = unit.upper()
    if unit != expected:
        raise UnitMismatchError(name, unit, expected)
    return value, unit


def _resolve_speed(
    knots: float,
    knots_unit: str,
    kilometers_per_hour: float,
    kilometers_per_hour_unit: str,
) -> tuple[float, str, float, str]:
    """Fill in whichever speed field is missing from the one that is present."""
    if knots_unit and not kilometers_per_hour_unit:
        return (
            knots,
            knots_unit,
            knots * _KNOTS_TO_KILOMETERS_PER_HOUR,
            UNIT_KILOMETERS_PER_HOUR,
        )
    if kilometers_per_hour_unit and not knots_unit:
        return (
            kilometers_per_hour / _KNOTS_TO_KILOMETERS_PER_HOUR,
            UNIT_KNOTS,
            kilometers_per_hour,
            kilometers_per_hour_unit,
        )
    return knots, knots_unit, kilometers_per_hour, kilometers_per_hour_unit


def _build_vtg_data(fields: _ScannedFields) -> VTGData:
    """Construct a VTGData from the eight scanned fields.

    Maps template slots to VTGData attributes:
        fields[0], fields[1] -> track (true), 'T'
        fields[2], fields[3] -> track (magnetic), 'M'
        fields[4], fields[5] -> speed in knots, 'N'
        fields[6], fields[7] -> speed in km/h, 'K'
    """
    track, track_unit = _resolve_field(
        fields[0], fields[1], UNIT_TRACK_TRUE, "track"
    )
    magnetic, magnetic_unit = _resolve_field(
        fields[2], fields[3], UNIT_TRACK_MAGNETIC, "mtrack"
    )
    knots, knots_unit = _resolve_field(
        fields[4], fields[5], UNIT_KNOTS, "knots speed"
    )
    kilometers_per_hour, kilometers_per_hour_unit = _resolve_field(
        fields[6], fields[7], UNIT_KILOMETERS_PER_HOUR, "kph speed"
    )
    knots, knots_unit, kilometers_per_hour, kilometers_per_hour_unit = (
        _resolve_speed(
            knots, knots_unit, kilometers_per_hour, kilometers_per_hour_unit
        )
    )

    return VTGData(
        track_true_degrees=track,
        track_true_unit=track_unit,
        track_magnetic_degrees=magnetic,
        track_magnetic_unit=magnetic_unit,
        speed_knots=knots,
        speed_knots_unit=knots_unit,
        speed_kilometers_per_hour=kilometers_per_hour,
        speed_kilometers_per_hour_unit=kilometers_per_hour_unit,
    )


def parse_vtg(sentence: str | None) -> VTGData | None:
    """Parse a GPVTG sentence into a VTGData record.

    It performs:
    1. Tokenizing against the fixed eight-field template
    2. Strict arity check (exactly 8 fields must tokenize)
    3. Per-group presence and unit validation (case-insensitive units)
    4. Cross-derivation of a missing speed field

    Args:
        sentence: Raw sentence text. Checksum digits and a trailing CR/LF
            are allowed but not verified.

    Returns:
        VTGData if parsing succeeds, or None if:
        - ``sentence`` is None
        - Fewer than 8 fields tokenize (wrong sentence type, truncated
          sentence, unparseable number, multi-character unit)
        - A present field has the wrong unit

    Example:
        >>> vtg = parse_vtg("$GPVTG,,,,,,,36.0,K*")
        >>> vtg.speed_knots
        19.438...
        >>> vtg.speed_knots_unit
        'N'
    """
    if sentence is None:
        logger.error("GPVTG parse error: no sentence given")
        return None

    logger.debug("GPVTG parse: %r", sentence)

    try:
        return _build_vtg_data(_scan_fields(sentence))
    except SentenceError as error:
        logger.error("GPVTG parse error: %s in %r", error, sentence.strip())
        return None


# --- aggregate record ---------------------------------------------------------


def _speed_kilometers_per_hour(vtg: VTGData) -> float:
    """Speed in km/h from whichever speed field the record carries."""
    if vtg.speed_kilometers_per_hour_unit:
        return vtg.speed_kilometers_per_hour
    return vtg.speed_knots * _KNOTS_TO_KILOMETERS_PER_HOUR


def vtg_to_info(vtg: VTGData | None, info: NavigationInfo | None) -> None:
    """Merge a VTG record into the aggregate navigation record.

    Only present groups are copied; everything else in ``info``, including
    fields owned by other sentence types, is left untouched. The GPVTG
    bit is added to the sentence mask even when no group is present.
    Nothing is ever cleared.

    Does nothing if either argument is None. Callers merging into a shared
    ``info`` from several threads must serialize the calls.
    """
    if vtg is None or info is None:
        return

    info.present = set_present(info.present, InfoField.SMASK)
    info.sentence_mask |= SentenceType.GPVTG

    present = vtg.present

    if is_present(present, InfoField.TRACK):
        info.track_true_degrees = vtg.track_true_degrees
        info.present = set_present(info.present, InfoField.TRACK)

    if is_present(present, InfoField.MTRACK):
        info.track_magnetic_degrees = vtg.track_magnetic_degrees
        info.present = set_present(info.present, InfoField.MTRACK)

    if is_present(present, InfoField.SPEED):
        info.speed_kilometers_per_hour = _speed_kilometers_per_hour(vtg)
        info.present = set_present(info.present, InfoField.SPEED)


def vtg_from_info(info: NavigationInfo | None) -> VTGData | None:
    """Project the aggregate navigation record onto a fresh VTG record.

    Present track groups are copied with their canonical units. Present
    speed, stored in km/h, is expressed in both knots and km/h.

    Returns:
        The projected record, or None if ``info`` is None.
    """
    if info is None:
        return None

    track, track_unit = 0.0, ""
    if is_present(info.present, InfoField.TRACK):
        track, track_unit = info.track_true_degrees, UNIT_TRACK_TRUE

    magnetic, magnetic_unit = 0.0, ""
    if is_present(info.present, InfoField.MTRACK):
        magnetic, magnetic_unit = info.track_magnetic_degrees, UNIT_TRACK_MAGNETIC

    knots, knots_unit = 0.0, ""
    kilometers_per_hour, kilometers_per_hour_unit = 0.0, ""
    if is_present(info.present, InfoField.SPEED):
        kilometers_per_hour = info.speed_kilometers_per_hour
        kilometers_per_hour_unit = UNIT_KILOMETERS_PER_HOUR
        knots = kilometers_per_hour / _KNOTS_TO_KILOMETERS_PER_HOUR
        knots_unit = UNIT_KNOTS

    return VTGData(
        track_true_degrees=track,
        track_true_unit=track_unit,
        track_magnetic_degrees=magnetic,
        track_magnetic_unit=magnetic_unit,
        speed_knots=knots,
        speed_knots_unit=knots_unit,
        speed_kilometers_per_hour=kilometers_per_hour,
        speed_kilometers_per_hour_unit=kilometers_per_hour_unit,
    )


# --- encoding -----------------------------------------------------------------


def _render(value: float, unit: str) -> list[str]:
    """Render one value/unit pair; two empty slots when absent."""
    if not unit:
        return ["", ""]
    return [f"{value:03.1f}", unit]


def generate_vtg(
    vtg: VTGData | None,
    formatter: SentenceFormatter = format_sentence,
) -> str:
    """Encode a VTG record as sentence text.

    Present groups are written with one decimal digit and their unit tag.
    Absent groups are written as two empty slots, never dropped, so the
    sentence always has eight fields. If a record carries only one of the
    two speed fields, the other is derived before writing.

    Args:
        vtg: Record to encode.
        formatter: Frames the rendered fields; its return value is passed
            through unchanged. Defaults to ``format_sentence``, which adds
            the '$GPVTG' prefix, checksum and CR/LF.

    Returns:
        Whatever ``formatter`` returns for the sentence.

    Raises:
        ValueError: If ``vtg`` is None.

    Example:
        >>> generate_vtg(parse_vtg("$GPVTG,045.2,T,,,10.0,N,,*"))
        '$GPVTG,45.2,T,,,10.0,N,18.5,K*13\\r\\n'
    """
    if vtg is None:
        raise ValueError("GPVTG generate error: no record given")

    fields = _render(vtg.track_true_degrees, vtg.track_true_unit)
    fields += _render(vtg.track_magnetic_degrees, vtg.track_magnetic_unit)

    knots, knots_unit, kilometers_per_hour, kilometers_per_hour_unit = (
        _resolve_speed(
            vtg.speed_knots,
            vtg.speed_knots_unit,
            vtg.speed_kilometers_per_hour,
            vtg.speed_kilometers_per_hour_unit,
        )
    )
    fields += _render(knots, knots_unit)
    fields += _render(kilometers_per_hour, kilometers_per_hour_unit)

    return formatter(_SENTENCE_ID, fields)
