"""JSON formatting utilities for navigation records."""

import json

from nmeanav.info import InfoField, NavigationInfo, SentenceType
from nmeanav.nmea import VTGData

__all__ = ["format_info_message", "format_vtg_message"]


def _flag_names(mask: InfoField | SentenceType) -> list[str]:
    return sorted(str(flag.name) for flag in type(mask) if flag in mask)


def format_vtg_message(vtg: VTGData) -> str:
    """Serialize a VTG record into a JSON string."""
    return json.dumps({
        "type": "vtg",
        "track_true_degrees": vtg.track_true_degrees,
        "track_true_unit": vtg.track_true_unit,
        "track_magnetic_degrees": vtg.track_magnetic_degrees,
        "track_magnetic_unit": vtg.track_magnetic_unit,
        "speed_knots": vtg.speed_knots,
        "speed_knots_unit": vtg.speed_knots_unit,
        "speed_kilometers_per_hour": vtg.speed_kilometers_per_hour,
        "speed_kilometers_per_hour_unit": vtg.speed_kilometers_per_hour_unit,
        "present": _flag_names(vtg.present),
    })


def format_info_message(info: NavigationInfo) -> str:
    """Serialize the aggregate record into a JSON string.

    Values whose presence bit is unset are sent as null.
    """
    present = info.present

    def _value(field: InfoField, value: float) -> float | None:
        return value if field in present else None

    return json.dumps({
        "type": "info",
        "track_true_degrees": _value(InfoField.TRACK, info.track_true_degrees),
        "track_magnetic_degrees": _value(
            InfoField.MTRACK, info.track_magnetic_degrees
        ),
        "speed_kilometers_per_hour": _value(
            InfoField.SPEED, info.speed_kilometers_per_hour
        ),
        "present": _flag_names(present),
        "sentences": _flag_names(info.sentence_mask),
    })
