"""Helper factories for server tests."""

from nmeanav.nmea import format_sentence


def frame(*fields: str) -> str:
    """Build a checksummed GPVTG sentence from its eight fields."""
    return format_sentence("GPVTG", list(fields))


def full_vtg() -> str:
    return frame("45.2", "T", "42.8", "M", "10.0", "N", "18.5", "K")


def track_only_vtg(track: str = "90.0") -> str:
    return frame(track, "T", "", "", "", "", "", "")
