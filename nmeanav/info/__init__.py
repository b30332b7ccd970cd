"""Aggregate navigation record and its presence flags."""

from nmeanav.info.presence import is_present, set_present
from nmeanav.info.types import InfoField, NavigationInfo, SentenceType

__all__ = [
    "InfoField",
    "NavigationInfo",
    "SentenceType",
    "is_present",
    "set_present",
]
