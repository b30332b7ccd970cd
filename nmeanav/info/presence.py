"""Accessors for presence masks.

Masks are immutable ``IntFlag`` values, so the mutator returns the new
mask instead of updating one in place:

    info.present = set_present(info.present, InfoField.TRACK)
"""

from nmeanav.info.types import InfoField

__all__ = ["is_present", "set_present"]


def is_present(mask: InfoField, field: InfoField) -> bool:
    """Return True if any bit of ``field`` is set in ``mask``."""
    return bool(mask & field)


def set_present(mask: InfoField, field: InfoField) -> InfoField:
    """Return ``mask`` with the bits of ``field`` added."""
    return mask | field
