"""Exceptions raised while scanning, decoding, or framing NMEA sentences.

All of them derive from ``ValueError`` so that parsers can keep the
``except (ValueError, IndexError): return None`` recovery used throughout
the package, while tests and callers can still tell the failure kinds apart.
"""


class SentenceError(ValueError):
    """Base class for sentence-level decode and encode failures."""


class ArityMismatchError(SentenceError):
    """The tokenizer parsed a different number of fields than the template has.

    Attributes:
        observed: Number of fields successfully tokenized.
        expected: Number of fields the template requires.
    """

    def __init__(self, observed: int, expected: int) -> None:
        super().__init__(f"need {expected} tokens, got {observed}")
        self.observed = observed
        self.expected = expected


class UnitMismatchError(SentenceError):
    """A present field carries a unit tag other than the one its slot requires.

    Attributes:
        field: Human-readable field name (e.g. ``"track"``).
        observed: Unit tag after case normalization.
        expected: The only unit tag accepted for this field.
    """

    def __init__(self, field: str, observed: str, expected: str) -> None:
        super().__init__(
            f"invalid {field} unit, got '{observed}', expected '{expected}'"
        )
        self.field = field
        self.observed = observed
        self.expected = expected


class SentenceTooLongError(SentenceError):
    """A framed sentence exceeds the NMEA 0183 maximum length."""
