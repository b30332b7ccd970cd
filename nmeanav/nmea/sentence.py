"""NMEA sentence framing for generated output.

Encoders render their fields to strings and hand them to a formatter,
which owns everything sentence-type independent: the '$' prefix and
sentence id, the ',' delimiters, the '*' checksum suffix and the CR/LF
line terminator.

    format_sentence("GPVTG", ["45.2", "T", "", "", "10.0", "N", "18.5", "K"])
    -> "$GPVTG,45.2,T,,,10.0,N,18.5,K*XX\\r\\n"
"""

from collections.abc import Callable, Sequence

from nmeanav.nmea.checksum import calculate_checksum
from nmeanav.nmea.errors import SentenceTooLongError

__all__ = ["SentenceFormatter", "format_sentence"]

# NMEA 0183 limit, counted from '$' through the checksum digits
_MAXIMUM_SENTENCE_LENGTH = 82

_LINE_TERMINATOR = "\r\n"

SentenceFormatter = Callable[[str, Sequence[str]], str]


def format_sentence(
    sentence_id: str,
    fields: Sequence[str],
    maximum_length: int = _MAXIMUM_SENTENCE_LENGTH,
) -> str:
    """Frame pre-rendered fields as a complete NMEA sentence.

    Args:
        sentence_id: Talker and sentence type, e.g. ``"GPVTG"``.
        fields: Field strings in wire order; empty strings become empty
            slots, so the field count is always preserved.
        maximum_length: Largest allowed length excluding CR/LF.

    Returns:
        The framed sentence, including checksum and CR/LF.

    Raises:
        SentenceTooLongError: If the framed sentence exceeds
            ``maximum_length``.
    """
    content = ",".join([sentence_id, *fields])
    framed = f"${content}*{calculate_checksum(content):02X}"
    if len(framed) > maximum_length:
        raise SentenceTooLongError(
            f"{sentence_id} sentence is {len(framed)} characters, "
            f"limit is {maximum_length}"
        )
    return framed + _LINE_TERMINATOR
