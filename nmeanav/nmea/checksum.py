"""NMEA checksum calculation and validation.

The checksum is the XOR of every character between '$' and '*' (both
exclusive), written after the '*' as two uppercase hexadecimal digits.

Example sentence structure:
    $GPVTG,45.2,T,42.8,M,10.0,N,18.5,K*4E
    ^       checksum content          ^^
    start                      checksum (0x4E)
"""

_START_DELIMITER = "$"
_CHECKSUM_DELIMITER = "*"
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _split_checksum(sentence: str) -> tuple[str, str] | None:
    """Split a framed sentence into its checksummed content and hex digits.

    Returns:
        ``(content, checksum_hex)``, or None when the '$' or '*' delimiter
        is missing or anything other than two checksum digits follows the '*'.

    Example:
        >>> _split_checksum("$GPVTG,,,,,,,,*52")
        ('GPVTG,,,,,,,,', '52')
    """
    if not sentence.startswith(_START_DELIMITER):
        return None
    if _CHECKSUM_DELIMITER not in sentence:
        return None

    end = sentence.index(_CHECKSUM_DELIMITER)
    content = sentence[1:end]
    provided = sentence[end + 1 :]

    if len(provided) != 2 or not _HEX_DIGITS.issuperset(provided):
        return None

    return content, provided


def calculate_checksum(content: str) -> int:
    """XOR the ASCII codes of ``content`` into a single byte.

    Args:
        content: The text between '$' and '*', delimiters excluded.

    Returns:
        Checksum in the range 0-255.
    """
    result = 0
    for character in content:
        result ^= ord(character)
    return result


def validate_checksum(sentence: str) -> bool:
    """Check that a framed sentence carries the checksum of its content.

    Surrounding whitespace (including the CR/LF line terminator) is
    ignored.

    Returns:
        True when the provided checksum matches; False when the sentence
        is unframed, truncated, has non-hexadecimal digits, or mismatches.

    Example:
        >>> validate_checksum("$GPVTG,45.2,T,42.8,M,10.0,N,18.5,K*4E\\r\\n")
        True
    """
    parts = _split_checksum(sentence.strip())
    if parts is None:
        return False

    content, provided = parts

    return calculate_checksum(content) == int(provided, 16)
