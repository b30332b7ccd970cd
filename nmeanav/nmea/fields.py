"""NMEA field tokenizing.

Sentences are scanned against a scanf-like template such as
``"$GPVTG,%f,%c,%f,%c,%f,%c,%f,%c*"``. Literal text in the template must
match the sentence exactly; each conversion consumes one field, which ends
at the next ',' or '*' (or the end of the line).

Empty fields are legitimate in NMEA (consecutive commas mean "no data"),
so they always convert successfully to an absent marker:

    %f  float   empty -> NaN
    %d  int     empty -> None
    %c  char    empty -> ""
    %s  string  empty -> ""

Scanning stops at the first literal mismatch or unconvertible field. The
number of values returned is therefore the number of fields that parsed,
which callers use for their arity checks.
"""

import math
import re
from collections.abc import Callable

_FIELD_TERMINATORS = ",*"

_CONVERSION_PATTERN = re.compile(r"(%[cdfs])")

# Plain decimal notation only: no exponent, no whitespace, no digit separators
_DECIMAL_PATTERN = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)", re.ASCII)

FieldValue = float | int | str | None


def parse_float_field(value: str) -> float:
    """Parse a float field, returning NaN if the field is empty.

    Raises:
        ValueError: If the field is not a plain decimal number.

    Example:
        >>> parse_float_field("045.2")
        45.2
        >>> parse_float_field("")
        nan
    """
    if not value:
        return math.nan
    if _DECIMAL_PATTERN.fullmatch(value) is None:
        raise ValueError(f"not a decimal number: {value!r}")
    return float(value)


def parse_int_field(value: str) -> int | None:
    """Parse an integer field, returning None if the field is empty."""
    if not value:
        return None
    return int(value)


def parse_char_field(value: str) -> str:
    """Parse a single-character field such as a unit tag.

    Raises:
        ValueError: If the field holds more than one character.
    """
    if len(value) > 1:
        raise ValueError(f"expected a single character, got {value!r}")
    return value


def parse_string_field(value: str) -> str:
    return value


_CONVERTERS: dict[str, Callable[[str], FieldValue]] = {
    "%f": parse_float_field,
    "%d": parse_int_field,
    "%c": parse_char_field,
    "%s": parse_string_field,
}


def _read_token(sentence: str, position: int) -> tuple[str, int]:
    """Return the field starting at ``position`` and the index just past it."""
    end = position
    while end < len(sentence) and sentence[end] not in _FIELD_TERMINATORS:
        end += 1
    return sentence[position:end], end


def _split_template(template: str) -> list[str]:
    """Split a template into alternating literals and conversions.

    Example:
        >>> _split_template("$GPVTG,%f,%c*")
        ['$GPVTG,', '%f', ',', '%c', '*']
    """
    return [piece for piece in _CONVERSION_PATTERN.split(template) if piece]


def scan_sentence(sentence: str, template: str) -> list[FieldValue]:
    """Tokenize a sentence against a template.

    Surrounding whitespace, including the CR/LF line terminator, is
    stripped before scanning.

    Args:
        sentence: Raw NMEA sentence, with or without checksum digits.
        template: Literal text interleaved with ``%f``/``%d``/``%c``/``%s``.

    Returns:
        The converted values, in template order, up to the first failure.

    Example:
        >>> scan_sentence("$GPVTG,045.2,T,,M*", "$GPVTG,%f,%c,%f,%c*")
        [45.2, 'T', nan, 'M']
        >>> scan_sentence("$GPVTG,045.2,TT*", "$GPVTG,%f,%c*")
        [45.2]
    """
    sentence = sentence.strip()
    values: list[FieldValue] = []
    position = 0

    for piece in _split_template(template):
        converter = _CONVERTERS.get(piece)
        if converter is None:
            if not sentence.startswith(piece, position):
                break
            position += len(piece)
            continue

        token, position = _read_token(sentence, position)
        try:
            values.append(converter(token))
        except ValueError:
            break

    return values
