"""Tests for NMEA sentence framing."""

import pytest

from nmeanav.nmea import SentenceTooLongError, format_sentence, validate_checksum


class TestFormatSentence:
    """Tests for format_sentence function."""

    def test_frames_fields_with_checksum_and_crlf(self):
        sentence = format_sentence(
            "GPVTG", ["45.2", "T", "42.8", "M", "10.0", "N", "18.5", "K"]
        )
        assert sentence == "$GPVTG,45.2,T,42.8,M,10.0,N,18.5,K*4E\r\n"

    def test_empty_fields_keep_their_slots(self):
        sentence = format_sentence("GPVTG", [""] * 8)
        assert sentence == "$GPVTG,,,,,,,,*52\r\n"

    def test_output_validates(self):
        sentence = format_sentence("GPVTG", ["", "", "1.0", "M", "", "", "", ""])
        assert validate_checksum(sentence) is True

    def test_too_long_raises(self):
        with pytest.raises(SentenceTooLongError, match="limit is 20"):
            format_sentence("GPVTG", ["123.4", "T"] * 4, maximum_length=20)

    def test_default_limit_is_nmea_maximum(self):
        with pytest.raises(SentenceTooLongError):
            format_sentence("GPVTG", ["1" * 80])
