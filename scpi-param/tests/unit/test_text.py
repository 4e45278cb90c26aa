"""Tests for discrete mnemonic and quoted string parameters."""

from __future__ import annotations

import io

import pytest

from scpi_param.errors import InvalidMnemonicError, InvalidStringCharacterError
from scpi_param.text import Discrete, QuotedString, find_disallowed, is_allowed_char


class RecordingSink:
    """Sink that keeps every write as a separate chunk."""

    def __init__(self) -> None:
        self.chunks: list[bytes] = []

    def write(self, data: bytes) -> None:
        self.chunks.append(bytes(data))

    @property
    def data(self) -> bytes:
        return b"".join(self.chunks)


def _encode(param: Discrete | QuotedString) -> bytes:
    buf = io.BytesIO()
    param.encode(buf)
    return buf.getvalue()


# ---------------------------------------------------------------------------
# Character rules
# ---------------------------------------------------------------------------


class TestAllowedCharacters:
    """Tests for is_allowed_char and find_disallowed."""

    @pytest.mark.parametrize("ch", ["A", "z", "0", " ", "~", "'", '"', "\t", "\n", "\r", "\x0c"])
    def test_allowed(self, ch: str) -> None:
        assert is_allowed_char(ch)

    @pytest.mark.parametrize("ch", ["\x00", "\x07", "\x0b", "\x1b", "\x7f", "\x80", "é", "Ω", "☃"])
    def test_disallowed(self, ch: str) -> None:
        assert not is_allowed_char(ch)

    def test_find_disallowed_none(self) -> None:
        assert find_disallowed("VOLT:DC") is None

    def test_find_disallowed_first_index(self) -> None:
        assert find_disallowed("ab\x00c\x01") == 2

    def test_find_disallowed_empty(self) -> None:
        assert find_disallowed("") is None


# ---------------------------------------------------------------------------
# Discrete
# ---------------------------------------------------------------------------


class TestDiscrete:
    """Tests for Discrete.encode."""

    def test_mnemonic_written_verbatim(self) -> None:
        assert _encode(Discrete("TEST")) == b"TEST"

    def test_no_delimiters_added(self) -> None:
        assert _encode(Discrete("CH1")) == b"CH1"

    def test_whitespace_allowed(self) -> None:
        assert _encode(Discrete("A B\t")) == b"A B\t"

    def test_empty_mnemonic(self) -> None:
        assert _encode(Discrete("")) == b""

    def test_control_character_raises(self) -> None:
        with pytest.raises(InvalidMnemonicError) as exc_info:
            _encode(Discrete("BA\x00D"))
        assert exc_info.value.index == 2
        assert exc_info.value.character == "\x00"
        assert exc_info.value.text == "BA\x00D"

    def test_non_ascii_raises(self) -> None:
        with pytest.raises(InvalidMnemonicError, match="index 4"):
            _encode(Discrete("VOLTÉ"))

    def test_rejected_mnemonic_writes_nothing(self) -> None:
        sink = RecordingSink()
        with pytest.raises(InvalidMnemonicError):
            Discrete("\x7f").encode(sink)
        assert sink.chunks == []

    def test_deterministic(self) -> None:
        assert _encode(Discrete("BUS")) == _encode(Discrete("BUS"))

    def test_frozen(self) -> None:
        mnemonic = Discrete("BUS")
        with pytest.raises(AttributeError):
            mnemonic.text = "IMM"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# QuotedString
# ---------------------------------------------------------------------------


class TestQuotedString:
    """Tests for QuotedString.encode."""

    def test_simple(self) -> None:
        assert _encode(QuotedString("foo")) == b'"foo"'

    def test_empty(self) -> None:
        assert _encode(QuotedString("")) == b'""'

    def test_quotes_doubled(self) -> None:
        text = "what if \"quotes\" break 'stuff'?"
        assert _encode(QuotedString(text)) == b"\"what if \"\"quotes\"\" break 'stuff'?\""

    def test_only_quote(self) -> None:
        assert _encode(QuotedString('"')) == b'""""'

    def test_single_quotes_untouched(self) -> None:
        assert _encode(QuotedString("it's")) == b"\"it's\""

    def test_whitespace_controls_allowed(self) -> None:
        assert _encode(QuotedString("a\r\nb")) == b'"a\r\nb"'

    def test_every_quote_doubled(self) -> None:
        text = 'x"y""z"'
        out = _encode(QuotedString(text))
        assert out.startswith(b'"') and out.endswith(b'"')
        assert out[1:-1] == text.replace('"', '""').encode("ascii")

    def test_non_ascii_raises(self) -> None:
        with pytest.raises(InvalidStringCharacterError) as exc_info:
            _encode(QuotedString("5 Ω"))
        assert exc_info.value.index == 2
        assert exc_info.value.character == "Ω"

    def test_control_character_raises(self) -> None:
        with pytest.raises(InvalidStringCharacterError, match="index 1"):
            _encode(QuotedString("a\x1bb"))

    def test_rejected_string_writes_nothing(self) -> None:
        sink = RecordingSink()
        with pytest.raises(InvalidStringCharacterError):
            QuotedString("café").encode(sink)
        assert sink.chunks == []

    def test_output_written_to_custom_sink(self) -> None:
        sink = RecordingSink()
        QuotedString("foo").encode(sink)
        assert sink.data == b'"foo"'


class TestQuotedStringReplacement:
    """Tests for the opt-in replacement character."""

    def test_disallowed_replaced(self) -> None:
        assert _encode(QuotedString("5 Ω", replacement="*")) == b'"5 *"'

    def test_quotes_still_doubled(self) -> None:
        assert _encode(QuotedString('"é"', replacement="?")) == b'"""?"""'

    def test_allowed_text_unchanged(self) -> None:
        assert _encode(QuotedString("foo", replacement="*")) == b'"foo"'

    def test_multi_character_replacement_raises(self) -> None:
        with pytest.raises(ValueError, match="single character"):
            QuotedString("foo", replacement="**")

    def test_empty_replacement_raises(self) -> None:
        with pytest.raises(ValueError, match="single character"):
            QuotedString("foo", replacement="")

    def test_quote_replacement_raises(self) -> None:
        with pytest.raises(InvalidStringCharacterError):
            QuotedString("foo", replacement='"')

    def test_non_ascii_replacement_raises(self) -> None:
        with pytest.raises(InvalidStringCharacterError):
            QuotedString("foo", replacement="é")
