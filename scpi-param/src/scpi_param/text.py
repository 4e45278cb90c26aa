"""Character and mnemonic program data.

Implements discrete (mnemonic) parameters and string program data as defined
by IEEE 488.2. Both accept only 7-bit ASCII; control characters are rejected
unless they are ASCII whitespace.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from scpi_param.errors import InvalidMnemonicError, InvalidStringCharacterError

if TYPE_CHECKING:
    from scpi_param.sink import ByteSink

# Control characters permitted in program data: tab, LF, FF, CR.
_ASCII_WHITESPACE: frozenset[str] = frozenset("\t\n\x0c\r")

_QUOTE = '"'


def is_allowed_char(ch: str) -> bool:
    """Check whether a character may appear in mnemonic or string data.

    Args:
        ch: A single character.

    Returns:
        True for printable ASCII and ASCII whitespace, False otherwise.
    """
    code = ord(ch)
    if code >= 0x80:
        return False
    if code < 0x20 or code == 0x7F:
        return ch in _ASCII_WHITESPACE
    return True


def find_disallowed(text: str) -> int | None:
    """Return the index of the first disallowed character, or None."""
    for index, ch in enumerate(text):
        if not is_allowed_char(ch):
            return index
    return None


@dataclass(frozen=True)
class Discrete:
    """Discrete (mnemonic) parameter, written verbatim.

    Reference: IEEE 488.2 character program data.

    Attributes:
        text: The mnemonic, e.g. ``"VOLT"`` or ``"BUS"``.

    Example:
        >>> buf = io.BytesIO()
        >>> Discrete("TEST").encode(buf)
        >>> buf.getvalue()
        b'TEST'
    """

    text: str

    def encode(self, sink: ByteSink) -> None:
        """Write the mnemonic bytes.

        Raises:
            InvalidMnemonicError: If the mnemonic contains a character that
                is not printable ASCII or ASCII whitespace.
        """
        index = find_disallowed(self.text)
        if index is not None:
            raise InvalidMnemonicError(self.text, index, self.text[index])
        sink.write(self.text.encode("ascii"))


@dataclass(frozen=True)
class QuotedString:
    """String program data, double-quoted with embedded quotes doubled.

    Attributes:
        text: Arbitrary text; must be ASCII unless ``replacement`` is set.
        replacement: Optional single character substituted for disallowed
            characters instead of raising. ``None`` (the default) rejects them.

    Raises:
        ValueError: If ``replacement`` is not exactly one character.
        InvalidStringCharacterError: If ``replacement`` is ``"`` or is itself
            a disallowed character.
    """

    text: str
    replacement: str | None = None

    def __post_init__(self) -> None:
        """Validate the replacement character."""
        rep = self.replacement
        if rep is None:
            return
        if len(rep) != 1:
            raise ValueError(f"Replacement must be a single character, got {rep!r}")
        if rep == _QUOTE or not is_allowed_char(rep):
            raise InvalidStringCharacterError(rep, 0, rep)

    def _escaped(self) -> str:
        if self.replacement is None:
            index = find_disallowed(self.text)
            if index is not None:
                raise InvalidStringCharacterError(self.text, index, self.text[index])
            return self.text.replace(_QUOTE, _QUOTE * 2)
        chars = []
        for ch in self.text:
            if ch == _QUOTE:
                chars.append(_QUOTE * 2)
            elif is_allowed_char(ch):
                chars.append(ch)
            else:
                chars.append(self.replacement)
        return "".join(chars)

    def encode(self, sink: ByteSink) -> None:
        """Write the quoted string.

        Raises:
            InvalidStringCharacterError: If the text contains a non-ASCII or
                disallowed control character and no replacement is set.
        """
        body = self._escaped()
        sink.write(b'"')
        sink.write(body.encode("ascii"))
        sink.write(b'"')
