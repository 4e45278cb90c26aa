"""SCPI parameter encoding error types.

This module defines the exception hierarchy raised when a value cannot be
expressed as SCPI program data. Errors raised by the byte sink itself are
never wrapped; they reach the caller unchanged.

Exception hierarchy:
    ScpiError (base)
    +-- EncodingError: Value cannot be represented as program data
        +-- InvalidMnemonicError: Bad character in a discrete mnemonic
        +-- InvalidStringCharacterError: Bad character in a quoted string
        +-- BlockTooLargeError: Block length needs more than 9 digits
        +-- NumericOutOfRangeError: Float magnitude exceeds 9.9E37
"""

from __future__ import annotations


class ScpiError(Exception):
    """Base exception for scpi-param errors.

    Catch this to handle any error raised by the package itself.
    """


class EncodingError(ScpiError, ValueError):
    """Raised when a value cannot be encoded as SCPI program data.

    The offending encoder raises before it finishes writing, so the sink may
    hold a truncated prefix that must not be forwarded to an instrument.
    """


class InvalidMnemonicError(EncodingError):
    """Raised when a discrete mnemonic contains a disallowed character.

    Attributes:
        text: The rejected mnemonic.
        index: Position of the first disallowed character.
        character: The disallowed character.
    """

    def __init__(self, text: str, index: int, character: str) -> None:
        """Initialize the error.

        Args:
            text: The rejected mnemonic.
            index: Position of the first disallowed character.
            character: The disallowed character.
        """
        self.text = text
        self.index = index
        self.character = character
        super().__init__(
            f"Invalid character {character!r} at index {index} in mnemonic {text!r}"
        )


class InvalidStringCharacterError(EncodingError):
    """Raised when string program data contains a disallowed character.

    Only 7-bit ASCII is permitted, and of the control characters only ASCII
    whitespace.

    Attributes:
        text: The rejected string.
        index: Position of the first disallowed character.
        character: The disallowed character.
    """

    def __init__(self, text: str, index: int, character: str) -> None:
        self.text = text
        self.index = index
        self.character = character
        super().__init__(
            f"Invalid character {character!r} at index {index} in string {text!r}"
        )


class BlockTooLargeError(EncodingError):
    """Raised when a block is too long for the single-digit length header.

    Attributes:
        length: Byte length of the rejected block.
    """

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            f"Block of {length} bytes exceeds the 9-digit length field of "
            f"arbitrary block program data"
        )


class NumericOutOfRangeError(EncodingError):
    """Raised when a finite number is outside the decimal numeric range.

    Attributes:
        value: The rejected number.
        limit: The largest permitted magnitude.
    """

    def __init__(self, value: float, limit: float) -> None:
        self.value = value
        self.limit = limit
        super().__init__(f"Numeric value {value!r} exceeds the SCPI range of +/-{limit:E}")
