"""SCPI program data encoding.

This package converts typed values into the parameter syntax of SCPI
1999.0 and IEEE 488.2 commands. It includes:

- A ``Parameter`` protocol implemented by every encodable value
- Mnemonic, string, block, boolean, integer and float encoders
- The DEF, MIN/MAX and UP/DOWN special parameters
- Comma-separated composite parameters
- Custom exception types for values that cannot be encoded

Encoders write into any byte sink with a ``write()`` method; building
complete commands and talking to instruments is left to the caller.

Typical usage::

    from scpi_param import Block, Discrete, Limit, encode_to_bytes

    header = b"SOUR:VOLT "
    command = header + encode_to_bytes(Limit.MAX)   # b'SOUR:VOLT MAX'
    trace = b"TRAC:DATA " + encode_to_bytes(Discrete("TRACE1"), Block(samples))
"""

from scpi_param.block import MAX_BLOCK_LENGTH, Block, block_header
from scpi_param.errors import (
    BlockTooLargeError,
    EncodingError,
    InvalidMnemonicError,
    InvalidStringCharacterError,
    NumericOutOfRangeError,
    ScpiError,
)
from scpi_param.number import (
    NUMERIC_LIMIT,
    Boolean,
    Float,
    Integer,
    format_bool,
    format_int,
    format_number,
)
from scpi_param.parameter import Composite, Parameter, encode, encode_to_bytes, to_parameter
from scpi_param.sink import ByteSink
from scpi_param.special import DEFAULT, DefaultValue, Limit, Step
from scpi_param.text import Discrete, QuotedString

__all__ = [
    # Protocols
    "ByteSink",
    "Parameter",
    # Encoding entry points
    "encode",
    "encode_to_bytes",
    "to_parameter",
    # Parameters
    "Block",
    "Boolean",
    "Composite",
    "Discrete",
    "Float",
    "Integer",
    "QuotedString",
    # Special parameters
    "DEFAULT",
    "DefaultValue",
    "Limit",
    "Step",
    # Formatting helpers
    "MAX_BLOCK_LENGTH",
    "NUMERIC_LIMIT",
    "block_header",
    "format_bool",
    "format_int",
    "format_number",
    # Errors
    "BlockTooLargeError",
    "EncodingError",
    "InvalidMnemonicError",
    "InvalidStringCharacterError",
    "NumericOutOfRangeError",
    "ScpiError",
]
