"""Arbitrary block program data.

A definite-length arbitrary block is written as ``#``, one digit giving the
number of length digits, the length in decimal, and then the raw bytes::

    #13\\x11\\x22\\x33

The single header digit limits blocks to 999,999,999 bytes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from scpi_param.errors import BlockTooLargeError

if TYPE_CHECKING:
    from scpi_param.sink import ByteSink

BytesLike = Union[bytes, bytearray, memoryview]

MAX_BLOCK_LENGTH = 999_999_999


def block_header(length: int) -> bytes:
    """Build the ``#<n><length>`` header for a block of *length* bytes.

    Args:
        length: Number of bytes in the block.

    Returns:
        The ASCII header bytes.

    Raises:
        BlockTooLargeError: If *length* needs more than 9 decimal digits.
    """
    if length > MAX_BLOCK_LENGTH:
        raise BlockTooLargeError(length)
    digits = str(length)
    return f"#{len(digits)}{digits}".encode("ascii")


@dataclass(frozen=True)
class Block:
    """Arbitrary block of bytes.

    The data is borrowed: it is handed to the sink without copying and is not
    retained after :meth:`encode` returns.

    Attributes:
        data: The block contents; any object supporting the buffer protocol.
    """

    data: BytesLike

    def __len__(self) -> int:
        # Byte count, not item count, for multi-byte buffers such as array('d')
        with memoryview(self.data) as view:
            return view.nbytes

    def encode(self, sink: ByteSink) -> None:
        """Write the block header followed by the raw bytes.

        Raises:
            BlockTooLargeError: If the block is longer than 999,999,999 bytes.
                Nothing is written in that case.
        """
        sink.write(block_header(len(self)))
        sink.write(self.data)
