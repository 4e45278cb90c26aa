"""Byte sink protocol definition.

This module defines the :class:`ByteSink` protocol, the only interface the
encoders consume. The command-assembly or transport layer supplies the sink
and owns it; encoders borrow it for a single call and never keep a reference.

Compatible sinks include:
- :class:`io.BytesIO` and files opened in binary mode
- Any object exposing ``write(data)`` that accepts bytes
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ByteSink(Protocol):
    """Protocol for a writable byte destination.

    This is a structural subtyping protocol (duck typing). Any class that
    implements a ``write()`` method accepting bytes is a valid sink. Errors
    raised by ``write()`` are propagated to the caller unchanged.

    Example:
        >>> class ListSink:
        ...     def __init__(self) -> None:
        ...         self.chunks: list[bytes] = []
        ...     def write(self, data: bytes) -> None:
        ...         self.chunks.append(bytes(data))
        ...
        >>> sink: ByteSink = ListSink()  # Type checks OK
    """

    def write(self, data: bytes) -> object:
        """Write a run of bytes.

        Args:
            data: The bytes to append. May be a ``memoryview`` over caller
                data for blocks.

        Returns:
            Whatever the sink returns (ignored by the encoders).
        """
        ...
