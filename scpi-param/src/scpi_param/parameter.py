"""Parameter protocol, composite parameters and native value dispatch.

Every encodable value implements :class:`Parameter`: a single ``encode()``
method that writes the value's program data into a :class:`ByteSink`. The
built-in encoders live in :mod:`scpi_param.text`, :mod:`scpi_param.block`,
:mod:`scpi_param.number` and :mod:`scpi_param.special`; user code may add its
own types simply by implementing ``encode()``.

Typical usage::

    from scpi_param import Discrete, Limit, encode_to_bytes

    args = encode_to_bytes(Discrete("CH1"), 2.5, Limit.MAX)
    # b'CH1,2.5E0,MAX'
"""

from __future__ import annotations

import io
import logging
import numbers
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from scpi_param.block import Block
from scpi_param.errors import EncodingError
from scpi_param.number import Boolean, Float, Integer
from scpi_param.text import QuotedString

if TYPE_CHECKING:
    from collections.abc import Iterator

    from scpi_param.sink import ByteSink

logger = logging.getLogger(__name__)

_SEPARATOR = b","


@runtime_checkable
class Parameter(Protocol):
    """Protocol for values usable as SCPI command or query parameters.

    Example:
        >>> class Channel:
        ...     def __init__(self, number: int) -> None:
        ...         self.number = number
        ...     def encode(self, sink: ByteSink) -> None:
        ...         sink.write(f"(@{self.number})".encode("ascii"))
        ...
        >>> encode_to_bytes(Channel(101), 5)
        b'(@101),5'
    """

    def encode(self, sink: ByteSink) -> None:
        """Write this value's program data into *sink*.

        Args:
            sink: Destination for the encoded bytes.

        Raises:
            EncodingError: If the value cannot be represented.
        """
        ...


class Composite:
    """Ordered list of parameters separated by commas.

    Elements may be parameters or native values accepted by
    :func:`to_parameter`. Nested composites flatten into the same list. An
    empty composite writes nothing.

    A composite is hashable only when all of its elements are; one holding a
    :class:`Block` over a ``bytearray`` raises ``TypeError`` from ``hash()``.

    Example:
        >>> encode_to_bytes(Composite("mixed", Discrete("BAG")))
        b'"mixed",BAG'
    """

    __slots__ = ("_elements",)

    def __init__(self, *elements: Any) -> None:
        self._elements = tuple(to_parameter(element) for element in elements)

    @property
    def elements(self) -> tuple[Parameter, ...]:
        """The element parameters in output order."""
        return self._elements

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Parameter]:
        return iter(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Composite):
            return NotImplemented
        return self._elements == other._elements

    def __hash__(self) -> int:
        return hash(self._elements)

    def __repr__(self) -> str:
        inner = ", ".join(repr(e) for e in self._elements)
        return f"Composite({inner})"

    def encode(self, sink: ByteSink) -> None:
        """Write each element in order, separated by commas.

        The first error raised by an element or by the sink aborts the
        remaining elements.
        """
        for index, element in enumerate(self._elements):
            if index:
                sink.write(_SEPARATOR)
            element.encode(sink)


def to_parameter(value: Any) -> Parameter:
    """Convert a native Python value into a parameter.

    ============================== =====================
    Value                          Parameter
    ============================== =====================
    ``bool``                       :class:`Boolean`
    ``int`` / ``numbers.Integral`` :class:`Integer`
    ``float`` / ``numbers.Real``   :class:`Float`
    ``str``                        :class:`QuotedString`
    bytes-like                     :class:`Block`
    ``tuple`` / ``list``           :class:`Composite`
    ``None``                       empty :class:`Composite`
    ============================== =====================

    Objects that already implement :class:`Parameter` are returned unchanged,
    including subclasses of ``str`` or ``int`` (such as enums of mnemonics)
    that define their own ``encode()``.

    Args:
        value: The value to convert.

    Returns:
        A parameter for *value*.

    Raises:
        TypeError: If *value* has no SCPI representation.
    """
    # str.encode satisfies the protocol structurally; only overrides count.
    if isinstance(value, Parameter) and type(value).encode is not str.encode:
        return value
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, numbers.Integral):
        return Integer(int(value))
    if isinstance(value, numbers.Real):
        # Converted when encoded, so oversized values raise NumericOutOfRangeError
        return Float(value)  # type: ignore[arg-type]
    if isinstance(value, str):
        return QuotedString(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return Block(value)
    if isinstance(value, (tuple, list)):
        return Composite(*value)
    if value is None:
        return Composite()
    raise TypeError(f"Cannot encode {type(value).__name__!r} as a SCPI parameter")


def encode(value: Any, sink: ByteSink) -> None:
    """Encode a single value into *sink*.

    Args:
        value: A parameter or native value accepted by :func:`to_parameter`.
        sink: Destination for the encoded bytes.

    Raises:
        EncodingError: If the value cannot be represented. The sink may
            already hold a partial value.
        TypeError: If the value has no SCPI representation.
    """
    param = to_parameter(value)
    try:
        param.encode(sink)
    except EncodingError as exc:
        logger.debug("Rejected %s parameter: %s", type(param).__name__, exc)
        raise


def encode_to_bytes(*values: Any) -> bytes:
    """Encode values as a comma-separated parameter list.

    The output is built in memory, so a failure never exposes a partial
    value.

    Args:
        *values: Parameters or native values accepted by :func:`to_parameter`.

    Returns:
        The encoded program data.

    Raises:
        EncodingError: If any value cannot be represented.
        TypeError: If any value has no SCPI representation.
    """
    buf = io.BytesIO()
    encode(Composite(*values), buf)
    data = buf.getvalue()
    logger.debug("Encoded %d parameter(s) into %d bytes", len(values), len(data))
    return data
