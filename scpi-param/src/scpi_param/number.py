"""SCPI numeric and boolean program data.

Handles NR1 (integer) and NR3 (scientific notation) output formats, the
special float values defined by SCPI 1999.0 7.2.1 (``NAN``, ``INF``,
``NINF``) and boolean program data (SCPI 1999.0 7.3).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from scpi_param.errors import NumericOutOfRangeError

if TYPE_CHECKING:
    from scpi_param.sink import ByteSink

# SCPI 1999.0 7.2: decimal numeric program data range.
NUMERIC_LIMIT = 9.9e37


def format_number(value: float) -> str:
    """Format a float as SCPI decimal numeric program data.

    ``nan``, ``inf`` and ``-inf`` are rendered as ``NAN``, ``INF`` and
    ``NINF``. Finite values use NR3 notation built from the shortest digit
    string that round-trips to *value*: ``-420000.0`` becomes ``-4.2E5`` and
    ``1.0`` becomes ``1E0``. Neither the mantissa nor the exponent carries a
    ``+`` sign, and the exponent has no leading zeros.

    Args:
        value: The numeric value to format.

    Returns:
        A SCPI-compatible string representation.

    Raises:
        NumericOutOfRangeError: If a finite *value* has a magnitude greater
            than 9.9E37.
    """
    try:
        value = float(value)
    except OverflowError:
        raise NumericOutOfRangeError(value, NUMERIC_LIMIT) from None
    if math.isnan(value):
        return "NAN"
    if math.isinf(value):
        return "NINF" if value < 0 else "INF"
    if abs(value) > NUMERIC_LIMIT:
        raise NumericOutOfRangeError(value, NUMERIC_LIMIT)

    # repr() yields the shortest round-tripping digits; as_tuple() is exact
    # and ignores the thread's decimal context.
    sign, coefficient, exp = Decimal(repr(value)).as_tuple()
    digits = list(coefficient)
    exponent = int(exp)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    mantissa = str(digits[0])
    if len(digits) > 1:
        mantissa += "." + "".join(str(d) for d in digits[1:])
    sci_exponent = exponent + len(digits) - 1 if any(digits) else 0
    return f"{'-' if sign else ''}{mantissa}E{sci_exponent}"


def format_int(value: int) -> str:
    """Format an integer as SCPI NR1 program data.

    Args:
        value: The integer to format.

    Returns:
        Canonical decimal digits with an optional leading ``-``.
    """
    return str(int(value))


def format_bool(value: bool) -> str:
    """Format a boolean for use in a SCPI command.

    Args:
        value: The boolean to format.

    Returns:
        ``"1"`` for True, ``"0"`` for False.
    """
    return "1" if value else "0"


@dataclass(frozen=True)
class Boolean:
    """Boolean program data, written as ``1`` or ``0``."""

    value: bool

    def encode(self, sink: ByteSink) -> None:
        sink.write(format_bool(self.value).encode("ascii"))


@dataclass(frozen=True)
class Integer:
    """Integer program data in NR1 form.

    Attributes:
        value: Any integer; Python integers have no fixed width.
    """

    value: int

    def encode(self, sink: ByteSink) -> None:
        sink.write(format_int(self.value).encode("ascii"))


@dataclass(frozen=True)
class Float:
    """Floating point program data in NR3 form.

    Attributes:
        value: The number to send. NaN and the infinities are written as
            ``NAN``, ``INF`` and ``NINF``.
    """

    value: float

    def encode(self, sink: ByteSink) -> None:
        """Write the number.

        Raises:
            NumericOutOfRangeError: If the finite magnitude exceeds 9.9E37.
        """
        sink.write(format_number(self.value).encode("ascii"))
