"""SCPI special numeric parameters.

Keywords that may stand in place of a numeric value (SCPI 1999.0 7.2.1):
``DEF`` lets the instrument choose, ``MIN``/``MAX`` select a limit, and
``UP``/``DOWN`` step the current value.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scpi_param.sink import ByteSink


class DefaultValue(Enum):
    """Special parameter that allows the instrument to select a value.

    Reference: SCPI 1999.0 7.2.1.1 - DEFault. Use the :data:`DEFAULT`
    singleton.
    """

    DEF = "DEF"

    def encode(self, sink: ByteSink) -> None:
        sink.write(self.value.encode("ascii"))


DEFAULT = DefaultValue.DEF


class Limit(Enum):
    """Special parameter that refers to a numeric limit value.

    Reference: SCPI 1999.0 7.2.1.2 - MINimum|MAXimum
    """

    MIN = "MIN"
    MAX = "MAX"

    def encode(self, sink: ByteSink) -> None:
        sink.write(self.value.encode("ascii"))


class Step(Enum):
    """Special parameter that refers to a numeric step.

    Reference: SCPI 1999.0 7.2.1.3 - UP|DOWN
    """

    UP = "UP"
    DOWN = "DOWN"

    def encode(self, sink: ByteSink) -> None:
        sink.write(self.value.encode("ascii"))
