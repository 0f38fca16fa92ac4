"""
Padding of a single value.
"""

from dataclasses import dataclass, replace
from typing import Any

import io

from padded_column.alignment import Alignment
from padded_column.excess import (
    DEFAULT_EXCESS_HANDLER,
    Excess,
    ExcessHandler,
    as_excess_handler,
)
from padded_column.pad import Pad, Write, as_pad
from padded_column.width import measure_width


def sink_writer(sink: Any) -> Write:
    """
    Return the ``write`` callable for an output sink: either an object with a
    ``write`` method (e.g. a file or :py:class:`io.StringIO`) or a callable
    which accepts text.
    """
    write = getattr(sink, "write", None)
    if callable(write):
        return write
    if callable(sink):
        return sink
    raise TypeError(f"cannot write to {type(sink).__name__}")


@dataclass(frozen=True)
class PaddedValue:
    r"""
    A value padded with repeated ``pad_block``\ s to fill ``total_width``.

    The padded text is produced only when the value is rendered (via
    :py:meth:`write_to`, ``str()`` or ``format()``), and is recomputed on
    every render. For example::

        >>> str(PaddedValue("abcdef", "-", 9, Alignment.RIGHT))
        '---abcdef'

    When the value is wider than ``total_width`` the ``handle_excess``
    handler decides what is written instead (by default the value is written
    unpadded).

    The ``pad`` and ``handle_excess`` arguments also accept bare functions
    which are wrapped in :py:class:`~padded_column.pad.PadFunction` and
    :py:class:`~padded_column.excess.ExcessHandlingFunction` respectively.
    """

    value: Any
    """The value to be padded (a str or :py:class:`~padded_column.width.Width`)."""

    pad_block: Any = " "
    """The block repeated to form the pad (expected to have a width of 1)."""

    total_width: int = 0
    """The width to fill."""

    pad: Pad = Alignment.LEFT
    """How to place the pad blocks."""

    handle_excess: ExcessHandler = DEFAULT_EXCESS_HANDLER
    """What to write when the value is wider than total_width."""

    def __post_init__(self) -> None:
        if self.total_width < 0:
            raise ValueError(f"total_width must be non-negative, got {self.total_width}")
        object.__setattr__(self, "pad", as_pad(self.pad))
        object.__setattr__(self, "handle_excess", as_excess_handler(self.handle_excess))

    def write_to(self, sink: Any) -> None:
        """
        Write the padded value to ``sink``. Any exception raised by the sink
        or by the excess handler is propagated.
        """
        write = sink_writer(sink)
        value_width = measure_width(self.value)
        if self.total_width >= value_width:
            self.pad.pad(write, self.value, self.pad_block, self.total_width - value_width)
        else:
            self.handle_excess.handle_excess(
                Excess(
                    value=self.value,
                    pad_block=self.pad_block,
                    value_width=value_width,
                    total_width=self.total_width,
                ),
                write,
            )

    def width(self) -> int:
        """
        The width of the padded value: total_width, or the value's own width
        if that is greater.
        """
        return max(self.total_width, measure_width(self.value))

    def replace(self, **changes: Any) -> "PaddedValue":
        """Return a copy with the given fields changed."""
        return replace(self, **changes)

    def __str__(self) -> str:
        out = io.StringIO()
        self.write_to(out)
        return out.getvalue()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)
