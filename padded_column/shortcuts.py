"""
Shorthands for the common case of padding with spaces.

The single-value functions write values which exceed ``total_width``
unpadded. For example::

    >>> str(align_right("abc", 5))
    '  abc'
    >>> str(align_center_left("abc", 8))
    '  abc   '
    >>> [str(v) for v in align_column_left(["a", "bc", "def"])]
    ['a  ', 'bc ', 'def']
"""

from typing import Any, Iterable

from padded_column.column import PaddedColumn, PaddedColumnIter
from padded_column.excess import IgnoreExcess
from padded_column.pad import (
    AlignCenterLeft,
    AlignCenterRight,
    AlignLeft,
    AlignRight,
    Pad,
)
from padded_column.value import PaddedValue


def _single(value: Any, total_width: int, pad: Pad) -> PaddedValue:
    return PaddedValue(
        value=value,
        pad_block=" ",
        total_width=total_width,
        pad=pad,
        handle_excess=IgnoreExcess(),
    )


def _multi(values: Iterable[Any], pad: Pad) -> PaddedColumnIter:
    return PaddedColumn(values=values, pad_block=" ", pad=pad).realize()


def align_left(value: Any, total_width: int) -> PaddedValue:
    """Pad spaces to the right of a value."""
    return _single(value, total_width, AlignLeft())


def align_right(value: Any, total_width: int) -> PaddedValue:
    """Pad spaces to the left of a value."""
    return _single(value, total_width, AlignRight())


def align_center_left(value: Any, total_width: int) -> PaddedValue:
    """
    Pad spaces to both sides of a value, with the remainder space (if any) on
    the right.
    """
    return _single(value, total_width, AlignCenterLeft())


def align_center_right(value: Any, total_width: int) -> PaddedValue:
    """
    Pad spaces to both sides of a value, with the remainder space (if any) on
    the left.
    """
    return _single(value, total_width, AlignCenterRight())


def align_column_left(values: Iterable[Any]) -> PaddedColumnIter:
    """Pad spaces to the right of every value so they share the same width."""
    return _multi(values, AlignLeft())


def align_column_right(values: Iterable[Any]) -> PaddedColumnIter:
    """Pad spaces to the left of every value so they share the same width."""
    return _multi(values, AlignRight())


def align_column_center_left(values: Iterable[Any]) -> PaddedColumnIter:
    """
    Pad spaces to both sides of every value so they share the same width,
    with remainder spaces on the right.
    """
    return _multi(values, AlignCenterLeft())


def align_column_center_right(values: Iterable[Any]) -> PaddedColumnIter:
    """
    Pad spaces to both sides of every value so they share the same width,
    with remainder spaces on the left.
    """
    return _multi(values, AlignCenterRight())
