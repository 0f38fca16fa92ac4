"""
Padding of a collection of values to a shared width.
"""

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

import logging

from padded_column.alignment import Alignment
from padded_column.excess import PanicOnExcess
from padded_column.pad import Pad, as_pad
from padded_column.value import PaddedValue
from padded_column.width import measure_width


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaddedColumn:
    """
    Pad all values in a collection to the width of the widest among them.

    Iterating over a column yields a :py:class:`PaddedValue` for every value,
    in the same order as the values::

        >>> [str(v) for v in PaddedColumn(["a", "bcd", "ef"], "-", Alignment.RIGHT)]
        ['--a', 'bcd', '-ef']

    Since the shared width depends on every value, the values are all read
    (and retained until their padded value is produced) before the first
    padded value is produced. The values may
    be any iterable, including a single-pass generator.
    """

    values: Iterable[Any]
    """Values to be padded."""

    pad_block: Any = " "
    """The block repeated to form the pad (expected to have a width of 1)."""

    pad: Pad = Alignment.LEFT
    """How to place the pad blocks."""

    def realize(self) -> "PaddedColumnIter":
        """
        Read all of the values, working out the shared width, and return an
        iterator over the padded values.
        """
        buffered = []
        total_width = 0
        for value in self.values:
            total_width = max(total_width, measure_width(value))
            buffered.append(value)
        logger.debug(
            "Realised column of %d value(s) with total_width %d",
            len(buffered),
            total_width,
        )
        return PaddedColumnIter(buffered, self.pad_block, as_pad(self.pad), total_width)

    def __iter__(self) -> "PaddedColumnIter":
        return self.realize()


class PaddedColumnIter(Iterator[PaddedValue]):
    """
    Iterator over the padded values of a realised :py:class:`PaddedColumn`.

    ``len()`` gives the exact number of values remaining.

    Every value is padded with :py:class:`~padded_column.excess.PanicOnExcess`
    since no value can be wider than the widest value: an excess can only
    occur if a value reports a different width when measured again.
    """

    def __init__(
        self, values: Iterable[Any], pad_block: Any, pad: Pad, total_width: int
    ) -> None:
        self._values = deque(values)
        self.pad_block = pad_block
        self.pad = pad
        self.total_width = total_width

    def __iter__(self) -> "PaddedColumnIter":
        return self

    def __next__(self) -> PaddedValue:
        if not self._values:
            raise StopIteration
        value = self._values.popleft()
        return PaddedValue(
            value=value,
            pad_block=self.pad_block,
            total_width=self.total_width,
            pad=self.pad,
            handle_excess=PanicOnExcess(),
        )

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return (
            f"<PaddedColumnIter total_width={self.total_width} "
            f"remaining={len(self)}>"
        )
