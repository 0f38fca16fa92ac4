"""
Enumerations naming where the pad should be placed.

Members are themselves padding strategies, so either an enum member or a
strategy instance from :py:mod:`padded_column.pad` may be used wherever a
strategy is expected.
"""

from enum import Enum
from typing import Any

from padded_column.pad import (
    AlignCenterLeft,
    AlignCenterRight,
    AlignLeft,
    AlignRight,
    Pad,
    Write,
)


class Alignment(Enum):
    """Where to place the content within the total width."""

    LEFT = "left"
    """Pad to the right, content to the left."""

    RIGHT = "right"
    """Pad to the left, content to the right."""

    CENTER_LEFT = "center-left"
    """Pad both sides, odd remainder block on the right."""

    CENTER_RIGHT = "center-right"
    """Pad both sides, odd remainder block on the left."""

    @property
    def strategy(self) -> Pad:
        return _ALIGNMENT_STRATEGIES[self]

    def pad(self, write: Write, value: Any, pad_block: Any, pad_width: int) -> None:
        self.strategy.pad(write, value, pad_block, pad_width)


_ALIGNMENT_STRATEGIES: dict[Alignment, Pad] = {
    Alignment.LEFT: AlignLeft(),
    Alignment.RIGHT: AlignRight(),
    Alignment.CENTER_LEFT: AlignCenterLeft(),
    Alignment.CENTER_RIGHT: AlignCenterRight(),
}


class PadDirection(Enum):
    """
    Which side of the content the pad goes on.

    Note that this names the side of the *pad*, so ``PadDirection.LEFT``
    right-aligns the content.
    """

    LEFT = "left"
    RIGHT = "right"

    def pad(self, write: Write, value: Any, pad_block: Any, pad_width: int) -> None:
        if self is PadDirection.LEFT:
            AlignRight().pad(write, value, pad_block, pad_width)
        else:
            AlignLeft().pad(write, value, pad_block, pad_width)
