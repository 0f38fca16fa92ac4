"""
Strategies for placing pad blocks around a value which fits within its total
width.

Every strategy receives a ``write`` callable (the output sink), the value,
the pad block and the number of pad blocks required (the *pad width*, which
is never negative). The padded text is emitted piece by piece to ``write``
rather than being built up as a new string first.
"""

from typing import Any, Callable, Protocol

Write = Callable[[str], Any]
"""An output sink: accepts a piece of text to emit."""


def write_repeat(write: Write, block: Any, count: int) -> None:
    """Emit ``str(block)`` to ``write`` ``count`` times."""
    if count <= 0:
        return
    text = str(block)
    for _ in range(count):
        write(text)


class Pad(Protocol):
    def pad(self, write: Write, value: Any, pad_block: Any, pad_width: int) -> None:
        ...


class _Stateless:
    """Equality and repr for strategies with no state."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class AlignLeft(_Stateless):
    """
    Pad to the right, content to the left.

    With pad block ``-`` and total width 9, ``abcdef`` becomes ``abcdef---``.
    """

    __slots__ = ()

    def pad(self, write: Write, value: Any, pad_block: Any, pad_width: int) -> None:
        write(str(value))
        write_repeat(write, pad_block, pad_width)


class AlignRight(_Stateless):
    """
    Pad to the left, content to the right.

    With pad block ``-`` and total width 9, ``abcdef`` becomes ``---abcdef``.
    """

    __slots__ = ()

    def pad(self, write: Write, value: Any, pad_block: Any, pad_width: int) -> None:
        write_repeat(write, pad_block, pad_width)
        write(str(value))


class AlignCenterLeft(_Stateless):
    """
    Pad both sides, placing the odd remainder block (if any) on the right so
    the content leans left: ``abc`` in 8 columns becomes ``--abc---``.
    """

    __slots__ = ()

    def pad(self, write: Write, value: Any, pad_block: Any, pad_width: int) -> None:
        half = pad_width >> 1
        remainder = pad_width & 1
        write_repeat(write, pad_block, half)
        write(str(value))
        write_repeat(write, pad_block, half)
        write_repeat(write, pad_block, remainder)


class AlignCenterRight(_Stateless):
    """
    Pad both sides, placing the odd remainder block (if any) on the left so
    the content leans right: ``abc`` in 8 columns becomes ``---abc--``.
    """

    __slots__ = ()

    def pad(self, write: Write, value: Any, pad_block: Any, pad_width: int) -> None:
        half = pad_width >> 1
        remainder = pad_width & 1
        write_repeat(write, pad_block, remainder)
        write_repeat(write, pad_block, half)
        write(str(value))
        write_repeat(write, pad_block, half)


class PadFunction:
    """
    Use an arbitrary function ``func(write, value, pad_block, pad_width)`` as
    a padding strategy.
    """

    __slots__ = ("func",)

    def __init__(self, func: Callable[[Write, Any, Any, int], None]) -> None:
        if not callable(func):
            raise TypeError(f"{func!r} is not callable")
        self.func = func

    def pad(self, write: Write, value: Any, pad_block: Any, pad_width: int) -> None:
        self.func(write, value, pad_block, pad_width)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PadFunction):
            return NotImplemented
        return self.func == other.func

    def __hash__(self) -> int:
        return hash(self.func)

    def __repr__(self) -> str:
        return f"PadFunction({self.func!r})"


def as_pad(pad: Any) -> Pad:
    """
    Coerce ``pad`` into a :py:class:`Pad`: strategies are returned as-is and
    bare callables are wrapped in :py:class:`PadFunction`.
    """
    if isinstance(pad, type):
        raise TypeError(
            f"{pad.__name__} is a class; pass an instance such as {pad.__name__}()"
        )
    if hasattr(pad, "pad"):
        return pad
    if callable(pad):
        return PadFunction(pad)
    raise TypeError(f"{pad!r} is not a padding strategy")
