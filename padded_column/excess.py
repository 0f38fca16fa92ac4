"""
Handling of values which are wider than the total width they are to be
padded to.

When a value's width exceeds the total width there is no way to pad it, so
the decision of what to emit instead is delegated to an *excess handler*.
Three handlers are provided:

* :py:class:`IgnoreExcess` (the default) writes the value unpadded.
* :py:class:`ErrorOnExcess` raises :py:exc:`ExcessError`, intended to be
  caught and handled by the caller.
* :py:class:`PanicOnExcess` raises :py:exc:`ExcessAssertionError`, for
  situations where an excess indicates a bug.

Any callable taking an :py:class:`Excess` and a ``write`` callable may also
be used via :py:class:`ExcessHandlingFunction`.
"""

from typing import Any, Callable, NamedTuple, Protocol

import logging

from padded_column.pad import Write, _Stateless, write_repeat
from padded_column.width import metric_for


logger = logging.getLogger(__name__)


class Excess(NamedTuple):
    """Details of a value whose width exceeded the total width."""

    value: Any
    """The value which caused the excess."""

    pad_block: Any
    """The pad block which would have been used."""

    value_width: int
    """The measured width of the value."""

    total_width: int
    """The total width which was exceeded."""


def excess_message(value_width: int, total_width: int) -> str:
    return f"value's width ({value_width}) is greater than total_width ({total_width})"


class ExcessError(Exception):
    """Raised by :py:class:`ErrorOnExcess` when a value is too wide."""

    def __init__(self, value_width: int, total_width: int) -> None:
        super().__init__(excess_message(value_width, total_width))
        self.value_width = value_width
        self.total_width = total_width


class ExcessAssertionError(AssertionError):
    """
    Raised by :py:class:`PanicOnExcess` when a value is too wide. Being an
    :py:exc:`AssertionError`, this indicates a bug rather than a condition
    callers are expected to handle.
    """

    def __init__(self, value_width: int, total_width: int) -> None:
        super().__init__(excess_message(value_width, total_width))
        self.value_width = value_width
        self.total_width = total_width


class ExcessHandler(Protocol):
    def handle_excess(self, excess: Excess, write: Write) -> None:
        ...


def ignore_excess(excess: Excess, write: Write) -> None:
    """Ignore the excess: write the value without padding."""
    write(str(excess.value))


def forbid_excess(excess: Excess, write: Write) -> None:
    """Forbid all excesses, raising an :py:exc:`ExcessAssertionError`."""
    logger.debug(
        "Forbidden excess: width %d > total_width %d",
        excess.value_width,
        excess.total_width,
    )
    raise ExcessAssertionError(excess.value_width, excess.total_width)


def error_on_excess(excess: Excess, write: Write) -> None:
    """Reject the excess with a recoverable :py:exc:`ExcessError`."""
    logger.debug(
        "Rejected excess: width %d > total_width %d",
        excess.value_width,
        excess.total_width,
    )
    raise ExcessError(excess.value_width, excess.total_width)


def truncate_excess(excess: Excess, write: Write) -> None:
    """
    Write as much of the value as fits within the total width.

    The value's text is cut at the last character which fits, measured with
    the same metric as the value itself. If a wide character would straddle
    the boundary, the remaining column(s) are filled with the pad block so
    that exactly ``total_width`` columns are always written.

    Values whose fragments cannot be measured with their own metric (see
    :py:func:`~padded_column.width.metric_for`) raise :py:exc:`TypeError`
    rather than emitting text of the wrong width.
    """
    text = str(excess.value)
    measure = metric_for(excess.value)

    used = 0
    end = 0
    for char in text:
        char_width = measure(char)
        if used + char_width > excess.total_width:
            break
        used += char_width
        end += 1

    write(text[:end])
    write_repeat(write, excess.pad_block, excess.total_width - used)


class IgnoreExcess(_Stateless):
    """Write the value unpadded. See :py:func:`ignore_excess`."""

    __slots__ = ()

    def handle_excess(self, excess: Excess, write: Write) -> None:
        ignore_excess(excess, write)


class ErrorOnExcess(_Stateless):
    """Raise :py:exc:`ExcessError`. See :py:func:`error_on_excess`."""

    __slots__ = ()

    def handle_excess(self, excess: Excess, write: Write) -> None:
        error_on_excess(excess, write)


class PanicOnExcess(_Stateless):
    """Raise :py:exc:`ExcessAssertionError`. See :py:func:`forbid_excess`."""

    __slots__ = ()

    def handle_excess(self, excess: Excess, write: Write) -> None:
        forbid_excess(excess, write)


class ExcessHandlingFunction:
    """Use an arbitrary function ``func(excess, write)`` as an excess handler."""

    __slots__ = ("func",)

    def __init__(self, func: Callable[[Excess, Write], None]) -> None:
        if not callable(func):
            raise TypeError(f"{func!r} is not callable")
        self.func = func

    def handle_excess(self, excess: Excess, write: Write) -> None:
        self.func(excess, write)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExcessHandlingFunction):
            return NotImplemented
        return self.func == other.func

    def __hash__(self) -> int:
        return hash(self.func)

    def __repr__(self) -> str:
        return f"ExcessHandlingFunction({self.func!r})"


DEFAULT_EXCESS_HANDLER = IgnoreExcess()


def as_excess_handler(handler: Any) -> ExcessHandler:
    """
    Coerce ``handler`` into an :py:class:`ExcessHandler`: handlers are
    returned as-is and bare callables are wrapped in
    :py:class:`ExcessHandlingFunction`.
    """
    if isinstance(handler, type):
        raise TypeError(
            f"{handler.__name__} is a class; pass an instance such as {handler.__name__}()"
        )
    if hasattr(handler, "handle_excess"):
        return handler
    if callable(handler):
        return ExcessHandlingFunction(handler)
    raise TypeError(f"{handler!r} is not an excess handler")
