"""
Width measurement for values which are to be padded.

A value's *width* is the number of terminal columns it occupies once
rendered, which is not necessarily the same as its length. Several
interpretations of the width of a piece of text are provided as thin wrapper
types so that the choice of metric travels with the value itself::

    >>> UnicodeWidth("日本").width()
    4
    >>> CharCount("日本").width()
    2
    >>> Len("日本").width()
    6
"""

from typing import Any, Callable, Protocol, runtime_checkable

import unicodedata

import wcwidth


@runtime_checkable
class Width(Protocol):
    """
    A value which knows its own display width.

    The width reported must agree with the width of ``str(value)`` as it
    will be displayed, otherwise padding will be visually wrong.
    """

    def width(self) -> int:
        ...


def unicode_width(text: str) -> int:
    """
    The display width of some text according to the Unicode East Asian Width
    tables, treating ambiguous-width characters as narrow.

    Non-printable characters are counted as zero-width.
    """
    total = 0
    for char in text:
        char_width = wcwidth.wcwidth(char)
        if char_width > 0:
            total += char_width
    return total


def unicode_width_cjk(text: str) -> int:
    """
    As :py:func:`unicode_width` but treats East Asian Ambiguous characters
    (e.g. box drawing, some Greek and Cyrillic) as wide, matching terminals
    running in a CJK context.
    """
    total = 0
    for char in text:
        char_width = wcwidth.wcwidth(char)
        if char_width <= 0:
            continue
        if unicodedata.east_asian_width(char) == "A":
            total += 2
        else:
            total += char_width
    return total


def char_count(text: str) -> int:
    """The number of code points in the text."""
    return len(text)


def byte_len(text: str) -> int:
    """The number of bytes in the UTF-8 encoding of the text."""
    return len(text.encode("utf-8"))


class _TextWidth:
    """
    Base for wrappers around a string which report a particular metric as
    their width.
    """

    __slots__ = ("_inner",)

    measure: Callable[[str], int]

    def __init__(self, inner: str) -> None:
        if not isinstance(inner, str):
            raise TypeError(
                f"{type(self).__name__} wraps str, not {type(inner).__name__}"
            )
        object.__setattr__(self, "_inner", inner)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def inner(self) -> str:
        """The wrapped string."""
        return self._inner

    def as_str(self) -> str:
        return self._inner

    def width(self) -> int:
        return type(self).measure(self._inner)

    def __str__(self) -> str:
        return self._inner

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._inner!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._inner == other._inner  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._inner))


class UnicodeWidth(_TextWidth):
    """Treat the Unicode display width (ambiguous characters narrow) as width."""

    __slots__ = ()
    measure = staticmethod(unicode_width)


class UnicodeWidthCjk(_TextWidth):
    """Treat the CJK-context Unicode display width as width."""

    __slots__ = ()
    measure = staticmethod(unicode_width_cjk)


class CharCount(_TextWidth):
    """Treat the number of characters as width."""

    __slots__ = ()
    measure = staticmethod(char_count)


class Len(_TextWidth):
    """Treat the UTF-8 byte length as width."""

    __slots__ = ()
    measure = staticmethod(byte_len)


def measure_width(value: Any) -> int:
    """
    Measure the width of a value.

    Values implementing :py:class:`Width` (including ``str`` subclasses which
    define ``width()``) are asked for their width. Plain strings are measured
    with :py:func:`unicode_width`. Anything else has no known width and a
    :py:exc:`TypeError` is raised.
    """
    if isinstance(value, Width):
        return value.width()
    if isinstance(value, str):
        return unicode_width(value)
    raise TypeError(f"cannot determine the width of {type(value).__name__} values")


def metric_for(value: Any) -> Callable[[str], int]:
    """
    Return the raw-text metric used to measure a value, for code which needs
    to measure fragments of its rendered text consistently (e.g. when
    truncating it).

    * Values with a ``measure`` callable (such as the wrappers in this
      module) use it.
    * ``str`` subclasses defining ``width()`` measure a fragment by building
      an instance of their own type from it.
    * Plain strings use :py:func:`unicode_width`.

    Any other value gives no way to measure a fragment consistently with
    the value itself, so :py:exc:`TypeError` is raised.
    """
    measure = getattr(value, "measure", None)
    if callable(measure):
        return measure
    if isinstance(value, str):
        if isinstance(value, Width):
            value_type = type(value)
            return lambda text: value_type(text).width()
        return unicode_width
    raise TypeError(
        f"cannot measure fragments of {type(value).__name__} values; "
        "give the type a measure(text) method"
    )
