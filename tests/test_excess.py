import pytest

from padded_column.excess import (
    DEFAULT_EXCESS_HANDLER,
    ErrorOnExcess,
    Excess,
    ExcessAssertionError,
    ExcessError,
    ExcessHandlingFunction,
    IgnoreExcess,
    PanicOnExcess,
    as_excess_handler,
    forbid_excess,
    ignore_excess,
    truncate_excess,
)
from padded_column.width import CharCount, Len


def handle(handler, value, total_width: int, pad_block: str = "-") -> str:
    out: list[str] = []
    value_width = value.width() if hasattr(value, "width") else len(value)
    handler.handle_excess(Excess(value, pad_block, value_width, total_width), out.append)
    return "".join(out)


class TestIgnoreExcess:
    def test_writes_value_unpadded(self) -> None:
        assert handle(IgnoreExcess(), "abcdefghijkl", 9) == "abcdefghijkl"

    def test_function_form(self) -> None:
        out: list[str] = []
        ignore_excess(Excess("abcdefghi", "-", 9, 6), out.append)
        assert out == ["abcdefghi"]

    def test_is_default(self) -> None:
        assert DEFAULT_EXCESS_HANDLER == IgnoreExcess()


class TestErrorOnExcess:
    def test_raises(self) -> None:
        with pytest.raises(ExcessError) as exc_info:
            handle(ErrorOnExcess(), "abcdefghi", 6)
        assert exc_info.value.value_width == 9
        assert exc_info.value.total_width == 6
        assert str(exc_info.value) == "value's width (9) is greater than total_width (6)"

    def test_is_not_an_assertion(self) -> None:
        with pytest.raises(ExcessError) as exc_info:
            handle(ErrorOnExcess(), "abc", 1)
        assert not isinstance(exc_info.value, AssertionError)


class TestPanicOnExcess:
    def test_raises(self) -> None:
        with pytest.raises(
            AssertionError,
            match=r"^value's width \(9\) is greater than total_width \(6\)$",
        ) as exc_info:
            handle(PanicOnExcess(), "abcdefghi", 6)
        assert isinstance(exc_info.value, ExcessAssertionError)
        assert exc_info.value.value_width == 9
        assert exc_info.value.total_width == 6

    def test_function_form(self) -> None:
        with pytest.raises(ExcessAssertionError):
            forbid_excess(Excess("abc", "-", 3, 2), [].append)

    def test_writes_nothing(self) -> None:
        out: list[str] = []
        with pytest.raises(ExcessAssertionError):
            PanicOnExcess().handle_excess(Excess("abc", "-", 3, 2), out.append)
        assert out == []


class TestTruncateExcess:
    def test_ascii(self) -> None:
        assert handle(ExcessHandlingFunction(truncate_excess), "abcdefghi", 6) == "abcdef"

    def test_zero_total_width(self) -> None:
        assert handle(ExcessHandlingFunction(truncate_excess), "abc", 0) == ""

    def test_wide_character_straddling_boundary(self) -> None:
        # "日本語" is 6 columns; only "日本" (4 columns) fits in 5 and the
        # remaining column is padded
        out: list[str] = []
        truncate_excess(Excess("日本語", "-", 6, 5), out.append)
        assert "".join(out) == "日本-"

    def test_uses_value_metric(self) -> None:
        # Measured in bytes, each of these characters is 3 wide
        assert handle(ExcessHandlingFunction(truncate_excess), Len("日本語"), 7) == "日本-"
        # Measured in characters, each is 1 wide
        assert handle(ExcessHandlingFunction(truncate_excess), CharCount("日本語"), 2) == "日本"

    def test_custom_metric(self) -> None:
        class Chars:
            def __init__(self, text: str) -> None:
                self.text = text

            def measure(self, text: str) -> int:
                return len(text)

            def width(self) -> int:
                return self.measure(self.text)

            def __str__(self) -> str:
                return self.text

        assert handle(ExcessHandlingFunction(truncate_excess), Chars("日本語"), 2) == "日本"

    def test_str_subclass_metric(self) -> None:
        class Narrow(str):
            def width(self) -> int:
                return len(self)

        assert handle(ExcessHandlingFunction(truncate_excess), Narrow("日本語"), 2) == "日本"

    def test_unmeasurable_fragments(self) -> None:
        class Fixed:
            def width(self) -> int:
                return 9

            def __str__(self) -> str:
                return "abcdefghi"

        out: list[str] = []
        with pytest.raises(TypeError):
            truncate_excess(Excess(Fixed(), "-", 9, 6), out.append)
        assert out == []


class TestExcessHandlingFunction:
    def test_custom(self) -> None:
        def stars(excess: Excess, write) -> None:
            write("*" * excess.total_width)

        assert handle(ExcessHandlingFunction(stars), "abcdefghi", 4) == "****"

    def test_equality(self) -> None:
        assert ExcessHandlingFunction(truncate_excess) == ExcessHandlingFunction(
            truncate_excess
        )
        assert ExcessHandlingFunction(truncate_excess) != ExcessHandlingFunction(
            ignore_excess
        )

    def test_not_callable(self) -> None:
        with pytest.raises(TypeError):
            ExcessHandlingFunction(None)  # type: ignore[arg-type]

    def test_as_excess_handler(self) -> None:
        assert as_excess_handler(PanicOnExcess()) == PanicOnExcess()
        assert as_excess_handler(truncate_excess) == ExcessHandlingFunction(
            truncate_excess
        )
        with pytest.raises(TypeError):
            as_excess_handler("nope")

    def test_rejects_handler_class(self) -> None:
        with pytest.raises(TypeError, match="IgnoreExcess is a class"):
            as_excess_handler(IgnoreExcess)
