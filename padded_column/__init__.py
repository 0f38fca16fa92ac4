__version__ = "0.0.1"

from padded_column.width import (
    Width,
    UnicodeWidth,
    UnicodeWidthCjk,
    CharCount,
    Len,
    measure_width,
    unicode_width,
    unicode_width_cjk,
    char_count,
    byte_len,
)
from padded_column.pad import (
    Pad,
    PadFunction,
    AlignLeft,
    AlignRight,
    AlignCenterLeft,
    AlignCenterRight,
)
from padded_column.alignment import Alignment, PadDirection
from padded_column.excess import (
    Excess,
    ExcessError,
    ExcessAssertionError,
    ExcessHandler,
    ExcessHandlingFunction,
    IgnoreExcess,
    ErrorOnExcess,
    PanicOnExcess,
    DEFAULT_EXCESS_HANDLER,
    ignore_excess,
    error_on_excess,
    forbid_excess,
    truncate_excess,
)
from padded_column.value import PaddedValue
from padded_column.column import PaddedColumn, PaddedColumnIter
from padded_column.shortcuts import (
    align_left,
    align_right,
    align_center_left,
    align_center_right,
    align_column_left,
    align_column_right,
    align_column_center_left,
    align_column_center_right,
)
from padded_column.tables import dict_to_table
