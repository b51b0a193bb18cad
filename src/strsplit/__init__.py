from ._delimiter_base import DelimiterInterface, Span
from ._exceptions import (
    StrSplitError,
    DelimiterError,
    DelimiterTypeError,
)
from ._null_logger import get_null_logger
from .delimiters import (
    StrDelimiter,
    CharDelimiter,
    AnyCharDelimiter,
    as_delimiter,
)
from .split import StrSplit, split_spans, until_char


__all__ = [
    "AnyCharDelimiter",
    "CharDelimiter",
    "DelimiterError",
    "DelimiterInterface",
    "DelimiterTypeError",
    "Span",
    "StrDelimiter",
    "StrSplit",
    "StrSplitError",
    "as_delimiter",
    "get_null_logger",
    "split_spans",
    "until_char",
]
