"""
Lazy splitting of a text on a delimiter.

``StrSplit`` walks the source text with a single cursor and asks its delimiter for
the next occurrence on every step, so nothing is computed ahead of the caller.
Built-in delimiters search the original text in place through ``find_next_from``;
any other delimiter is given the unconsumed remainder and its offsets are shifted
back onto the original text. When the delimiter is not found any
more, whatever is left is produced once and the iterator is exhausted for good.

Classes:
    StrSplit: The splitting iterator.

Functions:
    split_spans(text, delimiter) -> Iterator[Span]: Segment index ranges only.
    until_char(text, char) -> str: The part of a text before a character.
"""


from __future__ import annotations
import logging
from typing import Any, Iterator

from ._delimiter_base import DelimiterInterface, Span
from ._exceptions import DelimiterError
from ._null_logger import get_null_logger
from .delimiters import CharDelimiter, as_delimiter


class StrSplit:
    """An iterator over the pieces of a text between occurrences of a delimiter.

    It always yields at least one item: a text without the delimiter, including
    the empty text, comes back whole. A text that ends with the delimiter yields
    a trailing empty string. The iterator is single-pass.

    Attributes:
        text (str): The source text.
        delimiter (DelimiterInterface): The delimiter used to split ``text``.

    Example:
        >>> list(StrSplit("a b c d e", " "))
        ['a', 'b', 'c', 'd', 'e']
    """

    def __init__(self, text: str, delimiter: Any, logger: logging.Logger | None = None):
        """
        Args:
            text (str): The text to split.
            delimiter (Any):
                A str (matched as an exact substring), a DelimiterInterface, or any
                object with a ``find_next(text)`` method returning offsets relative to ``text``.
            logger (logging.Logger | None, optional): The logger for logging.

        Raises:
            TypeError: If ``text`` is not a str.
            DelimiterTypeError: If ``delimiter`` cannot act as a delimiter.
        """
        if not isinstance(text, str):
            raise TypeError(f"The text to split must be a str, got {type(text).__name__}.")
        self._text = text
        self._delimiter = as_delimiter(delimiter)
        self._cursor: int | None = 0
        self._last_match: Span | None = None
        self.logger = logger or get_null_logger()

    @property
    def text(self) -> str:
        return self._text

    @property
    def delimiter(self) -> DelimiterInterface:
        return self._delimiter

    @property
    def exhausted(self) -> bool:
        return self._cursor is None

    @property
    def remainder(self) -> str | None:
        """The part of the text not yet produced or skipped, None once exhausted."""
        if self._cursor is None:
            return None
        return self._text[self._cursor:]

    @property
    def last_match(self) -> Span | None:
        """The delimiter occurrence skipped by the latest step, None if that step found none."""
        return self._last_match

    def __iter__(self) -> StrSplit:
        return self

    def __next__(self) -> str:
        span = self.next_span()
        if span is None:
            raise StopIteration
        return span.slice(self._text)

    def next_span(self) -> Span | None:
        """Advance the iterator and return the index range of the next piece.

        Returns:
            Span | None: The range of the piece in ``text``, or None when exhausted.

        Raises:
            DelimiterError:
                If the delimiter reports a match outside the remainder or an empty
                match that would not move the cursor forward.
        """
        cursor = self._cursor
        if cursor is None:
            return None

        found = self._find_next(cursor)
        if found is None:
            self._cursor = None
            self._last_match = None
            self.logger.debug(f"Split exhausted, delimiter: {self._delimiter!r}, text length: {len(self._text)}")
            return Span(cursor, len(self._text))

        match_start, match_end = found
        if not cursor <= match_start <= match_end <= len(self._text):
            raise DelimiterError(
                f"{self._delimiter!r} returned the match ({match_start}, {match_end}) "
                f"outside the remainder [{cursor}, {len(self._text)})."
            )
        if match_end == cursor:
            raise DelimiterError(
                f"{self._delimiter!r} returned an empty match at {cursor}, the split would never advance."
            )
        self._cursor = match_end
        self._last_match = Span(match_start, match_end)
        return Span(cursor, match_start)

    def _find_next(self, cursor: int) -> tuple[int, int] | None:
        if isinstance(self._delimiter, DelimiterInterface):
            return self._delimiter.find_next_from(self._text, cursor)
        # Duck-typed delimiters only know find_next(text), relative to what they are given.
        found = self._delimiter.find_next(self._text[cursor:])
        if found is None:
            return None
        match_start, match_end = found
        return match_start + cursor, match_end + cursor

    def __repr__(self) -> str:
        return f"StrSplit(delimiter={self._delimiter!r}, remainder={self.remainder!r})"


def split_spans(text: str, delimiter: Any) -> Iterator[Span]:
    """Lazily yield the index ranges of the pieces of ``text``.

    This produces the same pieces as ``StrSplit`` without building any substrings.
    """
    splitter = StrSplit(text, delimiter)
    while (span := splitter.next_span()) is not None:
        yield span


def until_char(text: str, char: str) -> str:
    """Return the part of ``text`` before the first ``char``, or all of it if absent.

    Raises:
        DelimiterError: If ``char`` is not a single character.
    """
    first = next(StrSplit(text, CharDelimiter(char)), None)
    assert first is not None, "StrSplit always yields at least one item"
    return first
