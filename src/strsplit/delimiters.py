from __future__ import annotations
from typing import Any, Iterable

from ._delimiter_base import DelimiterInterface
from ._exceptions import DelimiterError, DelimiterTypeError


class StrDelimiter(DelimiterInterface):
    """Matches an exact substring.

    An empty pattern never matches, so splitting on it yields the whole text once.
    """

    def __init__(self, pattern: str):
        if not isinstance(pattern, str):
            raise DelimiterTypeError(f"The pattern must be a str, got {type(pattern).__name__}.")
        self._pattern = pattern

    @property
    def pattern(self) -> str:
        return self._pattern

    def find_next(self, text: str) -> tuple[int, int] | None:
        return self.find_next_from(text, 0)

    def find_next_from(self, text: str, start: int) -> tuple[int, int] | None:
        if not self._pattern:
            return None
        match_start = text.find(self._pattern, start)
        if match_start == -1:
            return None
        return match_start, match_start + len(self._pattern)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StrDelimiter):
            return NotImplemented
        return self._pattern == other._pattern

    def __hash__(self) -> int:
        return hash((StrDelimiter, self._pattern))

    def __repr__(self) -> str:
        return f"StrDelimiter({self._pattern!r})"


class CharDelimiter(DelimiterInterface):
    """Matches a single character."""

    def __init__(self, char: str):
        _check_char(char)
        self._char = char

    @property
    def char(self) -> str:
        return self._char

    def find_next(self, text: str) -> tuple[int, int] | None:
        return self.find_next_from(text, 0)

    def find_next_from(self, text: str, start: int) -> tuple[int, int] | None:
        match_start = text.find(self._char, start)
        if match_start == -1:
            return None
        return match_start, match_start + 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CharDelimiter):
            return NotImplemented
        return self._char == other._char

    def __hash__(self) -> int:
        return hash((CharDelimiter, self._char))

    def __repr__(self) -> str:
        return f"CharDelimiter({self._char!r})"


class AnyCharDelimiter(DelimiterInterface):
    """Matches whichever character of a set occurs first.

    Example:
        >>> list(StrSplit("a,b;c", AnyCharDelimiter(",;")))
        ['a', 'b', 'c']
    """

    def __init__(self, chars: Iterable[str]):
        chars = frozenset(chars)
        for char in chars:
            _check_char(char)
        self._chars = chars

    @property
    def chars(self) -> frozenset[str]:
        return self._chars

    def find_next(self, text: str) -> tuple[int, int] | None:
        return self.find_next_from(text, 0)

    def find_next_from(self, text: str, start: int) -> tuple[int, int] | None:
        if not self._chars:
            return None
        for index in range(start, len(text)):
            if text[index] in self._chars:
                return index, index + 1
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnyCharDelimiter):
            return NotImplemented
        return self._chars == other._chars

    def __hash__(self) -> int:
        return hash((AnyCharDelimiter, self._chars))

    def __repr__(self) -> str:
        return f"AnyCharDelimiter({''.join(sorted(self._chars))!r})"


def as_delimiter(delimiter: Any) -> DelimiterInterface:
    """Turn a user-supplied value into a delimiter.

    A plain str becomes a StrDelimiter. Delimiter instances and any object with a
    callable ``find_next(text)`` are returned unchanged. A duck-typed delimiter is
    always given the unconsumed part of the text and reports offsets relative to it.

    Raises:
        DelimiterTypeError: If the value cannot act as a delimiter.
    """
    if isinstance(delimiter, DelimiterInterface):
        return delimiter
    if isinstance(delimiter, str):
        return StrDelimiter(delimiter)
    if callable(getattr(delimiter, "find_next", None)):
        return delimiter
    raise DelimiterTypeError(
        f"{type(delimiter).__name__} object is not a delimiter, it must be a str or provide find_next()."
    )


def _check_char(char: Any) -> None:
    if not isinstance(char, str):
        raise DelimiterTypeError(f"A single character str is required, got {type(char).__name__}.")
    if len(char) != 1:
        raise DelimiterError(f"A single character is required, got {char!r}.")
