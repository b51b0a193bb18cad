from abc import ABCMeta, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    """A half-open ``[start, end)`` index range into a source text."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def slice(self, text: str) -> str:
        return text[self.start:self.end]


class DelimiterInterface(metaclass=ABCMeta):
    """Base class for delimiters.

    A delimiter knows how to locate its next occurrence in a text. Subclassing is
    optional: any object with a compatible ``find_next`` method is accepted by
    ``StrSplit``.
    """

    @abstractmethod
    def find_next(self, text: str) -> tuple[int, int] | None:
        """Find the leftmost occurrence in ``text``.

        Args:
            text (str): The text to search.

        Returns:
            tuple[int, int] | None:
                ``(match_start, match_end)`` of the occurrence, relative to ``text``
                and with ``match_end`` exclusive, or None if there is no occurrence.
        """
        ...

    def find_next_from(self, text: str, start: int) -> tuple[int, int] | None:
        """Find the leftmost occurrence at or after ``start``, offsets relative to ``text``.

        The default searches ``text[start:]`` with ``find_next`` and shifts the result.
        Subclasses that can search in place override it to avoid the copy.
        """
        found = self.find_next(text[start:])
        if found is None:
            return None
        match_start, match_end = found
        return match_start + start, match_end + start
