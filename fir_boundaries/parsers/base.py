from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Optional


class LineSource(ABC):
    """Base interface for sequential line readers."""

    @abstractmethod
    def read_line(self) -> Optional[str]:
        """
        Read the next line.

        Returns:
            The line without its terminator, or None at end of input
        """
        pass

    @abstractmethod
    def is_exhausted(self) -> bool:
        """
        Check whether no line is left to read.

        Returns:
            True if the next ``read_line`` would return None
        """
        pass

    @property
    @abstractmethod
    def line_number(self) -> int:
        """1-based number of the last line read, 0 before the first read."""
        pass


_END = object()


class IterableLineSource(LineSource):
    """
    Line source over any iterable of strings (open file, list of lines).

    Reads one line ahead so that exhaustion is known as soon as the last line
    has been handed out.
    """

    def __init__(self, lines: Iterable[str]):
        self._iterator: Iterator[str] = iter(lines)
        self._line_number = 0
        self._next = next(self._iterator, _END)

    def read_line(self) -> Optional[str]:
        if self._next is _END:
            return None
        line = self._next
        self._next = next(self._iterator, _END)
        self._line_number += 1
        return line.rstrip('\r\n')

    def is_exhausted(self) -> bool:
        return self._next is _END

    @property
    def line_number(self) -> int:
        return self._line_number
