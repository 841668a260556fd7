"""An ordered collection of intervals with overlap queries."""

from __future__ import annotations

from bisect import bisect_right
from typing import Any, Generic, Iterable, Iterator, NamedTuple, TypeVar

_T = TypeVar("_T")


class Interval(NamedTuple):
    """A closed interval ``[start, end]``."""

    start: int
    end: int

    def overlaps(self, other: Interval | tuple[int, int]) -> bool:
        """Return whether the two closed intervals share any point."""
        other = Interval(*other)
        return self.end >= other.start and self.start <= other.end


class Entry(NamedTuple, Generic[_T]):  # type: ignore[misc]
    """An interval together with the value stored for it."""

    interval: Interval
    value: Any


class IntervalTree(Generic[_T]):
    """Intervals kept in order of their start, searchable for overlaps.

    Without ``search_range`` a query walks backwards from the query start
    and stops at the first interval that ends before it. With
    ``search_range`` the walk continues past non-overlapping intervals,
    giving up once that many of them have been seen, so that intervals
    enclosing smaller ones are found as well.
    """

    def __init__(
        self,
        items: Iterable[tuple[Interval | tuple[int, int], _T]] = (),
        search_range: int | None = None,
    ) -> None:
        if search_range is not None and search_range <= 0:
            raise ValueError("search_range must be greater than 0")
        self._search_range = search_range
        self._starts: list[int] = []
        self._entries: list[Entry] = []
        for interval, value in items:
            self.insert(interval, value)

    def insert(self, interval: Interval | tuple[int, int], value: _T) -> None:
        """Add ``value`` for ``interval``; equal starts keep insertion order."""
        interval = Interval(*interval)
        index = bisect_right(self._starts, interval.start)
        self._starts.insert(index, interval.start)
        self._entries.insert(index, Entry(interval, value))

    def clear(self) -> None:
        """Remove every interval."""
        self._starts.clear()
        self._entries.clear()

    def __iter__(self) -> Iterator[Entry]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def overlapping(self, interval: Interval | tuple[int, int]) -> list[Entry]:
        """Return the stored entries overlapping ``interval``.

        Entries are returned from the highest start downwards. Only
        intervals starting at or before the query start are considered.
        """
        query = Interval(*interval)
        index = bisect_right(self._starts, query.start)
        result: list[Entry] = []
        misses = 0
        for entry in reversed(self._entries[:index]):
            if self._search_range is None:
                if entry.interval.end < query.start:
                    break
                result.append(entry)
            else:
                if misses >= self._search_range:
                    break
                if query.overlaps(entry.interval):
                    result.append(entry)
                else:
                    misses += 1
        return result