"""
Insertion ordered set.

Keeps the first occurrence of every value and remembers which later values
were rejected as duplicates, which is what vertex de-duplication needs.
"""

from typing import Dict, Generic, Hashable, Iterable, Iterator, List, TypeVar

T = TypeVar('T', bound=Hashable)


class OrderedSet(Generic[T]):
    """A set that iterates in first-insertion order."""

    def __init__(self, items: Iterable[T] = ()):
        self._items: Dict[T, None] = {}
        self._rejected: List[T] = []
        for item in items:
            self.add(item)

    def add(self, item: T) -> bool:
        """
        Add an item if not already present.

        Returns:
            True if the item was inserted, False if it was a duplicate
        """
        if item in self._items:
            self._rejected.append(item)
            return False
        self._items[item] = None
        return True

    @property
    def duplicates(self) -> List[T]:
        """Values that were offered more than once, each listed once, in first-rejected order."""
        return list(dict.fromkeys(self._rejected))

    def reverse(self) -> None:
        self._items = dict.fromkeys(reversed(list(self._items)))

    def to_list(self) -> List[T]:
        return list(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"OrderedSet({self.to_list()!r})"
