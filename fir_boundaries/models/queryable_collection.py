"""
Queryable collection classes for fluent, composable queries.

Lightweight chainable filtering over in-memory lists, used as the base of
the FIR collection.
"""

from typing import TypeVar, Generic, Callable, List, Dict, Optional, Any, Union, Hashable
from collections.abc import Iterable

T = TypeVar('T')


class QueryableCollection(Generic[T]):
    """
    A lightweight, chainable collection for filtering and querying in-memory data.

    Examples:
        # Attribute matching
        collection.where(icao='EGTT').all()

        # Chaining
        collection.filter(lambda f: f.is_oceanic).where(is_extension=False).count()

        # Grouping
        collection.group_by(lambda f: f.icao)
    """

    def __init__(self, items: Union[List[T], Iterable[T]]):
        """
        Initialize a queryable collection.

        Args:
            items: List or iterable of items to wrap
        """
        self._items: List[T] = list(items) if not isinstance(items, list) else items

    def filter(self, predicate: Callable[[T], bool]) -> 'QueryableCollection[T]':
        """
        Filter items using a predicate function.

        Args:
            predicate: Function that takes an item and returns True to include it

        Returns:
            New collection with filtered items
        """
        return self.__class__([item for item in self._items if predicate(item)])

    def where(self, **kwargs) -> 'QueryableCollection[T]':
        """
        Filter items using keyword arguments (attribute matching).
        All conditions must match (AND logic).

        Examples:
            boundaries.where(icao='KZAK', is_extension=False)
        """
        def matches(item: T) -> bool:
            return all(
                getattr(item, key, None) == value
                for key, value in kwargs.items()
            )
        return self.filter(matches)

    def first(self) -> Optional[T]:
        """Return the first item or None if collection is empty."""
        return self._items[0] if self._items else None

    def all(self) -> List[T]:
        """Return all items as a list."""
        return self._items

    def count(self) -> int:
        return len(self._items)

    def group_by(self, key_func: Callable[[T], Hashable]) -> Dict[Any, List[T]]:
        """
        Group items by a key function.

        Keys keep the order in which they were first seen.

        Examples:
            by_identity = boundaries.group_by(lambda f: (f.icao, f.is_oceanic))
        """
        result: Dict[Any, List[T]] = {}
        for item in self._items:
            key = key_func(item)
            if key not in result:
                result[key] = []
            result[key].append(item)
        return result

    def __iter__(self):
        """Allow iteration over items."""
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        """Allow indexing and slicing."""
        if isinstance(index, slice):
            return self.__class__(self._items[index])
        return self._items[index]

    def __bool__(self):
        return len(self._items) > 0

    def __repr__(self):
        """
        Return string representation with preview of items.

        Shows class name, the icao code of the first few items and total count.
        """
        class_name = self.__class__.__name__
        count = len(self._items)

        if count == 0:
            return f"{class_name}([])"

        preview_items = []
        for item in self._items[:3]:
            if hasattr(item, 'icao'):
                preview_items.append(repr(item.icao))
            else:
                preview_items.append(f"<{type(item).__name__}>")

        if count > 3:
            preview_items.append('...')

        preview = '[' + ', '.join(preview_items) + ']'
        return f"{class_name}({preview}, count={count})"
