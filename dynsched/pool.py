#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""pool - Ordered pools of entities (see :class:`dynsched.cluster.Cluster`)."""

from typing import Callable, Generic, Iterable, Iterator, List, Optional
from typing import TypeVar

T = TypeVar('T')


class EntityPool(Generic[T]):
    """An insertion-ordered pool of entities.

    This is the basic structure managed by a :class:`dynsched.cluster.Cluster`
    for both resources and jobs. Elements are appended at the end and removed
    by predicate, which keeps the relative order of the elements that stay.

    Parameters
    ----------
        items : Iterable[T]
            Initial contents of the pool, in order.
    """

    items: List[T]

    def __init__(self, items: Optional[Iterable[T]] = None):
        self.items = list(items) if items is not None else []

    def append(self, item: T) -> None:
        """Adds an item to the end of the pool."""
        self.items.append(item)

    def remove_matching(self, predicate: Callable[[T], bool]) -> List[T]:
        """Removes every item for which `predicate` holds.

        Parameters
        ----------
            predicate : Callable[[T], bool]
                Selects the items to remove

        Returns:
            List[T]: The removed items, in their former pool order.
        """
        removed: List[T] = []
        kept: List[T] = []
        for item in self.items:
            (removed if predicate(item) else kept).append(item)
        if removed:
            self.items[:] = kept
        return removed

    def first(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Returns the first item in pool order satisfying `predicate`."""
        for item in self.items:
            if predicate(item):
                return item
        return None

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __contains__(self, item):
        return item in self.items

    def __repr__(self):
        return f'EntityPool({self.items})'
